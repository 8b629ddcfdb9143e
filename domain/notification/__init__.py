"""Notification 领域模块

钉钉机器人消息的领域层，包含消息、@ 提醒、响应值对象以及签名服务。
"""
