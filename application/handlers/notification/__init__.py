"""Notification 处理器模块"""

from application.handlers.notification.send_message_handler import SendMessageHandler

__all__ = ["SendMessageHandler"]
