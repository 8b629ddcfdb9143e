"""钉钉机器人基础设施实现"""

from infrastructure.notification.dingtalk.robot_client import DingTalkRobot

__all__ = ["DingTalkRobot"]
