"""Notification 命令模块"""

from application.commands.notification.send_message import (
    SendMessageCommand,
    SendMessageResult,
)

__all__ = [
    "SendMessageCommand",
    "SendMessageResult",
]
