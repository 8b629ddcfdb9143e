"""通知领域值对象"""

from domain.notification.value_objects.message_type import MessageType
from domain.notification.value_objects.message import (
    Message,
    TextMessage,
    MarkdownMessage,
    text_message,
    markdown_message,
)
from domain.notification.value_objects.mention import (
    Mention,
    MentionOption,
    with_mobiles,
    with_user_ids,
    with_mention_all,
)
from domain.notification.value_objects.robot_response import RobotResponse

__all__ = [
    "MessageType",
    "Message",
    "TextMessage",
    "MarkdownMessage",
    "text_message",
    "markdown_message",
    "Mention",
    "MentionOption",
    "with_mobiles",
    "with_user_ids",
    "with_mention_all",
    "RobotResponse",
]
