"""消息类型枚举"""

from enum import Enum


class MessageType(str, Enum):
    """
    钉钉机器人消息类型

    继承 str 使枚举值可直接作为 msgtype 字段写入载荷。
    """

    TEXT = "text"  # 纯文本
    MARKDOWN = "markdown"  # Markdown
