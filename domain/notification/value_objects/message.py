"""机器人消息值对象"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from domain.common.base_value_object import BaseValueObject
from domain.notification.value_objects.message_type import MessageType

# 载荷中的消息类型判别字段
MSGTYPE_KEY = "msgtype"


@dataclass(frozen=True)
class Message(BaseValueObject, ABC):
    """
    机器人消息基类

    子类声明 msgtype 并实现 body()，即可作为新的消息类型发送。
    载荷结构为 {"msgtype": <类型>, <类型>: body()}。
    """

    msgtype: ClassVar[str]

    @abstractmethod
    def body(self) -> Dict[str, Any]:
        """消息类型专属字段"""

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为 JSON 可序列化字典（不含 at 字段）

        Returns:
            包含 msgtype 和对应消息体的字典
        """
        msgtype = str(getattr(self.msgtype, "value", self.msgtype))
        return {
            MSGTYPE_KEY: msgtype,
            msgtype: self.body(),
        }


@dataclass(frozen=True)
class TextMessage(Message):
    """
    文本消息

    Attributes:
        content: 消息内容
    """

    msgtype: ClassVar[str] = MessageType.TEXT.value

    content: str = ""

    def body(self) -> Dict[str, Any]:
        return {"content": self.content}


@dataclass(frozen=True)
class MarkdownMessage(Message):
    """
    Markdown 消息

    Attributes:
        title: 会话列表中展示的标题
        text: Markdown 正文
    """

    msgtype: ClassVar[str] = MessageType.MARKDOWN.value

    title: str = ""
    text: str = ""

    def body(self) -> Dict[str, Any]:
        return {"title": self.title, "text": self.text}


def text_message(content: str) -> TextMessage:
    """构建文本消息"""
    return TextMessage(content=content)


def markdown_message(title: str, text: str) -> MarkdownMessage:
    """构建 Markdown 消息"""
    return MarkdownMessage(title=title, text=text)
