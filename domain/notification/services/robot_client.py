"""机器人客户端接口"""

from typing import Protocol

from domain.notification.value_objects.mention import MentionOption
from domain.notification.value_objects.message import Message


class RobotClient(Protocol):
    """机器人客户端接口

    定义发送一条机器人消息的契约。
    实现类负责签名、序列化和 HTTP 调用，失败时抛出 NotificationException。
    """

    def build_and_send(self, message: Message, *options: MentionOption) -> None:
        """构建并发送消息

        Args:
            message: 消息（文本或 Markdown）
            options: @ 选项，按顺序应用

        Raises:
            NotificationException: 发送失败
        """
        ...
