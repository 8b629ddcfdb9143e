"""发送机器人消息处理器"""

import logging
from typing import List, Optional

from application.commands.notification.send_message import (
    SendMessageCommand,
    SendMessageResult,
)
from domain.common.exceptions import (
    InvalidValueObjectException,
    NotificationException,
)
from domain.notification.services.robot_client import RobotClient
from domain.notification.value_objects.mention import (
    MentionOption,
    with_mention_all,
    with_mobiles,
    with_user_ids,
)
from domain.notification.value_objects.message import (
    Message,
    markdown_message,
    text_message,
)
from domain.notification.value_objects.message_type import MessageType


class SendMessageHandler:
    """
    发送机器人消息处理器

    处理 SendMessageCommand：构建消息和 @ 选项，调用机器人客户端发送，
    并把发送异常转换为 SendMessageResult。
    """

    def __init__(self, robot: RobotClient, logger: Optional[logging.Logger] = None):
        """
        初始化处理器

        Args:
            robot: 机器人客户端
            logger: 日志记录器
        """
        self._robot = robot
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, command: SendMessageCommand) -> SendMessageResult:
        """
        处理发送命令

        Args:
            command: 发送命令

        Returns:
            SendMessageResult: 发送结果
        """
        # 1. 构建消息
        message = self._build_message(command)
        if message is None:
            return SendMessageResult(
                success=False,
                message=f"Unsupported message type: '{command.msgtype}'",
                error_code="INVALID_MESSAGE_TYPE",
            )

        # 2. 构建 @ 选项并发送
        try:
            self._robot.build_and_send(message, *self._build_options(command))
        except (NotificationException, InvalidValueObjectException) as e:
            errcode = getattr(e, "errcode", None)
            self._logger.debug(f"Send failed with {e.code} (errcode={errcode}): {e}")
            return SendMessageResult(
                success=False,
                message=str(e),
                error_code=e.code,
                errcode=errcode,
            )

        return SendMessageResult(success=True, message="Message sent")

    @staticmethod
    def _build_message(command: SendMessageCommand) -> Optional[Message]:
        if command.msgtype == MessageType.TEXT.value:
            return text_message(command.content)
        if command.msgtype == MessageType.MARKDOWN.value:
            return markdown_message(command.title, command.text)
        return None

    @staticmethod
    def _build_options(command: SendMessageCommand) -> List[MentionOption]:
        options: List[MentionOption] = []
        if command.at_mobiles:
            options.append(with_mobiles(*command.at_mobiles))
        if command.at_user_ids:
            options.append(with_user_ids(*command.at_user_ids))
        if command.at_all:
            options.append(with_mention_all())
        return options
