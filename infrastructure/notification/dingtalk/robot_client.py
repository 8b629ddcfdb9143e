"""钉钉自定义机器人客户端实现"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from domain.common.exceptions import (
    MessageSerializationException,
    RobotApiException,
    RobotResponseReadException,
    RobotTransportException,
)
from domain.notification.services.signature import DEFAULT_WEBHOOK_URL, build_signed_url
from domain.notification.value_objects.mention import AT_KEY, Mention, MentionOption
from domain.notification.value_objects.message import Message
from domain.notification.value_objects.robot_response import RobotResponse


class DingTalkRobot:
    """钉钉自定义机器人客户端

    使用 httpx 发送带签名的 POST 请求，每次调用只发送一次，不重试。

    消息和 @ 状态只在单次调用内构建，实例本身只持有不可变配置，
    因此同一实例可以被多个线程同时使用。

    Attributes:
        access_token: 机器人 access_token
        secret: 加签密钥
        base_url: Webhook 基础地址
        timeout: 请求超时时间（秒），None 表示不限制
    """

    def __init__(
        self,
        access_token: str,
        secret: str,
        *,
        base_url: str = DEFAULT_WEBHOOK_URL,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化客户端

        Args:
            access_token: 机器人 access_token
            secret: 加签密钥
            base_url: Webhook 基础地址
            timeout: 请求超时时间（秒）
            logger: 日志记录器（可选）
        """
        self._access_token = access_token
        self._secret = secret
        self._base_url = base_url
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def build_and_send(self, message: Message, *options: MentionOption) -> None:
        """构建并发送消息

        先写入消息体，再按顺序应用 @ 选项，然后发送。

        Args:
            message: 消息（文本或 Markdown）
            options: @ 选项，同一字段后者覆盖前者

        Raises:
            MessageSerializationException: 消息无法序列化
            RobotTransportException: HTTP 请求失败
            RobotResponseReadException: 读取响应失败
            RobotApiException: 钉钉返回非零错误码
        """
        data = message.to_dict()
        mention = Mention.from_options(*options)
        self._send(data, mention)

    def _send(self, data: Dict[str, Any], mention: Mention) -> None:
        url = build_signed_url(self._access_token, self._secret, base_url=self._base_url)

        data[AT_KEY] = mention.to_dict()
        try:
            body = json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            self._logger.error(f"JSON serialization failed for message: {e}")
            raise MessageSerializationException(f"Serialization failed: {e}") from e

        # 以流式方式发送，请求失败和读取响应体失败分开处理
        try:
            with httpx.stream(
                "POST",
                url,
                content=body,
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
            ) as response:
                status_code = response.status_code
                raw = self._read_body(response)
        except httpx.RequestError as e:
            self._logger.error(f"DingTalk api call failed: {e}")
            raise RobotTransportException(f"Request error: {e}") from e

        result = RobotResponse.parse(raw)
        if result is None:
            # 响应体无法解析时按成功处理
            self._logger.warning(
                f"Unparseable DingTalk response (status {status_code}), "
                "treating as success"
            )
            result = RobotResponse()

        if not result.is_success:
            error = RobotApiException(result.errcode, result.errmsg)
            self._logger.error(str(error))
            raise error

        self._logger.info("Message was successfully sent to DingTalk")

    def _read_body(self, response: httpx.Response) -> bytes:
        try:
            return response.read()
        except (httpx.StreamError, httpx.TransportError) as e:
            self._logger.error(f"Read DingTalk response error: {e}")
            raise RobotResponseReadException(f"Response read error: {e}") from e
