"""领域异常定义"""

from typing import Optional


class DomainException(Exception):
    """领域异常基类

    Attributes:
        message: 错误信息
        code: 错误码（供应用层映射为结果）
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class InvalidValueObjectException(DomainException):
    """值对象校验失败"""

    code = "INVALID_VALUE_OBJECT"

    def __init__(self, value_object: str, reason: str):
        super().__init__(f"Invalid {value_object}: {reason}")
        self.value_object = value_object
        self.reason = reason


# ========== 通知发送异常 ==========


class NotificationException(DomainException):
    """消息发送失败的基类"""

    code = "NOTIFICATION_ERROR"


class MessageSerializationException(NotificationException):
    """消息序列化为 JSON 失败"""

    code = "SERIALIZATION_ERROR"


class RobotTransportException(NotificationException):
    """HTTP 请求失败（网络/连接层错误）"""

    code = "TRANSPORT_ERROR"


class RobotResponseReadException(NotificationException):
    """读取响应体失败"""

    code = "RESPONSE_READ_ERROR"


class RobotApiException(NotificationException):
    """钉钉接口返回非零错误码

    Attributes:
        errcode: 钉钉错误码
        errmsg: 钉钉错误信息
    """

    code = "DINGTALK_API_ERROR"

    def __init__(self, errcode: int, errmsg: str):
        super().__init__(
            f"dingtalk response info: errcode={errcode},errmsg={errmsg}"
        )
        self.errcode = errcode
        self.errmsg = errmsg
