"""发送机器人消息命令"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SendMessageCommand:
    """
    发送机器人消息命令

    Attributes:
        msgtype: 消息类型 ("text" 或 "markdown")
        content: 文本消息内容（text 类型）
        title: Markdown 标题（markdown 类型）
        text: Markdown 正文（markdown 类型）
        at_mobiles: 需要 @ 的手机号
        at_user_ids: 需要 @ 的 userId
        at_all: 是否 @ 所有人
    """

    msgtype: str
    content: str = ""
    title: str = ""
    text: str = ""
    at_mobiles: List[str] = field(default_factory=list)
    at_user_ids: List[str] = field(default_factory=list)
    at_all: bool = False


@dataclass
class SendMessageResult:
    """
    发送机器人消息结果

    Attributes:
        success: 是否成功
        message: 消息
        error_code: 错误码（失败时）
            - INVALID_MESSAGE_TYPE: 不支持的消息类型
            - SERIALIZATION_ERROR: 消息序列化失败
            - TRANSPORT_ERROR: 请求钉钉失败
            - RESPONSE_READ_ERROR: 读取钉钉响应失败
            - DINGTALK_API_ERROR: 钉钉返回错误码
        errcode: 钉钉错误码（DINGTALK_API_ERROR 时有值）
    """

    success: bool
    message: str = ""
    error_code: Optional[str] = None
    errcode: Optional[int] = None
