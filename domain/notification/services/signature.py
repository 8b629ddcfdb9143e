"""钉钉机器人加签

签名算法：
    string_to_sign = "{timestamp}\\n{secret}"
    sign = base64(HmacSHA256(key=secret, msg=string_to_sign))

签名直接拼接到 URL 中，不做额外的 URL 编码。
"""

import base64
import hashlib
import hmac
import time
from typing import Optional

DEFAULT_WEBHOOK_URL = "https://oapi.dingtalk.com/robot/send?access_token="


def current_timestamp_ms() -> int:
    """当前时间戳（毫秒）"""
    return int(time.time() * 1000)


def compute_signature(secret: str, timestamp: int) -> str:
    """计算签名

    Args:
        secret: 机器人加签密钥
        timestamp: 毫秒时间戳

    Returns:
        标准 base64 编码的签名
    """
    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(
        secret.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def build_signed_url(
    access_token: str,
    secret: str,
    base_url: str = DEFAULT_WEBHOOK_URL,
    timestamp: Optional[int] = None,
) -> str:
    """构建带签名的请求 URL

    Args:
        access_token: 机器人 access_token
        secret: 机器人加签密钥
        base_url: Webhook 基础地址（以 access_token= 结尾）
        timestamp: 毫秒时间戳，默认取当前时间

    Returns:
        完整的请求 URL
    """
    if timestamp is None:
        timestamp = current_timestamp_ms()
    sign = compute_signature(secret, timestamp)
    return f"{base_url}{access_token}&timestamp={timestamp}&sign={sign}"
