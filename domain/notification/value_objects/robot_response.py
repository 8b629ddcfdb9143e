"""钉钉机器人响应值对象"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from domain.common.base_value_object import BaseValueObject

ERRCODE_KEY = "errcode"
ERRMSG_KEY = "errmsg"


@dataclass(frozen=True)
class RobotResponse(BaseValueObject):
    """
    钉钉机器人接口响应

    errcode 为 0 表示成功，其余均视为失败。

    Attributes:
        errcode: 错误码
        errmsg: 错误信息
    """

    errcode: int = 0
    errmsg: str = ""

    @property
    def is_success(self) -> bool:
        return self.errcode == 0

    @classmethod
    def parse(cls, raw: bytes) -> Optional["RobotResponse"]:
        """
        解析响应体

        字段名不区分大小写（errcode、ErrCode、ERRCODE 均可），
        同一字段出现多次时以最后一次为准。

        errcode 必须是 JSON 整数，errmsg 必须是 JSON 字符串；
        字段缺失或为 null 时取零值。

        Args:
            raw: 响应体字节

        Returns:
            解析结果；响应体不是 JSON 对象或字段类型不符时返回 None
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            return None

        if not isinstance(data, dict):
            return None

        fields = _fold_keys(data)
        errcode = fields.get(ERRCODE_KEY)
        errmsg = fields.get(ERRMSG_KEY)

        if errcode is None:
            errcode = 0
        # bool 是 int 的子类，需要单独排除
        elif not isinstance(errcode, int) or isinstance(errcode, bool):
            return None

        if errmsg is None:
            errmsg = ""
        elif not isinstance(errmsg, str):
            return None

        return cls(errcode=errcode, errmsg=errmsg)


def _fold_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for key, value in data.items():
        name = key.lower()
        if name in (ERRCODE_KEY, ERRMSG_KEY):
            fields[name] = value
    return fields
