"""@ 提醒值对象"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException

# 载荷字段名
AT_KEY = "at"
AT_MOBILES_KEY = "atMobiles"
AT_USER_IDS_KEY = "atUserIds"
AT_ALL_KEY = "isAtAll"


@dataclass(frozen=True)
class Mention(BaseValueObject):
    """
    @ 提醒对象

    描述消息需要 @ 的人。默认值表示不 @ 任何人。

    Attributes:
        mobiles: 被 @ 人的手机号
        user_ids: 被 @ 人的 userId
        at_all: 是否 @ 所有人
    """

    mobiles: Tuple[str, ...] = ()
    user_ids: Tuple[str, ...] = ()
    at_all: bool = False

    def validate(self) -> None:
        for mobile in self.mobiles:
            if not isinstance(mobile, str):
                raise InvalidValueObjectException("Mention", f"mobile must be str, got {mobile!r}")
        for user_id in self.user_ids:
            if not isinstance(user_id, str):
                raise InvalidValueObjectException("Mention", f"user id must be str, got {user_id!r}")

    @classmethod
    def from_options(cls, *options: "MentionOption") -> "Mention":
        """
        从选项构建 @ 对象

        选项按传入顺序依次应用，同一字段后者覆盖前者。

        Args:
            options: @ 选项

        Returns:
            新的 Mention 对象
        """
        mention = cls()
        for option in options:
            mention = option.apply(mention)
        return mention

    def to_dict(self) -> Dict[str, Any]:
        """
        序列化为钉钉 at 字段

        只输出非空字段，空列表和 False 直接省略。

        Returns:
            at 字段字典，未设置任何 @ 时为空字典
        """
        ret: Dict[str, Any] = {}

        if self.mobiles:
            ret[AT_MOBILES_KEY] = list(self.mobiles)

        if self.user_ids:
            ret[AT_USER_IDS_KEY] = list(self.user_ids)

        if self.at_all:
            ret[AT_ALL_KEY] = True

        return ret


@dataclass(frozen=True)
class MentionOption:
    """
    @ 选项

    设置 Mention 的单个字段。

    Attributes:
        field: Mention 字段名
        value: 字段的新值
    """

    field: str
    value: Any

    def apply(self, mention: Mention) -> Mention:
        """返回应用本选项后的新 Mention"""
        return replace(mention, **{self.field: self.value})


def with_mobiles(*mobiles: str) -> MentionOption:
    """按手机号 @"""
    return MentionOption(field="mobiles", value=tuple(mobiles))


def with_user_ids(*user_ids: str) -> MentionOption:
    """按 userId @"""
    return MentionOption(field="user_ids", value=tuple(user_ids))


def with_mention_all() -> MentionOption:
    """@ 所有人"""
    return MentionOption(field="at_all", value=True)
