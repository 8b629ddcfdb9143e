"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """值对象基类

    值对象不可变，按值比较。子类可覆盖 validate() 实现创建时校验，
    校验失败时抛出 InvalidValueObjectException。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """校验值对象（默认不做任何校验）"""
