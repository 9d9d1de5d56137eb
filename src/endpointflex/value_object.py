"""
值对象模块

参数值可以是标量、序列，或实现了 to_value() 的值对象。
端点在 set_params 时会把值对象还原为其底层的原始值。

使用示例:
    >>> class UserId(ValueObject):
    ...     def __init__(self, value: int):
    ...         self.value = value
    ...
    ...     def to_value(self) -> int:
    ...         return self.value
    >>>
    >>> unwrap_value(UserId(42))
    42
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ValueObject(ABC):
    """值对象基类，封装一个原始值。"""

    @abstractmethod
    def to_value(self) -> Any:
        """返回值对象封装的原始值（str、int、list 等）。"""

    def __eq__(self, other):
        if isinstance(other, ValueObject):
            return type(self) is type(other) and self.to_value() == other.to_value()
        return NotImplemented

    def __hash__(self):
        return hash((type(self), repr(self.to_value())))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.to_value()!r})"


def unwrap_value(value: Any) -> Any:
    """值对象返回其原始值，其它值原样返回（不递归处理序列内部）。"""
    if isinstance(value, ValueObject):
        return value.to_value()
    return value
