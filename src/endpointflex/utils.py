"""工具函数模块

提供端点数据规范化（空值移除、键前缀移除、snake_case 转换、白名单规范化）等实用功能
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

import humps

from endpointflex.constants import LIST_MARKER

logger = logging.getLogger(__name__)


# 连字符、空白等单词分隔符
_WORD_SEPARATOR_RE = re.compile(r"[\s\-]+")
_MULTI_UNDERSCORE_RE = re.compile(r"_{2,}")


# ========== 数据规范化 ==========


def no_null_items(data: Mapping[Any, Any], recursive: bool = False) -> dict[Any, Any]:
    """
    移除字典中值为 None 的条目

    参数:
        data: 原始字典
        recursive: 是否递归处理嵌套字典

    返回:
        新字典（不修改原字典），保持原有键顺序

    示例:
        >>> no_null_items({"a": 1, "b": None})
        {"a": 1}
    """
    result = {}
    for key, value in data.items():
        if value is None:
            continue
        if recursive and isinstance(value, Mapping):
            value = no_null_items(value, recursive=True)
        result[key] = value
    return result


def remove_prefix_from_keys(data: Mapping[Any, Any], prefix: str) -> dict[Any, Any]:
    """
    移除以指定前缀开头的键的前缀，剩余部分首字母小写

    与前缀完全相同的键、非字符串键保持不变。

    示例:
        >>> remove_prefix_from_keys({"prefixNumberCount": 5, "name": "x"}, "prefixNumber")
        {"count": 5, "name": "x"}
    """
    if not prefix:
        return dict(data)

    result = {}
    for key, value in data.items():
        if isinstance(key, str) and key.startswith(prefix) and len(key) > len(prefix):
            remainder = key[len(prefix) :]
            key = remainder[0].lower() + remainder[1:]
        result[key] = value
    return result


def to_snake_case(name: str) -> str:
    """
    将 camelCase、PascalCase、kebab-case 等命名转换为 snake_case

    示例:
        >>> to_snake_case("someParam")
        "some_param"
        >>> to_snake_case("Some-Other Param")
        "some_other_param"
    """
    name = _WORD_SEPARATOR_RE.sub("_", name.strip())
    name = humps.decamelize(name)
    return _MULTI_UNDERSCORE_RE.sub("_", name).lower()


def to_snake_cased_keys(data: Mapping[Any, Any]) -> dict[Any, Any]:
    """
    将字典的顶层字符串键转换为 snake_case，值保持不变

    转换后键名冲突时（如 "someParam" 和 "some_param"），后出现的条目覆盖
    先出现的条目，并记录一条 WARNING 日志。
    """
    result = {}
    for key, value in data.items():
        converted = to_snake_case(key) if isinstance(key, str) else key
        if converted in result:
            logger.warning(f"Key {key!r} collides with an earlier key after snake_case conversion to {converted!r}")
        result[converted] = value
    return result


def normalize_whitelist(whitelist: Iterable[str]) -> list[str]:
    """
    移除白名单条目末尾的列表标记，如 "tags[]" -> "tags"

    返回:
        规范化后的参数名列表，保持声明顺序
    """
    return [name[: -len(LIST_MARKER)] if name.endswith(LIST_MARKER) else name for name in whitelist]

