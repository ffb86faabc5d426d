"""字段合并：本轮提取的非空值覆盖已确认值；空值表示「本轮未提及」，不清空已有字段。"""
from __future__ import annotations

from typing import Mapping

from .fields import FieldSet, normalize_fields


def merge_fields(confirmed: Mapping[str, str] | None, extracted: Mapping[str, str] | None) -> FieldSet:
    """
    合并已确认字段与本轮提取字段，返回新的完整 FieldSet，不修改入参。
    用户纠正（「电话错了，应该是 139...」）会以非空新值覆盖旧值。
    """
    base = normalize_fields(confirmed)
    update = normalize_fields(extracted)
    return {key: update[key] or base[key] for key in base}
