"""
完整性判断：后端唯一权威。

姓名、公司必填，电话/邮箱/微信号至少一项。每轮都基于合并后的字段重新计算，
模型自报的 status 不参与判断。
"""
from __future__ import annotations

from typing import Mapping

from .fields import CONTACT_FIELDS, REQUIRED_FIELDS, STATUS_COLLECTING, STATUS_READY

# missing_fields 中表示「联系方式一项都没有」的占位键
CONTACT_GROUP = "contact"


def _filled(fields: Mapping[str, str], key: str) -> bool:
    return bool((fields.get(key) or "").strip())


def is_ready(fields: Mapping[str, str]) -> bool:
    return all(_filled(fields, k) for k in REQUIRED_FIELDS) and any(
        _filled(fields, k) for k in CONTACT_FIELDS
    )


def missing_fields(fields: Mapping[str, str]) -> list[str]:
    """阻止创建客户的缺项：未填的必填字段，以及联系方式全空时的 contact。"""
    missing = [k for k in REQUIRED_FIELDS if not _filled(fields, k)]
    if not any(_filled(fields, k) for k in CONTACT_FIELDS):
        missing.append(CONTACT_GROUP)
    return missing


def resolve_status(ready: bool) -> str:
    return STATUS_READY if ready else STATUS_COLLECTING
