"""
客户字段字典：必填、联系方式（至少一项）、选填，以及总结中使用的中文标签。

提示词、字段合并、完整性判断、总结渲染都从这里取定义；新增字段只改 FIELD_SPECS。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping

FieldGroup = Literal["required", "contact", "optional"]

# FieldSet：字段名 → 值，空串表示未知
FieldSet = dict[str, str]


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    group: FieldGroup
    hint: str = ""


# 顺序即总结中的展示顺序
FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec("name", "姓名", "required"),
    FieldSpec("company", "公司", "required"),
    FieldSpec("position", "职位", "optional"),
    FieldSpec("phone", "电话", "contact"),
    FieldSpec("email", "邮箱", "contact"),
    FieldSpec("wechat_id", "微信号", "contact"),
    FieldSpec("budget", "预算", "optional"),
    FieldSpec("intent_level", "意向等级", "optional", "High/Medium/Low"),
    FieldSpec("notes", "备注", "optional"),
)

# 模型 JSON 块中的保留键：模型自报的状态，仅作参考
STATUS_KEY = "status"
STATUS_COLLECTING = "collecting"
STATUS_READY = "ready_for_confirmation"

FIELD_KEYS: tuple[str, ...] = tuple(s.key for s in FIELD_SPECS)
REQUIRED_FIELDS: tuple[str, ...] = tuple(s.key for s in FIELD_SPECS if s.group == "required")
CONTACT_FIELDS: tuple[str, ...] = tuple(s.key for s in FIELD_SPECS if s.group == "contact")
OPTIONAL_FIELDS: tuple[str, ...] = tuple(s.key for s in FIELD_SPECS if s.group == "optional")
FIELD_LABELS: dict[str, str] = {s.key: s.label for s in FIELD_SPECS}


def specs_in_group(group: FieldGroup) -> list[FieldSpec]:
    return [s for s in FIELD_SPECS if s.group == group]


def is_known_field(key: str) -> bool:
    return key in FIELD_LABELS


def empty_fields() -> FieldSet:
    """每个已知字段都为空串的 FieldSet。"""
    return {k: "" for k in FIELD_KEYS}


def normalize_fields(fields: Mapping[str, Any] | None) -> FieldSet:
    """
    调用方传入的字段 → 规范 FieldSet：丢弃未知键，None 视为空串，值去首尾空白，补齐所有已知键。
    总是返回新字典，不修改入参。
    """
    out = empty_fields()
    for key, value in (fields or {}).items():
        if key not in out or value is None:
            continue
        out[key] = str(value).strip()
    return out
