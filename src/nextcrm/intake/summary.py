"""客户信息确认总结：只在完整性判断通过后由编排层调用。"""
from __future__ import annotations

from typing import Mapping

from .fields import FIELD_SPECS

RULE = "━━━━━━━━━━━━━━━━━━"
HEADER = "📋 客户信息确认"
FOOTER = "请确认以上信息是否正确？点击「确认创建」按钮即可创建客户。"


def render_summary(fields: Mapping[str, str]) -> str:
    """按字段字典顺序逐行输出「标签：值」，空字段整行省略。"""
    lines = [RULE, HEADER, RULE]
    for spec in FIELD_SPECS:
        # 多行值（如备注）压成一行，保持每个字段占一行
        value = " ".join(part.strip() for part in (fields.get(spec.key) or "").splitlines() if part.strip())
        if value:
            lines.append(f"{spec.label}：{value}")
    lines.append(RULE)
    lines.append(FOOTER)
    return "\n".join(lines)
