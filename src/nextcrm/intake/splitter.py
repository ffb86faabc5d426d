"""
模型回复拆分：用户可见文案 + 代码块中的 JSON 字段 + 模型自报状态。

约定（写进 system prompt）：文案在前，随后一个 ```json ... ``` 代码块，
内容为扁平对象，键为字段字典中的字段名，外加保留键 status。

任何解析问题都不抛出：找不到代码块、代码块未闭合、JSON 非法，
一律视为「本轮没有结构化数据」，文案尽量保留。
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any

from .errors import MalformedExtractionBlock
from .fields import STATUS_KEY, FieldSet, is_known_field

logger = logging.getLogger(__name__)

# 第一个代码块：允许 ```json（反引号与标记间可有空格）或不带语言标记的 ```，必须有闭合的 ```
_FENCE_RE = re.compile(r"```[ \t]*(?:json\b)?([\s\S]*?)```", re.IGNORECASE)


@dataclass
class SplitReply:
    prose: str
    extracted: FieldSet = field(default_factory=dict)
    claimed_status: str | None = None
    block_found: bool = False
    malformed: bool = False


def _scalar_to_str(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    # bool 是 int 的子类，需先排除
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedExtractionBlock(f"字段 {key} 的值不是字符串: {type(value).__name__}")
    return str(value)


def parse_payload(text: str) -> tuple[FieldSet, str | None]:
    """
    解析代码块内部：返回 (已知字段, 自报状态)。
    未知键连同其值一律忽略；非对象，或已知字段的值为嵌套值、布尔值时抛 MalformedExtractionBlock。
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise MalformedExtractionBlock(f"JSON 解析失败: {e}") from e
    if not isinstance(data, dict):
        raise MalformedExtractionBlock(f"JSON 块不是对象: {type(data).__name__}")

    extracted: FieldSet = {}
    status: str | None = None
    for key, value in data.items():
        if key == STATUS_KEY:
            status = _scalar_to_str(key, value) or None
        elif is_known_field(key):
            extracted[key] = _scalar_to_str(key, value)
    return extracted, status


def split_reply(raw: str) -> SplitReply:
    """拆分模型原始回复。只看第一个代码块。"""
    content = raw or ""
    m = _FENCE_RE.search(content)
    if not m:
        return SplitReply(prose=content.strip())

    prose = content[: m.start()].strip()
    try:
        extracted, status = parse_payload(m.group(1).strip())
    except MalformedExtractionBlock as e:
        logger.warning("模型回复中的 JSON 块无效，按无结构化数据处理: %s", e)
        return SplitReply(prose=prose, block_found=True, malformed=True)
    return SplitReply(prose=prose, extracted=extracted, claimed_status=status, block_found=True)
