"""
新建客户对话的 system prompt。

字段说明、示例总结、示例 JSON 都由字段字典生成，与解析器、总结渲染保持同一份定义。
每轮重新生成，并附上当前已确认的字段。
"""
from __future__ import annotations

import json
from typing import Mapping

from .fields import (
    FIELD_KEYS,
    STATUS_COLLECTING,
    STATUS_KEY,
    STATUS_READY,
    FieldSpec,
    normalize_fields,
    specs_in_group,
)
from .summary import render_summary

EXAMPLE_FIELDS: dict[str, str] = {
    "name": "张三",
    "company": "ABC科技公司",
    "position": "CTO",
    "phone": "13800138000",
    "email": "zhangsan@abc.com",
    "wechat_id": "abc123",
    "budget": "¥50,000",
    "intent_level": "High",
    "notes": "有意向采购CRM系统",
}


def _describe(specs: list[FieldSpec]) -> str:
    parts = []
    for s in specs:
        hint = f": {s.hint}" if s.hint else ""
        parts.append(f"{s.label}({s.key}{hint})")
    return "、".join(parts)


def example_payload(status: str = STATUS_READY) -> str:
    payload = {STATUS_KEY: status}
    payload.update({k: EXAMPLE_FIELDS.get(k, "") for k in FIELD_KEYS})
    return json.dumps(payload, ensure_ascii=False)


def build_system_prompt(confirmed: Mapping[str, str]) -> str:
    required = specs_in_group("required")
    contact = specs_in_group("contact")
    optional = specs_in_group("optional")
    contact_keys = "/".join(s.key for s in contact)
    required_labels = "、".join(s.label for s in required)
    all_keys = "、".join((STATUS_KEY,) + FIELD_KEYS)

    return f"""你是「新建客户」助手，帮助用户快速完成客户信息录入。

【必填项】{_describe(required)}
【联系方式至少填一个】{_describe(contact)} - {len(contact)}选1即可
【选填项】{_describe(optional)}

【工作流程】
1. 用简短友好的中文引导用户，优先收集：{required_labels}、联系方式（{contact_keys} 任选其一）
2. 用户可能一次性说多条信息（如"张三，ABC科技公司，微信abc123"），请准确提取到对应字段
3. 尽量在一次对话中收集所有信息（包括选填项），可以主动询问选填项
4. 支持修改和补充：用户可以说"把姓名改成李四"、"补充一下邮箱是xxx@xxx.com"、"电话错了，应该是13900139000"，请正确更新对应字段
5. 当必填项（{required_labels}）和至少一种联系方式都收集完成后，生成一份信息总结，格式如下：

{render_summary(EXAMPLE_FIELDS)}

6. 每次回复的最后，附加一个 JSON 块（用于系统处理）：
```json
{example_payload()}
```

【JSON 格式说明】
- 只使用以下键：{all_keys}，所有值都是字符串
- {STATUS_KEY}: "{STATUS_COLLECTING}"（收集中）或 "{STATUS_READY}"（等待确认）
- 当{required_labels}和至少一种联系方式（{contact_keys}）都收集完成时，{STATUS_KEY} 设为 "{STATUS_READY}"
- 只填已确认的字段，未确认的留空字符串 ""
- JSON 块之后不要再输出其他文字

【当前已收集的字段】
{json.dumps(normalize_fields(confirmed), ensure_ascii=False)}"""
