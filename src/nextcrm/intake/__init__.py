# 新建客户 AI 对话录入：字段字典、回复拆分、字段合并、完整性判断、确认总结、单轮编排

from .fields import (
    FIELD_SPECS,
    FIELD_KEYS,
    FIELD_LABELS,
    REQUIRED_FIELDS,
    CONTACT_FIELDS,
    OPTIONAL_FIELDS,
    FieldSet,
    empty_fields,
    normalize_fields,
)
from .errors import (
    IntakeError,
    ModelUnavailable,
    EmptyModelResponse,
    TurnCancelled,
)
from .splitter import SplitReply, split_reply
from .merger import merge_fields
from .policy import is_ready, missing_fields, resolve_status
from .summary import render_summary
from .models import TurnResult
from .orchestrator import handle_turn, ahandle_turn

__all__ = [
    "FIELD_SPECS",
    "FIELD_KEYS",
    "FIELD_LABELS",
    "REQUIRED_FIELDS",
    "CONTACT_FIELDS",
    "OPTIONAL_FIELDS",
    "FieldSet",
    "empty_fields",
    "normalize_fields",
    "IntakeError",
    "ModelUnavailable",
    "EmptyModelResponse",
    "TurnCancelled",
    "SplitReply",
    "split_reply",
    "merge_fields",
    "is_ready",
    "missing_fields",
    "resolve_status",
    "render_summary",
    "TurnResult",
    "handle_turn",
    "ahandle_turn",
]
