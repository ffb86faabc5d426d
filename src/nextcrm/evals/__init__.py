# Pydantic Evals：新建客户对话提示词回归测试

from .datasets import (
    intake_name_dataset,
    intake_readiness_dataset,
)

__all__ = [
    "intake_name_dataset",
    "intake_readiness_dataset",
]
