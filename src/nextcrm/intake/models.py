"""
单轮对话结果的数据边界。
"""
from pydantic import BaseModel, Field
from typing import Optional


class TurnResult(BaseModel):
    """一轮新建客户对话的输出；ready 为 True 时 fields 可直接用于创建客户。"""
    reply: str = Field(..., description="展示给用户的文案（不含 JSON 块）")
    fields: dict[str, str] = Field(default_factory=dict, description="合并后的完整字段，未知为空串")
    ready: bool = Field(False, description="后端判定：必填项与至少一种联系方式均已填写")
    status: str = Field("collecting", description="后端修正后的状态：collecting / ready_for_confirmation")
    summary: Optional[str] = Field(None, description="信息确认总结，仅 ready 为 True 时存在")
    missing_fields: list[str] = Field(default_factory=list, description="阻止创建客户的缺项，contact 表示联系方式全空")
    claimed_status: Optional[str] = Field(None, description="模型自报的状态，仅供排查，不参与判断")
