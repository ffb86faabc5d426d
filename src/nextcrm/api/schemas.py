"""
新建客户 AI 对话接口的请求与响应模型。
"""
from pydantic import BaseModel, Field
from typing import Optional

from nextcrm.core.llm import ChatMessage


class CustomerIntakeChatRequest(BaseModel):
    """前端每轮提交完整对话历史与当前已确认字段；后端不保存会话。"""
    messages: list[ChatMessage] = Field(..., min_length=1, description="完整对话历史，至少一条 user 消息")
    current_fields: dict[str, Optional[str]] = Field(default_factory=dict, description="之前轮次已确认的字段，首轮为空")


class CustomerIntakeChatResponse(BaseModel):
    """单轮对话结果。"""
    reply: str = Field(..., description="助手回复文案")
    fields: dict[str, str] = Field(default_factory=dict, description="合并后的字段，前端保存并在下一轮回传")
    ready: bool = Field(False, description="是否可以创建客户（后端判定）")
    status: str = Field("collecting", description="collecting / ready_for_confirmation")
    summary: Optional[str] = Field(None, description="信息确认总结，仅 ready 时返回")
    missing_fields: list[str] = Field(default_factory=list, description="尚缺的必填项；contact 表示联系方式全空")
