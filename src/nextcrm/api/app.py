"""
NextCRM AI 接口 HTTP 入口。

新建客户对话：POST /v1/ai/customer-intake/chat，前端每轮提交完整历史 + 当前字段，
后端调用模型、合并字段、判定是否可创建客户，返回回复文案与确认总结。
鉴权由网关/认证中心负责，不在本服务内处理。
"""
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from nextcrm.core.config import log_level
from nextcrm.core.llm import ChatClient, get_chat_client
from nextcrm.intake import IntakeError, ahandle_turn

from .schemas import CustomerIntakeChatRequest, CustomerIntakeChatResponse

logging.basicConfig(
    level=getattr(logging, log_level(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="NextCRM AI API",
    description="NextCRM：新建客户 AI 对话录入",
    version="0.1.0",
)


@app.exception_handler(IntakeError)
async def intake_error_handler(request: Request, exc: IntakeError):
    """模型不可用 / 空回复 / 取消：统一 {detail: {code, message}}，前端展示重试按钮。"""
    logger.warning("客户录入对话失败: %s %s", exc.code, request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": {"code": exc.code, "message": str(exc)}},
    )


@app.get("/health")
def health():
    """探活。"""
    return {"status": "ok", "service": "nextcrm"}


@app.post("/v1/ai/customer-intake/chat", response_model=CustomerIntakeChatResponse)
async def customer_intake_chat(
    request: CustomerIntakeChatRequest,
    client: ChatClient = Depends(get_chat_client),
):
    """
    新建客户 AI 对话：引导填写必填项，返回回复 + 合并字段 + 是否可创建。
    可创建时附带信息确认总结；用户确认后由前端调用创建客户接口。
    """
    if not any(m.role == "user" and m.content.strip() for m in request.messages):
        raise HTTPException(status_code=400, detail="messages 中至少需要一条用户消息")
    result = await ahandle_turn(request.messages, request.current_fields, client=client)
    return CustomerIntakeChatResponse(
        reply=result.reply,
        fields=result.fields,
        ready=result.ready,
        status=result.status,
        summary=result.summary,
        missing_fields=result.missing_fields,
    )
