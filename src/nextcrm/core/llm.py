"""
对话补全能力：LiteLLM 统一多平台模型调用，换模型只改 model 字符串。

环境变量：VOLCENGINE_API_KEY（豆包/火山方舟）、DEEPSEEK_API_KEY 等，
LiteLLM 会自动读取，无需在代码里区分厂商。
主模型失败或无返回时降级到备用模型（FallbackChatClient），调用方对此无感知。
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Literal

from pydantic import BaseModel, Field

from nextcrm.core.config import (
    get_fallback_model,
    get_primary_model,
    llm_max_tokens,
    llm_temperature,
    llm_timeout,
)

logger = logging.getLogger(__name__)

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """一条对话消息。"""
    role: Role = Field(..., description="system / user / assistant")
    content: str = Field("", description="消息正文")


class ChatClient(ABC):
    """对话补全接口：输入有序消息，返回候选回复列表（可能为空）。"""

    name: str = "chat"

    @abstractmethod
    def complete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        ...

    @abstractmethod
    async def acomplete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        ...


def _choices_to_messages(resp: Any) -> list[ChatMessage]:
    """LiteLLM 响应 → 候选消息列表；调用方取第一条。"""
    out: list[ChatMessage] = []
    for choice in getattr(resp, "choices", None) or []:
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None) if message is not None else None
        out.append(ChatMessage(role="assistant", content=content or ""))
    return out


class LiteLLMChatClient(ChatClient):
    """单一模型提供方：GPT、豆包、DeepSeek 等逻辑完全一致。"""

    def __init__(
        self,
        model: str,
        timeout: float | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ):
        self.model = model
        self.name = model
        self.timeout = timeout if timeout is not None else llm_timeout()
        self.temperature = temperature if temperature is not None else llm_temperature()
        self.max_tokens = max_tokens if max_tokens is not None else llm_max_tokens()

    def _request_kwargs(self, messages: list[ChatMessage]) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [m.model_dump() for m in messages],
            "timeout": self.timeout,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def complete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        from litellm import completion as litellm_completion

        resp = litellm_completion(**self._request_kwargs(messages))
        return _choices_to_messages(resp)

    async def acomplete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        from litellm import acompletion as litellm_acompletion

        resp = await litellm_acompletion(**self._request_kwargs(messages))
        return _choices_to_messages(resp)


class FallbackChatClient(ChatClient):
    """
    主备降级：优先主模型，异常或零候选时记录日志并改用备用模型。
    备用模型的异常直接抛出，由调用方决定如何处理。
    """

    def __init__(self, primary: ChatClient, secondary: ChatClient):
        self.primary = primary
        self.secondary = secondary
        self.name = f"{primary.name}->{secondary.name}"

    def complete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        try:
            choices = self.primary.complete(messages)
            if choices:
                return choices
            logger.warning("主模型 %s 无返回，降级到 %s", self.primary.name, self.secondary.name)
        except Exception as e:
            logger.warning(
                "主模型 %s 调用失败，降级到 %s: %s", self.primary.name, self.secondary.name, e
            )
        return self.secondary.complete(messages)

    async def acomplete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        try:
            choices = await self.primary.acomplete(messages)
            if choices:
                return choices
            logger.warning("主模型 %s 无返回，降级到 %s", self.primary.name, self.secondary.name)
        except Exception as e:
            logger.warning(
                "主模型 %s 调用失败，降级到 %s: %s", self.primary.name, self.secondary.name, e
            )
        return await self.secondary.acomplete(messages)


def build_chat_client() -> ChatClient:
    """按配置构建客户端：有降级模型时包一层 FallbackChatClient。"""
    primary = LiteLLMChatClient(get_primary_model())
    fallback = get_fallback_model()
    if not fallback or fallback == primary.model:
        return primary
    return FallbackChatClient(primary, LiteLLMChatClient(fallback))


# 懒加载单例，避免重复创建客户端
_client: ChatClient | None = None


def get_chat_client() -> ChatClient:
    global _client
    if _client is None:
        _client = build_chat_client()
    return _client
