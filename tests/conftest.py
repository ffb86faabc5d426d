"""
公共测试工具：可编排回复的假模型客户端，保证无需 API key 即可运行。
"""
from __future__ import annotations

import asyncio

import pytest

from nextcrm.core.llm import ChatClient, ChatMessage


class FakeChatClient(ChatClient):
    """按顺序返回预设回复；预设项为异常时抛出，为 None 时返回零候选。"""

    name = "fake/model"

    def __init__(self, *replies, delay: float = 0.0):
        self.replies = list(replies)
        self.delay = delay
        self.calls: list[list[ChatMessage]] = []

    def _next(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        self.calls.append(list(messages))
        reply = self.replies.pop(0) if self.replies else None
        if isinstance(reply, BaseException):
            raise reply
        if reply is None:
            return []
        return [ChatMessage(role="assistant", content=reply)]

    def complete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        return self._next(messages)

    async def acomplete(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        if self.delay:
            await asyncio.sleep(self.delay)
        return self._next(messages)


def user(text: str) -> ChatMessage:
    return ChatMessage(role="user", content=text)


def assistant(text: str) -> ChatMessage:
    return ChatMessage(role="assistant", content=text)


def model_reply(prose: str, payload: str) -> str:
    """拼一条「文案 + ```json 块」形式的模型回复。"""
    return f"{prose}\n\n```json\n{payload}\n```"


@pytest.fixture(autouse=True)
def no_tiktoken_download(monkeypatch):
    """单测不联网下载 tiktoken 编码表，token 数走近似值。"""
    monkeypatch.setattr("nextcrm.core.tokens._get_encoding_for_model", lambda model_name=None: None)
