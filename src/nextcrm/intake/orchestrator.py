"""
新建客户对话编排：一轮 = 拼 prompt → 调模型 → 拆分回复 → 合并字段 → 完整性判断 → 生成总结。

无状态：对话历史与已确认字段都由调用方传入、由调用方保存；本模块不缓存任何会话。
模型失败时直接抛错，不做重试、不补字段；调用方以相同输入重发整轮即可。
"""
from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Sequence

from nextcrm.core.llm import ChatClient, ChatMessage, get_chat_client
from nextcrm.core.tokens import count_message_tokens

from .errors import EmptyModelResponse, IntakeError, ModelUnavailable, TurnCancelled
from .fields import normalize_fields
from .merger import merge_fields
from .models import TurnResult
from .policy import is_ready, missing_fields, resolve_status
from .prompts import build_system_prompt
from .splitter import split_reply
from .summary import render_summary

logger = logging.getLogger(__name__)


def build_messages(history: Sequence[ChatMessage], confirmed: Mapping[str, str]) -> list[ChatMessage]:
    """本轮 system prompt + 历史消息；历史中的 system 消息丢弃，避免层层叠加。"""
    messages = [ChatMessage(role="system", content=build_system_prompt(confirmed))]
    messages.extend(m for m in history if m.role != "system")
    return messages


def _first_content(choices: list[ChatMessage]) -> str:
    if not choices:
        raise EmptyModelResponse("模型未返回任何候选回复")
    content = (choices[0].content or "").strip()
    if not content:
        raise EmptyModelResponse("模型返回内容为空")
    return content


def _model_name(client: ChatClient) -> str:
    return getattr(client, "name", "") or ""


def finish_turn(raw: str, confirmed: Mapping[str, str]) -> TurnResult:
    """模型原文 → TurnResult。纯函数，同样的输入总得到同样的结果。"""
    parsed = split_reply(raw)
    merged = merge_fields(confirmed, parsed.extracted)
    ready = is_ready(merged)
    status = resolve_status(ready)

    if parsed.claimed_status and parsed.claimed_status != status:
        logger.warning("模型自报状态 %s 与后端判定 %s 不一致，以后端为准", parsed.claimed_status, status)

    result = TurnResult(
        reply=parsed.prose,
        fields=merged,
        ready=ready,
        status=status,
        summary=render_summary(merged) if ready else None,
        missing_fields=missing_fields(merged),
        claimed_status=parsed.claimed_status,
    )
    logger.info(
        "客户录入对话完成: extracted=%s ready=%s missing=%s",
        sorted(k for k, v in parsed.extracted.items() if v),
        ready,
        result.missing_fields,
    )
    return result


def _prepare(
    history: Sequence[ChatMessage],
    confirmed: Mapping[str, str] | None,
    client: ChatClient | None,
) -> tuple[ChatClient, dict[str, str], list[ChatMessage]]:
    client = client or get_chat_client()
    known = normalize_fields(confirmed)
    messages = build_messages(history, known)
    logger.info(
        "客户录入对话: model=%s messages=%d prompt_tokens≈%d",
        _model_name(client),
        len(messages),
        count_message_tokens(messages, _model_name(client)),
    )
    return client, known, messages


def handle_turn(
    history: Sequence[ChatMessage],
    confirmed: Mapping[str, str] | None = None,
    client: ChatClient | None = None,
) -> TurnResult:
    """
    处理一轮新建客户对话。
    history: 至少包含一条 user 消息（由调用方校验）；confirmed: 之前轮次已确认的字段，首轮可为空。
    失败抛 ModelUnavailable / EmptyModelResponse，不修改 confirmed。
    """
    client, known, messages = _prepare(history, confirmed, client)
    try:
        choices = client.complete(messages)
    except IntakeError:
        raise
    except Exception as e:
        logger.error("客户录入对话调用模型失败: %s", e)
        raise ModelUnavailable() from e
    return finish_turn(_first_content(choices), known)


async def ahandle_turn(
    history: Sequence[ChatMessage],
    confirmed: Mapping[str, str] | None = None,
    client: ChatClient | None = None,
) -> TurnResult:
    """
    handle_turn 的异步版本。
    外层取消本任务（task.cancel、wait_for 超时、TaskGroup）时原样抛出 CancelledError，
    由外层按 asyncio 语义处理；模型调用自身被取消而本任务未被取消时抛 TurnCancelled。
    """
    client, known, messages = _prepare(history, confirmed, client)
    try:
        choices = await client.acomplete(messages)
    except asyncio.CancelledError as e:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            logger.info("客户录入对话已被调用方取消")
            raise
        logger.warning("客户录入对话的模型调用被取消")
        raise TurnCancelled() from e
    except IntakeError:
        raise
    except Exception as e:
        logger.error("客户录入对话调用模型失败: %s", e)
        raise ModelUnavailable() from e
    return finish_turn(_first_content(choices), known)
