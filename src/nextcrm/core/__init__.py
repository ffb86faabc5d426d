# 配置、LiteLLM 对话补全（主备降级）、tiktoken 预估

from .config import (
    get_primary_model,
    get_fallback_model,
    llm_timeout,
    llm_temperature,
    llm_max_tokens,
    log_level,
)
from .llm import (
    ChatMessage,
    ChatClient,
    LiteLLMChatClient,
    FallbackChatClient,
    build_chat_client,
    get_chat_client,
)
from .tokens import count_tokens, count_message_tokens

__all__ = [
    "get_primary_model",
    "get_fallback_model",
    "llm_timeout",
    "llm_temperature",
    "llm_max_tokens",
    "log_level",
    "ChatMessage",
    "ChatClient",
    "LiteLLMChatClient",
    "FallbackChatClient",
    "build_chat_client",
    "get_chat_client",
    "count_tokens",
    "count_message_tokens",
]
