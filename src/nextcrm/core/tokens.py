"""
tiktoken：请求前估算 prompt 的 token 数，写入对话日志便于排查超长历史与成本。
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    import tiktoken

    from nextcrm.core.llm import ChatMessage

# 常用模型与 tiktoken 编码的映射（豆包、DeepSeek 等兼容 API 按 cl100k_base 估算）
_MODEL_ENCODING = {
    "gpt-4o": "o200k_base",
    "gpt-4": "cl100k_base",
    "gpt-3.5-turbo": "cl100k_base",
    "deepseek": "cl100k_base",
    "doubao": "cl100k_base",
}
_DEFAULT_ENCODING = "cl100k_base"

# 每条消息的格式开销（role、分隔符），与 OpenAI 的计数约定一致
_TOKENS_PER_MESSAGE = 4


def _get_encoding_for_model(model_name: Optional[str] = None) -> "tiktoken.Encoding | None":
    """根据模型名获取编码；未知模型用 cl100k_base。编码表无法加载时返回 None。"""
    import tiktoken
    try:
        name = (model_name or "").strip().lower()
        for key, enc in _MODEL_ENCODING.items():
            if key in name:
                return tiktoken.get_encoding(enc)
        return tiktoken.get_encoding(_DEFAULT_ENCODING)
    except Exception:
        return None


def count_tokens(text: str, model_name: Optional[str] = None) -> int:
    """
    计算文本的 token 数量。
    编码表不可用（如离线环境）时回退为约 len(text)//2 的近似值。
    """
    if not text:
        return 0
    enc = _get_encoding_for_model(model_name)
    if enc is not None:
        return len(enc.encode(text))
    return max(1, len(text) // 2)


def count_message_tokens(messages: Iterable["ChatMessage"], model_name: Optional[str] = None) -> int:
    """整段对话的 token 估算：正文 + 每条消息的固定开销。"""
    total = 0
    for m in messages:
        total += _TOKENS_PER_MESSAGE + count_tokens(m.content, model_name)
    return total
