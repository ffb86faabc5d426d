"""
配置：从环境变量读取，供对话录入核心与模型客户端使用。
"""
import os
from pathlib import Path

# 可选加载 .env（若存在）：先项目根（与 pyproject.toml 同层），再当前工作目录
_env_paths = [
    Path(__file__).resolve().parents[3] / ".env",  # 从 src/nextcrm/core 往上的项目根
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        from dotenv import load_dotenv
        load_dotenv(_p)
        break

# 主模型：豆包（火山方舟）；降级模型：DeepSeek。模型名使用 LiteLLM 格式
DEFAULT_PRIMARY_MODEL = "volcengine/doubao-seed-1-8-251228"
DEFAULT_FALLBACK_MODEL = "deepseek/deepseek-chat"


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_primary_model() -> str:
    return (os.getenv("NEXTCRM_PRIMARY_MODEL") or DEFAULT_PRIMARY_MODEL).strip()


def get_fallback_model() -> str | None:
    """降级模型；显式设为空串或 none 时关闭降级。"""
    raw = os.getenv("NEXTCRM_FALLBACK_MODEL")
    if raw is None:
        return DEFAULT_FALLBACK_MODEL
    raw = raw.strip()
    if not raw or raw.lower() == "none":
        return None
    return raw


def llm_timeout() -> float:
    """单次模型调用超时（秒），由 LiteLLM 执行。"""
    return _env_float("NEXTCRM_LLM_TIMEOUT", 60.0)


def llm_temperature() -> float:
    return _env_float("NEXTCRM_LLM_TEMPERATURE", 0.7)


def llm_max_tokens() -> int:
    return _env_int("NEXTCRM_LLM_MAX_TOKENS", 2000)


def log_level() -> str:
    return (os.getenv("NEXTCRM_LOG_LEVEL") or "INFO").strip().upper()
