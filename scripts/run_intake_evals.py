#!/usr/bin/env python3
"""
Pydantic Evals：新建客户对话（姓名提取 / 完整性判定）回归测试。

用法: uv run python scripts/run_intake_evals.py [--dataset name|readiness|all]
需要 .env 中配置 VOLCENGINE_API_KEY 或 DEEPSEEK_API_KEY；无 key 时跳过需 LLM 的评估。
"""
from __future__ import annotations

import asyncio
import os
import sys

from nextcrm.core.llm import ChatMessage
from nextcrm.intake import handle_turn


def _first_turn(text: str):
    return handle_turn([ChatMessage(role="user", content=text)], {})


def _name_task(text: str) -> str:
    return _first_turn(text).fields.get("name", "")


def _readiness_task(text: str) -> bool:
    return _first_turn(text).ready


async def run_name_evals() -> None:
    from nextcrm.evals import intake_name_dataset
    report = await intake_name_dataset().evaluate(_name_task)
    print("\n=== 姓名提取回归 ===\n")
    report.print()


async def run_readiness_evals() -> None:
    from nextcrm.evals import intake_readiness_dataset
    report = await intake_readiness_dataset().evaluate(_readiness_task)
    print("\n=== 完整性判定回归 ===\n")
    report.print()


async def main() -> int:
    if not os.getenv("VOLCENGINE_API_KEY") and not os.getenv("DEEPSEEK_API_KEY"):
        print("未配置 VOLCENGINE_API_KEY 或 DEEPSEEK_API_KEY，跳过需 LLM 的 Evals。")
        return 0

    which = "all"
    for i, arg in enumerate(sys.argv[1:], 1):
        if arg in ("--dataset", "-d") and i + 1 < len(sys.argv):
            which = sys.argv[i + 1].lower()
            break
        if not arg.startswith("-"):
            which = arg.lower()
            break
    if which in ("name", "all"):
        await run_name_evals()
    if which in ("readiness", "all"):
        await run_readiness_evals()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
