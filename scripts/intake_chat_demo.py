#!/usr/bin/env python3
"""
命令行体验新建客户对话：模拟前端，每轮把完整历史与当前字段交给 handle_turn。

用法：uv run python scripts/intake_chat_demo.py
需要 .env 中配置 VOLCENGINE_API_KEY 或 DEEPSEEK_API_KEY。输入「确认」在可创建时结束，输入 q 退出。
"""
from __future__ import annotations

import json
import sys

from nextcrm.core.llm import ChatMessage
from nextcrm.intake import IntakeError, TurnResult, handle_turn


def main() -> int:
    history: list[ChatMessage] = []
    fields: dict[str, str] = {}
    last: TurnResult | None = None

    print("新建客户助手：请描述客户信息（如：张三，ABC公司，13800138000）")
    while True:
        try:
            text = input("> ").strip()
        except EOFError:
            return 0
        if text.lower() in ("q", "quit", "exit"):
            return 0
        if not text:
            continue
        if text == "确认" and last is not None and last.ready:
            print("将创建客户：")
            print(json.dumps({k: v for k, v in fields.items() if v}, ensure_ascii=False, indent=2))
            return 0

        history.append(ChatMessage(role="user", content=text))
        try:
            last = handle_turn(history, fields)
        except IntakeError as e:
            # 失败时历史与字段保持不变，可直接重发
            history.pop()
            print(f"[{e.code}] {e}，请重试")
            continue

        fields = last.fields
        history.append(ChatMessage(role="assistant", content=last.reply))
        print(last.reply)
        if last.summary:
            print(last.summary)
        elif last.missing_fields:
            print(f"（尚缺：{', '.join(last.missing_fields)}）")


if __name__ == "__main__":
    sys.exit(main())
