"""
日志初始化：标准 logging + rich 控制台输出，仅由 CLI 入口调用一次。
"""
# @file purpose: Configure stdlib logging with a rich console handler.

from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
