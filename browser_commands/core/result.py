"""
结构化的命令执行结果，用于向上层（Runner/CLI）汇报本地回放结果。
"""
# @file purpose: Define CommandResult model for executor outputs.

from __future__ import annotations

from typing import Any, Optional
from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """
    统一的执行返回值：
    - ok: 是否成功
    - output: JavaScript 命令的返回值（文本化），其他命令为 None
    - meta: 诊断信息（selector/像素/毫秒等），便于日志与回放
    """

    ok: bool = True
    output: Optional[str] = None
    meta: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, **meta: Any) -> "CommandResult":
        return cls(ok=True, meta=meta)
