"""
定义项目级异常类型，统一错误语义与捕获边界。
- BrowserCommandsError: 所有自定义异常的基类
- CommandValidationError: 构建命令时参数越界（例如 wait 超过 15 秒）
- CommandExecutionError: 本地回放时命令执行失败（元素缺失、超时、脚本异常等）

The wire codec deliberately has no error type of its own: malformed
elements are dropped, and tokenizer errors propagate as-is.
"""
# @file purpose: Define error taxonomy for browser-commands.

from typing import Any


class BrowserCommandsError(Exception):
    """Base class for all custom errors in browser-commands."""


class CommandValidationError(BrowserCommandsError, ValueError):
    """Raised by the builder when a command argument is out of range."""


class CommandExecutionError(BrowserCommandsError):
    """
    Raised when a command fails to execute during local replay.
    统一封装上下文，便于 CLI/Runner 打印一致的信息与诊断。
    """

    def __init__(
        self,
        command: str,
        message: str,
        *,
        selector: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.command: str = command
        self.selector: str | None = selector
        self.details: dict[str, Any] = details or {}
        self.cause: BaseException | None = cause

    def __str__(self) -> str:
        parts = [f"[{self.command}] {super().__str__()}"]
        if self.selector:
            parts.append(f"selector={self.selector}")
        if self.details:
            kv = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"details={{ {kv} }}")
        return " | ".join(parts)
