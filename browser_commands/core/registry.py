"""
命令执行器注册表:
- 以命令类型 (ClickCommand, WaitCommand, ...) 作为键注册执行函数
- Runner 在本地回放时按类型查找执行器
"""
# @file purpose: Registry mapping command types to async executors.

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Type

from .result import CommandResult

# 执行器的标准签名（异步）: (driver, ctx, command) -> CommandResult
ExecutorFn = Callable[[Any, Any, Any], Awaitable[CommandResult]]

_REGISTRY: Dict[type, ExecutorFn] = {}


def executor(command_type: Type[Any]) -> Callable[[ExecutorFn], ExecutorFn]:
    """
    装饰器：为某个命令类型注册执行器。
        @executor(ClickCommand)
        async def run_click(driver, ctx, command): ...
    """

    def deco(fn: ExecutorFn) -> ExecutorFn:
        _REGISTRY[command_type] = fn
        return fn

    return deco


def get_executor(command_type: Type[Any]) -> ExecutorFn:
    try:
        return _REGISTRY[command_type]
    except KeyError as e:
        raise KeyError(f"No executor registered for {command_type.__name__}") from e
