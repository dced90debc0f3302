"""
Command executors bound to BrowserDriver, used for local replay:
- click / scroll / wait / wait_for / javascript / input / select

Each executor:
  1) Expects a BrowserDriver + ctx + one browser command
  2) Returns CommandResult, or raises CommandExecutionError on failure
"""

# @file purpose: Implement and register command executors.
from __future__ import annotations

import asyncio
import json
from typing import Any

from browser_commands.core.commands import (
    ClickCommand,
    InputCommand,
    JavaScriptCommand,
    ScrollCommand,
    SelectCommand,
    WaitCommand,
    WaitForCommand,
)
from browser_commands.core.errors import CommandExecutionError
from browser_commands.core.registry import executor
from browser_commands.core.result import CommandResult
from browser_commands.core.settings import settings
from browser_commands.io.driver import BrowserDriver  # Protocol


@executor(ClickCommand)
async def run_click(driver: BrowserDriver, ctx: Any, command: ClickCommand) -> CommandResult:
    try:
        await driver.click(ctx, command.target_selector)
        return CommandResult.success(step="click", selector=command.target_selector)
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError(
            "click",
            "failed to click element",
            selector=command.target_selector,
            cause=e,
        ) from e


@executor(ScrollCommand)
async def run_scroll(driver: BrowserDriver, ctx: Any, command: ScrollCommand) -> CommandResult:
    try:
        await driver.scroll(ctx, command.pixels)
        return CommandResult.success(step="scroll", pixels=command.pixels)
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError(
            "scroll", "failed to scroll page", details={"pixels": command.pixels}, cause=e
        ) from e


@executor(WaitCommand)
async def run_wait(driver: BrowserDriver, ctx: Any, command: WaitCommand) -> CommandResult:
    # negative values come only from hand-written wire data
    milliseconds = max(0, command.milliseconds)
    try:
        await driver.wait(ctx, milliseconds)
        return CommandResult.success(step="wait", milliseconds=milliseconds)
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError(
            "wait", "failed to wait", details={"milliseconds": milliseconds}, cause=e
        ) from e


@executor(WaitForCommand)
async def run_wait_for(driver: BrowserDriver, ctx: Any, command: WaitForCommand) -> CommandResult:
    try:
        await driver.wait_for(ctx, command.target_selector)
        return CommandResult.success(step="wait_for", selector=command.target_selector)
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError(
            "wait_for",
            "element did not appear in time",
            selector=command.target_selector,
            cause=e,
        ) from e


@executor(JavaScriptCommand)
async def run_javascript(
    driver: BrowserDriver, ctx: Any, command: JavaScriptCommand
) -> CommandResult:
    """Bounded by settings.script_timeout_ms, mirroring the service's 5 second limit."""
    timeout = settings.script_timeout_ms / 1000
    try:
        value = await asyncio.wait_for(driver.evaluate(ctx, command.script), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise CommandExecutionError(
            "javascript",
            "script exceeded the execution limit",
            details={"timeout_ms": settings.script_timeout_ms},
            cause=e,
        ) from e
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError("javascript", "script raised an error", cause=e) from e
    output = value if value is None or isinstance(value, str) else json.dumps(value, default=str)
    return CommandResult(ok=True, output=output, meta={"step": "javascript"})


@executor(InputCommand)
async def run_input(driver: BrowserDriver, ctx: Any, command: InputCommand) -> CommandResult:
    try:
        await driver.fill(ctx, command.target_selector, command.input_value)
        return CommandResult.success(
            step="input", selector=command.target_selector, length=len(command.input_value)
        )
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError(
            "input",
            "failed to input text",
            selector=command.target_selector,
            cause=e,
        ) from e


@executor(SelectCommand)
async def run_select(driver: BrowserDriver, ctx: Any, command: SelectCommand) -> CommandResult:
    try:
        await driver.select_option(ctx, command.target_selector, command.select_value)
        return CommandResult.success(
            step="select", selector=command.target_selector, value=command.select_value
        )
    except Exception as e:  # noqa: BLE001
        raise CommandExecutionError(
            "select",
            "failed to select option",
            selector=command.target_selector,
            details={"value": command.select_value},
            cause=e,
        ) from e
