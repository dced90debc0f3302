"""最小化测试：包能被导入，且每种命令都有本地回放执行器。"""
# @file purpose: Minimal smoke test.

import asyncio

import pytest

import browser_commands.actions.impl  # noqa: F401  注册执行器
import browser_commands.io.playwright_driver as playwright_driver
from browser_commands.core.commands import COMMAND_TYPES
from browser_commands.core.registry import get_executor


@pytest.mark.parametrize("command_type", COMMAND_TYPES, ids=lambda t: t.__name__)
def test_every_command_type_has_an_executor(command_type) -> None:
    assert callable(get_executor(command_type))


def test_playwright_driver_needs_start() -> None:
    driver = playwright_driver.PlaywrightDriver()
    with pytest.raises(RuntimeError, match="Call start"):
        asyncio.run(driver.new_context())
