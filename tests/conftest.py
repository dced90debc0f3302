"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest


class FakeDriver:
    """In-memory BrowserDriver: records every call, can fail on demand."""

    def __init__(self, *, failures: dict[str, int] | None = None) -> None:
        # method name -> how many calls should raise before succeeding
        self.failures = dict(failures or {})
        self.calls: list[tuple[Any, ...]] = []
        self.script_results: dict[str, Any] = {}
        self.script_delay_s = 0.0

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        name = call[0]
        if self.failures.get(name, 0) > 0:
            self.failures[name] -= 1
            raise RuntimeError(f"{name} failed")

    async def click(self, ctx: Any, selector: str, *, timeout_ms: int | None = None) -> None:
        self._record("click", selector)

    async def scroll(self, ctx: Any, pixels: int) -> None:
        self._record("scroll", pixels)

    async def wait(self, ctx: Any, milliseconds: int) -> None:
        self._record("wait", milliseconds)

    async def wait_for(self, ctx: Any, selector: str, *, timeout_ms: int | None = None) -> None:
        self._record("wait_for", selector)

    async def fill(
        self, ctx: Any, selector: str, text: str, *, timeout_ms: int | None = None
    ) -> None:
        self._record("fill", selector, text)

    async def select_option(
        self, ctx: Any, selector: str, value: str, *, timeout_ms: int | None = None
    ) -> None:
        self._record("select_option", selector, value)

    async def evaluate(self, ctx: Any, script: str) -> Any:
        self._record("evaluate", script)
        if self.script_delay_s:
            await asyncio.sleep(self.script_delay_s)
        return self.script_results.get(script)

    async def screenshot(self, ctx: Any, path: str, *, full_page: bool = True) -> None:
        self.calls.append(("screenshot", path))


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def make_driver() -> type[FakeDriver]:
    return FakeDriver
