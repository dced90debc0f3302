"""
Browser driver protocol (abstraction).

This Protocol defines the browser control surface that command executors
rely on when a command list is replayed locally. It allows plugging
different backends (Playwright, or an in-memory fake in tests) without
changing the executors.

Notes:
- `ctx` represents an execution context for one command sequence.
  In the Playwright implementation it is a `Page` created via `new_context()`.
"""

from __future__ import annotations

from typing import Any, Protocol


class BrowserDriver(Protocol):
    # -------- lifecycle --------
    async def start(self) -> None: ...
    async def stop(self) -> None: ...
    async def new_context(self) -> Any: ...
    async def close_context(self, ctx: Any) -> None: ...

    # -------- navigation & waits --------
    async def goto(self, ctx: Any, url: str, *, timeout_ms: int | None = None) -> None: ...
    async def wait_for(self, ctx: Any, selector: str, *, timeout_ms: int | None = None) -> None: ...
    async def wait(self, ctx: Any, milliseconds: int) -> None: ...

    # -------- interactions --------
    async def click(self, ctx: Any, selector: str, *, timeout_ms: int | None = None) -> None: ...
    async def scroll(self, ctx: Any, pixels: int) -> None: ...
    async def fill(
        self, ctx: Any, selector: str, text: str, *, timeout_ms: int | None = None
    ) -> None: ...
    async def select_option(
        self, ctx: Any, selector: str, value: str, *, timeout_ms: int | None = None
    ) -> None: ...
    async def evaluate(self, ctx: Any, script: str) -> Any: ...

    # -------- utilities --------
    async def screenshot(self, ctx: Any, path: str, *, full_page: bool = True) -> None: ...
