# browser_commands/core/controller/runner.py
"""
Minimal sequential runner for a browser command list (local replay).

Responsibilities:
- Execute commands strictly in list order
- Retry on CommandExecutionError with linear backoff
- On failure: save screenshot artifact (if artifacts_dir is set)
- Return per-step outcomes for CLI rendering
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .. import registry
from ..commands import BrowserCommand
from ..errors import CommandExecutionError

logger = logging.getLogger(__name__)


@dataclass
class StepOutcome:
    """UI-friendly outcome used by the CLI."""

    index: int
    name: str
    ok: bool
    detail: str = "-"
    artifact_path: str | None = None
    output: str | None = None  # e.g., value returned by a javascript command
    meta: dict[str, Any] | None = None


class Runner:
    def __init__(
        self,
        *,
        retries: int = 0,
        artifacts_dir: Path | None = None,
        backoff_seconds: float = 0.5,
    ) -> None:
        self.retries = max(0, retries)
        self.artifacts_dir = artifacts_dir
        self.backoff_seconds = backoff_seconds
        if self.artifacts_dir:
            self.artifacts_dir.mkdir(parents=True, exist_ok=True)

    async def run(
        self, driver: Any, ctx: Any, commands: Sequence[BrowserCommand]
    ) -> list[StepOutcome]:
        outcomes: list[StepOutcome] = []

        for i, command in enumerate(commands, start=1):
            name = command.command_name

            try:
                fn = registry.get_executor(type(command))
            except KeyError as e:
                outcomes.append(StepOutcome(index=i, name=name, ok=False, detail=str(e)))
                continue

            attempt = 0
            while True:
                try:
                    res = await fn(driver, ctx, command)
                except CommandExecutionError as e:
                    attempt += 1
                    if attempt > self.retries:
                        logger.warning("step %d (%s) failed: %s", i, name, e)
                        artifact = await self._on_failure(driver, ctx, i, name)
                        outcomes.append(
                            StepOutcome(
                                index=i,
                                name=name,
                                ok=False,
                                detail=str(e),
                                artifact_path=artifact,
                            )
                        )
                        break
                    logger.info("step %d (%s) failed, retry %d/%d", i, name, attempt, self.retries)
                    await asyncio.sleep(self.backoff_seconds * attempt)
                    continue

                outcomes.append(
                    StepOutcome(
                        index=i,
                        name=name,
                        ok=res.ok,
                        detail=self._detail(res.output, res.meta),
                        output=res.output,
                        meta=res.meta,
                    )
                )
                break

        return outcomes

    @staticmethod
    def _detail(output: str | None, meta: dict[str, Any]) -> str:
        """Human-friendly detail for CLI."""
        if output:
            return (output[:120] + "…") if len(output) > 120 else output
        if "selector" in meta:
            return f'selector="{meta["selector"]}"'
        if "milliseconds" in meta:
            return f"{meta['milliseconds']} ms"
        if "pixels" in meta:
            return f"{meta['pixels']} px"
        return "-"

    async def _on_failure(self, driver: Any, ctx: Any, index: int, name: str) -> str | None:
        """Best-effort failure artifact (screenshot)."""
        if not self.artifacts_dir:
            return None
        png = self.artifacts_dir / f"fail-{index:02d}-{name}.png"
        try:
            await driver.screenshot(ctx, str(png), full_page=True)
        except Exception as e:  # noqa: BLE001
            logger.debug("could not save failure screenshot: %s", e)
            return None
        return str(png)
