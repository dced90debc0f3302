"""
CLI entrypoint.

doctor:    print effective settings.
validate:  decode a JSON command array (lenient) and show what survives.
normalize: decode then re-encode to the canonical wire form.
run:       replay a command array in a local Chromium (debug aid).
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import ijson
import typer
from rich.console import Console
from rich.table import Table

from ..codec.decoder import loads_commands
from ..codec.encoder import dumps_commands
from ..core.commands import BrowserCommand
from ..core.controller.runner import Runner, StepOutcome
from ..core.log import setup_logging
from ..core.settings import settings
from ..io.playwright_driver import PlaywrightDriver

app = typer.Typer(help="browser-commands CLI")
console = Console()


@app.callback()
def main_callback(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    setup_logging(log_level)


def _read_commands(script: Path, tag: str) -> List[BrowserCommand]:
    if not script.exists():
        typer.secho(f"[{tag}] file not found: {script}", fg=typer.colors.RED)
        raise typer.Exit(code=2)
    try:
        return loads_commands(script.read_bytes())
    except ijson.JSONError as e:
        typer.secho(f"[{tag}] not valid JSON: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=2)


def _payload(command: BrowserCommand) -> str:
    return ", ".join(f"{k}={v!r}" for k, v in command.model_dump().items())


@app.command("doctor")
def doctor() -> None:
    """Environment check: print key settings to confirm CLI is usable."""
    console.print("[bold green]browser-commands[/] environment")
    console.print(f"- headless:       {settings.headless}")
    console.print(f"- timeout:        {settings.default_timeout_ms} ms")
    console.print(f"- script timeout: {settings.script_timeout_ms} ms")
    console.print(f"- artifacts dir:  {settings.artifacts_dir}")


@app.command("validate")
def validate(
    script: Path = typer.Argument(..., help="Path to a JSON command array"),
) -> None:
    """
    Decode the file the way the service-side codec does: unknown keys and
    malformed entries are dropped silently. Prints the decoded commands and
    exits non-zero when none survive.
    """
    commands = _read_commands(script, "validate")

    table = Table(title="Decoded Commands", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("name")
    table.add_column("payload")
    for i, command in enumerate(commands, start=1):
        table.add_row(str(i), command.command_name, _payload(command))
    console.print(table)

    if not commands:
        typer.secho("[validate] no commands decoded", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.secho(f"[validate] {len(commands)} command(s) decoded", fg=typer.colors.GREEN)


@app.command("normalize")
def normalize(
    script: Path = typer.Argument(..., help="Path to a JSON command array"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file"),
) -> None:
    """Rewrite a command array with canonical names and compact layout."""
    text = dumps_commands(_read_commands(script, "normalize"))
    if output is None:
        typer.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    typer.secho(f"[normalize] written: {output}", fg=typer.colors.GREEN)


@app.command("run")
def run(
    url: str = typer.Argument(..., help="Page to open before replaying"),
    script: Path = typer.Argument(..., help="Path to a JSON command array"),
    headless: bool = typer.Option(
        settings.headless, "--headless/--no-headless", help="Run browser headless"
    ),
    slowmo: int = typer.Option(0, "--slowmo", help="Slow motion in ms (debug)"),
    retries: int = typer.Option(0, "--retries", help="Retry times on CommandExecutionError"),
    artifacts_dir: Path = typer.Option(
        settings.artifacts_dir, "--artifacts-dir", help="Where to save failure screenshots"
    ),
) -> None:
    """
    Open URL, replay the decoded commands in order, print a table of results;
    returns non-zero on any failure.
    """
    commands = _read_commands(script, "run")

    # registers executors
    import browser_commands.actions.impl  # noqa: F401

    async def _run() -> int:
        driver = PlaywrightDriver(
            headless=headless, slow_mo_ms=slowmo, default_timeout_ms=settings.default_timeout_ms
        )
        await driver.start()
        try:
            ctx = await driver.new_context()
            try:
                await driver.goto(ctx, url)
                runner = Runner(retries=retries, artifacts_dir=artifacts_dir)
                rows: list[StepOutcome] = await runner.run(driver, ctx, commands)
            finally:
                await driver.close_context(ctx)
        finally:
            await driver.stop()

        table = Table(title="Run Results", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("name")
        table.add_column("result")
        table.add_column("detail")

        failures = 0
        for r in rows:
            detail = r.detail
            if not r.ok:
                failures += 1
                if r.artifact_path:
                    detail = f"{detail} (artifact: {r.artifact_path})"
            table.add_row(str(r.index), r.name, "[green]OK[/]" if r.ok else "[red]FAIL[/]", detail)
        console.print(table)
        return 1 if failures else 0

    code = asyncio.run(_run())
    if code != 0:
        raise typer.Exit(code=code)
    typer.secho("[run] completed successfully", fg=typer.colors.GREEN)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
