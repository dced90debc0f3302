"""Tests for local replay: executors + Runner, against an in-memory driver."""

from __future__ import annotations

import pytest

import browser_commands.actions.impl  # noqa: F401  注册执行器
from browser_commands.core import registry
from browser_commands.core.builder import CommandBuilder
from browser_commands.core.controller.runner import Runner
from browser_commands.core.settings import settings


@pytest.mark.asyncio
async def test_runs_commands_in_order(driver) -> None:
    commands = (
        CommandBuilder()
        .wait_for("#form")
        .input("#name", "Alice")
        .select("#country", "ZA")
        .scroll(-100)
        .wait(200)
        .click("#submit")
        .commands
    )
    rows = await Runner().run(driver, None, commands)

    assert [r.ok for r in rows] == [True] * 6
    assert [r.name for r in rows] == ["wait_for", "input", "select", "scroll", "wait", "click"]
    assert driver.calls == [
        ("wait_for", "#form"),
        ("fill", "#name", "Alice"),
        ("select_option", "#country", "ZA"),
        ("scroll", -100),
        ("wait", 200),
        ("click", "#submit"),
    ]
    assert rows[-1].detail == 'selector="#submit"'
    assert rows[4].detail == "200 ms"


@pytest.mark.asyncio
async def test_javascript_output(driver) -> None:
    driver.script_results = {"document.title": "Home", "data()": {"n": 1}}
    commands = CommandBuilder().evaluate("document.title").evaluate("data()").commands
    rows = await Runner().run(driver, None, commands)
    assert [r.output for r in rows] == ["Home", '{"n": 1}']
    assert rows[0].detail == "Home"


@pytest.mark.asyncio
async def test_javascript_time_limit(monkeypatch: pytest.MonkeyPatch, driver) -> None:
    monkeypatch.setattr(settings, "script_timeout_ms", 10)
    driver.script_delay_s = 1.0
    rows = await Runner().run(driver, None, CommandBuilder().evaluate("slow()").commands)
    assert not rows[0].ok
    assert "execution limit" in rows[0].detail


@pytest.mark.asyncio
async def test_retries_then_succeeds(make_driver) -> None:
    driver = make_driver(failures={"click": 2})
    rows = await Runner(retries=2, backoff_seconds=0).run(
        driver, None, CommandBuilder().click("#a").commands
    )
    assert rows[0].ok
    assert driver.calls == [("click", "#a")] * 3


@pytest.mark.asyncio
async def test_failure_saves_artifact_and_continues(make_driver, tmp_path) -> None:
    driver = make_driver(failures={"fill": 5})
    commands = CommandBuilder().input("#missing", "x").click("#ok").commands
    rows = await Runner(retries=1, artifacts_dir=tmp_path, backoff_seconds=0).run(
        driver, None, commands
    )

    assert [r.ok for r in rows] == [False, True]
    assert "[input] failed to input text" in rows[0].detail
    assert "selector=#missing" in rows[0].detail
    expected = str(tmp_path / "fail-01-input.png")
    assert rows[0].artifact_path == expected
    assert ("screenshot", expected) in driver.calls


@pytest.mark.asyncio
async def test_missing_executor_reported(monkeypatch: pytest.MonkeyPatch, driver) -> None:
    monkeypatch.setattr(registry, "_REGISTRY", {})
    rows = await Runner().run(driver, None, CommandBuilder().click("#a").commands)
    assert not rows[0].ok
    assert "No executor registered for ClickCommand" in rows[0].detail
    assert driver.calls == []


@pytest.mark.asyncio
async def test_negative_wait_is_clamped(driver) -> None:
    from browser_commands.codec.decoder import loads_commands

    rows = await Runner().run(driver, None, loads_commands('[{"wait": -5}]'))
    assert rows[0].ok
    assert driver.calls == [("wait", 0)]


@pytest.mark.asyncio
async def test_wait_failure_is_reported_and_replay_continues(make_driver) -> None:
    driver = make_driver(failures={"wait": 1})
    rows = await Runner(backoff_seconds=0).run(
        driver, None, CommandBuilder().wait(10).click("#a").commands
    )

    assert [r.ok for r in rows] == [False, True]
    assert "[wait] failed to wait" in rows[0].detail
    assert driver.calls == [("wait", 10), ("click", "#a")]
