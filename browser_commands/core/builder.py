"""
Fluent construction of browser command sequences.

    commands: list[BrowserCommand] = []
    CommandBuilder(commands).wait_for("#login").input("#user", "alice").click("#submit")

The builder never owns the list: every call appends to the list it was
given and returns the builder so calls can be chained. Commands run in the
order they were appended.
"""
# @file purpose: Fluent builder appending commands to a caller-owned list.

from __future__ import annotations

from datetime import timedelta
from typing import List, Optional, Union

from .commands import (
    DEFAULT_SCROLL_PIXELS,
    MAX_WAIT_MS,
    BrowserCommand,
    ClickCommand,
    InputCommand,
    JavaScriptCommand,
    ScrollCommand,
    SelectCommand,
    WaitCommand,
    WaitForCommand,
)
from .errors import CommandValidationError


class CommandBuilder:
    def __init__(self, commands: Optional[List[BrowserCommand]] = None) -> None:
        self.commands: List[BrowserCommand] = commands if commands is not None else []

    def _add(self, command: BrowserCommand) -> "CommandBuilder":
        self.commands.append(command)
        return self

    def click(self, target_selector: str) -> "CommandBuilder":
        """Mouse click on the element matching target_selector."""
        return self._add(ClickCommand(target_selector=target_selector))

    def scroll(self, pixels: int = DEFAULT_SCROLL_PIXELS) -> "CommandBuilder":
        """Scroll by `pixels`; use negative values to scroll up."""
        return self._add(ScrollCommand(pixels=pixels))

    def wait(self, duration: Union[int, timedelta]) -> "CommandBuilder":
        """
        Pause for `duration` (milliseconds or a timedelta), at most 15 seconds.
        Raises CommandValidationError when the limit is exceeded.
        """
        if isinstance(duration, timedelta):
            milliseconds = round(duration.total_seconds() * 1000)
        else:
            milliseconds = int(duration)
        if milliseconds > MAX_WAIT_MS:
            raise CommandValidationError("The maximum wait time is 15 seconds.")
        return self._add(WaitCommand(milliseconds=milliseconds))

    def wait_for(self, target_selector: str) -> "CommandBuilder":
        """Wait for an element to be available in the DOM."""
        return self._add(WaitForCommand(target_selector=target_selector))

    def input(self, target_selector: str, input_value: str) -> "CommandBuilder":
        return self._add(InputCommand(target_selector=target_selector, input_value=input_value))

    def select(self, target_selector: str, select_value: str) -> "CommandBuilder":
        """The select value may be the option value or its label."""
        return self._add(SelectCommand(target_selector=target_selector, select_value=select_value))

    def evaluate(self, script: str) -> "CommandBuilder":
        """Run a JavaScript snippet once the page has loaded (5 second limit)."""
        return self._add(JavaScriptCommand(script=script))
