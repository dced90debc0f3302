"""
浏览器命令模型：一条命令 = 一个浏览器自动化步骤。
- ClickCommand / ScrollCommand / WaitCommand / WaitForCommand
- JavaScriptCommand / InputCommand / SelectCommand

Each variant exposes a fixed canonical `command_name`. How a command is laid
out on the wire lives in browser_commands.codec, not here.
"""
# @file purpose: Define the closed set of browser command variants.

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

# Upper bound enforced by the builder API only.
MAX_WAIT_MS = 15_000
DEFAULT_SCROLL_PIXELS = 1000


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    command_name: ClassVar[str]


class ClickCommand(_Command):
    """Click the element found by target_selector."""

    command_name: ClassVar[str] = "click"

    target_selector: str = Field(default="", description="CSS/XPath of the element to click.")


class ScrollCommand(_Command):
    """Scroll the page; negative pixels scroll up."""

    command_name: ClassVar[str] = "scroll"

    pixels: int = DEFAULT_SCROLL_PIXELS


class WaitCommand(_Command):
    """Pause for a number of milliseconds."""

    command_name: ClassVar[str] = "wait"

    milliseconds: int = 0


class WaitForCommand(_Command):
    """Wait until target_selector is present in the DOM."""

    command_name: ClassVar[str] = "wait_for"

    target_selector: str = ""


class JavaScriptCommand(_Command):
    """Evaluate a script on the page (the service allows 5 seconds)."""

    command_name: ClassVar[str] = "javascript"

    script: str = ""


class InputCommand(_Command):
    """Enter text into an input, textarea or editable element."""

    command_name: ClassVar[str] = "input"

    target_selector: str = ""
    input_value: str = ""


class SelectCommand(_Command):
    """Pick an option (value or label) from a drop-down."""

    command_name: ClassVar[str] = "select"

    target_selector: str = ""
    select_value: str = ""


BrowserCommand = Union[
    ClickCommand,
    ScrollCommand,
    WaitCommand,
    WaitForCommand,
    JavaScriptCommand,
    InputCommand,
    SelectCommand,
]

COMMAND_TYPES: tuple[type[_Command], ...] = (
    ClickCommand,
    ScrollCommand,
    WaitCommand,
    WaitForCommand,
    JavaScriptCommand,
    InputCommand,
    SelectCommand,
)


def is_command(obj: object) -> bool:
    return isinstance(obj, COMMAND_TYPES)
