"""
Wire table for browser commands.

On the wire a command is a single-key object whose key *is* the type:

    {"click": "#submit"}            TEXT     scalar string payload
    {"wait": 500}                   INTEGER  scalar integer payload
    {"input": {"#name": "Alice"}}   KEYED    selector becomes the property name

Decode accepts several aliases per command (case-insensitive); encode always
writes the canonical name. Scroll is not wired into the table.
"""
# @file purpose: Alias table and payload kinds for the command wire format.

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..core.commands import (
    BrowserCommand,
    ClickCommand,
    InputCommand,
    JavaScriptCommand,
    SelectCommand,
    WaitCommand,
    WaitForCommand,
)


class WireKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    KEYED = "keyed"


# canonical name -> accepted aliases (lower-case)
_ALIAS_GROUPS: Dict[str, Tuple[str, ...]] = {
    "click": ("click", "tap"),
    "wait": ("wait",),
    "wait_for": ("waitfor", "wait_for", "wait-for"),
    "javascript": ("javascript", "js", "eval", "evaluate"),
    "input": ("input", "fill", "type"),
    "select": ("select", "choose", "pick"),
}

ALIASES: Dict[str, str] = {
    alias: canonical for canonical, aliases in _ALIAS_GROUPS.items() for alias in aliases
}

WIRE_KINDS: Dict[str, WireKind] = {
    "click": WireKind.TEXT,
    "wait": WireKind.INTEGER,
    "wait_for": WireKind.TEXT,
    "javascript": WireKind.TEXT,
    "input": WireKind.KEYED,
    "select": WireKind.KEYED,
}

# Scalar kinds take one argument, keyed kinds take (selector, value).
FACTORIES: Dict[str, Callable[..., BrowserCommand]] = {
    "click": lambda selector: ClickCommand(target_selector=selector),
    "wait": lambda milliseconds: WaitCommand(milliseconds=milliseconds),
    "wait_for": lambda selector: WaitForCommand(target_selector=selector),
    "javascript": lambda script: JavaScriptCommand(script=script),
    "input": lambda selector, value: InputCommand(target_selector=selector, input_value=value),
    "select": lambda selector, value: SelectCommand(target_selector=selector, select_value=value),
}


def resolve(name: str) -> Optional[str]:
    """Map a wire key (any alias, any case) to its canonical name, or None."""
    return ALIASES.get(name.lower())
