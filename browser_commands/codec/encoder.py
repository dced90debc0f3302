"""
Encoder: ordered browser commands -> JSON command array.

Each command becomes a single-key object named by its canonical name:

    [{"click": "#submit"}, {"wait": 500}, {"input": {"#name": "Alice"}}]

Commands without an entry in the encode table (ScrollCommand) are left out
of the array rather than raising.
"""
# @file purpose: Encode browser commands to the wire format.

from __future__ import annotations

import io
import logging
from typing import IO, Any, Callable, Dict, Iterable, Iterator, List, Tuple, Type

from ..core.commands import (
    BrowserCommand,
    ClickCommand,
    InputCommand,
    JavaScriptCommand,
    SelectCommand,
    WaitCommand,
    WaitForCommand,
)
from .events import Event, JsonEventWriter, build_python, iter_python_events

logger = logging.getLogger(__name__)


def _scalar(field: str) -> Callable[[Any], Iterator[Event]]:
    def payload(command: Any) -> Iterator[Event]:
        yield from iter_python_events(getattr(command, field))

    return payload


def _keyed(value_field: str) -> Callable[[Any], Iterator[Event]]:
    def payload(command: Any) -> Iterator[Event]:
        yield "start_map", None
        yield "map_key", command.target_selector
        yield "string", getattr(command, value_field)
        yield "end_map", None

    return payload


# command type -> (canonical name, payload events)
_ENCODERS: Dict[Type[Any], Tuple[str, Callable[[Any], Iterator[Event]]]] = {
    ClickCommand: ("click", _scalar("target_selector")),
    WaitCommand: ("wait", _scalar("milliseconds")),
    WaitForCommand: ("wait_for", _scalar("target_selector")),
    JavaScriptCommand: ("javascript", _scalar("script")),
    InputCommand: ("input", _keyed("input_value")),
    SelectCommand: ("select", _keyed("select_value")),
}


def iter_command_events(commands: Iterable[BrowserCommand]) -> Iterator[Event]:
    yield "start_array", None
    for command in commands:
        entry = _ENCODERS.get(type(command))
        if entry is None:
            logger.debug("no wire encoding for %s; omitted", type(command).__name__)
            continue
        name, payload = entry
        yield "start_map", None
        yield "map_key", name
        yield from payload(command)
        yield "end_map", None
    yield "end_array", None


def encode_commands(commands: Iterable[BrowserCommand], writer: JsonEventWriter) -> None:
    writer.write_all(iter_command_events(commands))


def dumps_commands(commands: Iterable[BrowserCommand]) -> str:
    """Compact JSON text of the command array."""
    buf = io.StringIO()
    encode_commands(commands, JsonEventWriter(buf))
    return buf.getvalue()


def dump_commands(commands: Iterable[BrowserCommand], fp: IO[str]) -> None:
    encode_commands(commands, JsonEventWriter(fp))


def commands_to_python(commands: Iterable[BrowserCommand]) -> List[Dict[str, Any]]:
    """The wire form as plain Python data (ready for json.dumps / pydantic)."""
    return build_python(iter_command_events(commands))
