"""
Streaming decoder: JSON command array -> ordered list of browser commands.

The decoder is lenient by contract. It never raises for data-shape problems:
- top level is not an array (or is null)   -> no commands
- unknown key                              -> value skipped, key dropped
- payload of the wrong shape               -> key dropped
- wait value that is not an integer token  -> WaitCommand(milliseconds=0)

Only tokenizer errors (truncated or malformed JSON text) propagate, and
commands yielded before such an error have already reached the caller.

CommandStreamDecoder is a push-style state machine fed one event at a time;
it holds at most one pending command and never buffers the array.
"""
# @file purpose: Decode command arrays from a token-event stream.

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional

from ..core.commands import BrowserCommand
from .events import (
    END_EVENTS,
    SCALAR_EVENTS,
    START_EVENTS,
    Event,
    JsonSource,
    iter_json_events,
    iter_python_events,
    scalar_text,
)
from .table import FACTORIES, WIRE_KINDS, WireKind, resolve

logger = logging.getLogger(__name__)


class DecodeState(str, Enum):
    EXPECT_ARRAY = "expect_array"
    IN_ARRAY = "in_array"
    IN_ELEMENT = "in_element"
    AWAIT_SCALAR = "await_scalar"
    AWAIT_NESTED_OBJECT = "await_nested_object"
    AWAIT_NESTED_PROPERTY = "await_nested_property"
    AWAIT_NESTED_VALUE = "await_nested_value"
    SKIPPING = "skipping"
    DONE = "done"


def _text(event: str, value: Any) -> str:
    if event == "string":
        return value
    if event == "null":
        return ""
    return scalar_text(event, value)


def _integer(event: str, value: Any) -> int:
    # JSON integer tokens only; ijson hands fractions/exponents over as Decimal
    if event == "number" and isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


class CommandStreamDecoder:
    """
    Feed events in order with feed(); it returns a command each time one is
    complete. `done` turns True at the closing bracket of the array, or
    straight away when the top-level value is not an array.
    """

    def __init__(self) -> None:
        self.state = DecodeState.EXPECT_ARRAY
        self._name: Optional[str] = None
        self._selector: Optional[str] = None
        self._value: Optional[str] = None
        self._skip_depth = 0
        self._resume = DecodeState.IN_ARRAY

    @property
    def done(self) -> bool:
        return self.state is DecodeState.DONE

    def feed(self, event: str, value: Any = None) -> Optional[BrowserCommand]:
        handler = getattr(self, f"_on_{self.state.value}")
        return handler(event, value)

    # ---------------- transitions ----------------

    def _skip(self, resume: DecodeState, depth: int = 0) -> None:
        """Discard the next value (depth=0) or the rest of an open container (depth=1)."""
        self._skip_depth = depth
        self._resume = resume
        self.state = DecodeState.SKIPPING

    def _drop(self, reason: str) -> None:
        logger.debug("dropping %r command: %s", self._name, reason)
        self._name = None

    def _emit(self, *args: Any) -> BrowserCommand:
        command = FACTORIES[self._name](*args)
        self._name = None
        return command

    def _on_expect_array(self, event: str, value: Any) -> None:
        if event == "start_array":
            self.state = DecodeState.IN_ARRAY
        else:
            logger.debug("command list is not an array (%s); nothing to decode", event)
            self.state = DecodeState.DONE

    def _on_in_array(self, event: str, value: Any) -> None:
        if event == "start_map":
            self.state = DecodeState.IN_ELEMENT
        elif event == "end_array":
            self.state = DecodeState.DONE
        elif event == "start_array":
            self._skip(DecodeState.IN_ARRAY, depth=1)
        # bare scalars in the array carry no command

    def _on_in_element(self, event: str, value: Any) -> None:
        if event == "end_map":
            self.state = DecodeState.IN_ARRAY
        elif event == "map_key":
            name = resolve(value)
            if name is None:
                logger.debug("skipping unknown command key %r", value)
                self._skip(DecodeState.IN_ELEMENT)
                return
            self._name = name
            if WIRE_KINDS[name] is WireKind.KEYED:
                self.state = DecodeState.AWAIT_NESTED_OBJECT
            else:
                self.state = DecodeState.AWAIT_SCALAR

    def _on_await_scalar(self, event: str, value: Any) -> Optional[BrowserCommand]:
        kind = WIRE_KINDS[self._name]
        if event in SCALAR_EVENTS:
            self.state = DecodeState.IN_ELEMENT
            payload = _integer(event, value) if kind is WireKind.INTEGER else _text(event, value)
            return self._emit(payload)
        if event in START_EVENTS:
            self._drop("expected a scalar value")
            self._skip(DecodeState.IN_ELEMENT, depth=1)
            return None
        # object closed without a value: missing scalar
        self.state = DecodeState.IN_ARRAY
        return self._emit(0 if kind is WireKind.INTEGER else "")

    def _on_await_nested_object(self, event: str, value: Any) -> None:
        if event == "start_map":
            self._selector = None
            self._value = None
            self.state = DecodeState.AWAIT_NESTED_PROPERTY
        elif event == "start_array":
            self._drop("expected a nested object")
            self._skip(DecodeState.IN_ELEMENT, depth=1)
        elif event in END_EVENTS:
            self._drop("expected a nested object")
            self.state = DecodeState.IN_ARRAY
        else:
            self._drop("expected a nested object")
            self.state = DecodeState.IN_ELEMENT

    def _on_await_nested_property(self, event: str, value: Any) -> Optional[BrowserCommand]:
        if event == "map_key":
            if self._selector is None:
                self._selector = value
            self.state = DecodeState.AWAIT_NESTED_VALUE
            return None
        # end_map: the nested object is complete
        self.state = DecodeState.IN_ELEMENT
        return self._emit(self._selector or "", self._value or "")

    def _on_await_nested_value(self, event: str, value: Any) -> None:
        if event in START_EVENTS:
            self._skip(DecodeState.AWAIT_NESTED_PROPERTY, depth=1)
            return
        if self._value is None:
            self._value = _text(event, value)
        self.state = DecodeState.AWAIT_NESTED_PROPERTY

    def _on_skipping(self, event: str, value: Any) -> None:
        if event in START_EVENTS:
            self._skip_depth += 1
        elif event in END_EVENTS:
            self._skip_depth -= 1
        if self._skip_depth == 0:
            self.state = self._resume

    def _on_done(self, event: str, value: Any) -> None:
        return None


def iter_commands(events: Iterable[Event]) -> Iterator[BrowserCommand]:
    """Yield commands as they complete; stops reading at the end of the array."""
    decoder = CommandStreamDecoder()
    for event, value in events:
        command = decoder.feed(event, value)
        if command is not None:
            yield command
        if decoder.done:
            return


def decode_events(events: Iterable[Event]) -> List[BrowserCommand]:
    return list(iter_commands(events))


def loads_commands(source: JsonSource) -> List[BrowserCommand]:
    """Decode JSON text (str, bytes or a binary file object)."""
    return decode_events(iter_json_events(source))


def decode_commands(value: Any) -> List[BrowserCommand]:
    """Decode already-parsed JSON data; None or a non-list gives []."""
    return decode_events(iter_python_events(value))
