"""
Token-event plumbing shared by the decoder and the encoder.

Events use ijson's vocabulary, `(event, value)` pairs:
  start_array / end_array / start_map / end_map / map_key
  string / number / boolean / null

- iter_json_events():   tokenize JSON text with ijson (streaming)
- iter_python_events(): the same events from already-parsed Python data
- JsonEventWriter:      write events back out as compact JSON text
- build_python():       materialize events into Python values
"""
# @file purpose: Event sources and sinks for the command codec.

from __future__ import annotations

import io
import json
from decimal import Decimal
from typing import IO, Any, Iterable, Iterator, List, Mapping, Tuple, Union

import ijson
from ijson.common import ObjectBuilder

Event = Tuple[str, Any]
JsonSource = Union[str, bytes, IO[bytes]]

SCALAR_EVENTS = frozenset({"string", "number", "boolean", "null"})
START_EVENTS = frozenset({"start_array", "start_map"})
END_EVENTS = frozenset({"end_array", "end_map"})


def iter_json_events(source: JsonSource) -> Iterator[Event]:
    """
    Stream events out of JSON text. Truncated or malformed input raises
    ijson's own JSONError / IncompleteJSONError while iterating.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    return ijson.basic_parse(source)


def iter_python_events(value: Any) -> Iterator[Event]:
    """Walk a json.loads-style value and yield the events ijson would emit."""
    if value is None:
        yield "null", None
    elif isinstance(value, bool):
        yield "boolean", value
    elif isinstance(value, (int, float, Decimal)):
        yield "number", value
    elif isinstance(value, str):
        yield "string", value
    elif isinstance(value, Mapping):
        yield "start_map", None
        for key, item in value.items():
            yield "map_key", str(key)
            yield from iter_python_events(item)
        yield "end_map", None
    elif isinstance(value, (list, tuple)):
        yield "start_array", None
        for item in value:
            yield from iter_python_events(item)
        yield "end_array", None
    else:
        raise TypeError(f"not a JSON value: {type(value).__name__}")


def scalar_text(event: str, value: Any) -> str:
    if event == "number" and isinstance(value, Decimal):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


class JsonEventWriter:
    """
    Writes events to a text stream as compact JSON.
    Keeps one item counter per open container to place the commas.
    """

    def __init__(self, fp: IO[str]) -> None:
        self.fp = fp
        self._counts: List[int] = []
        self._after_key = False

    def _separate(self) -> None:
        if self._after_key:
            self._after_key = False
            return
        if self._counts:
            if self._counts[-1]:
                self.fp.write(",")
            self._counts[-1] += 1

    def write(self, event: str, value: Any = None) -> None:
        if event in START_EVENTS:
            self._separate()
            self.fp.write("[" if event == "start_array" else "{")
            self._counts.append(0)
        elif event in END_EVENTS:
            self._counts.pop()
            self.fp.write("]" if event == "end_array" else "}")
        elif event == "map_key":
            self._separate()
            self.fp.write(json.dumps(value, ensure_ascii=False))
            self.fp.write(":")
            self._after_key = True
        elif event in SCALAR_EVENTS:
            self._separate()
            self.fp.write(scalar_text(event, value))
        else:
            raise ValueError(f"unknown event: {event}")

    def write_all(self, events: Iterable[Event]) -> None:
        for event, value in events:
            self.write(event, value)


def build_python(events: Iterable[Event]) -> Any:
    builder = ObjectBuilder()
    for event, value in events:
        builder.event(event, value)
    return builder.value
