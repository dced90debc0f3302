"""Tests for the command encoder and encode/decode round trips."""

from __future__ import annotations

import io
import json

import pytest

from browser_commands.codec.decoder import loads_commands
from browser_commands.codec.encoder import (
    commands_to_python,
    dump_commands,
    dumps_commands,
    iter_command_events,
)
from browser_commands.core.builder import CommandBuilder
from browser_commands.core.commands import (
    ClickCommand,
    InputCommand,
    JavaScriptCommand,
    ScrollCommand,
    SelectCommand,
    WaitCommand,
    WaitForCommand,
)

CANONICAL = (
    '[{"click":"#submit"},{"wait":500},{"wait_for":"#result"},'
    '{"javascript":"document.title"},{"input":{"#name":"Alice"}},'
    '{"select":{"#country":"ZA"}}]'
)


@pytest.mark.parametrize(
    "command,expected",
    [
        (ClickCommand(target_selector="#a"), '{"click":"#a"}'),
        (WaitCommand(milliseconds=250), '{"wait":250}'),
        (WaitForCommand(target_selector="#r"), '{"wait_for":"#r"}'),
        (JavaScriptCommand(script="1+1"), '{"javascript":"1+1"}'),
        (InputCommand(target_selector="#f", input_value="hello"), '{"input":{"#f":"hello"}}'),
        (SelectCommand(target_selector="#s", select_value="ZA"), '{"select":{"#s":"ZA"}}'),
    ],
)
def test_encodes_each_variant(command, expected):
    assert dumps_commands([command]) == f"[{expected}]"


def test_empty_sequence():
    assert dumps_commands([]) == "[]"


def test_scroll_is_omitted():
    commands = CommandBuilder().click("#a").scroll(300).wait(10).commands
    assert dumps_commands(commands) == '[{"click":"#a"},{"wait":10}]'


def test_builder_sequence_matches_wire_example():
    commands = (
        CommandBuilder()
        .click("#submit")
        .wait(500)
        .wait_for("#result")
        .evaluate("document.title")
        .input("#name", "Alice")
        .select("#country", "ZA")
        .commands
    )
    assert dumps_commands(commands) == CANONICAL


def test_escaping_is_valid_json():
    script = 'document.querySelector("#x").innerText\n// done'
    commands = [JavaScriptCommand(script=script), InputCommand(target_selector='a[name="q"]', input_value="é")]
    text = dumps_commands(commands)
    assert json.loads(text) == [{"javascript": script}, {"input": {'a[name="q"]': "é"}}]
    assert "é" in text


def test_dump_commands_to_stream():
    buf = io.StringIO()
    dump_commands([WaitCommand(milliseconds=1)], buf)
    assert buf.getvalue() == '[{"wait":1}]'


def test_commands_to_python():
    commands = [ClickCommand(target_selector="#a"), InputCommand(target_selector="#n", input_value="v")]
    assert commands_to_python(commands) == [{"click": "#a"}, {"input": {"#n": "v"}}]


def test_event_stream_shape():
    assert list(iter_command_events([InputCommand(target_selector="#n", input_value="v")])) == [
        ("start_array", None),
        ("start_map", None),
        ("map_key", "input"),
        ("start_map", None),
        ("map_key", "#n"),
        ("string", "v"),
        ("end_map", None),
        ("end_map", None),
        ("end_array", None),
    ]


class TestRoundTrip:
    def test_canonical_round_trip(self):
        assert dumps_commands(loads_commands(CANONICAL)) == CANONICAL

    def test_pretty_input_normalizes_to_compact(self):
        pretty = json.dumps(json.loads(CANONICAL), indent=2)
        assert dumps_commands(loads_commands(pretty)) == CANONICAL

    def test_alias_normalization(self):
        tap = loads_commands('[{"tap": "#a"}]')
        click = loads_commands('[{"click": "#a"}]')
        assert tap == click
        assert dumps_commands(tap) == '[{"click":"#a"}]'

    def test_aliases_encode_canonically(self):
        raw = '[{"WAITFOR": "#w"}, {"js": "x"}, {"type": {"#t": "v"}}, {"choose": {"#c": "o"}}]'
        assert dumps_commands(loads_commands(raw)) == (
            '[{"wait_for":"#w"},{"javascript":"x"},{"input":{"#t":"v"}},{"select":{"#c":"o"}}]'
        )

    def test_order_preserved(self):
        raw = (
            '[{"select":{"#s":"1"}},{"wait":2},{"click":"#3"},'
            '{"input":{"#i":"4"}},{"javascript":"5"}]'
        )
        assert dumps_commands(loads_commands(raw)) == raw

    def test_keyed_shape_round_trip(self):
        decoded = loads_commands('[{"input": {"#field": "hello"}}]')
        assert decoded == [InputCommand(target_selector="#field", input_value="hello")]
        assert dumps_commands(decoded) == '[{"input":{"#field":"hello"}}]'
