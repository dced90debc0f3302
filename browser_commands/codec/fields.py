"""
Pydantic field type carrying the command codec.

    class ScrapeRequest(BaseModel):
        url: str
        browser_commands: BrowserCommandList = Field(default_factory=list)

Validation decodes the wire array leniently (unknown or malformed entries are
dropped, null gives []); lists of command instances pass through unchanged.
Serialization always writes the canonical wire form.
"""
# @file purpose: Annotated pydantic type bridging models and the codec.

from __future__ import annotations

import logging
from typing import Annotated, Any, List

from pydantic import BeforeValidator, PlainSerializer

from ..core.commands import BrowserCommand, is_command
from .decoder import iter_commands
from .encoder import commands_to_python
from .events import iter_python_events

logger = logging.getLogger(__name__)


def _decode(value: Any) -> List[BrowserCommand]:
    """Decode Python data, keeping what was decoded before a non-JSON leaf."""
    commands: List[BrowserCommand] = []
    try:
        for command in iter_commands(iter_python_events(value)):
            commands.append(command)
    except TypeError as e:
        logger.debug("dropping malformed command entry: %s", e)
    return commands


def _validate(value: Any) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        return _decode(value)
    # one element at a time, so a bad entry only costs itself
    commands: List[Any] = []
    for item in value:
        if is_command(item):
            commands.append(item)
        else:
            commands.extend(_decode([item]))
    return commands


BrowserCommandList = Annotated[
    List[BrowserCommand],
    BeforeValidator(_validate),
    PlainSerializer(commands_to_python, return_type=List[dict]),
]
