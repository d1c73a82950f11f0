"""Result sinks: where rendered lint messages go."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

import click


class Level(str, Enum):
    """Display level of an emitted message."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class ResultSink(Protocol):
    """Receives rendered messages from :class:`~ddllint.validator.Validator`.

    ``clear()`` is called once at the start of every validation, before any
    message. ``separator()`` closes each statement's block of messages.
    """

    def clear(self) -> None: ...

    def emit(self, level: Level, text: str) -> None: ...

    def separator(self, text: str) -> None: ...


class ListSink:
    """Collects events in memory.

    Separators are recorded as ``(None, text)`` so that blocks can be told
    apart from messages.
    """

    def __init__(self) -> None:
        self.events: list[tuple[Level | None, str]] = []

    def clear(self) -> None:
        self.events.clear()

    def emit(self, level: Level, text: str) -> None:
        self.events.append((level, text))

    def separator(self, text: str) -> None:
        self.events.append((None, text))

    @property
    def messages(self) -> list[tuple[Level, str]]:
        """Emitted messages without separators."""
        return [(level, text) for level, text in self.events if level is not None]

    @property
    def block_count(self) -> int:
        """Number of statement blocks emitted."""
        return sum(1 for level, _ in self.events if level is None)


class ConsoleSink:
    """Prints one line per event, prefixed with its level."""

    _COLORS = {
        Level.SUCCESS: "green",
        Level.INFO: "cyan",
        Level.ERROR: "red",
    }

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the sink.

        Args:
            use_colors: Whether to use ANSI color codes
        """
        self.use_colors = use_colors

    def clear(self) -> None:
        """Nothing to clear; printed lines stay on the terminal."""

    def emit(self, level: Level, text: str) -> None:
        prefix = f"[{level.name}]"
        if self.use_colors:
            prefix = click.style(prefix, fg=self._COLORS[level], bold=True)
        click.echo(f"{prefix} {text}")

    def separator(self, text: str) -> None:
        click.echo(text)
