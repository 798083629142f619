"""Typing session state: the source text, reveal cursor and line buffer.

A :class:`DisplaySession` is owned by whoever drives the display. Each
operation runs to completion before returning, so the buffer a caller
renders is always the fully updated one.
"""

from __future__ import annotations

import logging

from .buffer import LineBuffer, Row, new_buffer
from .constants import DisplayConstants
from .events import Reset, Resize, RevealStep, SessionEvent
from .reflow import rebuild

logger = logging.getLogger(__name__)


class DisplaySession:
    """Reveals ``source`` into a ``width`` x ``height`` grid.

    Invariant: ``buffer`` always equals
    ``rebuild(source, cursor, width, height)``.
    """

    def __init__(self, source: str, width: int, height: int,
                 speed: int = DisplayConstants.DEFAULT_SPEED):
        if speed < 1:
            raise ValueError(f"Speed must be at least 1, got {speed}")
        self.source = source
        self.speed = speed
        self._width = width
        self._height = height
        self._cursor = 0
        self._buffer = new_buffer(height, width)

    @property
    def cursor(self) -> int:
        """Number of source characters revealed so far."""
        return self._cursor

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> LineBuffer:
        return self._buffer

    def rows(self) -> list[Row]:
        """Rows to render, exactly ``height`` of them."""
        return self._buffer.rows()

    def reveal(self, n: int | None = None) -> None:
        """Reveal ``n`` more characters (default: the session speed).

        Revealing the last character of the source starts the session over
        from an empty screen.
        """
        if n is None:
            n = self.speed
        if n < 0:
            raise ValueError(f"Cannot reveal a negative number of characters: {n}")

        next_cursor = min(self._cursor + n, len(self.source))
        self._buffer.append(self.source[self._cursor:next_cursor])
        self._cursor = next_cursor

        if self._cursor == len(self.source):
            logger.debug("Source exhausted after %d characters, starting over", self._cursor)
            self.reset()

    def reset(self) -> None:
        """Clear the screen and start revealing from the beginning."""
        self._cursor = 0
        self._buffer = new_buffer(self._height, self._width)

    def resize(self, width: int, height: int) -> None:
        """Re-lay-out everything revealed so far for new terminal dimensions."""
        logger.debug("Resize %dx%d -> %dx%d at cursor %d",
                     self._width, self._height, width, height, self._cursor)
        self._buffer = rebuild(self.source, self._cursor, width, height)
        self._width = width
        self._height = height

    def dispatch(self, event: SessionEvent) -> None:
        """Apply a single session event."""
        if isinstance(event, RevealStep):
            self.reveal(event.count)
        elif isinstance(event, Resize):
            self.resize(event.width, event.height)
        elif isinstance(event, Reset):
            self.reset()
        else:
            raise TypeError(f"Not a session event: {event!r}")
