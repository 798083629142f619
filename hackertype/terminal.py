"""Terminal interface using Blessed for display and Curtsies for input."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import blessed
from blessed.formatters import COLORS
from wcwidth import wcwidth

from .buffer import Row
from .overlay import overlay_position
from .width import text_width

logger = logging.getLogger(__name__)


def _paints_in_place(ch: str) -> bool:
    return ch.isprintable() and wcwidth(ch) >= 1


def row_text(row: Row, width: int) -> str:
    """Return the text of ``row`` padded with spaces to ``width`` columns.

    Characters that would not take exactly one grid cell on screen (control
    characters, combining marks, zero-width joiners) are shown as a space
    so the painted row is as wide as the grid says it is.
    """
    chars = [cell.char if _paints_in_place(cell.char) else ' ' for cell in row]
    used = sum(cell.width for cell in row)
    return ''.join(chars) + ' ' * max(0, width - used)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Virtual screen state for minimal updates
        self._last_lines: list[str] | None = None
        self._last_width: int | None = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def style(self, foreground: str, background: str, bold: bool = False) -> str:
        """Return the escape sequence selecting the given colors.

        Unknown color names fall back to the terminal's normal attributes.
        """
        parts = [self.term.normal]
        if foreground in COLORS:
            parts.append(getattr(self.term, foreground))
        else:
            logger.warning(f"Unknown foreground color {foreground!r}, using default")
        if background in COLORS:
            parts.append(getattr(self.term, f"on_{background}"))
        else:
            logger.warning(f"Unknown background color {background!r}, using default")
        if bold:
            parts.append(self.term.bold)
        return ''.join(str(p) for p in parts)

    def invalidate_frame(self) -> None:
        """Invalidate cached frame so next update does a full clear."""
        self._last_lines = None
        self._last_width = None

    def update_frame(self, rows: Sequence[Row], width: int, style: str = '') -> None:
        """Paint ``rows`` top to bottom, writing only lines that changed.

        Falls back to a full clear on first paint or when geometry changes.
        """
        need_full_clear = (
            self._last_lines is None
            or self._last_width != width
            or len(self._last_lines) != len(rows)
        )
        if need_full_clear:
            print(f"{style}{self.term.home}{self.term.clear}", end='')
            self._last_lines = ["" for _ in rows]
            self._last_width = width

        for y, row in enumerate(rows):
            text = row_text(row, width)
            if text != self._last_lines[y]:
                print(f"{self.term.move_yx(y, 0)}{style}{text}{self.term.normal}", end='')
                self._last_lines[y] = text

        print('', end='', flush=True)

    def draw_overlay(self, message: str, style: str = '') -> None:
        """Clear the screen and draw ``message`` in its center."""
        print(f"{self.term.normal}{self.term.home}{self.term.clear}", end='')
        y, x = overlay_position(text_width(message), self.width, self.height)
        print(f"{self.term.move_yx(y, x)}{style}{message}{self.term.normal}", end='', flush=True)
        # Whatever was on screen before is gone now
        self.invalidate_frame()

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name as a string, or None if no key arrived.
        """
        if self._curtsies_input is None:
            return None
        # Keys left over from an earlier read live in curtsies, not on stdin
        if timeout is None:
            return str(next(self._curtsies_input))
        key = self._curtsies_input.send(float(timeout))
        return None if key is None else str(key)

    @property
    def width(self) -> int:
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self) -> int:
        """Terminal height in rows."""
        return self.term.height
