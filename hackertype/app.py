"""Main application controller for the typing display."""

from __future__ import annotations

import logging
import os
import select
import signal
import sys
import termios
from typing import Optional

from .constants import DisplayConstants
from .events import Event, Quit, Reset, Resize, RevealStep, ShowOverlay
from .keyboard import KeyboardHandler
from .overlay import OverlayKind
from .session import DisplaySession
from .settings import Settings
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class TypingApp:
    """Runs a typing session in the terminal until the user quits."""

    def __init__(self, source: str, settings: Optional[Settings] = None,
                 terminal: Optional[TerminalInterface] = None):
        self.settings = settings or Settings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal, speed=self.settings.speed)
        self.session = DisplaySession(
            source,
            width=self.terminal.width,
            height=self.terminal.height,
            speed=self.settings.speed,
        )
        self.overlay: Optional[OverlayKind] = None
        self.running = False
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, DisplayConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main event loop."""
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                old_settings = None
                try:
                    # Disable IXON/IXOFF so Ctrl-S and Ctrl-Q are plain keys
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, AttributeError, OSError):
                    old_settings = None

                self._draw()
                while self.running:
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        # Several signals may have queued up; one resize covers them
                        os.read(self._resize_pipe_r, 1024)
                        self.handle_event(Resize(self.terminal.width, self.terminal.height))
                    elif 0 in ready:
                        # One read from stdin can carry several keys
                        event = self.keyboard.get_event(timeout=0)
                        while event is not None:
                            self.handle_event(event)
                            if not self.running:
                                break
                            event = self.keyboard.get_event(timeout=0)

                if old_settings:
                    try:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                    except (termios.error, OSError):
                        pass

        except KeyboardInterrupt:
            # Ctrl-C quits
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()

    def handle_event(self, event: Event) -> None:
        """Apply one event and repaint if anything changed on screen."""
        if isinstance(event, Quit):
            self.running = False
            return

        if isinstance(event, Resize):
            self.session.dispatch(event)
            self.terminal.invalidate_frame()
            self._draw()
            return

        # Any key dismisses a visible overlay and does nothing else
        if self.overlay is not None:
            self.overlay = None
            self._draw()
            return

        if isinstance(event, ShowOverlay):
            logger.debug("Showing overlay %s", event.kind.name)
            self.overlay = event.kind
            self.session.reset()
        elif isinstance(event, (RevealStep, Reset)):
            self.session.dispatch(event)
        else:
            raise TypeError(f"Unknown event: {event!r}")
        self._draw()

    def _draw(self):
        """Draw the current state to the terminal."""
        if self.overlay is not None:
            style = self.terminal.style(self.overlay.foreground, self.settings.background, bold=True)
            self.terminal.draw_overlay(self.overlay.message, style)
            return

        style = self.terminal.style(self.settings.foreground, self.settings.background)
        self.terminal.update_frame(self.session.rows(), self.session.width, style)
