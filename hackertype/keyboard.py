"""Keyboard input handling: curtsies key tokens to display events."""

from typing import Optional

from .constants import DisplayConstants
from .events import Event, Quit, Reset, RevealStep, ShowOverlay
from .overlay import OverlayKind


class KeyboardHandler:
    """Maps key presses to events.

    Control keys have fixed meanings; every other key reveals ``speed``
    more characters.
    """

    CTRL_ACTIONS = {
        'a': lambda: ShowOverlay(OverlayKind.GRANTED),
        'd': lambda: ShowOverlay(OverlayKind.DENIED),
        'r': Reset,
        'c': Quit,
    }

    def __init__(self, terminal_interface, speed: int = DisplayConstants.DEFAULT_SPEED):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface
        self.speed = speed

    def get_event(self, timeout: Optional[float] = None) -> Optional[Event]:
        """Read the next key, if any, and return its event."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> Event:
        """Parse a curtsies key token (or a raw key string) into an event.

        Args:
            key: Key as delivered by the terminal, e.g. ``'x'``,
                ``'<Ctrl-a>'`` or ``'<ESC>'``.
        """
        key_str = str(key)

        if key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            if not mods and base in ('esc', 'escape'):
                return Quit()
            if 'ctrl' in mods and base in self.CTRL_ACTIONS:
                return self.CTRL_ACTIONS[base]()
            return RevealStep(self.speed)

        # Bare control bytes: Ctrl-A .. Ctrl-Z and ESC
        if len(key_str) == 1:
            o = ord(key_str)
            if o == 27:
                return Quit()
            if 1 <= o <= 26:
                ch = chr(ord('a') + o - 1)
                if ch in self.CTRL_ACTIONS:
                    return self.CTRL_ACTIONS[ch]()

        return RevealStep(self.speed)
