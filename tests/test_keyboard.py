"""Test keyboard input mapping."""

from hackertype.events import Quit, Reset, RevealStep, ShowOverlay
from hackertype.keyboard import KeyboardHandler
from hackertype.overlay import OverlayKind


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


def test_regular_keys_reveal_speed_characters():
    handler = KeyboardHandler(MockTerminal(), speed=5)
    for key in ('a', 'Z', ' ', '<SPACE>', '<LEFT>', '<F1>', '<Ctrl-x>', '<Esc+a>'):
        assert handler.parse_key(key) == RevealStep(5)


def test_escape_quits():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key('<ESC>') == Quit()
    assert handler.parse_key('\x1b') == Quit()


def test_ctrl_c_quits():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key('<Ctrl-c>') == Quit()
    assert handler.parse_key('\x03') == Quit()


def test_overlay_keys():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key('<Ctrl-a>') == ShowOverlay(OverlayKind.GRANTED)
    assert handler.parse_key('\x01') == ShowOverlay(OverlayKind.GRANTED)
    assert handler.parse_key('<Ctrl-d>') == ShowOverlay(OverlayKind.DENIED)
    assert handler.parse_key('\x04') == ShowOverlay(OverlayKind.DENIED)


def test_reset_key():
    handler = KeyboardHandler(MockTerminal())
    assert handler.parse_key('<Ctrl-r>') == Reset()
    assert handler.parse_key('\x12') == Reset()


def test_enter_and_other_control_bytes_reveal():
    handler = KeyboardHandler(MockTerminal(), speed=2)
    assert handler.parse_key('\n') == RevealStep(2)
    assert handler.parse_key('\x13') == RevealStep(2)


def test_get_event_reads_from_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal, speed=3)
    assert handler.get_event(timeout=0) is None
    terminal.add_key('x')
    terminal.add_key('<Ctrl-a>')
    assert handler.get_event() == RevealStep(3)
    assert handler.get_event() == ShowOverlay(OverlayKind.GRANTED)
