"""Full-screen status messages shown on top of the typing display."""

from enum import Enum


class OverlayKind(Enum):
    """Available overlay messages with their text and color."""
    GRANTED = ("ACCESS GRANTED", "green")
    DENIED = ("ACCESS DENIED", "red")

    def __init__(self, message: str, foreground: str):
        self.message = message
        self.foreground = foreground


def overlay_position(message_width: int, width: int, height: int) -> tuple[int, int]:
    """Return the (row, column) where a centered message starts.

    The column is clamped at zero so a message wider than the terminal is
    painted from the left edge instead of off-screen.
    """
    return height // 2, max(0, (width - message_width) // 2)
