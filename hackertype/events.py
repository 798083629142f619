"""Events driving a typing session.

``RevealStep``, ``Resize`` and ``Reset`` are applied by
:class:`hackertype.session.DisplaySession`. ``ShowOverlay`` and ``Quit`` are
handled by the application loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .overlay import OverlayKind


@dataclass(frozen=True)
class RevealStep:
    """Expose ``count`` more characters of the source text."""
    count: int


@dataclass(frozen=True)
class Resize:
    """The terminal now has ``width`` columns and ``height`` rows."""
    width: int
    height: int


@dataclass(frozen=True)
class Reset:
    """Start over from an empty screen."""


@dataclass(frozen=True)
class ShowOverlay:
    """Paint a full-screen status message."""
    kind: OverlayKind


@dataclass(frozen=True)
class Quit:
    """Leave the application."""


SessionEvent = Union[RevealStep, Resize, Reset]
Event = Union[RevealStep, Resize, Reset, ShowOverlay, Quit]
