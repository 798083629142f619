"""hackertype - reveal a source text in the terminal as if typed live."""

from .buffer import Cell, LineBuffer, Row, new_buffer
from .reflow import rebuild
from .session import DisplaySession
from .width import char_width

__all__ = [
    'Cell',
    'LineBuffer',
    'Row',
    'new_buffer',
    'rebuild',
    'DisplaySession',
    'char_width',
]
