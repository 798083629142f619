"""Terminal column widths for single characters."""

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    """Return the number of terminal columns ``ch`` occupies (1 or 2).

    wcwidth reports 0 for combining marks and -1 for control characters;
    both still take a cell in the grid, so they count as one column.
    """
    return 2 if wcwidth(ch) == 2 else 1


def text_width(text: str) -> int:
    """Return the total column width of ``text``."""
    return sum(char_width(ch) for ch in text)
