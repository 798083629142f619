"""Rebuilding the line buffer after the terminal changes size."""

from .buffer import LineBuffer, new_buffer


def rebuild(source: str, reveal_count: int, width: int, height: int) -> LineBuffer:
    """Lay out the first ``reveal_count`` characters of ``source`` from scratch.

    The result is exactly the buffer that would exist had the terminal been
    ``width`` x ``height`` since the first character was revealed. Nothing
    from a previous buffer is reused, so the cost is linear in
    ``reveal_count``.
    """
    if not 0 <= reveal_count <= len(source):
        raise ValueError(
            f"Reveal count {reveal_count} outside source of length {len(source)}"
        )
    buffer = new_buffer(height, width)
    buffer.append(source[:reveal_count])
    return buffer
