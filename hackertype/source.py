"""Loading the source text that gets typed out."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import DisplayConstants

logger = logging.getLogger(__name__)


class SourceLoadError(Exception):
    """Raised when the source text cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(DisplayConstants.SOURCE_LOAD_ERROR_MESSAGE.format(path, reason))
        self.path = path
        self.reason = reason


def decode_source(data: bytes, tab_size: int = DisplayConstants.DEFAULT_TAB_SIZE) -> str:
    """Decode raw bytes into the text handed to the display.

    Invalid UTF-8 becomes U+FFFD. Line endings are normalized to ``\\n`` and
    tabs are expanded to spaces (``tab_size`` of 0 leaves them alone).
    """
    text = data.decode("utf-8", errors="replace")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if tab_size > 0:
        text = text.expandtabs(tab_size)
    return text


def load_source(path: str | Path, tab_size: int = DisplayConstants.DEFAULT_TAB_SIZE) -> str:
    """Read and decode the source file at ``path``.

    Raises:
        SourceLoadError: if the file cannot be read.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise SourceLoadError(str(path), e.strerror or str(e)) from e

    text = decode_source(data, tab_size)
    logger.debug("Loaded %d characters from %s", len(text), path)
    return text
