from __future__ import annotations

import importlib.metadata

from .constants import DisplayConstants


def get_version() -> str:
    """Return the installed package version, or 'unknown' when running from a checkout."""
    try:
        return importlib.metadata.version(DisplayConstants.APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_string() -> str:
    return f"{DisplayConstants.APP_NAME} {get_version()}"
