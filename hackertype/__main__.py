"""hackertype CLI entry point.

Allows running via `python -m hackertype` and provides the console script
defined in `pyproject.toml`.

Usage:
    hackertype [--version] [--speed N] [--log-file PATH] [--save] [SOURCE]

    --save stores the resulting source and speed as the new defaults.

Controls:
    Any key: Type the next few characters
    Ctrl-A: ACCESS GRANTED
    Ctrl-D: ACCESS DENIED
    Ctrl-R: Start over
    Esc, Ctrl-C: Quit
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import replace
from typing import Optional

from .constants import DisplayConstants
from .settings import Settings, SettingsPersistence, validate_setting
from .source import SourceLoadError, load_source
from .version import get_version_string

USAGE = "usage: hackertype [--version] [--speed N] [--log-file PATH] [--save] [SOURCE]"


class UsageError(Exception):
    """Raised for invalid command-line arguments."""


def parse_args(args: list[str], settings: Settings) -> tuple[Settings, Optional[str], bool]:
    """Apply command-line arguments on top of ``settings``.

    Returns the resulting settings, the log file path (if any) and whether
    the settings should be saved as the new defaults.
    """
    log_file = None
    save = False
    source = None
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ('--speed', '-s', '--log-file'):
            if i + 1 >= len(args):
                raise UsageError(f"{arg} requires a value")
            value = args[i + 1]
            i += 2
            if arg == '--log-file':
                log_file = value
                continue
            try:
                speed = int(value)
            except ValueError:
                raise UsageError(f"invalid speed: {value!r}") from None
            if not validate_setting('speed', speed):
                raise UsageError(f"speed must be between 1 and {DisplayConstants.MAX_SPEED}")
            settings = replace(settings, speed=speed)
        elif arg == '--save':
            save = True
            i += 1
        elif arg.startswith('-') and arg != '-':
            raise UsageError(f"unknown option: {arg}")
        else:
            if source is not None:
                raise UsageError("only one source file may be given")
            source = arg
            i += 1

    if source is not None:
        settings = replace(settings, source=source)
    return settings, log_file, save


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return 0

    try:
        persistence = SettingsPersistence()
        settings, log_file, save = parse_args(args, persistence.load())
    except UsageError as e:
        print(f"hackertype: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        source = load_source(settings.source, tab_size=settings.tab_size)
    except SourceLoadError as e:
        print(e, file=sys.stderr)
        return 1

    if save:
        # Stored relative paths would depend on where hackertype is started
        persistence.save(replace(settings, source=os.path.abspath(settings.source)))

    # Lazy import to avoid importing terminal deps for --version and errors
    from .app import TypingApp
    TypingApp(source, settings).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
