"""Launch-argument helpers.

Arguments are scanned by prefix rather than parsed with a strict parser, so
unrelated or malformed arguments of the host application never stop it from
starting.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from dblang.logging import logger
from dblang.services.cultures import parse_culture
from dblang.services.exceptions import CultureNotFoundError

CAPTURE_ARGUMENT = "--dblang"
LOCALIZE_ARGUMENT = "--localize="
DEFAULT_CAPTURE_CULTURE = "en-US"


def capture_culture(argv: Sequence[str] | None = None) -> str | None:
    """Culture named by ``--dbLang=``: run the application in capture mode for it."""

    for arg in sys.argv if argv is None else argv:
        if not arg.lower().startswith(CAPTURE_ARGUMENT):
            continue
        _, _, value = arg.partition("=")
        try:
            return parse_culture(value)
        except CultureNotFoundError:
            logger.warning("capture_argument_invalid", value=value)
            return DEFAULT_CAPTURE_CULTURE
    return None


def localization_database(argv: Sequence[str] | None = None) -> str:
    """Path given with ``--localize=`` if that file exists, else an empty string."""

    for arg in sys.argv if argv is None else argv:
        if not arg.startswith(LOCALIZE_ARGUMENT):
            continue
        _, _, path = arg.partition("=")
        if path and Path(path).is_file():
            return path
        return ""
    return ""


__all__ = [
    "CAPTURE_ARGUMENT",
    "DEFAULT_CAPTURE_CULTURE",
    "LOCALIZE_ARGUMENT",
    "capture_culture",
    "localization_database",
]
