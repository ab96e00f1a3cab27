# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Utility functions for pdftextcodec."""

import logging
import sys
from typing import Any

import pikepdf

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configures logging for pdftextcodec.

    Decoded CMap text is traced at DEBUG level, so ``verbose=True`` is
    what makes it visible.

    Args:
        verbose: If True, DEBUG level is used.
        quiet: If True, only ERROR and higher are output.
            Takes precedence over verbose.

    Returns:
        Configured logger for pdftextcodec.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    package_logger = logging.getLogger("pdftextcodec")
    package_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)

    logger.debug("Logging configured with level: %s", logging.getLevelName(level))
    return package_logger


def resolve_indirect(obj: Any) -> Any:
    """Resolve indirect object reference if needed.

    Args:
        obj: A pikepdf object that may be an indirect reference.

    Returns:
        The resolved object.
    """
    try:
        return obj.get_object()
    except Exception:
        return obj


def name_str(obj: pikepdf.Object, fallback: str = "") -> str:
    """Returns a pikepdf Name without its leading slash.

    Names carrying non-UTF-8 bytes are decoded as Latin-1.

    Args:
        obj: pikepdf Name object.
        fallback: Value to return if conversion fails entirely.

    Returns:
        The bare name, e.g. ``"WinAnsiEncoding"``.
    """
    try:
        text = str(obj)
    except (UnicodeDecodeError, UnicodeEncodeError):
        try:
            text = bytes(obj).decode("latin-1")
        except Exception:
            return fallback
    return text[1:] if text.startswith("/") else text
