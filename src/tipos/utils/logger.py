"""Logging helper for tipos.

Example:
    >>> from tipos.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Decoding type tree")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "tipos.".

    Example:
        >>> get_logger("mymodule").name
        'tipos.mymodule'
    """
    if not (name == "tipos" or name.startswith("tipos.")):
        name = f"tipos.{name}"
    return logging.getLogger(name)
