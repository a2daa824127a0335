"""Logger lookup for vemi modules.

Every vemi logger lives under the ``vemi`` namespace so applications can
enable lexer diagnostics with one call::

    >>> import logging
    >>> logging.getLogger("vemi").setLevel(logging.DEBUG)

The package logger carries a NullHandler; vemi never configures output.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "vemi"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the vemi namespace.

    Args:
        name: Module name, usually ``__name__``

    Example:
        >>> get_logger("lexer.cursor").name
        'vemi.lexer.cursor'
        >>> get_logger("vemi.lexer.cursor").name
        'vemi.lexer.cursor'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
