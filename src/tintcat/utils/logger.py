"""Logger naming for tintcat.

Every module logs under the ``tintcat`` hierarchy so one handler on the
package logger sees grammar loading, config fallbacks, renderer palette
misses and the forwarded diagnostics (``tintcat.diagnostics``). The
package installs a NullHandler on ``tintcat``; nothing is printed unless
the caller configures logging.

Example:
    >>> import logging
    >>> from tintcat.utils.logger import get_logger
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> get_logger("__main__").name
    'tintcat.__main__'
"""

from __future__ import annotations

import logging

ROOT = "tintcat"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` inside the ``tintcat`` hierarchy.

    Module names already under the package (``tintcat.grammar``) are used
    as-is; anything else, such as ``__main__`` when a module is run with
    ``python -m``, is nested under ``tintcat.``.
    """
    if name != ROOT and not name.startswith(f"{ROOT}."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)
