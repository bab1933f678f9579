"""Logger factory for codeblock modules.

Example:
    >>> from codeblock.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering block")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger under the ``codeblock.`` namespace.

    Example:
        >>> get_logger("mymodule").name
        'codeblock.mymodule'
    """
    if not (name == "codeblock" or name.startswith("codeblock.")):
        name = f"codeblock.{name}"
    return logging.getLogger(name)
