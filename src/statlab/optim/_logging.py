"""Package logging switches.

All statlab modules log through ``logging.getLogger(__name__)``, i.e.
under the ``statlab`` namespace. The package installs a NullHandler so
nothing is printed unless the application configures logging.

Module loggers are left at NOTSET and inherit the package logger's level,
so one threshold on ``statlab`` controls all of them.
"""

import logging
from typing import Union

__all__ = [
    'disable_logging',
    'enable_logging',
]

_PACKAGE_LOGGER = 'statlab'
_SILENT = logging.CRITICAL + 1


def disable_logging() -> None:
    """Silence every statlab logger."""
    logging.getLogger(_PACKAGE_LOGGER).setLevel(_SILENT)


def enable_logging(level: Union[int, str] = logging.DEBUG) -> logging.Logger:
    """Re-enable statlab logging at ``level`` and return the package logger."""
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
