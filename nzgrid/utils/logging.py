"""
Logging utility for nzgrid.

The transforms never log per call. Messages come from projection definitions (DEBUG),
the optional validation layer (one-time zone warnings) and the round-trip command.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('nzgrid')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """Logs a warning only the first time a given message is seen"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
