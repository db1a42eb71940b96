"""
File logging for debugging the Keptn client itself.

Records go to "logs/internal.log" under the keptn cache directory, at a level
below DEBUG so that they never reach the console. Nothing is written unless
KEPTN_ENABLE_INTERNAL_LOG is set to a true value.
"""

import os

from loguru import logger

from ..config import LOGS_DIR, _to_bool

_LEVEL = "KEPTN_INTERNAL"
_LOGFILE_BASE = LOGS_DIR / "internal.log"
_HANDLER_ID = None
_enabled: bool = False

# below loguru's DEBUG (10)
logger.level(name=_LEVEL, no=9)


def disable():
    """Removes the log file sink, if enable() added one."""
    global _enabled
    global _HANDLER_ID
    if _enabled:
        if _HANDLER_ID is not None:
            logger.remove(_HANDLER_ID)
            _HANDLER_ID = None
        _enabled = False


def enable():
    """
    Adds the log file sink if KEPTN_ENABLE_INTERNAL_LOG is true, and does
    nothing otherwise. Calling it again while enabled does not add a second
    sink.
    """
    global _enabled
    global _HANDLER_ID

    if not _to_bool(os.environ.get("KEPTN_ENABLE_INTERNAL_LOG", "false")):
        return

    if not _enabled:
        _HANDLER_ID = logger.add(
            _LOGFILE_BASE,
            level=_LEVEL,
            colorize=False,
            rotation="10 MB",
            retention=3,
            compression="zip",
        )
        _enabled = True


def log(*args, **kwargs):
    """Writes one record to the log file. A no-op while disabled."""
    if not _enabled:
        return
    return logger.opt(depth=1).log(_LEVEL, *args, **kwargs)
