# autotagger/common/logging.py
from __future__ import annotations

import logging
from typing import Optional, Union

from autotagger.common.settings import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    # getLevelName maps known names to ints; anything else falls back to INFO
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str = "autotagger", level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Return a named logger at LOG_LEVEL (or `level`).
    If no handlers are set anywhere, we add a basicConfig once.
    """
    lvl = _resolve_level(level)
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=lvl, format=_FORMAT)
    logger.setLevel(lvl)
    return logger
