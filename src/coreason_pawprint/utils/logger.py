# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import sys
from typing import Any, TextIO

from loguru import logger as _logger

__all__ = ["logger", "enable_diagnostics", "disable_diagnostics"]

PACKAGE = "coreason_pawprint"

DIAGNOSTICS_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Host handlers are left untouched; records from this package stay muted until enabled.
_logger.disable(PACKAGE)


def enable_diagnostics(level: str = "DEBUG", sink: Any = None) -> int:
    """
    Turns on the library's own diagnostics and routes them to `sink` (stderr by default).
    Returns the loguru handler id, to be passed to `disable_diagnostics`.
    """
    _logger.enable(PACKAGE)
    target: TextIO = sink if sink is not None else sys.stderr
    return _logger.add(target, level=level, filter=PACKAGE, format=DIAGNOSTICS_FORMAT)


def disable_diagnostics(handler_id: int) -> None:
    _logger.remove(handler_id)
    _logger.disable(PACKAGE)


logger: Any = _logger
