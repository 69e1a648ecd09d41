# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

"""
coreason-pawprint
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .ansi import AnsiBgColor, AnsiFgColor, decorate, strip_ansi
from .models import LogLevel, PawPrintConfig, StackFrame
from .printer import (
    PawPrint,
    PawPrintError,
    PawPrintNotInitializedError,
    debug,
    error,
    get_instance,
    info,
    init,
    warn,
)

__all__ = [
    "AnsiFgColor",
    "AnsiBgColor",
    "decorate",
    "strip_ansi",
    "LogLevel",
    "PawPrintConfig",
    "StackFrame",
    "PawPrint",
    "PawPrintError",
    "PawPrintNotInitializedError",
    "init",
    "get_instance",
    "info",
    "warn",
    "debug",
    "error",
]
