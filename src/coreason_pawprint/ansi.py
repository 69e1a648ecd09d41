# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import re
from enum import Enum
from typing import Optional

ESC = "\x1b["
RESET = f"{ESC}0m"

_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class AnsiFgColor(Enum):
    """
    Foreground colors, as 256-color palette indices.
    """

    black = 16
    white = 255
    yellow = 220
    pink = 205
    lightPink = 218
    orange = 208

    @property
    def code(self) -> str:
        return f"{ESC}38;5;{self.value}m"


class AnsiBgColor(Enum):
    """
    Background colors, as 256-color palette indices.
    """

    black = 16
    white = 255
    yellow = 220
    pink = 205
    lightPink = 218
    orange = 208

    @property
    def code(self) -> str:
        return f"{ESC}48;5;{self.value}m"


def decorate(text: str, fg: Optional[AnsiFgColor] = None, bg: Optional[AnsiBgColor] = None) -> str:
    """
    Wraps text with the escape sequences for fg/bg, terminated by a reset.
    Returns the text untouched when no color is given.
    """
    if fg is None and bg is None:
        return text

    prefix = ""
    if fg is not None:
        prefix += fg.code
    if bg is not None:
        prefix += bg.code
    return f"{prefix}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Removes all SGR escape sequences from text."""
    return _SGR_PATTERN.sub("", text)
