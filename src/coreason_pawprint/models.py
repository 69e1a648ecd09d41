# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from coreason_pawprint.ansi import AnsiBgColor, AnsiFgColor

DEFAULT_NAME = "PAW"
DEFAULT_MAX_STACK_TRACES = 5


class PawPrintConfig(BaseModel):
    """
    Immutable configuration of the `PawPrint` singleton.

    An empty or blank name falls back to `PAW`; a negative stack trace
    limit is clamped to 0.
    """

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_NAME
    max_stack_traces: int = DEFAULT_MAX_STACK_TRACES
    should_print_name: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def _default_blank_name(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return DEFAULT_NAME
        return str(value).strip()

    @field_validator("max_stack_traces")
    @classmethod
    def _clamp_max_stack_traces(cls, value: int) -> int:
        return max(value, 0)


class StackFrame(BaseModel):
    """
    A single frame descriptor, independent of how the host represented it.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    lineno: Optional[int] = None
    function: Optional[str] = None

    @property
    def location(self) -> str:
        """`<file>:<line>` with the file reduced to its basename."""
        base = os.path.basename(self.filename) or self.filename
        if self.lineno is None:
            return base
        return f"{base}:{self.lineno}"

    def __str__(self) -> str:
        text = self.filename if self.lineno is None else f"{self.filename}:{self.lineno}"
        if self.function:
            text += f" in {self.function}"
        return text


class LevelStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    badge_fg: AnsiFgColor
    badge_bg: AnsiBgColor
    text_fg: AnsiFgColor


class LogLevel(str, Enum):
    INFO = "INFO"
    WARN = "WARN"
    DEBUG = "DEBUG"
    ERROR = "ERROR"

    @property
    def style(self) -> LevelStyle:
        return _LEVEL_STYLES[self]


_LEVEL_STYLES = {
    LogLevel.INFO: LevelStyle(badge_fg=AnsiFgColor.black, badge_bg=AnsiBgColor.yellow, text_fg=AnsiFgColor.yellow),
    LogLevel.WARN: LevelStyle(badge_fg=AnsiFgColor.lightPink, badge_bg=AnsiBgColor.pink, text_fg=AnsiFgColor.pink),
    LogLevel.DEBUG: LevelStyle(
        badge_fg=AnsiFgColor.black, badge_bg=AnsiBgColor.lightPink, text_fg=AnsiFgColor.lightPink
    ),
    LogLevel.ERROR: LevelStyle(badge_fg=AnsiFgColor.white, badge_bg=AnsiBgColor.orange, text_fg=AnsiFgColor.orange),
}
