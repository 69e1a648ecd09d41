# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import pytest
from pydantic import ValidationError

from coreason_pawprint.ansi import AnsiBgColor, AnsiFgColor
from coreason_pawprint.models import LogLevel, PawPrintConfig, StackFrame


def test_config_defaults() -> None:
    config = PawPrintConfig()
    assert config.name == "PAW"
    assert config.max_stack_traces == 5
    assert config.should_print_name is True


@pytest.mark.parametrize("name", ["", "   ", None])
def test_config_blank_name_falls_back(name: object) -> None:
    config = PawPrintConfig(name=name)  # type: ignore[arg-type]
    assert config.name == "PAW"


def test_config_is_frozen() -> None:
    config = PawPrintConfig(name="APP")
    with pytest.raises(ValidationError):
        config.name = "OTHER"  # type: ignore[misc]


def test_config_clamps_negative_max_stack_traces() -> None:
    assert PawPrintConfig(max_stack_traces=-1).max_stack_traces == 0


def test_stack_frame_location_uses_basename() -> None:
    frame = StackFrame(filename="/srv/app/service.py", lineno=42, function="handle")
    assert frame.location == "service.py:42"
    assert str(frame) == "/srv/app/service.py:42 in handle"


def test_stack_frame_without_line() -> None:
    frame = StackFrame(filename="<garbage>")
    assert frame.location == "<garbage>"
    assert str(frame) == "<garbage>"


def test_level_styles() -> None:
    assert LogLevel.INFO.style.badge_fg is AnsiFgColor.black
    assert LogLevel.INFO.style.badge_bg is AnsiBgColor.yellow
    assert LogLevel.WARN.style.badge_fg is AnsiFgColor.lightPink
    assert LogLevel.WARN.style.badge_bg is AnsiBgColor.pink
    assert LogLevel.DEBUG.style.badge_fg is AnsiFgColor.black
    assert LogLevel.DEBUG.style.badge_bg is AnsiBgColor.lightPink
    assert LogLevel.ERROR.style.badge_fg is AnsiFgColor.white
    assert LogLevel.ERROR.style.badge_bg is AnsiBgColor.orange
