# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

from typing import Generator, List

import pytest

from coreason_pawprint.ansi import strip_ansi
from coreason_pawprint.models import StackFrame
from coreason_pawprint.printer import PawPrint

# --- Mocks ---


class CapturingWriter:
    """
    Console writer that records every emitted unit instead of printing it.
    """

    def __init__(self) -> None:
        self.units: List[str] = []

    def __call__(self, text: str) -> None:
        self.units.append(text)

    @property
    def plain(self) -> List[str]:
        return [strip_ansi(unit) for unit in self.units]

    def clear(self) -> None:
        self.units.clear()


# --- Fixtures ---


@pytest.fixture(autouse=True)
def reset_singleton() -> Generator[None, None, None]:
    PawPrint.reset()
    yield
    PawPrint.reset()


@pytest.fixture
def writer() -> CapturingWriter:
    return CapturingWriter()


@pytest.fixture
def five_frames() -> List[StackFrame]:
    """Innermost first."""
    return [
        StackFrame(filename="/srv/app/service.py", lineno=10 * i + 1, function=f"func_{i}") for i in range(5)
    ]
