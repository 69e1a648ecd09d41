# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import inspect
import re
import traceback
from types import FrameType, TracebackType
from typing import Any, Iterable, List, Optional

from coreason_pawprint.models import StackFrame
from coreason_pawprint.utils.logger import logger

# File "app.py", line 12, in main
_PYTHON_FRAME = re.compile(r'File "(?P<file>[^"]+)", line (?P<line>\d+)(?:, in (?P<func>.+))?')
# app.py:12, package:app/main.dart:12:5, at foo (/srv/app.js:3:14)
_GENERIC_FRAME = re.compile(r"(?P<file>[^\s()]+?):(?P<line>\d+)(?::\d+)?")

_TRACEBACK_HEADER = "Traceback (most recent call last):"


def parse_frame(line: str) -> Optional[StackFrame]:
    """
    Parses one textual frame into a StackFrame.
    Understands Python traceback lines and the generic `<file>:<line>[:<col>]` shape.
    Returns None when no file/line pair can be found.
    """
    match = _PYTHON_FRAME.search(line)
    if match:
        func = match.group("func")
        return StackFrame(
            filename=match.group("file"),
            lineno=int(match.group("line")),
            function=func.strip() if func else None,
        )

    match = _GENERIC_FRAME.search(line)
    if match:
        return StackFrame(filename=match.group("file"), lineno=int(match.group("line")))

    return None


def _from_summary(summary: Iterable[traceback.FrameSummary]) -> List[StackFrame]:
    # The traceback module lists frames outermost first.
    frames = [StackFrame(filename=fs.filename, lineno=fs.lineno, function=fs.name) for fs in summary]
    frames.reverse()
    return frames


def _from_text(text: str) -> List[StackFrame]:
    frames: List[StackFrame] = []

    if _TRACEBACK_HEADER in text:
        # Only the `File "...", line N` lines are frames; source and exception lines are skipped.
        for line in text.splitlines():
            frame = parse_frame(line) if _PYTHON_FRAME.search(line) else None
            if frame is not None:
                frames.append(frame)
        frames.reverse()
        return frames

    for line in text.splitlines():
        if not line.strip():
            continue
        frames.append(parse_frame(line) or StackFrame(filename=line.strip()))
    return frames


def _from_item(item: Any) -> StackFrame:
    if isinstance(item, StackFrame):
        return item
    if isinstance(item, traceback.FrameSummary):
        return StackFrame(filename=item.filename, lineno=item.lineno, function=item.name)
    text = str(item)
    return parse_frame(text) or StackFrame(filename=text.strip())


def extract_frames(trace: Any) -> List[StackFrame]:
    """
    Normalizes a stack-trace-like value into frame descriptors, innermost frame first.

    Accepts exceptions, traceback objects, live frames, `traceback.StackSummary`,
    sequences of frames or frame strings, and formatted traceback text.
    Anything unusable yields an empty list; this function never raises.
    """
    if trace is None:
        return []

    try:
        if isinstance(trace, BaseException):
            trace = trace.__traceback__
            if trace is None:
                return []
        if isinstance(trace, TracebackType):
            return _from_summary(traceback.extract_tb(trace))
        if isinstance(trace, FrameType):
            return _from_summary(traceback.extract_stack(trace))
        if isinstance(trace, traceback.StackSummary):
            return _from_summary(trace)
        if isinstance(trace, str):
            return _from_text(trace)
        if isinstance(trace, (list, tuple)):
            if trace and all(isinstance(item, traceback.FrameSummary) for item in trace):
                return _from_summary(trace)
            return [_from_item(item) for item in trace if not (isinstance(item, str) and not item.strip())]
        return _from_text(str(trace))
    except Exception as e:
        logger.debug(f"Could not extract frames from {type(trace).__name__}: {e}")
        return []


def capture_stack(skip: int = 0) -> List[StackFrame]:
    """
    Captures the current call stack, innermost first.
    Frame 0 is the caller of this function, shifted outwards by `skip` frames.
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(skip):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return []
        return _from_summary(traceback.extract_stack(target))
    finally:
        del frame
