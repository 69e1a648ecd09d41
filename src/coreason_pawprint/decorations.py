# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pawprint

import dataclasses
import json
import pprint
from datetime import datetime
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel

from coreason_pawprint.ansi import AnsiBgColor, AnsiFgColor, decorate
from coreason_pawprint.frames import extract_frames
from coreason_pawprint.models import LogLevel
from coreason_pawprint.utils.logger import logger

UNKNOWN_SOURCE = "unknown"
NO_ERROR = "No error provided"
NO_STACK_TRACE = "No stack trace available"

DELIMITER = " | "
ERROR_GLYPH = "✖"

MAX_OBJECT_DEPTH = 8
MAX_OBJECT_LENGTH = 10_000

_BADGE_WIDTH = max(len(level.value) for level in LogLevel)


def get_current_timestamp(now: Optional[datetime] = None) -> str:
    """Local wall-clock time as `HH:MM:SS.mmm`."""
    moment = now or datetime.now()
    return moment.strftime("%H:%M:%S.%f")[:-3]


def get_source_file_info(stack_trace: Any = None) -> str:
    """
    Returns `<file>:<line>` of the second frame of the given stack.

    Callers that want the current stack capture it themselves. Falls back to
    the only frame of a single-frame stack, and to `unknown` when the stack is
    absent or nothing usable is found.
    """
    frames = extract_frames(stack_trace)
    if not frames:
        return UNKNOWN_SOURCE

    frame = frames[1] if len(frames) > 1 else frames[0]
    if frame.lineno is None:
        logger.debug(f"Unparseable stack frame: {frame.filename!r}")
        return UNKNOWN_SOURCE
    return frame.location


def get_decorated_string(text: str, fg: Optional[AnsiFgColor] = None, bg: Optional[AnsiBgColor] = None) -> str:
    return decorate(text, fg=fg, bg=bg)


def get_level_badge(level: LogLevel) -> str:
    style = level.style
    return decorate(f"[ {level.value.ljust(_BADGE_WIDTH)} ]", fg=style.badge_fg, bg=style.badge_bg)


def get_decorated_name(name: str, show: bool) -> str:
    if not show:
        return ""
    return decorate(f"[{name}]", fg=AnsiFgColor.white, bg=AnsiBgColor.black) + " "


def compose_line(name_badge: str, level: LogLevel, parts: Sequence[str]) -> str:
    """
    Joins the badges and the ` | `-delimited parts into one printable line,
    the parts colored with the level's text color.
    """
    body = decorate(DELIMITER.join(parts), fg=level.style.text_fg)
    return f"{name_badge}{get_level_badge(level)} {body}"


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return obj


def _render_object(obj: Any) -> str:
    if isinstance(obj, str):
        return obj

    try:
        return json.dumps(_to_jsonable(obj), indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug(f"Object of type {type(obj).__name__} is not JSON renderable, using pprint: {e}")

    try:
        # pprint marks self-references instead of following them.
        return pprint.pformat(obj, indent=2, width=100, depth=MAX_OBJECT_DEPTH, sort_dicts=False)
    except Exception as e:
        logger.debug(f"pprint failed for {type(obj).__name__}: {e}")
        return f"<unrepresentable {type(obj).__name__}>"


def get_pretty_object(obj: Any) -> str:
    """
    Multi-line, indented rendering of an arbitrary value.
    JSON shapes render as indented JSON; everything else goes through a
    depth-bounded pprint. Output is capped at MAX_OBJECT_LENGTH characters.
    """
    text = _render_object(obj)
    if len(text) > MAX_OBJECT_LENGTH:
        text = text[:MAX_OBJECT_LENGTH] + "\n... (truncated)"
    return decorate(text, fg=AnsiFgColor.lightPink)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception as e:
        logger.debug(f"str() failed for {type(value).__name__}: {e}")
        return f"<unprintable {type(value).__name__}>"


def get_pretty_error(err: Any) -> str:
    if err is None:
        text = NO_ERROR
    elif isinstance(err, BaseException):
        message = _safe_str(err)
        text = f"{type(err).__name__}: {message}" if message else type(err).__name__
    else:
        text = _safe_str(err)

    return decorate(f"{ERROR_GLYPH} {text}", fg=AnsiFgColor.orange)


def _connector(index: int, total: int) -> str:
    if total == 1:
        return "─"
    if index == 0:
        return "┌"
    if index == total - 1:
        return "└"
    return "├"


def get_pretty_stack_trace(stack_trace: Any, max_lines: int) -> str:
    """
    Renders the first `max_lines` frames (innermost first), one per line,
    joined by connector glyphs. Absent or empty traces render a placeholder.
    """
    frames = extract_frames(stack_trace)[: max(max_lines, 0)]
    if not frames:
        return decorate(NO_STACK_TRACE, fg=AnsiFgColor.orange)

    lines: List[str] = [f"{_connector(i, len(frames))} {frame}" for i, frame in enumerate(frames)]
    return decorate("\n".join(lines), fg=AnsiFgColor.orange)
