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
import sys
import threading
from typing import Any, Callable, List, NoReturn, Optional

from coreason_pawprint.decorations import (
    compose_line,
    get_current_timestamp,
    get_decorated_name,
    get_pretty_error,
    get_pretty_object,
    get_pretty_stack_trace,
    get_source_file_info,
)
from coreason_pawprint.frames import capture_stack
from coreason_pawprint.models import (
    DEFAULT_MAX_STACK_TRACES,
    DEFAULT_NAME,
    LogLevel,
    PawPrintConfig,
)
from coreason_pawprint.utils.logger import logger

Writer = Callable[[str], None]
DebugPredicate = Callable[[], bool]

NOT_INITIALISED_MESSAGE = "`PawPrint` is not yet initialised, initialise it with `PawPrint.init()`"
INIT_MESSAGE = "Instance of `PawPrint` created successfully"

_TRUTHY = {"1", "true", "yes", "on"}


class PawPrintError(Exception):
    """Base class for errors raised by coreason-pawprint."""


class PawPrintNotInitializedError(PawPrintError, RuntimeError):
    """Raised when the printer is accessed before `PawPrint.init()`."""


def default_debug_mode() -> bool:
    """
    `PAW_DEBUG` wins when set; otherwise follows `__debug__`, which is off under `python -O`.
    """
    flag = os.getenv("PAW_DEBUG")
    if flag is not None:
        return flag.strip().lower() in _TRUTHY
    return __debug__


def default_writer(text: str) -> None:
    sys.stderr.write(text + "\n")
    sys.stderr.flush()


class PawPrint:
    """
    A beautiful printer for your logs.

    Process-wide singleton. Build it once with `PawPrint.init()` and fetch it
    anywhere with `PawPrint.get_instance()`.
    """

    _instance: Optional["PawPrint"] = None
    _lock = threading.Lock()

    def __init__(
        self,
        config: PawPrintConfig,
        debug_mode: Optional[DebugPredicate] = None,
        writer: Optional[Writer] = None,
    ):
        self.config = config
        self._debug_mode = debug_mode or default_debug_mode
        self._writer = writer or default_writer

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def max_stack_traces(self) -> int:
        return self.config.max_stack_traces

    @property
    def should_print_name(self) -> bool:
        return self.config.should_print_name

    @classmethod
    def init(
        cls,
        name: str = DEFAULT_NAME,
        max_stack_traces: int = DEFAULT_MAX_STACK_TRACES,
        should_print_name: bool = True,
        *,
        debug_mode: Optional[DebugPredicate] = None,
        writer: Optional[Writer] = None,
    ) -> "PawPrint":
        """
        Creates the singleton on the first call and returns it.
        Later calls return the existing instance and ignore their arguments.

        Example:
            PawPrint.init(name="MyApp", max_stack_traces=3, should_print_name=True)
        """
        with cls._lock:
            if cls._instance is None:
                config = PawPrintConfig(
                    name=name,
                    max_stack_traces=max_stack_traces,
                    should_print_name=should_print_name,
                )
                cls._instance = cls(config, debug_mode=debug_mode, writer=writer)
                logger.debug(f"PawPrint initialised with {config!r}")
                cls._instance._init_log(INIT_MESSAGE)
            else:
                logger.debug("PawPrint already initialised, ignoring re-initialisation")

        return cls._instance

    @classmethod
    def get_instance(cls) -> "PawPrint":
        if cls._instance is None:
            cls._on_init_error()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the singleton so `init()` can build a new one."""
        with cls._lock:
            cls._instance = None

    @staticmethod
    def _on_init_error() -> NoReturn:
        logger.debug("PawPrint accessed before init()")
        if default_debug_mode():
            default_writer(get_pretty_error(NOT_INITIALISED_MESSAGE))
        raise PawPrintNotInitializedError(NOT_INITIALISED_MESSAGE)

    def _init_log(self, msg: str) -> None:
        title = get_decorated_name(DEFAULT_NAME, True)
        self._print_log(compose_line(title, LogLevel.INFO, [get_current_timestamp(), msg]))

    def _title(self) -> str:
        return get_decorated_name(self.name, self.should_print_name)

    def _primary_line(self, level: LogLevel, stack_trace: Any, msg: Optional[str]) -> str:
        parts: List[str] = [get_source_file_info(stack_trace), get_current_timestamp()]
        if msg is not None:
            parts.append(msg)
        return compose_line(self._title(), level, parts)

    def info(self, msg: str, stack_trace: Any = None) -> None:
        """
        Logs an informational message.

        Example:
            PawPrint.get_instance().info("This is an informational message")
        """
        if stack_trace is None:
            stack_trace = capture_stack()
        self._print_log(self._primary_line(LogLevel.INFO, stack_trace, msg))

    def warn(self, msg: str, stack_trace: Any = None) -> None:
        if stack_trace is None:
            stack_trace = capture_stack()
        self._print_log(self._primary_line(LogLevel.WARN, stack_trace, msg))

    def debug(self, obj: Any, stack_trace: Any = None) -> None:
        """
        Logs an object for preview, pretty-printed on its own line.

        Example:
            PawPrint.get_instance().debug({"key": "value", "count": 42})
        """
        if stack_trace is None:
            stack_trace = capture_stack()
        self._print_log(self._primary_line(LogLevel.DEBUG, stack_trace, None))
        self._print_log(get_pretty_object(obj))

    def error(self, msg: str, error: Any = None, stack_trace: Any = None) -> None:
        """
        Logs an error message, followed by the error and its truncated stack trace.

        When no stack trace is given, the traceback carried by `error` is used for
        the trace block while the source location still points at the caller.

        Example:
            try:
                raise NotImplementedError("Oops! You've forgotten to implement this feature")
            except NotImplementedError as e:
                PawPrint.get_instance().error("An unexpected error occurred", error=e)
        """
        source = stack_trace if stack_trace is not None else capture_stack()
        self._error(msg, error, stack_trace, source)

    def _error(self, msg: str, error: Any, stack_trace: Any, source: Any) -> None:
        trace = stack_trace if stack_trace is not None else getattr(error, "__traceback__", None)

        self._print_log(self._primary_line(LogLevel.ERROR, source, msg))
        self._print_log(get_pretty_error(error))
        self._print_log(get_pretty_stack_trace(trace, max_lines=self.max_stack_traces))

    def _print_log(self, log: str) -> None:
        if self._debug_mode():
            self._writer(log)


# --- Public API Functions ---


def init(
    name: str = DEFAULT_NAME,
    max_stack_traces: int = DEFAULT_MAX_STACK_TRACES,
    should_print_name: bool = True,
    *,
    debug_mode: Optional[DebugPredicate] = None,
    writer: Optional[Writer] = None,
) -> PawPrint:
    """Initialises the `PawPrint` singleton."""
    return PawPrint.init(
        name=name,
        max_stack_traces=max_stack_traces,
        should_print_name=should_print_name,
        debug_mode=debug_mode,
        writer=writer,
    )


def get_instance() -> PawPrint:
    return PawPrint.get_instance()


def info(msg: str, stack_trace: Any = None) -> None:
    PawPrint.get_instance().info(msg, stack_trace if stack_trace is not None else capture_stack())


def warn(msg: str, stack_trace: Any = None) -> None:
    PawPrint.get_instance().warn(msg, stack_trace if stack_trace is not None else capture_stack())


def debug(obj: Any, stack_trace: Any = None) -> None:
    PawPrint.get_instance().debug(obj, stack_trace if stack_trace is not None else capture_stack())


def error(msg: str, error: Any = None, stack_trace: Any = None) -> None:
    """
    Logs an error through the singleton.
    """
    source = stack_trace if stack_trace is not None else capture_stack()
    PawPrint.get_instance()._error(msg, error, stack_trace, source)
