"""Outcome values returned by operations that may fail or report a message."""

from __future__ import annotations

import enum
import inspect
from dataclasses import dataclass


class ErrorType(enum.Enum):
    """Where a result's message is shown, and with what severity."""

    MSGBOX_ERROR = "msgbox_error"
    MSGBOX_WARNING = "msgbox_warning"
    MSGBOX_OK = "msgbox_ok"
    CONSOLE_ERROR = "console_error"
    CONSOLE_WARNING = "console_warning"
    CONSOLE_NORMAL = "console_normal"
    NONE = "none"

    @property
    def is_dialog(self) -> bool:
        """True for kinds shown in a dialog box."""
        return self in (
            ErrorType.MSGBOX_ERROR,
            ErrorType.MSGBOX_WARNING,
            ErrorType.MSGBOX_OK,
        )

    @property
    def is_console(self) -> bool:
        """True for kinds printed to the console."""
        return self in (
            ErrorType.CONSOLE_ERROR,
            ErrorType.CONSOLE_WARNING,
            ErrorType.CONSOLE_NORMAL,
        )


@dataclass(frozen=True)
class SourceLocation:
    """A place in the code: file, line and function name."""

    file: str
    line: int
    function: str

    def format(self) -> str:
        """Render as a message prefix: ``[file:line in function] ``."""
        return f"[{self.file}:{self.line} in {self.function}] "


def capture_location(depth: int = 0) -> SourceLocation:
    """Return the location of the caller, ``depth`` frames further out.

    ``depth=0`` is the function that calls ``capture_location`` itself.
    """
    if depth < 0:
        raise ValueError("depth must not be negative")
    frame = inspect.currentframe()
    target = frame.f_back if frame is not None else None
    try:
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            raise ValueError(f"call stack is not {depth} frames deep")
        code = target.f_code
        return SourceLocation(code.co_filename, target.f_lineno, code.co_name)
    finally:
        del frame, target


@dataclass(frozen=True)
class Result:
    """Success flag plus an optional message and how it was reported."""

    success: bool
    message: str | None = None
    error_type: ErrorType = ErrorType.NONE
    should_exit: bool = False

    def __bool__(self) -> bool:
        return self.success


OK = Result(True)