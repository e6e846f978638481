"""Report results to the console or a dialog, building ``Result`` values."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from micaview.result import ErrorType, Result, SourceLocation

DialogFn = Callable[[str, str, ErrorType], None]

ANSI_RED = "\033[1;31m"
ANSI_YELLOW = "\033[1;33m"
ANSI_WHITE = "\033[0m"
ANSI_RESET = "\033[0m"

DEFAULT_ERROR_MESSAGE = "Erro desconhecido"
DEFAULT_WARNING_MESSAGE = "Aviso"

_DIALOG_TITLES = {
    ErrorType.MSGBOX_ERROR: "Erro",
    ErrorType.MSGBOX_WARNING: "Aviso",
    ErrorType.MSGBOX_OK: "Info",
}


class ReportExit(SystemExit):
    """Raised after a fatal report; carries the result that was reported."""

    def __init__(self, result: Result) -> None:
        super().__init__(1)
        self.result = result


def _stderr_dialog(title: str, message: str, kind: ErrorType) -> None:
    sys.stderr.write(f"[{title}] {message}\n")
    sys.stderr.flush()


class Reporter:
    """Shows messages on a console stream or through a dialog callable.

    ``console`` is the stream for console output; when it is ``None``
    errors go to standard error and the rest to standard output.
    ``dialog`` is called as ``dialog(title, message, error_type)``.
    """

    def __init__(
        self,
        console: TextIO | None = None,
        dialog: DialogFn | None = None,
    ) -> None:
        self.console = console
        self.dialog = dialog if dialog is not None else _stderr_dialog

    def _stream(self, kind: ErrorType) -> TextIO:
        if self.console is not None:
            return self.console
        return sys.stderr if kind is ErrorType.CONSOLE_ERROR else sys.stdout

    def _show(self, result: Result) -> None:
        message = result.message or ""
        kind = result.error_type
        if kind.is_dialog:
            self.dialog(_DIALOG_TITLES[kind], message, kind)
        elif kind is ErrorType.CONSOLE_ERROR:
            self._write(kind, f"{ANSI_RED}[ERRO] {message}{ANSI_RESET}\n")
        elif kind is ErrorType.CONSOLE_WARNING:
            self._write(kind, f"{ANSI_YELLOW}[AVISO] {message}{ANSI_RESET}\n")
        elif kind is ErrorType.CONSOLE_NORMAL:
            self._write(kind, f"{ANSI_WHITE}{message}{ANSI_RESET}\n")
        if result.should_exit:
            raise ReportExit(result)

    def _write(self, kind: ErrorType, text: str) -> None:
        stream = self._stream(kind)
        stream.write(text)
        stream.flush()

    def _report(
        self,
        success: bool,
        message: str,
        location: SourceLocation | None,
        kind: ErrorType,
        should_exit: bool,
    ) -> Result:
        full = location.format() + message if location is not None else message
        result = Result(success, full, kind, should_exit)
        self._show(result)
        return result

    def error(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        location: SourceLocation | None = None,
        dialog: bool = False,
    ) -> Result:
        """Report an error; the result is unsuccessful."""
        kind = ErrorType.MSGBOX_ERROR if dialog else ErrorType.CONSOLE_ERROR
        return self._report(False, message, location, kind, False)

    def error_end(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        location: SourceLocation | None = None,
        dialog: bool = False,
    ) -> Result:
        """Report an error, then raise ``ReportExit`` (exit status 1)."""
        kind = ErrorType.MSGBOX_ERROR if dialog else ErrorType.CONSOLE_ERROR
        return self._report(False, message, location, kind, True)

    def warning(
        self,
        message: str = DEFAULT_WARNING_MESSAGE,
        location: SourceLocation | None = None,
        dialog: bool = False,
    ) -> Result:
        """Report a warning; the result is unsuccessful."""
        kind = ErrorType.MSGBOX_WARNING if dialog else ErrorType.CONSOLE_WARNING
        return self._report(False, message, location, kind, False)

    def warning_end(
        self,
        message: str = DEFAULT_WARNING_MESSAGE,
        location: SourceLocation | None = None,
        dialog: bool = False,
    ) -> Result:
        """Report a warning, then raise ``ReportExit`` (exit status 1)."""
        kind = ErrorType.MSGBOX_WARNING if dialog else ErrorType.CONSOLE_WARNING
        return self._report(False, message, location, kind, True)

    def normal(
        self,
        message: str = "",
        location: SourceLocation | None = None,
        dialog: bool = False,
    ) -> Result:
        """Report an informational message; the result is successful."""
        kind = ErrorType.MSGBOX_OK if dialog else ErrorType.CONSOLE_NORMAL
        return self._report(True, message, location, kind, False)

    def both_error(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        location: SourceLocation | None = None,
    ) -> Result:
        """Report an error on the console, then in a dialog; return the latter."""
        self.error(message, location, dialog=False)
        return self.error(message, location, dialog=True)

    def both_warning(
        self,
        message: str = DEFAULT_WARNING_MESSAGE,
        location: SourceLocation | None = None,
    ) -> Result:
        """Report a warning on the console, then in a dialog; return the latter."""
        self.warning(message, location, dialog=False)
        return self.warning(message, location, dialog=True)