# File: src/mstair/logwriter/log_writer.py
"""
Leveled, colorized line logging with an optional mirrored log file.

Example:
    >>> from mstair.logwriter.log_writer import LogWriter
    >>> from mstair.logwriter.severity import Severity
    >>> writer = LogWriter(prefix="[app] ")
    >>> writer.emit("Application started")
    >>> writer.emit_formatted(Severity.WARNING, "Retrying %s in %d seconds", "fetch", 5)
    >>>
    >>> writer.set_log_file("app.log")
    >>> writer.error("Could not reach %s", "db01")
    >>> writer.fatal("Giving up")  # writes the line, then exits with status 1

Line layout on the output stream:
    <header><custom prefix><severity tag><message>

- The header holds whatever the OutputFlags ask for (time by default).
- The severity tag is colored per severity and the message body is always
  colored with the accent color (magenta) when color is enabled.
- The log file receives `<custom prefix><severity tag><message>` with no
  header and no newline added.

Design:
- State is owned by the LogWriter instance; there is no hidden global. See
  mstair.logwriter.writer_factory for the process-wide default writer.
- Lines are written through a private, non-propagating logging.Logger with a
  single StreamHandler, so host application logging configuration never
  filters or duplicates LogWriter output.
- A re-entrant lock serializes configuration changes and each emit.
- A log file that cannot be opened disables file logging and produces a
  WARNING line on the output stream; emit never raises for it.
- FATAL ends the process: SystemExit in the main thread, os._exit() from any
  other thread.
"""

from __future__ import annotations

import logging
import os
import re
import sys
import threading
import warnings
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from typing import Any, Final, TextIO

from mstair.logwriter.base import config as cfg
from mstair.logwriter.base.fs_helpers import StrPath, fs_append_text
from mstair.logwriter.line_formatter import K_LINE_PREFIX, LineFormatter, colorize
from mstair.logwriter.output_flags import OutputFlags
from mstair.logwriter.severity import Severity


__all__: list[str] = [
    "ACCENT_COLOR",
    "LogWriter",
    "WrappedError",
]

ACCENT_COLOR: Final[str] = "magenta"
"""Color applied to every message body, regardless of severity."""

_WRAP_PLACEHOLDER_RX: Final[re.Pattern[str]] = re.compile(r"%([%w])")


class WrappedError(Exception):
    """
    Error substituted for the first exception argument of a "%w" format.

    Its text is the text of the original exception, which is kept as
    `__cause__`.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.__cause__ = cause


class LogWriter:
    """
    Writes severity-tagged, colorized lines to a stream and optionally to a file.

    Every severity is always emitted; there is no level threshold. Emitting a
    FATAL line terminates the process with `exit_code` via SystemExit.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        flags: OutputFlags | int = OutputFlags.DEFAULT,
        prefix: str = "",
        log_file: StrPath = "",
        color: bool | None = None,
        exit_code: int = 1,
        name: str = "mstair.logwriter",
    ) -> None:
        """
        Initialize the LogWriter.

        :param stream: Output stream for log lines. Defaults to sys.stderr.
        :param flags: Header flags; OutputFlags.MSG_PREFIX is always added.
        :param prefix: Custom prefix placed before the severity tag on every line.
        :param log_file: Path of the mirror file; empty disables file logging.
        :param color: True/False forces ANSI colors on/off, None detects per stream.
        :param exit_code: Process exit status used after a FATAL line.
        :param name: Name of the underlying logging.Logger (not registered globally).
        """
        self._lock = threading.RLock()
        self._flags: OutputFlags = OutputFlags(flags) | OutputFlags.MSG_PREFIX
        self._prefix: str = prefix
        self._log_file_enabled: bool = False
        self._log_file: str = ""
        self._color: bool | None = color
        self.exit_code: int = exit_code

        # Private logger: never registered with logging.getLogger(), never propagates
        self._logger = logging.Logger(name, logging.NOTSET)
        self._logger.propagate = False
        self._handler: logging.StreamHandler[TextIO] = logging.StreamHandler(
            stream if stream is not None else sys.stderr
        )
        self._handler.setFormatter(LineFormatter(self._flags))
        self._logger.addHandler(self._handler)

        self.set_log_file(log_file)

    def __repr__(self) -> str:
        enabled, path = self.get_log_file()
        return "<{cls} {name!r} flags={flags!r} prefix={prefix!r} log_file={log_file!r}>".format(
            cls=self.__class__.__name__,
            name=self._logger.name,
            flags=self._flags,
            prefix=self._prefix,
            log_file=path if enabled else None,
        )

    # ---------- emitting ----------

    def emit(self, message: Any, severity: Severity | str | int = Severity.INFO) -> None:
        """
        Write one line for `message` at `severity`.

        :param message: Message text; non-string values are converted with str().
        :param severity: Severity, severity name, or stdlib level number.
        """
        self._emit(Severity.parse(severity), str(message), stacklevel=1)

    def emit_formatted(self, severity: Severity | str | int, fmt: str, *args: Any) -> None:
        """
        Same as emit(), after printf-style substitution of `args` into `fmt`.

        With no args, `fmt` is used verbatim. A "%w" placeholder is deprecated:
        it is rewritten to "%s" and the first exception argument is replaced
        by a WrappedError chained to it.

        :raises TypeError: If `args` do not match the placeholders in `fmt`.
        :raises ValueError: If `fmt` contains an unsupported placeholder.
        """
        self._emit(Severity.parse(severity), _format_message(fmt, args), stacklevel=1)

    def debug(self, fmt: str, *args: Any) -> None:
        self._emit(Severity.DEBUG, _format_message(fmt, args), stacklevel=1)

    def info(self, fmt: str, *args: Any) -> None:
        self._emit(Severity.INFO, _format_message(fmt, args), stacklevel=1)

    def warning(self, fmt: str, *args: Any) -> None:
        self._emit(Severity.WARNING, _format_message(fmt, args), stacklevel=1)

    def error(self, fmt: str, *args: Any) -> None:
        self._emit(Severity.ERROR, _format_message(fmt, args), stacklevel=1)

    def fatal(self, fmt: str, *args: Any) -> None:
        """Write a FATAL line, then end the process with exit_code."""
        self._emit(Severity.FATAL, _format_message(fmt, args), stacklevel=1)

    def emit_blank_line(self) -> None:
        """
        Write a bare newline: no header, no custom prefix, no severity tag.

        Flags are suppressed for this one write only. Nothing is written to the
        log file.
        """
        with self._lock, self._flags_suppressed():
            self._logger.log(logging.INFO, "", extra={K_LINE_PREFIX: ""})

    def _emit(self, severity: Severity, message: str, *, stacklevel: int) -> None:
        # stacklevel is relative to the public method; +2 skips it and _emit()
        with self._lock:
            color = self._colors_enabled()
            body = colorize(message, ACCENT_COLOR, color)
            line_prefix = self._prefix + colorize(severity.tag, severity.color, color)

            if self._log_file_enabled:
                self._mirror_to_file(line_prefix + body)

            self._logger.log(
                severity.level,
                body,
                extra={K_LINE_PREFIX: line_prefix},
                stacklevel=stacklevel + 2,
            )

            if severity is Severity.FATAL:
                self._terminate()

    def _mirror_to_file(self, text: str) -> None:
        path = self._log_file
        try:
            fs_append_text(path, text, errors="backslashreplace")
        except OSError as exc:
            self._set_log_file("")
            self._write_console_warning(
                f"Error opening log file {path!r}, file logging disabled: {exc}"
            )

    def _terminate(self) -> None:
        """
        End the process with exit_code after flushing the output stream.

        SystemExit only unwinds the calling thread, so outside the main thread
        the process is ended with os._exit() instead.
        """
        with suppress(Exception):
            self._handler.flush()
        if threading.current_thread() is threading.main_thread():
            sys.exit(self.exit_code)
        for std_stream in (sys.stdout, sys.stderr):
            with suppress(Exception):
                std_stream.flush()
        os._exit(self.exit_code)

    def _write_console_warning(self, message: str) -> None:
        """Write a WARNING line straight to the output stream, bypassing file mirroring."""
        color = self._colors_enabled()
        line_prefix = self._prefix + colorize(Severity.WARNING.tag, Severity.WARNING.color, color)
        self._logger.log(
            logging.WARNING,
            colorize(message, ACCENT_COLOR, color),
            extra={K_LINE_PREFIX: line_prefix},
        )

    @contextmanager
    def _flags_suppressed(self) -> Iterator[None]:
        previous = self._handler.formatter
        self._handler.setFormatter(LineFormatter(OutputFlags.NONE))
        try:
            yield
        finally:
            self._handler.setFormatter(previous)

    def _colors_enabled(self) -> bool:
        if self._color is not None:
            return self._color
        return cfg.colors_enabled(self._handler.stream)

    # ---------- configuration ----------

    def set_output_flags(self, flags: OutputFlags | int | str) -> None:
        """
        Replace the header flags; OutputFlags.MSG_PREFIX is always added.

        Takes effect for the next line. The output stream is unchanged.
        """
        new_flags = OutputFlags.parse(flags) if isinstance(flags, str) else OutputFlags(flags)
        with self._lock:
            self._flags = new_flags | OutputFlags.MSG_PREFIX
            self._handler.setFormatter(LineFormatter(self._flags))

    def get_output_flags(self) -> OutputFlags:
        with self._lock:
            return self._flags

    def set_output_stream(self, stream: TextIO) -> None:
        """
        Rebind output to `stream`. File logging and flags are unaffected.

        The previous stream is flushed, not closed.
        """
        with self._lock:
            with suppress(Exception):
                self._handler.flush()
            self._logger.removeHandler(self._handler)
            self._handler.close()

            new_handler: logging.StreamHandler[TextIO] = logging.StreamHandler(stream)
            new_handler.setFormatter(LineFormatter(self._flags))
            self._logger.addHandler(new_handler)
            self._handler = new_handler

    def get_output_stream(self) -> TextIO:
        with self._lock:
            return self._handler.stream

    def set_log_file(self, path: StrPath) -> None:
        """
        Mirror every line to `path`, appending. An empty path disables file logging.

        The file is opened lazily on each emit, so a bad path is only reported
        when the next line is written.
        """
        with self._lock:
            self._set_log_file(path)

    def disable_log_file(self) -> None:
        """Disable file logging. Equivalent to set_log_file("")."""
        self.set_log_file("")

    def get_log_file(self) -> tuple[bool, str]:
        """Return (enabled, path); path is "" when file logging is disabled."""
        with self._lock:
            return self._log_file_enabled, self._log_file

    def _set_log_file(self, path: StrPath) -> None:
        self._log_file = os.fspath(path) if path else ""
        self._log_file_enabled = self._log_file != ""

    def set_prefix(self, prefix: str) -> None:
        """Set the custom prefix placed immediately before the severity tag."""
        with self._lock:
            self._prefix = prefix

    def get_prefix(self) -> str:
        with self._lock:
            return self._prefix

    def set_color(self, color: bool | None) -> None:
        """Force ANSI colors on (True) or off (False), or detect per stream (None)."""
        with self._lock:
            self._color = color

    def get_color(self) -> bool | None:
        with self._lock:
            return self._color


def _format_message(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    if "%w" in fmt:
        fmt, args = _rewrite_wrap_placeholder(fmt, args)
    return fmt % args


def _rewrite_wrap_placeholder(fmt: str, args: tuple[Any, ...]) -> tuple[str, tuple[Any, ...]]:
    """
    Rewrite the first "%w" to "%s" and wrap the first exception argument.

    "%%w" is a literal percent followed by "w" and is left alone.
    """
    found = False

    def _replace(match: re.Match[str]) -> str:
        nonlocal found
        if match.group(1) == "w" and not found:
            found = True
            return "%s"
        return match.group(0)

    new_fmt = _WRAP_PLACEHOLDER_RX.sub(_replace, fmt)
    if not found:
        return fmt, args

    warnings.warn(
        'The "%w" placeholder is deprecated; use "%s" with the exception instead',
        DeprecationWarning,
        stacklevel=4,
    )
    new_args = list(args)
    for i, arg in enumerate(new_args):
        if isinstance(arg, BaseException):
            new_args[i] = WrappedError(arg)
            break
    return new_fmt, tuple(new_args)


# End of file: src/mstair/logwriter/log_writer.py
