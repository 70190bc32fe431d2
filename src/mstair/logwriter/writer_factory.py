# File: src/mstair/logwriter/writer_factory.py
"""
Factory and process-wide default for LogWriter instances.

Most code should own a LogWriter explicitly. For scripts that just want a
package-level `emit()`, this module keeps one lazily created default writer,
configured from the LOGWRITER_* environment variables (see writer_config), and
exposes module-level functions that delegate to it.

Example:
    >>> from mstair.logwriter import writer_factory as log
    >>> log.set_prefix("[build] ")
    >>> log.emit("starting")
    >>> log.emit_formatted("warning", "%d files skipped", 3)
"""

import threading
from typing import Any, TextIO

from mstair.logwriter.base.fs_helpers import StrPath
from mstair.logwriter.log_writer import LogWriter
from mstair.logwriter.output_flags import OutputFlags
from mstair.logwriter.severity import Severity
from mstair.logwriter.writer_config import WriterConfig


_LOG_WRITER: LogWriter | None = None
_LOG_WRITER_LOCK = threading.Lock()


def create_log_writer(*, reload_config: bool = False, **overrides: Any) -> LogWriter:
    """
    Return a new LogWriter configured from the environment, then from `overrides`.

    :param reload_config: Re-read LOGWRITER_* variables instead of using the cached config.
    :param overrides: LogWriter keyword arguments (stream, flags, prefix, log_file, color,
        exit_code, name).
    """
    config = WriterConfig.reload() if reload_config else WriterConfig.get_instance()
    kwargs: dict[str, Any] = {
        "flags": config.flags,
        "prefix": config.prefix,
        "log_file": config.log_file,
        "color": config.color,
    }
    kwargs.update(overrides)
    stream: TextIO = kwargs.pop("stream", None) or config.stream
    return LogWriter(stream, **kwargs)


def get_log_writer() -> LogWriter:
    """Return the process-wide default LogWriter, creating it on first use."""
    global _LOG_WRITER
    with _LOG_WRITER_LOCK:
        if _LOG_WRITER is None:
            _LOG_WRITER = create_log_writer()
        return _LOG_WRITER


def set_log_writer(writer: LogWriter | None) -> None:
    """Replace the default LogWriter; None means the next use creates a fresh one."""
    global _LOG_WRITER
    with _LOG_WRITER_LOCK:
        _LOG_WRITER = writer


def reset_log_writer() -> None:
    set_log_writer(None)


def emit(message: Any, severity: Severity | str | int = Severity.INFO) -> None:
    get_log_writer().emit(message, severity)


def emit_formatted(severity: Severity | str | int, fmt: str, *args: Any) -> None:
    get_log_writer().emit_formatted(severity, fmt, *args)


def emit_blank_line() -> None:
    get_log_writer().emit_blank_line()


def set_output_flags(flags: OutputFlags | int | str) -> None:
    get_log_writer().set_output_flags(flags)


def get_output_flags() -> OutputFlags:
    return get_log_writer().get_output_flags()


def set_output_stream(stream: TextIO) -> None:
    get_log_writer().set_output_stream(stream)


def get_output_stream() -> TextIO:
    return get_log_writer().get_output_stream()


def set_log_file(path: StrPath) -> None:
    get_log_writer().set_log_file(path)


def disable_log_file() -> None:
    get_log_writer().disable_log_file()


def get_log_file() -> tuple[bool, str]:
    return get_log_writer().get_log_file()


def set_prefix(prefix: str) -> None:
    get_log_writer().set_prefix(prefix)


def get_prefix() -> str:
    return get_log_writer().get_prefix()


# End of file: src/mstair/logwriter/writer_factory.py
