# File: src/mstair/logwriter/writer_config.py
"""
Environment variable-driven defaults for LogWriter instances.

Recognized variables (a .env file is loaded first, without overriding):
- LOGWRITER_PREFIX: custom prefix placed before the severity tag.
- LOGWRITER_FILE: path of the mirror log file; empty disables file logging.
- LOGWRITER_FLAGS: OutputFlags expression, e.g. "date,time" or "std|utc".
- LOGWRITER_STREAM: "stderr" (default) or "stdout".
- LOGWRITER_COLOR: "auto" (default), "always"/"true"/"1", "never"/"false"/"0".

Invalid values are reported through this module's logger and the default is
kept. See WriterConfig for how the values are applied.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Final, TextIO

from mstair.logwriter.base.fs_helpers import fs_load_dotenv
from mstair.logwriter.output_flags import OutputFlags


__all__ = ["WriterConfig"]

_LOG = logging.getLogger(__name__)

_ENV_PREFIX: Final[str] = "LOGWRITER_"
_COLOR_VALUES: Final[dict[str, bool | None]] = {
    "": None,
    "auto": None,
    "always": True,
    "true": True,
    "yes": True,
    "on": True,
    "1": True,
    "never": False,
    "false": False,
    "no": False,
    "off": False,
    "0": False,
}
_STREAM_NAMES: Final[frozenset[str]] = frozenset({"stderr", "stdout"})

_writer_config_instance: WriterConfig | None = None


@dataclass(slots=True)
class WriterConfig:
    """
    LogWriter defaults resolved from LOGWRITER_* environment variables.

    Fields left at their defaults when a variable is missing or invalid.
    """

    prefix: str = ""
    log_file: str = ""
    flags: OutputFlags = OutputFlags.DEFAULT
    stream_name: str = "stderr"
    color: bool | None = None

    @classmethod
    def from_environment(cls) -> WriterConfig:
        """Build a WriterConfig from the current environment (after loading .env)."""
        fs_load_dotenv()
        config = cls()
        env = os.environ

        config.prefix = env.get(f"{_ENV_PREFIX}PREFIX", config.prefix)
        config.log_file = env.get(f"{_ENV_PREFIX}FILE", config.log_file).strip()

        raw_flags = env.get(f"{_ENV_PREFIX}FLAGS")
        if raw_flags is not None and raw_flags.strip():
            try:
                config.flags = OutputFlags.parse(raw_flags) | OutputFlags.MSG_PREFIX
            except ValueError as e:
                _LOG.warning("Ignoring %sFLAGS=%r: %s", _ENV_PREFIX, raw_flags, e)

        raw_stream = env.get(f"{_ENV_PREFIX}STREAM")
        if raw_stream is not None:
            stream_name = raw_stream.strip().lower()
            if stream_name in _STREAM_NAMES:
                config.stream_name = stream_name
            elif stream_name:
                _LOG.warning(
                    "Ignoring %sSTREAM=%r: expected one of %s",
                    _ENV_PREFIX,
                    raw_stream,
                    ", ".join(sorted(_STREAM_NAMES)),
                )

        raw_color = env.get(f"{_ENV_PREFIX}COLOR")
        if raw_color is not None:
            color_key = raw_color.strip().strip("'\"").lower()
            if color_key in _COLOR_VALUES:
                config.color = _COLOR_VALUES[color_key]
            else:
                _LOG.warning(
                    "Ignoring %sCOLOR=%r: expected auto, always or never", _ENV_PREFIX, raw_color
                )

        return config

    @classmethod
    def get_instance(cls) -> WriterConfig:
        """Return the singleton WriterConfig instance, creating it if needed."""
        global _writer_config_instance
        if _writer_config_instance is None:
            _writer_config_instance = cls.from_environment()
        return _writer_config_instance

    @classmethod
    def reload(cls) -> WriterConfig:
        """Discard the cached instance and re-read the environment."""
        global _writer_config_instance
        _writer_config_instance = None
        return cls.get_instance()

    @property
    def stream(self) -> TextIO:
        """The configured stream, resolved at access time (honors redirected sys.stderr)."""
        return sys.stdout if self.stream_name == "stdout" else sys.stderr


# End of file: src/mstair/logwriter/writer_config.py
