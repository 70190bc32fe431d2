# File: src/mstair/logwriter/base/fs_helpers.py
"""
File System Helpers
"""

import os
from pathlib import Path
from typing import IO, TypeAlias

import dotenv


StrPath: TypeAlias = str | os.PathLike[str]


def fs_load_dotenv(*, dotenv_path: StrPath | None = None, stream: IO[str] | None = None) -> bool:
    """
    Load variables from a .env file into os.environ, keeping values already set.

    With neither `dotenv_path` nor `stream`, the file is located by `dotenv.find_dotenv()`.

    :return: True if at least one variable was set.
    """
    return dotenv.load_dotenv(dotenv_path=dotenv_path, stream=stream, override=False)


def fs_append_text(
    path: StrPath, text: str, *, encoding: str = "utf-8", errors: str = "strict"
) -> None:
    """
    Append `text` to the file at `path`, creating the file if it does not exist.

    The file is opened and closed on every call; no newline is added.

    :param errors: Codec error handler, as for open().
    :raises OSError: If the file cannot be opened or written.
    :raises UnicodeEncodeError: If `text` cannot be encoded and `errors` is "strict".
    """
    with Path(path).open("a", encoding=encoding, errors=errors) as f:
        f.write(text)


# End of file: src/mstair/logwriter/base/fs_helpers.py
