"""HTML document reader.

Documents are loaded without any content normalization: newline sequences are
kept exactly as stored on disk (``newline=""``) and a UTF-8 byte-order mark is
consumed by the default ``"utf-8-sig"`` codec.  ``FileNotFoundError`` and other
I/O errors propagate to the caller.
"""

from __future__ import annotations

import os
from typing import TextIO

PathLikeStr = os.PathLike[str]


def open_html(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> TextIO:
    """Open ``path`` for streaming reads.

    The returned file object is a context manager; the caller owns it.
    """

    return open(path, "r", encoding=encoding, errors=errors, newline="")


def read_html(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read an HTML file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.

    Returns
    -------
    str
        The file contents without any newline translation.
    """

    with open_html(path, encoding=encoding, errors=errors) as f:
        return f.read()


__all__ = ["open_html", "read_html"]
