"""HTML document writer.

The :func:`write_html` helper persists a reformatted document without altering
its newline sequences.  Directories required to store the file are created
automatically.  By default UTF-8 encoding without a BOM is used.
"""

from __future__ import annotations

import os
from pathlib import Path

PathLikeStr = os.PathLike[str]


def write_html(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as provided.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        The document to be written.
    encoding:
        Output encoding.
    newline:
        ``newline`` parameter forwarded to :func:`open`.  The default of ``""``
        emits newline characters in ``text`` verbatim.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["write_html"]
