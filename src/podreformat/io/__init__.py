"""File access for the command line interface, keyed by file extension.

Pod transformers write ``.html`` (sometimes ``.htm`` or ``.xhtml``) pages, and
``.txt`` is accepted for HTML saved under a plain-text name.  All four map to
the verbatim HTML reader and writer; any other extension raises
``UnsupportedFormatError`` so that binary files are never fed to the scanner.

Further formats can be plugged in with :func:`register_reader` and
:func:`register_writer`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.html_reader import open_html, read_html
from .writers.html_writer import write_html

PathArg = str | os.PathLike[str]

HTML_EXTENSIONS: tuple[str, ...] = (".html", ".htm", ".xhtml", ".txt")

_readers: dict[str, Callable[..., str]] = {}
_writers: dict[str, Callable[..., None]] = {}


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Use ``func(path, **kwargs) -> str`` for files ending in ``ext`` (e.g. ``".html"``)."""

    _readers[ext.lower()] = func


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Use ``func(path, text, **kwargs)`` for files ending in ``ext``."""

    _writers[ext.lower()] = func


def get_extension(path: PathArg) -> str:
    """Return the lower-cased suffix of ``path`` with its dot, or ``""``."""

    return Path(path).suffix.lower()


def _handler(table: dict[str, Callable[..., Any]], path: PathArg) -> Callable[..., Any]:
    ext = get_extension(path)
    try:
        return table[ext]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported file extension: '{ext}' ({os.fspath(path)})"
        ) from None


def read_file(path: PathArg, **kwargs: Any) -> str:
    """Return the HTML text of ``path``; ``kwargs`` (e.g. ``encoding``) go to the reader.

    Raises
    ------
    UnsupportedFormatError
        If the extension of ``path`` has no reader.
    """

    return _handler(_readers, path)(path, **kwargs)


def write_file(path: PathArg, text: str, **kwargs: Any) -> None:
    """Write ``text`` to ``path``; ``kwargs`` (e.g. ``encoding``) go to the writer.

    Raises
    ------
    UnsupportedFormatError
        If the extension of ``path`` has no writer.
    """

    _handler(_writers, path)(path, text, **kwargs)


for _ext in HTML_EXTENSIONS:
    register_reader(_ext, read_html)
    register_writer(_ext, write_html)

__all__ = [
    "HTML_EXTENSIONS",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
    "open_html",
    "read_html",
    "write_html",
]
