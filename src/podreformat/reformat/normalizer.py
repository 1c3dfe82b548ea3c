"""Indentation normalization for preformatted text.

The :func:`normalize_indent` function shifts a chunk of ``<pre>`` text to the
left by the indentation shared by all of its lines.

Rules
-----
1. The chunk is split on ``\\n``.  Nothing is lost: empty lines and a trailing
   empty element (chunk ending with a newline) are kept.
2. **Blank lines** (empty or whitespace only) do not take part in the minimum;
   they stand for verbatim paragraph breaks and space-only lines.
3. The indentation of a line is the length of its leading whitespace run,
   counted in characters.  A tab counts as one, like a space, so mixed
   tab/space indentation is handled deterministically rather than visually.
4. The shared indentation is the minimum over the non-blank lines, clamped to
   :data:`MAX_INDENT`.  Every line loses that many leading characters, or all
   of its leading whitespace when it has less (only possible for blank lines).
   The carriage return of a CRLF break is never part of what a blank line
   loses.  A chunk without any non-blank line is left alone.
5. With ``squash_blank_lines`` every line that is whitespace only after step 4
   becomes the empty string.  Line feeds are never touched.

Example
-------

>>> normalize_indent("\\n    while (<>) {\\n        chomp;\\n    }\\n")
'\\nwhile (<>) {\\n    chomp;\\n}\\n'

The function is pure and performs no I/O.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

MAX_INDENT = 99

_LEADING_WS = re.compile(r"\s*")


def is_blank(line: str) -> bool:
    """Return ``True`` for empty or whitespace-only lines."""

    return not line or line.isspace()


def indent_width(line: str) -> int:
    """Return the number of leading whitespace characters of ``line``."""

    match = _LEADING_WS.match(line)
    return match.end() if match else 0


def min_indent_width(lines: Iterable[str]) -> int:
    """Return the smallest indentation among the non-blank ``lines``.

    The result never exceeds :data:`MAX_INDENT`, which is also returned when
    every line is blank.
    """

    widths = (indent_width(line) for line in lines if not is_blank(line))
    return min(MAX_INDENT, min(widths, default=MAX_INDENT))


def _strip_indent(line: str, width: int) -> str:
    cut = min(width, indent_width(line))
    if cut == len(line) and line.endswith("\r"):
        # CR of a CRLF break on a blank line
        cut -= 1
    return line[cut:]


def normalize_indent(text: str, squash_blank_lines: bool = False) -> str:
    """Remove the indentation shared by the lines of ``text``.

    Parameters
    ----------
    text:
        Raw text found inside a preformatted block, newlines included.
    squash_blank_lines:
        Reduce whitespace-only lines to empty strings after de-indenting.

    Returns
    -------
    str
        The de-indented text with the same number of lines.
    """

    lines = text.split("\n")
    if any(not is_blank(line) for line in lines):
        width = min_indent_width(lines)
        if width:
            lines = [_strip_indent(line, width) for line in lines]

    if squash_blank_lines:
        lines = ["" if is_blank(line) else line for line in lines]

    return "\n".join(lines)


__all__ = [
    "MAX_INDENT",
    "is_blank",
    "indent_width",
    "min_indent_width",
    "normalize_indent",
]
