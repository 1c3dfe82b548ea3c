"""Removal of extra leading spaces from code blocks in HTML rendered from Pod.

Pod to HTML transformers keep the indentation of verbatim paragraphs, so code
blocks come out as ``<pre>`` elements whose lines all start with the same
handful of spaces.  :class:`PodCodeReformatter` walks the document once,
passes every tag, comment and declaration through untouched and shifts the
text of each ``<pre>`` block to the left by its own shared indentation (see
:func:`~podreformat.reformat.normalizer.normalize_indent`).

Nesting is tracked with a depth counter rather than a flag: text between an
inner ``<pre>`` and its end tag is still inside a block.  Unbalanced end tags
drive the counter negative; this is tolerated, as no validation of the
document structure is performed.

Example
-------

>>> PodCodeReformatter().reformat_text("<pre>\\n    a\\n    b\\n</pre>")
'<pre>\\na\\nb\\n</pre>'
"""

from __future__ import annotations

import io
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING, Any

from ..io.readers.html_reader import open_html
from ..parse.events import HtmlEvent, TagClose, TagOpen, Text
from ..parse.scanner import DEFAULT_READ_SIZE, iter_events
from ..utils.errors import InvalidInputTypeError
from ..utils.logging import get_logger
from .normalizer import normalize_indent

if TYPE_CHECKING:
    from ..config.schema import ConfigModel

logger = get_logger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview)


@dataclass(slots=True)
class _Session:
    """State of a single :meth:`PodCodeReformatter.reformat_pre` call."""

    output: list[str] = field(default_factory=list)
    depth: int = 0
    blocks: int = 0


class PodCodeReformatter:
    """De-indent the preformatted blocks of HTML documents.

    Parameters
    ----------
    squash_blank_lines:
        When true, lines of a block made only of whitespace become empty
        strings (the newline is left untouched).  Otherwise they are treated
        like any other line and only lose the shared indentation.
    tag:
        Name of the element whose text is reformatted.
    read_size:
        Characters requested per read from streams and files.
    encoding:
        Codec for paths, binary streams and byte buffers.
    """

    def __init__(
        self,
        squash_blank_lines: bool = False,
        *,
        tag: str = "pre",
        read_size: int = DEFAULT_READ_SIZE,
        encoding: str = "utf-8-sig",
    ) -> None:
        self._squash_blank_lines = bool(squash_blank_lines)
        self._tag = tag.lower()
        self._read_size = read_size
        self._encoding = encoding

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> "PodCodeReformatter":
        """Build a reformatter from a loaded :class:`ConfigModel`."""

        return cls(
            cfg.reformat.squash_blank_lines,
            tag=cfg.reformat.tag,
            read_size=cfg.io.read_size,
            encoding=cfg.io.encoding_in,
        )

    @property
    def squash_blank_lines(self) -> bool:
        return self._squash_blank_lines

    @property
    def tag(self) -> str:
        return self._tag

    def reformat_pre(self, source: Any) -> str:
        """Return the document read from ``source`` with its blocks de-indented.

        ``source`` may be a file name (``str`` or path-like object), an already
        opened text or binary stream, or a ``bytes``-like buffer holding the
        document.  Files opened here are closed on every exit path; streams
        supplied by the caller are read to the end but left open.

        Raises
        ------
        InvalidInputTypeError
            If ``source`` is of none of the accepted forms.
        OSError
            If the file cannot be opened or read.  No partial output is
            returned.
        """

        session = _Session()
        with self._open(source) as stream:
            for event in iter_events(stream, read_size=self._read_size, encoding=self._encoding):
                self._dispatch(session, event)
        logger.debug(
            "reformatted %d <%s> block(s), final depth %d",
            session.blocks,
            self._tag,
            session.depth,
        )
        return "".join(session.output)

    def reformat_text(self, html: str) -> str:
        """Return ``html`` with its blocks de-indented."""

        return self.reformat_pre(io.StringIO(html))

    @contextmanager
    def _open(self, source: Any) -> Iterator[IO[Any]]:
        if isinstance(source, (str, os.PathLike)):
            with open_html(source, encoding=self._encoding) as f:
                yield f
        elif isinstance(source, _BUFFER_TYPES):
            yield io.StringIO(bytes(source).decode(self._encoding))
        elif callable(getattr(source, "read", None)):
            yield source
        else:
            raise InvalidInputTypeError(f"Wrong input type: {source!r}")

    def _dispatch(self, session: _Session, event: HtmlEvent) -> None:
        if isinstance(event, Text):
            text = event.content
            if session.depth > 0:
                text = normalize_indent(text, self._squash_blank_lines)
            session.output.append(text)
            return
        if isinstance(event, TagOpen) and event.name == self._tag:
            session.depth += 1
            session.blocks += 1
        elif isinstance(event, TagClose) and event.name == self._tag:
            session.depth -= 1
        session.output.append(event.source)


def reformat_pre(
    source: Any,
    *,
    squash_blank_lines: bool = False,
    tag: str = "pre",
) -> str:
    """Shortcut for ``PodCodeReformatter(...).reformat_pre(source)``."""

    return PodCodeReformatter(squash_blank_lines, tag=tag).reformat_pre(source)


__all__ = ["PodCodeReformatter", "reformat_pre"]
