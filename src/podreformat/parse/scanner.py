"""Streaming HTML scanner.

The scanner turns an HTML character stream into a lazy sequence of
:mod:`~podreformat.parse.events`.  It is built on :class:`html.parser.HTMLParser`
running with ``convert_charrefs=False`` so that nothing is decoded or
rewritten: every span of source the parser consumes is attributed to the
handler that fired for it and re-emitted verbatim.

Text guarantees
---------------
``HTMLParser`` reports character data in pieces: entity references split it,
and so do the boundaries between :meth:`~html.parser.HTMLParser.feed` calls.
The scanner coalesces adjacent pieces and emits a single :class:`Text` event
only once the next non-text token (or the end of input) is reached, so a
consumer always sees each text run as one chunk.

Source the parser never consumes (an unterminated ``<script>`` body at end of
input, for instance) is emitted as text when the stream is exhausted.
"""

from __future__ import annotations

import codecs
import io
from collections import deque
from collections.abc import Iterator
from html.parser import HTMLParser
from typing import IO, AnyStr

from .events import HtmlEvent, Other, TagClose, TagOpen, Text

DEFAULT_READ_SIZE = 64 * 1024

_TEXT = "text"
_OPEN = "open"
_CLOSE = "close"
_OTHER = "other"


class _EventCollector(HTMLParser):
    """``HTMLParser`` that queues :data:`HtmlEvent` objects instead of dispatching."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.events: deque[HtmlEvent] = deque()
        self._pending: tuple[str, str] | None = None
        self._text: list[str] = []

    # Handlers only record what kind of token is being consumed; the event is
    # emitted from ``updatepos`` once the exact source span is known.

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._pending = (_OPEN, tag)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # ``<pre/>`` opens a block like ``<pre>`` does.
        self._pending = (_OPEN, tag)

    def handle_endtag(self, tag: str) -> None:
        self._pending = (_CLOSE, tag)

    def handle_data(self, data: str) -> None:
        self._pending = (_TEXT, "")

    def handle_entityref(self, name: str) -> None:
        self._pending = (_TEXT, "")

    def handle_charref(self, name: str) -> None:
        self._pending = (_TEXT, "")

    def handle_comment(self, data: str) -> None:
        self._pending = (_OTHER, "")

    def handle_decl(self, decl: str) -> None:
        self._pending = (_OTHER, "")

    def handle_pi(self, data: str) -> None:
        self._pending = (_OTHER, "")

    def unknown_decl(self, data: str) -> None:
        self._pending = (_OTHER, "")

    # ``updatepos`` is the private ``_markupbase.ParserBase`` hook that
    # ``HTMLParser.goahead`` calls after every handler with the consumed span.
    def updatepos(self, i: int, j: int) -> int:
        if i < j:
            self._emit(self.rawdata[i:j])
        return super().updatepos(i, j)

    def _emit(self, raw: str) -> None:
        kind, name = self._pending or (_TEXT, "")
        self._pending = None
        if kind == _TEXT:
            self._text.append(raw)
            return
        self.flush_text()
        if kind == _OPEN:
            self.events.append(TagOpen(name, raw))
        elif kind == _CLOSE:
            self.events.append(TagClose(name, raw))
        else:
            self.events.append(Other(raw))

    def flush_text(self) -> None:
        if self._text:
            self.events.append(Text("".join(self._text)))
            self._text.clear()

    def finish(self) -> None:
        """Process buffered input as end of document."""

        self.close()
        if self.rawdata:
            self._text.append(self.rawdata)
            self.rawdata = ""
        self.flush_text()


def _read_chunks(stream: IO[AnyStr], read_size: int, encoding: str) -> Iterator[str]:
    decoder = None
    while True:
        chunk = stream.read(read_size)
        if not chunk:
            break
        if isinstance(chunk, str):
            yield chunk
            continue
        if decoder is None:
            decoder = codecs.getincrementaldecoder(encoding)()
        text = decoder.decode(chunk)
        if text:
            yield text
    if decoder is not None:
        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail


def iter_events(
    stream: IO[AnyStr],
    *,
    read_size: int = DEFAULT_READ_SIZE,
    encoding: str = "utf-8-sig",
) -> Iterator[HtmlEvent]:
    """Yield the events of the HTML document read from ``stream``.

    Parameters
    ----------
    stream:
        Readable text or binary stream.  Binary input is decoded incrementally
        with ``encoding``.  The stream is read to exhaustion but not closed.
    read_size:
        Maximum number of characters (or bytes) requested per read.
    encoding:
        Codec used for binary streams only.

    Notes
    -----
    The generator is restartable per call: every invocation owns a fresh
    parser.  Joining the ``source`` of the yielded events reproduces the
    decoded input exactly.
    """

    if read_size < 1:
        raise ValueError("read_size must be a positive integer")
    collector = _EventCollector()
    for text in _read_chunks(stream, read_size, encoding):
        collector.feed(text)
        while collector.events:
            yield collector.events.popleft()
    collector.finish()
    while collector.events:
        yield collector.events.popleft()


def scan(html: str) -> Iterator[HtmlEvent]:
    """Yield the events of an in-memory HTML string."""

    return iter_events(io.StringIO(html))


__all__ = ["DEFAULT_READ_SIZE", "iter_events", "scan"]
