"""Events produced by the streaming HTML scanner.

Every event carries the exact source text it was produced from, so that
joining the ``source`` of all events of a document reproduces the document
byte for byte.  Tag names are lower-cased; the raw text is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class TagOpen:
    """A start tag such as ``<pre class="code">``."""

    name: str
    raw: str

    @property
    def source(self) -> str:
        return self.raw


@dataclass(slots=True, frozen=True)
class TagClose:
    """An end tag such as ``</pre>``."""

    name: str
    raw: str

    @property
    def source(self) -> str:
        return self.raw


@dataclass(slots=True, frozen=True)
class Text:
    """One unbroken run of character data.

    Entity and character references are kept in their undecoded form and are
    part of the surrounding run.
    """

    content: str

    @property
    def source(self) -> str:
        return self.content


@dataclass(slots=True, frozen=True)
class Other:
    """Comments, declarations, processing instructions and marked sections."""

    raw: str

    @property
    def source(self) -> str:
        return self.raw


HtmlEvent = Union[TagOpen, TagClose, Text, Other]

__all__ = ["TagOpen", "TagClose", "Text", "Other", "HtmlEvent"]
