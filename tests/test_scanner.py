"""Tests for the streaming HTML scanner."""

from __future__ import annotations

import io

import pytest

from podreformat.parse import Other, TagClose, TagOpen, Text, iter_events, scan
from podreformat.parse.scanner import _EventCollector

DOCUMENT = (
    "<!DOCTYPE html>\n"
    "<?xml-stylesheet href=\"pod.css\"?>\n"
    "<!-- HTML produced by a Pod transformer -->\n"
    "<HTML>\n"
    "<h1 id=\"SYNOPSIS\">SYNOPSIS</h1>\n"
    "<pre class=\"code\">\n"
    "    if ($a &lt; $b &amp;&amp; $c &#62; 0) {\n"
    "        print;\n"
    "    }\n"
    "</pre >\n"
    "<p>a < b<br/>&copy 2011</p>\n"
    "<script>if (a<b) { x = '</p>'; }</script>\n"
    "</HTML>\n"
)


def _source(events: list) -> str:
    return "".join(event.source for event in events)


def test_events_reproduce_document() -> None:
    assert _source(list(scan(DOCUMENT))) == DOCUMENT


@pytest.mark.parametrize("read_size", [1, 2, 7, 64])
def test_read_boundaries_do_not_change_events(read_size: int) -> None:
    expected = list(scan(DOCUMENT))
    events = list(iter_events(io.StringIO(DOCUMENT), read_size=read_size))
    assert events == expected


def test_block_events() -> None:
    events = list(scan('<pre class="x">\n  a &amp; b\n</pre>'))
    assert events == [
        TagOpen("pre", '<pre class="x">'),
        Text("\n  a &amp; b\n"),
        TagClose("pre", "</pre>"),
    ]


def test_text_run_is_unbroken_across_references() -> None:
    events = list(scan("<pre>a &lt; b &#62; c &#x41; d</pre>"))
    texts = [e for e in events if isinstance(e, Text)]
    assert texts == [Text("a &lt; b &#62; c &#x41; d")]


def test_tag_names_lower_cased_raw_kept() -> None:
    events = list(scan("<PRE>x</Pre>"))
    assert events[0] == TagOpen("pre", "<PRE>")
    assert events[-1] == TagClose("pre", "</Pre>")


def test_self_closing_syntax_is_an_open_tag() -> None:
    events = list(scan("a<br/>b"))
    assert events == [Text("a"), TagOpen("br", "<br/>"), Text("b")]


def test_markup_other_than_tags() -> None:
    events = list(scan("<!DOCTYPE html><!-- note --><?pi data?>"))
    assert events == [
        Other("<!DOCTYPE html>"),
        Other("<!-- note -->"),
        Other("<?pi data?>"),
    ]


def test_stray_less_than_is_text() -> None:
    assert list(scan("a < b")) == [Text("a < b")]
    assert list(scan("tail <")) == [Text("tail <")]


def test_unterminated_script_is_kept() -> None:
    html = "<p>x</p><script>var a = 1;"
    events = list(scan(html))
    assert _source(events) == html
    assert isinstance(events[-1], Text)


def test_binary_stream_decoded_incrementally() -> None:
    raw = "\ufeff<pre>\n  café\n</pre>".encode("utf-8")
    events = list(iter_events(io.BytesIO(raw), read_size=1))
    assert events == [
        TagOpen("pre", "<pre>"),
        Text("\n  café\n"),
        TagClose("pre", "</pre>"),
    ]


def test_empty_input() -> None:
    assert list(scan("")) == []


def test_invalid_read_size() -> None:
    with pytest.raises(ValueError):
        list(iter_events(io.StringIO("x"), read_size=0))


@pytest.mark.parametrize(
    ("markup", "event"),
    [
        ("<a href='#x'>", TagOpen("a", "<a href='#x'>")),
        ("</a >", TagClose("a", "</a >")),
        ("<hr/>", TagOpen("hr", "<hr/>")),
        ("<!-- c -->", Other("<!-- c -->")),
        ("<!DOCTYPE html>", Other("<!DOCTYPE html>")),
        ("<?pi x?>", Other("<?pi x?>")),
    ],
)
def test_every_handler_is_followed_by_its_span(markup: str, event: object) -> None:
    collector = _EventCollector()
    collector.feed(f"x{markup}y")
    assert collector._pending is None
    collector.finish()
    assert list(collector.events) == [Text("x"), event, Text("y")]


@pytest.mark.parametrize("reference", ["&amp;", "&#62;", "&#x3E;"])
def test_reference_handlers_feed_text(reference: str) -> None:
    collector = _EventCollector()
    collector.feed(f"x{reference}y")
    collector.finish()
    assert collector._pending is None
    assert list(collector.events) == [Text(f"x{reference}y")]
