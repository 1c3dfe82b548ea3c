"""Streaming HTML tokenization into pass-through events."""

from .events import HtmlEvent, Other, TagClose, TagOpen, Text
from .scanner import DEFAULT_READ_SIZE, iter_events, scan

__all__ = [
    "HtmlEvent",
    "TagOpen",
    "TagClose",
    "Text",
    "Other",
    "DEFAULT_READ_SIZE",
    "iter_events",
    "scan",
]
