"""De-indentation of preformatted blocks."""

from .normalizer import MAX_INDENT, indent_width, is_blank, min_indent_width, normalize_indent
from .reformatter import PodCodeReformatter, reformat_pre

__all__ = [
    "MAX_INDENT",
    "indent_width",
    "is_blank",
    "min_indent_width",
    "normalize_indent",
    "PodCodeReformatter",
    "reformat_pre",
]
