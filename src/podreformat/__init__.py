"""Remove extra leading spaces from code blocks in HTML rendered from Pod.

>>> from podreformat import PodCodeReformatter
>>> PodCodeReformatter().reformat_pre("page.html")  # doctest: +SKIP
"""

from .reformat import PodCodeReformatter, normalize_indent, reformat_pre
from .utils.errors import InvalidInputTypeError, ReformatError

__version__ = "0.1.0"

__all__ = [
    "PodCodeReformatter",
    "reformat_pre",
    "normalize_indent",
    "InvalidInputTypeError",
    "ReformatError",
    "__version__",
]
