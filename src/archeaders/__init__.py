"""src/archeaders/__init__.py

ArcHeaders - Case-insensitive, multi-value HTTP header collection for Python.

ArcHeaders is a zero-dependency library built entirely on Python's standard
library. It parses header blocks, mappings and lists of pairs into one
collection that keeps the original header casing for display.

Key Features:
    - Case-insensitive lookup, case-preserving output
    - Duplicate headers merged with a comma ("a,b")
    - Insertion-ordered, generator-based iteration
    - Round-trip stable string rendering
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Basic usage::

        from archeaders import Headers

        headers = Headers("Content-Type: text/html\\nX-Trace: a")
        headers.append("x-trace", "b")
        headers.get("X-TRACE")  # "a,b"

        for name, value in headers:
            print(name, value)

    Strict parsing::

        from archeaders import HeaderParser, Headers

        parser = HeaderParser(max_header_size=8192, strict=True)
        headers = Headers.from_string(raw_text, parser=parser)
"""

from archeaders.exceptions import (
    ArcHeadersError,
    HeaderParseError,
    HeaderSizeError,
    InvalidInputKind,
    MalformedHeaderError,
)
from archeaders.http.headers import HeaderEntry, Headers
from archeaders.http.parser import HeaderParser
from archeaders.version import __version__

__all__ = [
    "Headers",
    "HeaderEntry",
    "HeaderParser",
    "ArcHeadersError",
    "InvalidInputKind",
    "HeaderParseError",
    "MalformedHeaderError",
    "HeaderSizeError",
    "__version__",
]
