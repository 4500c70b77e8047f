"""src/archeaders/exceptions.py

ArcHeaders Exceptions hierarchy.
"""


class ArcHeadersError(Exception):
    """Base exception for all ArcHeaders errors."""


class InvalidInputKind(ArcHeadersError, TypeError):
    """
    Headers were constructed (or updated) from an unsupported input.

    Accepted inputs are None, a header block string, another Headers,
    a mapping, or an iterable of (name, value) pairs.
    """

    def __init__(self, message: str = "Unsupported headers input"):
        super().__init__(message)


class HeaderParseError(ArcHeadersError, ValueError):
    """
    Errors related to parsing a raw header block.
    """


class MalformedHeaderError(HeaderParseError):
    """A header line has no name/value separator (strict parsing only)."""


class HeaderSizeError(HeaderParseError):
    """Header block is larger than the configured maximum size."""
