"""src/archeaders/http/headers.py

Case-insensitive, multi-value HTTP header collection for ArcHeaders.
"""

import logging
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from archeaders.exceptions import InvalidInputKind
from archeaders.http.parser import HeaderParser

__all__ = ["Headers", "HeaderEntry", "HeadersInput"]

logger = logging.getLogger("archeaders.headers")

HeadersInput = Union[
    str, "Headers", Mapping[str, Any], Iterable[Tuple[str, Any]], None
]


class HeaderEntry:
    """Display name and (possibly comma-joined) value of one header."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"HeaderEntry({self.name!r}, {self.value!r})"


class Headers:
    """
    Case-insensitive collection of HTTP headers.

    Lookup uses the lowercased name; the name is displayed the way it was
    first appended (or last set). Appending an existing header joins the
    values with a comma, without a space: ``"a,b"``.

    Iterating yields ``(name, value)`` pairs in first-insertion order.
    Mutating the collection while iterating is undefined behavior.

    Example::

        headers = Headers("Content-Type: text/html\\nAccept: */*")
        headers.append("accept", "text/plain")
        headers.get("ACCEPT")  # "*/*,text/plain"
        str(headers)  # "Content-Type: text/html\\nAccept: */*,text/plain"
    """

    __slots__ = ("_map",)

    def __init__(self, headers: HeadersInput = None):
        self._map: Dict[str, HeaderEntry] = {}
        if headers is not None:
            self.update(headers)

    @classmethod
    def from_string(
        cls, text: str, parser: Optional[HeaderParser] = None
    ) -> "Headers":
        """
        Build headers from a raw header block using a configured parser.

        Args:
            text: Header block, one "name: value" per line.
            parser: Parser to use. Defaults to a lenient HeaderParser.

        Raises:
            HeaderParseError: If the parser rejects the text.
        """
        if parser is None:
            parser = HeaderParser()

        headers = cls()
        for name, value in parser.iter_headers(text):
            headers.append(name, value)
        return headers

    def update(self, headers: HeadersInput) -> None:
        """
        Append every header of ``headers`` to this collection.

        Accepts the same inputs as the constructor.

        Raises:
            InvalidInputKind: If ``headers`` is not a supported input.
        """
        if headers is None:
            return

        if isinstance(headers, str):
            for name, value in HeaderParser().iter_headers(headers):
                self.append(name, value)
        elif isinstance(headers, Headers):
            for name, value in list(headers.entries()):
                self.append(name, value)
        elif isinstance(headers, Mapping):
            for name, value in headers.items():
                self.append(name, value)
        elif isinstance(headers, (bytes, bytearray)) or not isinstance(
            headers, Iterable
        ):
            logger.debug("Rejected headers input of type %s", type(headers).__name__)
            raise InvalidInputKind(
                f"Unsupported headers input: {type(headers).__name__}"
            )
        else:
            for pair in headers:
                name, value = self._unpack_pair(pair)
                self.append(name, value)

    @staticmethod
    def _unpack_pair(pair: Any) -> Tuple[Any, Any]:
        if isinstance(pair, (str, bytes, Mapping)):
            raise InvalidInputKind(f"Expected a (name, value) pair, got {pair!r}")
        try:
            name, value = pair
        except (TypeError, ValueError) as exc:
            raise InvalidInputKind(
                f"Expected a (name, value) pair, got {pair!r}"
            ) from exc
        return name, value

    def append(self, name: str, value: Any) -> None:
        """Add a value, comma-joining it to an existing header."""
        name = str(name)
        value = str(value)
        entry = self._map.get(name.lower())
        if entry is None:
            self._map[name.lower()] = HeaderEntry(name, value)
        else:
            entry.value = f"{entry.value},{value}"

    def set(self, name: str, value: Any) -> None:
        """Replace a header's value and display name."""
        name = str(name)
        self._map[name.lower()] = HeaderEntry(name, str(value))

    def delete(self, name: str) -> None:
        """Remove a header. Missing headers are ignored."""
        self._map.pop(str(name).lower(), None)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get header value.

        Args:
            name: Header name (case-insensitive).
            default: Value returned when the header is missing.

        Returns:
            The stored value (comma-joined if appended more than once),
            or default if not found.
        """
        entry = self._map.get(str(name).lower())
        if entry is None:
            return default
        return entry.value

    def has(self, name: str) -> bool:
        """Whether a header exists (case-insensitive)."""
        return str(name).lower() in self._map

    def for_each(self, callback: Callable[[str, str, "Headers"], Any]) -> None:
        """Call ``callback(value, name, headers)`` for every header in order."""
        for entry in self._map.values():
            callback(entry.value, entry.name, self)

    def keys(self) -> Iterator[str]:
        """Yield header names as they are displayed."""
        for entry in self._map.values():
            yield entry.name

    def values(self) -> Iterator[str]:
        """Yield header values."""
        for entry in self._map.values():
            yield entry.value

    def entries(self) -> Iterator[Tuple[str, str]]:
        """Yield (name, value) pairs."""
        for entry in self._map.values():
            yield entry.name, entry.value

    def copy(self) -> "Headers":
        return Headers(self)

    def clear(self) -> None:
        self._map.clear()

    def to_string(self) -> str:
        """Render headers as "name: value" lines joined by newlines."""
        return "\n".join(f"{name}: {value}" for name, value in self.entries())

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.has(name)

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.delete(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return list(self.entries()) == list(other.entries())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Headers({list(self.entries())!r})"
