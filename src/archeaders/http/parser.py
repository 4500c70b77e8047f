"""src/archeaders/http/parser.py

Header block text parser for ArcHeaders.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from archeaders.exceptions import HeaderSizeError, MalformedHeaderError

__all__ = ["HeaderParser"]

logger = logging.getLogger("archeaders.parser")


class HeaderParser:
    """
    Lenient parser for "name: value" header blocks.

    Handles:
    - LF and CRLF line endings.
    - Surrounding whitespace on every line.
    - Folded (continuation) lines, when fold is enabled.
    - Lines without a colon (empty value, or an error in strict mode).
    - Defensive sizing.
    """

    def __init__(
        self,
        max_header_size: Optional[int] = None,
        strict: bool = False,
        fold: bool = False,
    ):
        self.max_header_size = max_header_size
        self.strict = strict
        self.fold = fold

    def parse(self, text: str) -> List[Tuple[str, str]]:
        """
        Parse a header block into (name, value) pairs.

        Duplicate names are returned as separate pairs, in order.

        Raises:
            HeaderSizeError: If the text exceeds max_header_size.
            MalformedHeaderError: If strict and a line has no colon.
        """
        return list(self.iter_headers(text))

    def iter_headers(self, text: str) -> Iterator[Tuple[str, str]]:
        """Lazily yield (name, value) pairs from a header block."""
        if self.max_header_size is not None and len(text) > self.max_header_size:
            raise HeaderSizeError(
                f"Headers exceed maximum size of {self.max_header_size} characters"
            )

        lines = text.split("\n")
        logical = self._unfold(lines) if self.fold else self._strip(lines)

        for line in logical:
            name, value = self._parse_line(line)
            if not name:
                if self.strict:
                    raise MalformedHeaderError(f"Empty header name: {line!r}")
                logger.debug("Skipping header line without name: %r", line)
                continue
            yield name, value

    def _strip(self, lines: List[str]) -> Iterator[str]:
        """Yield each stripped, non-empty line on its own."""
        for raw in lines:
            line = raw.strip()
            if line:
                yield line

    def _unfold(self, lines: List[str]) -> Iterator[str]:
        """
        Join continuation lines onto the header they belong to.
        Yields stripped, non-empty logical lines.
        """
        current: Optional[str] = None

        for raw in lines:
            raw = raw.rstrip("\r")

            if raw[:1] in (" ", "\t"):
                folded = raw.strip()
                if current is None:
                    logger.debug("Dropping continuation without header: %r", raw)
                    continue
                if folded:
                    current = f"{current} {folded}"
                continue

            if current is not None:
                yield current

            line = raw.strip()
            current = line if line else None

        if current is not None:
            yield current

    def _parse_line(self, line: str) -> Tuple[str, str]:
        if ":" not in line:
            if self.strict:
                raise MalformedHeaderError(f"Missing ':' in header line: {line!r}")
            logger.debug("Header line without value: %r", line)
            return line, ""

        name, value = line.split(":", 1)
        return name.rstrip(), value.strip()
