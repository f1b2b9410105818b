"""Error type and byte ranges relative to a parsed document."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """A span of bytes in the document."""

    offset: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        """Offset just past the last byte of the span."""
        return self.offset + self.length


class ParserError(Exception):
    """Error in the content of a document, pointing at the offending bytes."""

    def __init__(
        self,
        message: str,
        highlight: Range | None = None,
        key: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.highlight = highlight if highlight is not None else Range()
        self.key = key

    def __str__(self) -> str:
        return self.message