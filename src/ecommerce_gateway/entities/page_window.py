"""Pagination window domain entity."""

from dataclasses import dataclass

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageWindow:
    """Offset/limit window and free-text filter for list operations.

    Attributes:
        offset: Number of records to skip (non-negative)
        limit: Maximum number of records to return (non-negative)
        search: Free-text filter, empty string for none
    """

    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT
    search: str = ""

    def __post_init__(self) -> None:
        if self.offset < 0 or self.limit < 0:
            raise ValueError("offset and limit must be non-negative")
