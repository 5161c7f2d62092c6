# src/pagination.py
"""Forward cursor pagination over an ordered record store.

The store only knows how to return "N records starting at/after position P",
so whether another page exists is answered with a second, lookahead scan
from the last record of the current page.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence

from src.exception import InvalidCursor, InvalidPageSize

logger = logging.getLogger(__name__)

# Identifiers and limits are bound as signed 64-bit integers.
MIN_IDENTIFIER = -(2**63)
MAX_IDENTIFIER = 2**63 - 1


@dataclass(frozen=True)
class ScanCursor:
    """Position the scan at the record whose id is `position`, then skip `skip` records."""

    position: int
    skip: int = 0


class RecordStore(Protocol):
    async def scan(self, cursor: ScanCursor | None, limit: int) -> Sequence[Any]:
        """Return up to `limit` records ordered by ascending id."""
        ...


@dataclass(frozen=True)
class Edge:
    cursor: str
    node: Any


@dataclass(frozen=True)
class PageInfo:
    end_cursor: str = ""
    has_next_page: bool = False


@dataclass(frozen=True)
class Page:
    page_info: PageInfo = field(default_factory=PageInfo)
    edges: tuple[Edge, ...] = ()


class LookaheadMode(str, enum.Enum):
    # Lookahead starts AT the last record, so that record counts towards
    # the page size. A page ending one short of a full page after it reports
    # has_next_page=False even though records remain.
    INCLUSIVE = "inclusive"
    # Corrected variant: look one record past the last record.
    EXCLUSIVE = "exclusive"


class Paginator:
    def __init__(
        self,
        store: RecordStore,
        default_page_size: int = 10,
        max_page_size: int | None = None,
        lookahead: LookaheadMode = LookaheadMode.INCLUSIVE,
    ):
        self.store = store
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size
        self.lookahead = LookaheadMode(lookahead)

    def resolve_page_size(self, page_size: int | None) -> int:
        if page_size is None:
            page_size = self.default_page_size
        if page_size < 1:
            raise InvalidPageSize(f"Page size must be a positive integer, got {page_size}")
        if self.max_page_size is not None and page_size > self.max_page_size:
            raise InvalidPageSize(
                f"Page size {page_size} exceeds the maximum of {self.max_page_size}"
            )
        # The store adds the boundary skip to the limit.
        if page_size > MAX_IDENTIFIER - 1:
            raise InvalidPageSize(f"Page size {page_size} is too large")
        return page_size

    async def fetch_page(self, page_size: int | None = None, after_cursor: int | None = None) -> Page:
        size = self.resolve_page_size(page_size)
        if after_cursor is not None and not MIN_IDENTIFIER <= after_cursor <= MAX_IDENTIFIER:
            raise InvalidCursor(f"Cursor {after_cursor} is out of range")

        if after_cursor is None:
            records = await self.store.scan(None, size)
        else:
            records = await self.store.scan(ScanCursor(position=after_cursor, skip=1), size)

        if not records:
            logger.debug("Empty page for size=%s after=%s", size, after_cursor)
            return Page()

        last_id = records[-1].id
        has_next_page = await self._has_next_page(last_id, size)

        logger.debug(
            "Fetched %d records after=%s end_cursor=%s has_next_page=%s",
            len(records), after_cursor, last_id, has_next_page,
        )
        return Page(
            page_info=PageInfo(end_cursor=str(last_id), has_next_page=has_next_page),
            edges=tuple(Edge(cursor=str(record.id), node=record) for record in records),
        )

    async def _has_next_page(self, last_id: int, size: int) -> bool:
        if self.lookahead is LookaheadMode.EXCLUSIVE:
            following = await self.store.scan(ScanCursor(position=last_id, skip=1), 1)
            return len(following) > 0

        following = await self.store.scan(ScanCursor(position=last_id), size)
        return len(following) >= size
