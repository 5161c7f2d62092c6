# src/tweets/service.py
import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.exception import InvalidCursor, StoreUnavailable
from src.pagination import ScanCursor
from .models import Tweet

logger = logging.getLogger(__name__)


class TweetStore:
    """Ordered scan over the tweets table, ascending by id."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def scan(self, cursor: ScanCursor | None, limit: int) -> Sequence[Tweet]:
        query = select(Tweet).options(selectinload(Tweet.user)).order_by(Tweet.id)

        if cursor is None:
            return await self._execute(query.limit(limit))

        # The scan is anchored on the cursor record itself, which must exist.
        tweets = await self._execute(
            query.where(Tweet.id >= cursor.position).limit(limit + cursor.skip)
        )
        if not tweets or tweets[0].id != cursor.position:
            raise InvalidCursor(f"No tweet found for cursor {cursor.position}")
        return tweets[cursor.skip:]

    async def _execute(self, query) -> Sequence[Tweet]:
        try:
            result = await self.db.execute(query)
        except (DBAPIError, OSError) as exc:
            logger.exception("Tweet store query failed")
            raise StoreUnavailable("The tweet store is unavailable") from exc
        return result.scalars().all()
