# src/tweets/dependencies.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_async_session
from src.pagination import LookaheadMode, Paginator
from .config import pagination_settings
from .service import TweetStore


def build_tweet_paginator(db: AsyncSession) -> Paginator:
    return Paginator(
        TweetStore(db),
        default_page_size=pagination_settings.DEFAULT_PAGE_SIZE,
        max_page_size=pagination_settings.MAX_PAGE_SIZE,
        lookahead=LookaheadMode(pagination_settings.PAGINATION_LOOKAHEAD),
    )


async def get_tweet_paginator(db: AsyncSession = Depends(get_async_session)) -> Paginator:
    return build_tweet_paginator(db)
