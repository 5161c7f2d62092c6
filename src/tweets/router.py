# src/tweets/router.py
from fastapi import APIRouter, Depends, Query

from src.exception import PaginationError, to_http_exception
from src.pagination import Paginator
from .dependencies import get_tweet_paginator
from .schemas import TweetPageResponse

router = APIRouter()


@router.get("", response_model=TweetPageResponse)
async def list_tweets(first: int | None = Query(None), after: int | None = Query(None),
                      paginator: Paginator = Depends(get_tweet_paginator)):
    try:
        page = await paginator.fetch_page(first, after)
    except PaginationError as exc:
        raise to_http_exception(exc) from exc
    return TweetPageResponse.model_validate(page)
