# src/tweets/resolvers.py
import logging

from graphql import GraphQLError
from strawberry.types import Info

from src.context import GraphQLContext
from src.exception import PaginationError
from .types import TweetConnection

logger = logging.getLogger(__name__)


async def resolve_tweets(
    info: Info[GraphQLContext, None],
    first: int | None = None,
    after: int | None = None,
) -> TweetConnection:
    try:
        page = await info.context.paginator.fetch_page(first, after)
    except PaginationError as exc:
        # Store failures are logged where they happen.
        if exc.status_code < 500:
            logger.info("tweets query rejected: %s", exc.message)
        raise GraphQLError(exc.message, extensions={"code": exc.code}) from exc
    return TweetConnection.from_page(page)
