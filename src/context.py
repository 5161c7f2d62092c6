# src/context.py
from dataclasses import dataclass, field

from fastapi import BackgroundTasks, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from src.database import get_async_session
from src.pagination import Paginator
from src.tweets.dependencies import build_tweet_paginator


@dataclass
class GraphQLContext(BaseContext):
    """Request-scoped GraphQL context: one paginator, bound to the request's session."""

    request: Request | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    paginator: Paginator = field(default=None)  # type: ignore[assignment]


async def get_graphql_context(db: AsyncSession = Depends(get_async_session)) -> GraphQLContext:
    return GraphQLContext(paginator=build_tweet_paginator(db))
