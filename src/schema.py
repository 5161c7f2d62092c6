# src/schema.py
import strawberry
from strawberry.fastapi import GraphQLRouter

from src.context import get_graphql_context
from src.tweets.resolvers import resolve_tweets
from src.tweets.types import TweetConnection


@strawberry.type
class Query:
    tweets: TweetConnection = strawberry.field(resolver=resolve_tweets)


schema = strawberry.Schema(query=Query)

graphql_router = GraphQLRouter(schema, context_getter=get_graphql_context)
