# src/api.py
from fastapi import APIRouter

from src.schema import graphql_router
from src.tweets.router import router as tweets_router

api_router = APIRouter()
api_router.include_router(tweets_router, prefix="/tweets", tags=["tweets"])
api_router.include_router(graphql_router, prefix="/graphql", tags=["graphql"])
