# src/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Gauge
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.base import BaseHTTPMiddleware

from src.api import api_router
from src.config import settings
from src.tweets import models as tweet_models  # noqa
from src.users import models as user_models  # noqa

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.PROJECT_NAME)

Instrumentator().instrument(app).expose(
    app,
    endpoint="/metrics",
    include_in_schema=False,
)

# Track in-flight requests (concurrency)
INPROGRESS = Gauge("inprogress_requests", "In-progress HTTP requests")


class InflightMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        INPROGRESS.inc()
        try:
            response = await call_next(request)
            return response
        finally:
            INPROGRESS.dec()


# Add early so it wraps all following middlewares/routers
app.add_middleware(InflightMiddleware)

app.include_router(api_router)

origins = settings.CORS_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


@app.get("/")
async def read_root():
    return {"msg": "Welcome to the Tweet Feed API!"}


@app.get("/health-check")
async def health_check():
    return {"status": "healthy"}
