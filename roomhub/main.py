"""FastAPI application and app configuration for RoomHub.

This module creates the FastAPI `app`, configures middleware (CORS, rate limiting),
registers the routers and initializes the DB on startup (calls `roomhub.database.init_db`).
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy.exc import SQLAlchemyError

from roomhub.database import init_db
from roomhub.errors import make_error_response
from roomhub.routers import rooms

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))


DEFAULT_RATE_LIMIT = os.getenv("RATE_LIMIT", "60/minute")
limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan startup: initializing database")
    init_db()
    yield
    logger.info("Lifespan shutdown")


app = FastAPI(title="RoomHub Backend", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS (developer friendly defaults)
origins = os.getenv("CORS_ORIGINS", "*")
if origins == "*":
    allowed_origins: List[str] = ["*"]
else:
    # comma separated list
    allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(status_code=429, content=make_error_response("rate_limited", "Rate limit exceeded"))


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # No retry and no partial result: the request fails as a whole
    logger.exception("Database error while handling %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=make_error_response("database_error", "Database error"))


@app.get("/health", tags=["Health"])
async def health() -> dict:
    return {"status": "ok"}


app.include_router(rooms.router)
logger.info("Included router: roomhub.routers.rooms")


__all__ = ["app"]
