"""FastAPI application entry point for the feed aggregation proxy."""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.upstream import UpstreamClient
from services.views import ViewService

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    config: Settings | None = None,
    client: UpstreamClient | None = None,
    cache: TTLCache | None = None,
) -> FastAPI:
    if config is None:
        config = settings
    if client is None:
        client = UpstreamClient(config.base_url or "", config.access_token or "")
    if cache is None:
        cache = TTLCache(ttl_seconds=config.cache_ttl_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        missing = config.validate()
        if missing:
            logger.warning("Missing env vars (upstream calls will fail): %s", ", ".join(missing))
        yield
        await client.aclose()

    app = FastAPI(title="Feed Proxy API", version="1.0.0", lifespan=lifespan)
    app.state.views = ViewService(client, cache, timeout_seconds=config.upstream_timeout_seconds)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if config.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.feed import router as feed_router
    from routes.health import router as health_router

    app.include_router(health_router)
    app.include_router(feed_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on http://localhost:%d", settings.port)
    uvicorn.run("app:app", host=settings.host, port=settings.port)
