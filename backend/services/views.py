"""Cached views: cache lookup, concurrent upstream fetch, compute, store."""

import asyncio
import logging
from typing import Any

from errors import UpstreamError
from services import aggregation
from services.cache import TTLCache
from services.upstream import UpstreamClient

logger = logging.getLogger(__name__)

TOP_USERS_KEY = "top-users"
POST_TYPES = ("latest", "popular")


class ViewService:
    """Serves the derived views, owning the cache they are stored in."""

    def __init__(self, client: UpstreamClient, cache: TTLCache, timeout_seconds: float = 10):
        self.client = client
        self.cache = cache
        self.timeout_seconds = timeout_seconds

    async def top_users(self) -> list[dict]:
        cached = self.cache.get(TOP_USERS_KEY)
        if cached is not None:
            logger.debug("Cache hit: %s", TOP_USERS_KEY)
            return cached

        users, posts = await self._gather(self.client.fetch_users(), self.client.fetch_posts())
        result = [entry.model_dump(by_alias=True) for entry in aggregation.top_users(users, posts)]

        self.cache.set(TOP_USERS_KEY, result)
        logger.info("Computed %s: %d users from %d posts", TOP_USERS_KEY, len(result), len(posts))
        return result

    async def posts(self, post_type: str | None) -> list[dict]:
        """Latest or popular posts. Callers validate ``post_type`` against ``POST_TYPES``."""
        key = f"posts-{post_type}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached

        if post_type == "popular":
            posts, comments = await self._gather(self.client.fetch_posts(), self.client.fetch_comments())
            result = aggregation.popular_posts(posts, comments)
        else:
            (posts,) = await self._gather(self.client.fetch_posts())
            result = [post.to_json() for post in aggregation.latest_posts(posts)]

        self.cache.set(key, result)
        logger.info("Computed %s: %d posts", key, len(result))
        return result

    async def _gather(self, *fetches) -> list[Any]:
        """Run upstream fetches concurrently, bounded by the per-request timeout."""
        try:
            return await asyncio.wait_for(asyncio.gather(*fetches), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise UpstreamError(f"Upstream fetch timed out after {self.timeout_seconds}s") from e
