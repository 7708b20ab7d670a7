"""Upstream provider client — authenticated access to users, posts and comments.

Each fetch is a single GET against the configured base URL with the bearer
token attached. No retries; any failure aborts the enclosing request.
"""

import logging

import httpx
from pydantic import BaseModel, ValidationError

from errors import DecodeError, UpstreamError
from models import Comment, CommentsPayload, Post, PostsPayload, UsersPayload

logger = logging.getLogger(__name__)


class UpstreamClient:
    def __init__(
        self,
        base_url: str,
        access_token: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_users(self) -> dict[str, str]:
        """Return the upstream {user id: display name} mapping."""
        payload = await self._get("/users", UsersPayload)
        return payload.users

    async def fetch_posts(self) -> list[Post]:
        payload = await self._get("/posts", PostsPayload)
        return payload.posts

    async def fetch_comments(self) -> list[Comment]:
        payload = await self._get("/comments", CommentsPayload)
        return payload.comments

    async def _get(self, path: str, schema: type[BaseModel]):
        logger.info("Fetching upstream %s", path)
        try:
            resp = await self._client.get(path)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Upstream request failed for %s: %s", path, e)
            raise UpstreamError(f"Upstream request failed for {path}: {e}") from e

        try:
            return schema.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.error("Malformed upstream payload from %s: %s", path, e)
            raise DecodeError(f"Malformed upstream payload from {path}") from e
