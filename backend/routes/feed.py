"""Feed routes — cached aggregate views over the upstream provider.

GET /top-users          → users with the most posts
GET /posts?type=latest  → most recent posts
GET /posts?type=popular → posts tied for the most comments
"""

import logging

from fastapi import APIRouter, Depends, Query, Request

from errors import InvalidParameterError, ViewUnavailableError
from services.views import POST_TYPES, ViewService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_views(request: Request) -> ViewService:
    return request.app.state.views


def _validate_post_type(post_type: str | None) -> str:
    if post_type not in POST_TYPES:
        raise InvalidParameterError()
    return post_type


@router.get("/top-users")
async def top_users(views: ViewService = Depends(get_views)) -> list[dict]:
    """Top 5 users by post count."""
    try:
        return await views.top_users()
    except Exception as e:
        logger.exception("Top users view failed")
        raise ViewUnavailableError("Failed to fetch top users") from e


@router.get("/posts")
async def posts(
    post_type: str | None = Query(None, alias="type"),
    views: ViewService = Depends(get_views),
) -> list[dict]:
    """Latest or popular posts, selected by the ``type`` query parameter."""
    post_type = _validate_post_type(post_type)

    try:
        return await views.posts(post_type)
    except Exception as e:
        logger.exception("Posts view failed (type=%s)", post_type)
        raise ViewUnavailableError("Failed to fetch posts") from e
