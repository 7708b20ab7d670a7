"""Derived views over upstream collections. Pure functions, no I/O.

Identifiers are joined in their string form: upstream user maps are keyed
by string while posts and comments may carry numeric ids.
"""

import logging
from collections import Counter
from datetime import datetime, timezone

from models import Comment, Post, TopUser

logger = logging.getLogger(__name__)

TOP_USERS_LIMIT = 5
LATEST_POSTS_LIMIT = 5


def top_users(users: dict[str, str], posts: list[Post], limit: int = TOP_USERS_LIMIT) -> list[TopUser]:
    """Users ranked by post count, highest first.

    Ties keep the order in which each user first appears in ``posts``.
    Users missing from ``users`` get a ``None`` name.
    """
    counts = Counter(str(post.user_id) for post in posts)
    return [
        TopUser(id=user_id, name=users.get(user_id), post_count=count)
        for user_id, count in counts.most_common(limit)
    ]


def parse_timestamp(value: str | int | float | None) -> datetime | None:
    """Parse an ISO-8601 string or epoch milliseconds. Returns None if unparsable.

    Naive timestamps are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def latest_posts(posts: list[Post], limit: int = LATEST_POSTS_LIMIT) -> list[Post]:
    """Most recent posts first. Posts without a usable timestamp sort last."""

    def sort_key(post: Post) -> tuple[int, float]:
        parsed = parse_timestamp(post.timestamp)
        if parsed is None:
            return (1, 0.0)
        return (0, -parsed.timestamp())

    return sorted(posts, key=sort_key)[:limit]


def popular_posts(posts: list[Post], comments: list[Comment]) -> list[dict]:
    """Every post tied for the highest comment count, with ``commentCount`` attached.

    Returns an empty list when there are no comments at all.
    """
    counts = Counter(str(comment.post_id) for comment in comments)
    if not counts:
        return []

    max_comments = max(counts.values())
    trending = [
        {**post.to_json(), "commentCount": max_comments}
        for post in posts
        if counts[str(post.id)] == max_comments
    ]
    if not trending:
        logger.warning("Most commented post (%d comments) is absent from upstream posts", max_comments)
    return trending
