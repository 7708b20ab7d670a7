"""Typed records for upstream payloads and derived views."""

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A post as delivered upstream. Unknown fields are kept and passed through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | str
    user_id: int | str = Field(alias="userId")
    timestamp: str | int | float | None = None
    content: str | None = None

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class Comment(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | str | None = None
    post_id: int | str = Field(alias="postId")


class UsersPayload(BaseModel):
    users: dict[str, str]


class PostsPayload(BaseModel):
    posts: list[Post]


class CommentsPayload(BaseModel):
    comments: list[Comment]


class TopUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None
    post_count: int = Field(alias="postCount")
