"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel

from tinyblog.domain.post import Post


class PostCreate(BaseModel):
    """Request schema for creating a post."""

    title: str
    description: str


class PostResponse(BaseModel):
    """Response schema for a post."""

    id: int
    title: str
    description: str
    summary: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            description=post.description,
            summary=post.summary(),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostListResponse(BaseModel):
    """Response schema for paginated post list."""

    posts: list[PostResponse]
    total: int
    offset: int
    limit: int
    has_more: bool
