"""Post creation and lookup service."""

import logging
from typing import Protocol

from tinyblog.domain.errors import PostNotFoundError, ValidationError
from tinyblog.domain.post import Post, missing_fields

logger = logging.getLogger(__name__)


class PostStore(Protocol):
    """Persistence operations the service depends on."""

    async def create(self, title: str, description: str) -> Post: ...

    async def get_by_id(self, post_id: int) -> Post | None: ...

    async def get_last(self) -> Post | None: ...

    async def list_all(self, offset: int = 0, limit: int | None = None) -> list[Post]: ...

    async def count(self) -> int: ...

    async def delete(self, post_id: int) -> bool: ...


class PostService:
    """Creates and fetches posts through an injected store."""

    def __init__(self, store: PostStore) -> None:
        self.store = store

    async def create(self, title: str | None, description: str | None) -> Post:
        """Create a post.

        None for either field is rejected; empty strings are accepted.

        Raises:
            ValidationError: If title or description is missing
        """
        missing = missing_fields(title, description)
        if missing:
            logger.warning(f"Rejected post creation, missing: {', '.join(missing)}")
            raise ValidationError(
                f"Missing required field(s): {', '.join(missing)}", fields=missing
            )

        post = await self.store.create(title=title, description=description)
        logger.info(f"Created post {post.id}: {post.title!r}")
        return post

    async def get(self, post_id: int) -> Post:
        """Get a post by ID or raise PostNotFoundError."""
        post = await self.store.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def last(self) -> Post | None:
        """Get the most recently created post, if any."""
        return await self.store.get_last()

    async def all(self, offset: int = 0, limit: int | None = None) -> list[Post]:
        """List posts in creation order."""
        return await self.store.list_all(offset=offset, limit=limit)

    async def count(self) -> int:
        """Get total post count."""
        return await self.store.count()

    async def delete(self, post_id: int) -> None:
        """Delete a post by ID or raise PostNotFoundError."""
        if not await self.store.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info(f"Deleted post {post_id}")
