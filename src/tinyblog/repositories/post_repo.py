"""Post repository for database operations."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tinyblog.domain.post import Post
from tinyblog.infrastructure.models import PostModel


def to_domain(model: PostModel) -> Post:
    """Convert an ORM row into a Post."""
    return Post(
        id=model.id,
        title=model.title,
        description=model.description,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PostRepository:
    """Repository for Post CRUD operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def create(self, title: str, description: str) -> Post:
        """Insert a post and return it with its ID and timestamps."""
        model = PostModel(title=title, description=description)
        self.session.add(model)
        await self.session.flush()
        # Pull server-generated timestamps
        await self.session.refresh(model)
        return to_domain(model)

    async def get_by_id(self, post_id: int) -> Post | None:
        """Get a post by its ID."""
        model = await self.session.get(PostModel, post_id)
        return to_domain(model) if model else None

    async def get_last(self) -> Post | None:
        """Get the most recently created post."""
        stmt = select(PostModel).order_by(PostModel.id.desc()).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return to_domain(model) if model else None

    async def list_all(self, offset: int = 0, limit: int | None = None) -> list[Post]:
        """List posts in creation order."""
        stmt = select(PostModel).order_by(PostModel.id.asc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        """Get total post count."""
        stmt = select(func.count(PostModel.id))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete(self, post_id: int) -> bool:
        """Delete a post by ID.

        Returns:
            True if a post was removed, False if none matched
        """
        model = await self.session.get(PostModel, post_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.flush()
        return True
