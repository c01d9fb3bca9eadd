import asyncio

from tinyblog.infrastructure.database import async_session_factory
from tinyblog.repositories.post_repo import PostRepository
from tinyblog.services.posts import PostService


async def seed():
    async with async_session_factory() as session:
        service = PostService(PostRepository(session))
        post = await service.create(title="My title", description="The post description")
        await session.commit()
        print(f"Created post {post.id}: {post.summary()}")


asyncio.run(seed())
