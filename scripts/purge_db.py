import asyncio

from sqlalchemy import text

from tinyblog.infrastructure.database import async_session_factory


async def clear_data():
    async with async_session_factory() as session:
        await session.execute(text("DELETE FROM posts"))
        await session.commit()
        print("Database cleared! All posts removed.")


asyncio.run(clear_data())
