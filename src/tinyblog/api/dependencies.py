"""FastAPI dependency injection providers."""

import secrets
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from tinyblog.config import get_settings
from tinyblog.infrastructure.database import get_session
from tinyblog.repositories.post_repo import PostRepository
from tinyblog.services.posts import PostService

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]

# --- API Key Authentication ---

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_api_key(
    api_key: str | None = Security(_api_key_header),
) -> str:
    """Verify API key for write endpoints.

    If API_KEY is not configured (empty), auth is skipped (dev mode).
    """
    settings = get_settings()
    if not settings.api_key:
        return "anonymous"
    if not api_key or not secrets.compare_digest(api_key, settings.api_key):
        raise HTTPException(status_code=403, detail="Invalid or missing API key")
    return api_key


ApiKeyDep = Annotated[str, Depends(require_api_key)]


async def get_post_repository(
    session: SessionDep,
) -> AsyncGenerator[PostRepository, None]:
    """Provide PostRepository instance."""
    yield PostRepository(session)


PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]


def get_post_service(post_repo: PostRepoDep) -> PostService:
    """Provide PostService backed by the request's repository."""
    return PostService(post_repo)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
