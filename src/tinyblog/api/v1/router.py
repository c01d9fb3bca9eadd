"""API v1 router aggregator."""

from fastapi import APIRouter

from tinyblog.api.v1.posts import router as posts_router

router = APIRouter(prefix="/api/v1")
router.include_router(posts_router)
