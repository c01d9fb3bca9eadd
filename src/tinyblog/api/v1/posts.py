"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, Response, status

from tinyblog.api.dependencies import ApiKeyDep, PostServiceDep
from tinyblog.api.v1.schemas import PostCreate, PostListResponse, PostResponse
from tinyblog.domain.errors import PostNotFoundError
from tinyblog.domain.errors import ValidationError as PostValidationError  # not pydantic's

router = APIRouter(prefix="/posts", tags=["posts"])

# Largest primary key the storage backends accept (signed 64-bit)
MAX_POST_ID = 2**63 - 1

PostIdPath = Annotated[int, Path(ge=1, le=MAX_POST_ID)]


@router.get("", response_model=PostListResponse)
async def list_posts(
    service: PostServiceDep,
    offset: int = Query(0, ge=0),
    limit: int = Query(30, ge=1, le=100),
) -> PostListResponse:
    """List posts with pagination, oldest first."""
    posts = await service.all(offset=offset, limit=limit)
    total = await service.count()

    return PostListResponse(
        posts=[PostResponse.from_domain(p) for p in posts],
        total=total,
        offset=offset,
        limit=limit,
        has_more=offset + len(posts) < total,
    )


@router.get("/last", response_model=PostResponse)
async def get_last_post(service: PostServiceDep) -> PostResponse:
    """Get the most recently created post."""
    post = await service.last()
    if not post:
        raise HTTPException(status_code=404, detail="No posts yet")
    return PostResponse.from_domain(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: PostIdPath, service: PostServiceDep) -> PostResponse:
    """Get a single post by ID."""
    try:
        post = await service.get(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found") from None
    return PostResponse.from_domain(post)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreate,
    service: PostServiceDep,
    _auth: ApiKeyDep,
) -> PostResponse:
    """Create a post."""
    try:
        post = await service.create(title=request.title, description=request.description)
    except PostValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PostResponse.from_domain(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: PostIdPath,
    service: PostServiceDep,
    _auth: ApiKeyDep,
) -> Response:
    """Delete a post by ID."""
    try:
        await service.delete(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found") from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
