"""Posts API — create."""

import structlog
from fastapi import APIRouter, Depends

from socialnet.api.deps import validated
from socialnet.models.requests import CreatePostRequest
from socialnet.models.responses import ApiResponse, ErrorResponse, PostDraft
from socialnet.services.posts import build_post_draft

logger = structlog.get_logger()

router = APIRouter(prefix="/posts")


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[PostDraft],
    responses={400: {"model": ErrorResponse}},
)
async def create_post(request: CreatePostRequest = Depends(validated(CreatePostRequest))):
    """Accept a post, reply or quote once every post rule passes."""
    draft = build_post_draft(request)

    logger.info(
        "post_accepted",
        type=draft.type,
        parent_id=draft.parent_id,
        hashtags=len(draft.hashtags),
        media=len(draft.media),
    )

    return ApiResponse[PostDraft](message="Post created successfully", data=draft)
