"""Post drafting — turns a validated create request into a persistable draft."""

from socialnet.models.requests import CreatePostRequest
from socialnet.models.responses import PostDraft
from socialnet.services.text import extract_hashtags


def build_post_draft(request: CreatePostRequest) -> PostDraft:
    """Normalize a validated request. Expects the business rules to have passed."""
    content = request.content.strip() if request.content else None
    return PostDraft(
        type=request.type,
        visibility=request.visibility,
        content=content,
        parent_id=request.parent_id,
        media=list(request.media),
        mentions_ids=list(dict.fromkeys(request.mentions_ids or [])),
        hashtags=extract_hashtags(content),
    )
