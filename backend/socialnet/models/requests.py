"""API request models.

These models only describe shape (types, lengths, formats). Cross-field
business rules are bound to them in ``socialnet.validators.bindings`` and run
by the validation facade after deserialization.
"""

from datetime import date
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field, HttpUrl

from socialnet.models.transforms import NormalizedStr, TrimmedStr, parse_id_list

POST_MAX_LENGTH = 500


class PostType(str, Enum):
    POST = "POST"
    REPLY = "REPLY"
    QUOTE = "QUOTE"


class PostVisibility(str, Enum):
    EVERY_ONE = "EVERY_ONE"
    FOLLOWERS = "FOLLOWERS"
    MENTIONED = "MENTIONED"
    VERIFIED = "VERIFIED"


class CreatePostRequest(BaseModel):
    """Request to publish a post, reply or quote."""

    content: Optional[str] = Field(
        default=None,
        max_length=POST_MAX_LENGTH,
        description="The textual content of the post",
        examples=["Excited to share my new project today! #python"],
    )
    type: PostType = Field(..., description="POST, REPLY or QUOTE")
    parent_id: Optional[int] = Field(
        default=None,
        description="ID of the parent post (replies and quotes only)",
    )
    visibility: PostVisibility
    media: list[str] = Field(
        default_factory=list,
        description="References to already-uploaded media files",
    )
    mentions_ids: Annotated[Optional[list[int]], BeforeValidator(parse_id_list)] = Field(
        default=None,
        description='User IDs to mention. Accepts [1,2,3], "[1,2,3]" or "1,2,3"',
    )


class UpdateUserRequest(BaseModel):
    """Partial update of account fields. Omitted fields are left unchanged."""

    # Username pattern needs a lookahead
    model_config = {"regex_engine": "python-re"}

    email: Optional[NormalizedStr] = Field(
        default=None,
        pattern=r"^[\x20-\x7E]+@[\x20-\x7E]+\.[\x20-\x7E]+$",
        description="ASCII email address. Trimmed and lowercased.",
    )
    username: Optional[NormalizedStr] = Field(
        default=None,
        min_length=3,
        max_length=50,
        pattern=r"^[a-z](?!.*[_.]{2})[a-z0-9._]*[a-z0-9]$",
        description="Starts with a letter, ends with a letter or digit. Trimmed and lowercased.",
    )
    name: Optional[TrimmedStr] = Field(
        default=None,
        min_length=3,
        max_length=50,
        pattern=r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$",
    )
    birth_date: Optional[date] = None
    profile_image_url: Optional[HttpUrl] = None
    banner_image_url: Optional[HttpUrl] = None
    bio: Optional[TrimmedStr] = Field(default=None, max_length=160)
    location: Optional[TrimmedStr] = Field(default=None, max_length=100)
    website: Optional[HttpUrl] = None


class UpdateProfileRequest(BaseModel):
    """Partial update of public profile fields."""

    name: Optional[TrimmedStr] = Field(default=None, max_length=30)
    birth_date: Optional[date] = None
    profile_image_url: Optional[HttpUrl] = None
    banner_image_url: Optional[HttpUrl] = None
    bio: Optional[TrimmedStr] = Field(default=None, max_length=160)
    location: Optional[TrimmedStr] = Field(default=None, max_length=100)
    website: Optional[HttpUrl] = None
