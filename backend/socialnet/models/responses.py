"""API response models."""

from enum import Enum
from typing import Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel

from socialnet.models.requests import PostType, PostVisibility

T = TypeVar("T")


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    FAIL = "fail"


class ApiResponse(BaseModel, Generic[T]):
    """Standard success envelope."""

    status: ResponseStatus = ResponseStatus.SUCCESS
    message: str
    data: Optional[T] = None


class FieldError(BaseModel):
    """One rejected property and why."""

    property: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope. ``fail`` = client input, ``error`` = server side."""

    status: Literal[ResponseStatus.ERROR, ResponseStatus.FAIL]
    message: str
    error: Union[list[FieldError], str, None] = None


class PostDraft(BaseModel):
    """Accepted post payload, ready for persistence."""

    type: PostType
    visibility: PostVisibility
    content: Optional[str] = None
    parent_id: Optional[int] = None
    media: list[str] = []
    mentions_ids: list[int] = []
    hashtags: list[str] = []


class AuthenticateOptions(BaseModel):
    """Options handed to the OAuth provider redirect."""

    provider: str
    scope: list[str]
    state: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    registered_rules: int


class OAuthSignup(BaseModel):
    """Account fields derived from an OAuth provider profile."""

    provider: str
    provider_id: str
    email: str
    username: str
    name: str
    profile_image_url: Optional[str] = None
