"""Auth API — OAuth redirect options and provider profile intake."""

from typing import Any

from fastapi import APIRouter, Body, Request

from socialnet.models.responses import ApiResponse, AuthenticateOptions, ErrorResponse, OAuthSignup
from socialnet.services.oauth import build_authenticate_options, build_oauth_signup

router = APIRouter(prefix="/auth")


@router.get(
    "/{provider}/options",
    response_model=ApiResponse[AuthenticateOptions],
    responses={404: {"model": ErrorResponse}},
)
async def authenticate_options(provider: str, request: Request):
    """Scope and state the client must send to the provider's consent screen."""
    options = build_authenticate_options(provider, request.query_params)
    return ApiResponse[AuthenticateOptions](message="OAuth options resolved", data=options)


@router.post(
    "/{provider}/signup",
    response_model=ApiResponse[OAuthSignup],
    responses={404: {"model": ErrorResponse}},
)
async def oauth_signup(provider: str, profile: dict[str, Any] = Body(...)):
    """Account fields for a first-time sign-in, from the provider's profile payload."""
    signup = build_oauth_signup(provider, profile)
    return ApiResponse[OAuthSignup](message="OAuth profile resolved", data=signup)
