"""Users and profiles API — partial updates of the current account."""

from fastapi import APIRouter, Depends

from socialnet.api.deps import validated
from socialnet.models.requests import UpdateProfileRequest, UpdateUserRequest
from socialnet.models.responses import ApiResponse, ErrorResponse

router = APIRouter()


@router.patch(
    "/users/me",
    response_model=ApiResponse[UpdateUserRequest],
    responses={400: {"model": ErrorResponse}},
)
async def update_user(request: UpdateUserRequest = Depends(validated(UpdateUserRequest))):
    """Return the normalized update (trimmed, lowercased) once rules pass."""
    return ApiResponse[UpdateUserRequest](message="User updated successfully", data=request)


@router.patch(
    "/profiles/me",
    response_model=ApiResponse[UpdateProfileRequest],
    responses={400: {"model": ErrorResponse}},
)
async def update_profile(request: UpdateProfileRequest = Depends(validated(UpdateProfileRequest))):
    return ApiResponse[UpdateProfileRequest](message="Profile updated successfully", data=request)
