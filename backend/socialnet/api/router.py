"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from socialnet.api.auth import router as auth_router
from socialnet.api.health import router as health_router
from socialnet.api.posts import router as posts_router
from socialnet.api.users import router as users_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Auth
api_router.include_router(auth_router, tags=["Auth"])

# Posts
api_router.include_router(posts_router, tags=["Posts"])

# Users and profiles
api_router.include_router(users_router, tags=["Users"])
