"""Startup rule table — which business rules apply to which request model."""

from functools import lru_cache
from typing import Optional

from socialnet.config import Settings, get_settings
from socialnet.models.requests import CreatePostRequest, UpdateProfileRequest, UpdateUserRequest
from socialnet.validators.engine import ValidationFacade
from socialnet.validators.registry import RuleRegistry
from socialnet.validators.rules import (
    content_required_if_no_media,
    is_adult,
    parent_id_allowed,
    parent_required_for_reply_or_quote,
    skip_if_missing,
)


def register_default_rules(registry: RuleRegistry, settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    adult = skip_if_missing(is_adult(settings.MIN_USER_AGE, settings.MAX_USER_AGE))

    # Posts
    registry.bind(CreatePostRequest, "content", content_required_if_no_media())
    registry.bind(CreatePostRequest, "type", parent_required_for_reply_or_quote())
    registry.bind(CreatePostRequest, "parent_id", parent_id_allowed())

    # Users / profiles
    registry.bind(UpdateUserRequest, "birth_date", adult)
    registry.bind(UpdateProfileRequest, "birth_date", adult)


def build_default_registry(settings: Optional[Settings] = None) -> RuleRegistry:
    """Create, populate and freeze the process registry."""
    registry = RuleRegistry()
    register_default_rules(registry, settings)
    registry.freeze()
    return registry


def build_validation_facade(settings: Optional[Settings] = None) -> ValidationFacade:
    settings = settings or get_settings()
    return ValidationFacade(
        build_default_registry(settings),
        strict=settings.VALIDATION_STRICT,
    )


@lru_cache
def get_validation_facade() -> ValidationFacade:
    return build_validation_facade(get_settings())
