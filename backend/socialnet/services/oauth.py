"""OAuth initiation — provider table instead of one guard class per provider.

Each provider declares the scopes it requests, how the ``state`` value is
derived from the inbound query string, and how its profile payload maps onto
``OAuthProfile``. The state carries the client platform (``web``,
``android``, ...) through the provider redirect.
"""

import random
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel

from socialnet.config import get_settings
from socialnet.exceptions import UnsupportedProviderError
from socialnet.models.responses import AuthenticateOptions, OAuthSignup
from socialnet.services.text import generate_username

StateResolver = Callable[[Mapping[str, str]], str]


def platform_state(query: Mapping[str, str]) -> str:
    """State is the ``platform`` query parameter, defaulting to the configured platform."""
    return query.get("platform") or get_settings().OAUTH_DEFAULT_PLATFORM


# ── Profile mapping ──

class OAuthProfile(BaseModel):
    """Provider-agnostic view of an OAuth user profile."""

    provider: str
    provider_id: str
    display_name: str
    username: Optional[str] = None
    email: Optional[str] = None
    profile_image_url: Optional[str] = None
    profile_url: Optional[str] = None


ProfileMapper = Callable[[Mapping[str, Any]], OAuthProfile]


def _first_value(entries: Any) -> Optional[str]:
    if entries:
        return entries[0].get("value")
    return None


def map_google_profile(profile: Mapping[str, Any]) -> OAuthProfile:
    email = _first_value(profile.get("emails"))
    return OAuthProfile(
        provider="google",
        provider_id=str(profile["id"]),
        display_name=profile.get("displayName", ""),
        email=email,
        profile_image_url=_first_value(profile.get("photos")),
        username=email.split("@")[0] if email else None,
    )


def map_github_profile(profile: Mapping[str, Any]) -> OAuthProfile:
    return OAuthProfile(
        provider="github",
        provider_id=str(profile["id"]),
        username=profile.get("username"),
        display_name=profile.get("displayName") or profile.get("username") or "",
        profile_url=profile.get("profileUrl"),
        profile_image_url=_first_value(profile.get("photos")),
    )


# ── Provider table ──

class OAuthProviderConfig(BaseModel):
    scopes: list[str]
    state_resolver: StateResolver = platform_state
    profile_mapper: Optional[ProfileMapper] = None


OAUTH_PROVIDERS: dict[str, OAuthProviderConfig] = {
    "google": OAuthProviderConfig(scopes=["profile", "email"], profile_mapper=map_google_profile),
    "github": OAuthProviderConfig(scopes=["user:email"], profile_mapper=map_github_profile),
}


def _provider_config(
    provider: str,
    providers: Optional[Mapping[str, OAuthProviderConfig]],
) -> OAuthProviderConfig:
    table = OAUTH_PROVIDERS if providers is None else providers
    config = table.get(provider)
    if config is None:
        raise UnsupportedProviderError(provider)
    return config


def build_authenticate_options(
    provider: str,
    query: Mapping[str, str],
    providers: Optional[Mapping[str, OAuthProviderConfig]] = None,
) -> AuthenticateOptions:
    """Resolve scope and state for an OAuth redirect.

    Raises:
        UnsupportedProviderError: provider has no configuration entry
    """
    config = _provider_config(provider, providers)

    return AuthenticateOptions(
        provider=provider,
        scope=list(config.scopes),
        state=config.state_resolver(query),
    )


def build_oauth_signup(
    provider: str,
    payload: Mapping[str, Any],
    providers: Optional[Mapping[str, OAuthProviderConfig]] = None,
    rng: Optional[random.Random] = None,
) -> OAuthSignup:
    """Turn a provider profile payload into the account fields for a new user.

    - username: the provider's, else generated from the display name
    - email: the provider's, else ``<provider_id>@<provider>.oauth``
    - name: display name, else username

    Raises:
        UnsupportedProviderError: provider has no configuration entry or no mapper
    """
    config = _provider_config(provider, providers)
    if config.profile_mapper is None:
        raise UnsupportedProviderError(provider)

    profile = config.profile_mapper(payload)
    username = profile.username or generate_username(profile.display_name or "user", rng)

    return OAuthSignup(
        provider=profile.provider,
        provider_id=profile.provider_id,
        email=profile.email or f"{profile.provider_id}@{profile.provider}.oauth",
        username=username,
        name=profile.display_name or username,
        profile_image_url=profile.profile_image_url,
    )
