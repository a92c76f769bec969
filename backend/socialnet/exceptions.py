"""Application exception hierarchy.

Exception Hierarchy:
    SocialNetError (base)
    ├── RuleRegistryError
    │   ├── DuplicateRuleError      → raised at startup, aborts boot
    │   └── RegistryFrozenError     → registration after freeze()
    ├── UnregisteredTypeError       → strict mode only, 500
    ├── RequestValidationFailed     → 400 Bad Request
    └── UnsupportedProviderError    → 404 Not Found

Rule failures are never raised inside the validation engine; they come back as
Violation entries on a ValidationResult. Only the HTTP layer turns an invalid
result into RequestValidationFailed.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from socialnet.validators.models import ValidationResult


class SocialNetError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: User-facing error description
        context: Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RuleRegistryError(SocialNetError):
    """Misuse of the rule registry. Always a programmer error."""


class DuplicateRuleError(RuleRegistryError):
    """A rule with the same name is already bound to the class+property pair."""

    def __init__(self, rule_name: str, target: str, property_name: str):
        super().__init__(
            message=f"Rule '{rule_name}' is already bound to {target}.{property_name}",
            context={"rule": rule_name, "target": target, "property": property_name},
        )
        self.rule_name = rule_name
        self.target = target
        self.property_name = property_name


class RegistryFrozenError(RuleRegistryError):
    """Registration attempted after the registry was frozen."""

    def __init__(self, rule_name: str):
        super().__init__(
            message=f"Cannot register rule '{rule_name}': registry is frozen",
            context={"rule": rule_name},
        )


class UnregisteredTypeError(SocialNetError):
    """Strict-mode validation of a type that has no rule bindings."""

    def __init__(self, target: str):
        super().__init__(
            message=f"No validation rules registered for {target}",
            context={"target": target},
        )
        self.target = target


class RequestValidationFailed(SocialNetError):
    """Inbound request data broke one or more business rules.

    Carries the full ValidationResult so the exception handler can render
    every violation as ``{property, message}``.
    """

    def __init__(self, result: "ValidationResult"):
        super().__init__(
            message="Validation failed",
            context={"violation_count": len(result.violations)},
        )
        self.result = result


class UnsupportedProviderError(SocialNetError):
    """OAuth provider has no configuration entry."""

    def __init__(self, provider: str):
        super().__init__(
            message=f"Unsupported OAuth provider: {provider}",
            context={"provider": provider},
        )
        self.provider = provider
