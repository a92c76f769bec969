"""Rule-based validation for request models.

Usage:
    from socialnet.validators import get_validation_facade

    result = get_validation_facade().validate(request_model)
    if not result.is_valid:
        # Render result.error_details() to the client
"""

from socialnet.validators.bindings import (
    build_default_registry,
    build_validation_facade,
    get_validation_facade,
)
from socialnet.validators.engine import ValidationFacade
from socialnet.validators.evaluator import RuleEvaluator
from socialnet.validators.models import Rule, RuleBinding, RuleDefinition, ValidationResult, Violation
from socialnet.validators.registry import RuleRegistry
from socialnet.validators.reporter import ViolationReporter

__all__ = [
    "ValidationFacade",
    "get_validation_facade",
    "build_validation_facade",
    "build_default_registry",
    "RuleRegistry",
    "RuleEvaluator",
    "ViolationReporter",
    "Rule",
    "RuleBinding",
    "RuleDefinition",
    "ValidationResult",
    "Violation",
]
