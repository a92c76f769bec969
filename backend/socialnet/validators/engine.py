"""Validation facade — single entry point for rule-based validation.

Looks up the rules bound to the instance's class, evaluates them and returns a
ValidationResult. Invalid input is data, not an exception.

Usage:
    facade = ValidationFacade(registry)
    result = facade.validate(create_post_request)
    if not result.is_valid:
        # Render result.error_details() to the client
"""

import time
from typing import Any, Optional

import structlog

from socialnet.exceptions import RequestValidationFailed, UnregisteredTypeError
from socialnet.validators.evaluator import RuleEvaluator
from socialnet.validators.models import ValidationResult
from socialnet.validators.registry import RuleRegistry
from socialnet.validators.reporter import ViolationReporter

logger = structlog.get_logger()


class ValidationFacade:
    """Orchestrates registry lookup, evaluation and reporting.

    Design principles:
        - Stateless per call: same instance → equal result
        - Synchronous and CPU-only
        - Unregistered types pass unless strict mode is on
    """

    def __init__(
        self,
        registry: RuleRegistry,
        strict: bool = False,
        evaluator: Optional[RuleEvaluator] = None,
        reporter: Optional[ViolationReporter] = None,
    ):
        self.registry = registry
        self.strict = strict
        self.evaluator = evaluator or RuleEvaluator()
        self.reporter = reporter or ViolationReporter()

    def validate(self, instance: Any) -> ValidationResult:
        """Validate ``instance`` against the rules bound to its class.

        Raises:
            UnregisteredTypeError: strict mode and the class has no bindings
        """
        start_time = time.perf_counter()
        target = type(instance)

        if self.strict and not self.registry.is_registered(target):
            raise UnregisteredTypeError(target.__qualname__)

        bindings = self.registry.lookup(target)
        violations = self.evaluator.evaluate(instance, bindings)
        result = self.reporter.report(violations)

        logger.debug(
            "validation_complete",
            target=target.__name__,
            rules=len(bindings),
            is_valid=result.is_valid,
            violation_count=len(result.violations),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return result

    def validate_or_raise(self, instance: Any) -> Any:
        """Return ``instance`` unchanged when valid, else raise RequestValidationFailed."""
        result = self.validate(instance)
        if not result.is_valid:
            raise RequestValidationFailed(result)
        return instance
