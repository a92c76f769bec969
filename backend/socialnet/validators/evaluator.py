"""Rule evaluator — runs bound predicates against one instance."""

from collections.abc import Mapping
from typing import Any, Iterable

import structlog

from socialnet.validators.models import RULE_EVALUATION_FAILED, RuleBinding, Violation

logger = structlog.get_logger()


def read_property(instance: Any, property_name: str) -> Any:
    """Read a property from an object or mapping. Missing reads as None."""
    if isinstance(instance, Mapping):
        return instance.get(property_name)
    return getattr(instance, property_name, None)


class RuleEvaluator:
    """Evaluates each binding in order and collects violations.

    Contract:
        - Every binding runs; one failing or crashing rule never stops the rest
        - A predicate that raises produces a generic violation instead
        - The instance is only read, never written
    """

    def evaluate(self, instance: Any, bindings: Iterable[RuleBinding]) -> list[Violation]:
        violations: list[Violation] = []

        for binding in bindings:
            rule = binding.rule

            try:
                value = read_property(instance, rule.property_name)
                passed = bool(rule.evaluate(value, instance))
                message = rule.resolved_message
            except Exception as e:
                logger.error(
                    "rule_evaluation_failed",
                    rule=rule.name,
                    property=rule.property_name,
                    target=binding.target.__name__,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                passed = False
                message = RULE_EVALUATION_FAILED

            if not passed:
                violations.append(Violation(
                    property=rule.property_name,
                    rule=rule.name,
                    message=message,
                ))

        return violations
