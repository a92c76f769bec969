"""Violation reporter — wraps evaluator output into a ValidationResult."""

from typing import Iterable

from socialnet.validators.models import ValidationResult, Violation


class ViolationReporter:
    """Pure aggregation. No filtering, no deduplication, order kept."""

    def report(self, violations: Iterable[Violation]) -> ValidationResult:
        return ValidationResult(violations=tuple(violations))
