"""Validation models — rules, bindings, violations and the result structure.

All validation is deterministic: same input → same output, no I/O, no randomness.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, computed_field

# Predicate shape shared by every rule: (field value, whole instance) -> passed?
Predicate = Callable[[Any, Any], bool]

RULE_EVALUATION_FAILED = "rule evaluation failed"


class RuleDefinition(BaseModel):
    """A reusable, unbound rule: name + predicate + default message.

    Produced by the factories in ``socialnet.validators.rules`` and bound to a
    class+property pair through ``RuleRegistry.bind``.
    """

    name: str
    evaluate: Predicate
    default_message: str

    model_config = {"frozen": True}


class Rule(BaseModel):
    """A named predicate attached to one property."""

    name: str
    property_name: str
    evaluate: Predicate
    default_message: str
    message: Optional[str] = None  # Overrides default_message when set

    model_config = {"frozen": True}

    @property
    def resolved_message(self) -> str:
        return self.message if self.message is not None else self.default_message


class RuleBinding(BaseModel):
    """Associates one Rule with one class/property pair."""

    target: type
    rule: Rule

    model_config = {"frozen": True}

    @property
    def property_name(self) -> str:
        return self.rule.property_name


class Violation(BaseModel):
    """A single rule failure against one property of one instance."""

    property: str
    rule: str
    message: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Pass/fail outcome plus every violation of one validation call."""

    violations: tuple[Violation, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.violations) == 0

    def error_details(self) -> list[dict[str, str]]:
        """Client-facing shape: one ``{property, message}`` per violation."""
        return [{"property": v.property, "message": v.message} for v in self.violations]

    def by_property(self) -> dict[str, list[str]]:
        """Group messages by property, preserving violation order."""
        grouped: dict[str, list[str]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.property, []).append(violation.message)
        return grouped
