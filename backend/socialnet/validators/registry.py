"""Rule registry — maps a class to its ordered rule bindings.

Rules are registered once during startup and read for the rest of the
process lifetime. ``freeze()`` closes registration; after that the registry
is read-only and lookups need no locking.

Usage:
    registry = RuleRegistry()
    registry.bind(CreatePostRequest, "type", parent_required_for_reply_or_quote())
    registry.freeze()
    bindings = registry.lookup(CreatePostRequest)
"""

import threading
from typing import Optional

import structlog

from socialnet.exceptions import DuplicateRuleError, RegistryFrozenError
from socialnet.validators.models import Predicate, Rule, RuleBinding, RuleDefinition

logger = structlog.get_logger()


def _qualname(target: type) -> str:
    return f"{target.__module__}.{target.__qualname__}"


class RuleRegistry:
    """Holds rule bindings per target class, in registration order."""

    def __init__(self):
        self._lock = threading.Lock()
        self._bindings: dict[type, tuple[RuleBinding, ...]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        rule_name: str,
        target: type,
        property_name: str,
        evaluation_fn: Predicate,
        default_message: str,
        message: Optional[str] = None,
    ) -> RuleBinding:
        """Bind a new rule to ``target.property_name``.

        Args:
            rule_name: Unique name of the rule on this class+property pair
            target: Class whose instances the rule applies to
            property_name: Attribute the rule reads its value from
            evaluation_fn: Pure predicate ``(value, instance) -> bool``
            default_message: Message used when no override is given
            message: Optional message override

        Returns:
            The created RuleBinding

        Raises:
            DuplicateRuleError: rule_name already bound to the same pair
            RegistryFrozenError: registry was frozen
        """
        rule = Rule(
            name=rule_name,
            property_name=property_name,
            evaluate=evaluation_fn,
            default_message=default_message,
            message=message,
        )
        binding = RuleBinding(target=target, rule=rule)

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(rule_name)

            existing = self._bindings.get(target, ())
            if any(
                b.rule.name == rule_name and b.property_name == property_name
                for b in existing
            ):
                raise DuplicateRuleError(rule_name, _qualname(target), property_name)

            # Replace rather than append so readers only ever see whole tuples
            self._bindings[target] = existing + (binding,)

        logger.debug(
            "rule_registered",
            rule=rule_name,
            target=_qualname(target),
            property=property_name,
        )
        return binding

    def bind(
        self,
        target: type,
        property_name: str,
        definition: RuleDefinition,
        message: Optional[str] = None,
    ) -> RuleBinding:
        """Register a prebuilt RuleDefinition on ``target.property_name``."""
        return self.register(
            rule_name=definition.name,
            target=target,
            property_name=property_name,
            evaluation_fn=definition.evaluate,
            default_message=definition.default_message,
            message=message,
        )

    def lookup(self, target: type) -> tuple[RuleBinding, ...]:
        """Return bindings for ``target`` in registration order (empty if unknown)."""
        return self._bindings.get(target, ())

    def is_registered(self, target: type) -> bool:
        return target in self._bindings

    def freeze(self) -> None:
        """Close registration. Idempotent."""
        with self._lock:
            if self._frozen:
                return
            self._frozen = True
        logger.info(
            "registry_frozen",
            targets=len(self._bindings),
            rules=self.rule_count,
        )

    @property
    def rule_count(self) -> int:
        return sum(len(b) for b in self._bindings.values())
