"""
RuleRegistry
============

What we test:
    ✅ Lookup returns bindings in registration order
    ✅ Unknown classes look up to an empty sequence
    ✅ Duplicate name on the same class+property is rejected
    ✅ Same name on another property or class is accepted
    ✅ Freeze closes registration
"""

import pytest

from socialnet.exceptions import DuplicateRuleError, RegistryFrozenError, RuleRegistryError
from socialnet.validators.models import RuleDefinition


class Signup:
    def __init__(self, name=None, email=None):
        self.name = name
        self.email = email


class Login:
    pass


def _always(result):
    return lambda value, instance: result


class TestRegister:

    def test_returns_binding(self, registry):
        binding = registry.register("non_empty", Signup, "name", _always(True), "name is required")
        assert binding.target is Signup
        assert binding.property_name == "name"
        assert binding.rule.name == "non_empty"
        assert binding.rule.resolved_message == "name is required"

    def test_message_override_wins(self, registry):
        binding = registry.register(
            "non_empty", Signup, "name", _always(True), "name is required", message="Tell us your name",
        )
        assert binding.rule.resolved_message == "Tell us your name"

    def test_empty_message_override_is_kept(self, registry):
        binding = registry.register("non_empty", Signup, "name", _always(False), "name is required", message="")
        assert binding.rule.resolved_message == ""

    def test_duplicate_on_same_property_fails(self, registry):
        registry.register("non_empty", Signup, "name", _always(True), "required")
        with pytest.raises(DuplicateRuleError) as exc_info:
            registry.register("non_empty", Signup, "name", _always(False), "required again")

        assert exc_info.value.rule_name == "non_empty"
        assert exc_info.value.property_name == "name"
        assert isinstance(exc_info.value, RuleRegistryError)

    def test_same_name_on_other_property_succeeds(self, registry):
        registry.register("non_empty", Signup, "name", _always(True), "required")
        registry.register("non_empty", Signup, "email", _always(True), "required")
        assert len(registry.lookup(Signup)) == 2

    def test_same_name_on_other_class_succeeds(self, registry):
        registry.register("non_empty", Signup, "name", _always(True), "required")
        registry.register("non_empty", Login, "name", _always(True), "required")
        assert registry.rule_count == 2

    def test_bind_uses_definition(self, registry):
        definition = RuleDefinition(name="never", evaluate=_always(False), default_message="nope")
        binding = registry.bind(Signup, "email", definition, message="bad email")
        assert binding.rule.name == "never"
        assert binding.rule.default_message == "nope"
        assert binding.rule.message == "bad email"

    def test_rules_are_immutable(self, registry):
        binding = registry.register("non_empty", Signup, "name", _always(True), "required")
        with pytest.raises(Exception):
            binding.rule.name = "renamed"


class TestLookup:

    def test_registration_order_is_preserved(self, registry):
        for name in ("first", "second", "third"):
            registry.register(name, Signup, "name", _always(True), name)
        registry.register("other", Signup, "email", _always(True), "other")

        names = [b.rule.name for b in registry.lookup(Signup)]
        assert names == ["first", "second", "third", "other"]

    def test_unknown_class_is_empty(self, registry):
        assert registry.lookup(Login) == ()
        assert registry.is_registered(Login) is False

    def test_lookup_is_exact_class(self, registry):
        class PremiumSignup(Signup):
            pass

        registry.register("non_empty", Signup, "name", _always(True), "required")
        assert registry.lookup(PremiumSignup) == ()


class TestFreeze:

    def test_register_after_freeze_fails(self, registry):
        registry.register("non_empty", Signup, "name", _always(True), "required")
        registry.freeze()

        with pytest.raises(RegistryFrozenError):
            registry.register("late", Signup, "email", _always(True), "too late")
        assert len(registry.lookup(Signup)) == 1

    def test_freeze_is_idempotent(self, registry):
        registry.freeze()
        registry.freeze()
        assert registry.frozen is True

    def test_lookup_snapshot_is_not_affected_by_later_registration(self, registry):
        registry.register("first", Signup, "name", _always(True), "first")
        snapshot = registry.lookup(Signup)
        registry.register("second", Signup, "name", _always(True), "second")

        assert len(snapshot) == 1
        assert len(registry.lookup(Signup)) == 2
