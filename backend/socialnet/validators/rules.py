"""Built-in business rules.

Each factory returns a RuleDefinition whose predicate has the uniform shape
``(value, instance) -> bool``. Predicates never raise for bad data: missing or
malformed input simply fails (or passes vacuously for conditional rules).
"""

from datetime import date, datetime
from typing import Any, Callable, Iterable, Optional

from socialnet.validators.evaluator import read_property
from socialnet.validators.models import RuleDefinition

DEFAULT_MIN_AGE = 15
DEFAULT_MAX_AGE = 100

Clock = Callable[[], date]


# ── Age ──

def parse_birth_date(value: Any) -> Optional[date]:
    """Coerce a birth date value to ``date``; None when missing or malformed.

    Accepts ``date``, ``datetime`` and ISO-8601 strings. Booleans, numbers and
    every other type are rejected.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def compute_age(birth: date, today: date) -> int:
    """Whole years between ``birth`` and ``today``.

    Decremented by one while today precedes this year's anniversary, so a
    Feb 29 birthday counts from Mar 1 in non-leap years.
    """
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def is_adult(
    min_age: int = DEFAULT_MIN_AGE,
    max_age: int = DEFAULT_MAX_AGE,
    clock: Clock = date.today,
) -> RuleDefinition:
    """Age computed from the value must fall in ``[min_age, max_age]`` inclusive."""

    def predicate(value: Any, _instance: Any) -> bool:
        birth = parse_birth_date(value)
        if birth is None:
            return False
        return min_age <= compute_age(birth, clock()) <= max_age

    return RuleDefinition(
        name="is_adult",
        evaluate=predicate,
        default_message=f"User must be between {min_age} and {max_age} years old",
    )


# ── Conditional ──

def required_if(
    name: str,
    trigger_field: str,
    trigger_values: Iterable[Any],
    companion_field: str,
    message: str,
) -> RuleDefinition:
    """``companion_field`` must be non-null whenever ``trigger_field`` is one of
    ``trigger_values``. Vacuously true otherwise."""
    triggers = tuple(trigger_values)

    def predicate(_value: Any, instance: Any) -> bool:
        trigger = read_property(instance, trigger_field)
        if trigger is None or trigger not in triggers:
            return True
        return read_property(instance, companion_field) is not None

    return RuleDefinition(name=name, evaluate=predicate, default_message=message)


def forbidden_if(
    name: str,
    trigger_field: str,
    trigger_values: Iterable[Any],
    message: str,
) -> RuleDefinition:
    """The bound value must be null whenever ``trigger_field`` is one of
    ``trigger_values``."""
    triggers = tuple(trigger_values)

    def predicate(value: Any, instance: Any) -> bool:
        trigger = read_property(instance, trigger_field)
        if trigger is not None and trigger in triggers:
            return value is None
        return True

    return RuleDefinition(name=name, evaluate=predicate, default_message=message)


def skip_if_missing(definition: RuleDefinition) -> RuleDefinition:
    """Wrap a rule so an absent (None) value passes. For optional fields."""
    inner = definition.evaluate

    def predicate(value: Any, instance: Any) -> bool:
        if value is None:
            return True
        return inner(value, instance)

    return definition.model_copy(update={"evaluate": predicate})


# ── Posts ──

def parent_required_for_reply_or_quote() -> RuleDefinition:
    return required_if(
        name="parent_required_for_reply_or_quote",
        trigger_field="type",
        trigger_values=("REPLY", "QUOTE"),
        companion_field="parent_id",
        message="parent_id is required when type is REPLY or QUOTE",
    )


def parent_id_allowed() -> RuleDefinition:
    return forbidden_if(
        name="parent_id_allowed",
        trigger_field="type",
        trigger_values=("POST",),
        message="parent_id is not allowed when type is POST",
    )


def content_required_if_no_media() -> RuleDefinition:
    """Content must be a non-blank string unless at least one media item is attached."""

    def predicate(value: Any, instance: Any) -> bool:
        media = read_property(instance, "media")
        has_media = isinstance(media, (list, tuple)) and len(media) > 0
        if has_media:
            return True
        return isinstance(value, str) and len(value.strip()) > 0

    return RuleDefinition(
        name="content_required_if_no_media",
        evaluate=predicate,
        default_message="Content is required when no media is provided",
    )
