"""String normalizers applied before field validation.

Used as pydantic ``BeforeValidator``s on request models. Non-string input is
passed through untouched so the field's own type check reports it.
"""

import json
from typing import Annotated, Any

from pydantic import BeforeValidator


def trim(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def to_lower_case(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def parse_id_list(value: Any) -> Any:
    """Accept ``[1, 2]``, ``"[1, 2]"`` or ``"1,2"``; empty input becomes None."""
    if not value:
        return None

    if isinstance(value, (list, tuple)):
        return list(value)

    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return parsed
        if isinstance(parsed, str):
            value = parsed
        return [part.strip() for part in value.split(",") if part.strip()]

    return value


TrimmedStr = Annotated[str, BeforeValidator(trim)]
NormalizedStr = Annotated[str, BeforeValidator(to_lower_case), BeforeValidator(trim)]
