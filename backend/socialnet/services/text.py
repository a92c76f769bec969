"""Text helpers for posts and accounts."""

import random
import re
from typing import Optional

HASHTAG_PATTERN = re.compile(r"#(\w+)")


def extract_hashtags(content: Optional[str]) -> list[str]:
    """Lowercased, de-duplicated hashtags in first-seen order."""
    if not content:
        return []

    tags = (match.lower() for match in HASHTAG_PATTERN.findall(content))
    return list(dict.fromkeys(tags))


def generate_username(full_name: str, rng: Optional[random.Random] = None) -> str:
    """Build a username candidate like ``doejo4821`` from ``"John Doe"``.

    Last name (or the only name) lowercased, first two letters of the first
    name, then a random number in [0, 9999]. Uniqueness is the caller's job.
    """
    rng = rng or random
    parts = full_name.split()
    first = parts[0] if parts else ""
    last = parts[1] if len(parts) > 1 else first
    return f"{last.lower()}{first[:2].lower()}{rng.randint(0, 9999)}"
