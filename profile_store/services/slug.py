"""
Slug derivation and lookup filters for profiles.

A slug is the profile name lowercased with every whitespace run collapsed
to a single hyphen ("Anna Marie Lee" -> "anna-marie-lee"). Profiles store
their slug, so lookups are an equality match on an indexed field. Records
written before the slug was persisted are matched on ``name`` instead.
"""

import re
from typing import Any, Dict

_WHITESPACE = re.compile(r"\s+")

# A hyphen in a key may come from a literal hyphen or from whitespace
_SEPARATOR_PATTERN = r"(?:\s+|-)"


def slugify(name: str) -> str:
    """Derive the lookup key for a profile name."""
    return _WHITESPACE.sub("-", name.lower())


def legacy_name_pattern(profile_key: str) -> str:
    """
    Build an anchored regex matching the names that produce ``profile_key``.

    Key text is escaped, so characters such as ``.`` or ``+`` in a name
    match literally.
    """
    parts = slugify(profile_key).split("-")
    return "^" + _SEPARATOR_PATTERN.join(re.escape(part) for part in parts) + "$"


def profile_key_filter(profile_key: str) -> Dict[str, Any]:
    """MongoDB filter selecting the profiles addressed by ``profile_key``."""
    slug = slugify(profile_key)
    return {
        "$or": [
            {"slug": slug},
            {
                "slug": {"$exists": False},
                "name": {"$regex": legacy_name_pattern(slug), "$options": "i"},
            },
        ]
    }
