"""Display-name to namespace slug conversion."""

from __future__ import annotations

import re

DEFAULT_SLUG = "custom_mod"

_CYRILLIC_MAP = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "c", "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "",
    "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def transliterate(value: str) -> str:
    """Replace Cyrillic letters with Latin equivalents, keeping case."""
    chars = []
    for char in value:
        lower = char.lower()
        mapped = _CYRILLIC_MAP.get(lower)
        if not mapped:
            # Hard and soft signs map to "" and are dropped.
            chars.append("" if mapped == "" else char)
        elif char == lower:
            chars.append(mapped)
        else:
            chars.append(mapped.upper())
    return "".join(chars)


def slugify(value: str, fallback: str = DEFAULT_SLUG) -> str:
    """
    Turn a display name into a namespace-safe slug.

    Example:
        >>> slugify("Амулет стремительности")
        'amulet_stremitelnosti'
    """
    slug = _NON_SLUG_CHARS.sub("_", transliterate(value or "").lower()).strip("_")
    return slug or fallback
