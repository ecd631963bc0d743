"""
Input processing services.

Normalizes raw request records into validated pack configurations.
"""

from .normalizer import ConfigNormalizer, normalize_pack_config
from .slugify import slugify, transliterate

__all__ = [
    "ConfigNormalizer",
    "normalize_pack_config",
    "slugify",
    "transliterate",
]
