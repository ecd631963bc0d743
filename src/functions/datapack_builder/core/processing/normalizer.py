"""
Config normalization service.

Turns a loosely-typed request record into a strict PackConfig. Most input
slips are corrected in place (defaults, clamping, truncation); only values
that would corrupt generated file paths or command text are rejected.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Tuple

from pydantic import ValidationError as ModelValidationError

from ..contracts.pack_config import (
    DEFAULT_AMPLIFIER,
    DEFAULT_DURATION,
    DEFAULT_EFFECT_ID,
    DEFAULT_ITEM_ID,
    DEFAULT_PACK_NAME,
    MAX_AMPLIFIER,
    MAX_DURATION,
    MAX_MESSAGE_LENGTH,
    MIN_AMPLIFIER,
    MIN_DURATION,
    NAMESPACE_PATTERN,
    RESOURCE_LOCATION_PATTERN,
    InvalidIdentifierError,
    InvalidNamespaceError,
    InvalidNumberError,
    PackConfig,
    ValidationError,
)
from ..effects import get_effect
from .slugify import slugify

logger = logging.getLogger(__name__)

# Accepted spellings for each field, checked in order.
FIELD_ALIASES = {
    "pack_name": ("packName", "pack_name", "modName", "mod_name"),
    "namespace": ("namespace",),
    "item_id": ("itemId", "item_id"),
    "effect_id": ("effectId", "effect_id"),
    "duration": ("duration",),
    "amplifier": ("amplifier",),
    "message": ("message",),
}


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


class ConfigNormalizer:
    """
    Validates and coerces raw request records into PackConfig values.

    Example:
        normalizer = ConfigNormalizer()
        config = normalizer.normalize({"packName": "Speed Amulet", "duration": 999})
        assert config.duration == 60
    """

    def normalize(self, raw: Optional[Mapping[str, Any]]) -> PackConfig:
        """
        Build a PackConfig from raw input.

        Args:
            raw: Request record; keys may use camelCase or snake_case

        Returns:
            Validated PackConfig

        Raises:
            InvalidNumberError: duration or amplifier is not numeric
            InvalidNamespaceError: namespace has characters outside [a-z0-9_-]
            InvalidIdentifierError: effect id is not a resource location, or item
                id contains control characters
        """
        raw = raw or {}

        pack_name = self._string(raw, "pack_name") or DEFAULT_PACK_NAME
        namespace = self._string(raw, "namespace") or slugify(pack_name)
        if not NAMESPACE_PATTERN.fullmatch(namespace):
            raise InvalidNamespaceError(namespace)

        item_id = self._string(raw, "item_id") or DEFAULT_ITEM_ID
        if any(ord(char) < 0x20 or ord(char) == 0x7f for char in item_id):
            raise InvalidIdentifierError("item_id", item_id)
        effect_id = self._string(raw, "effect_id") or DEFAULT_EFFECT_ID
        if not RESOURCE_LOCATION_PATTERN.fullmatch(effect_id):
            raise InvalidIdentifierError("effect_id", effect_id)

        effect = get_effect(effect_id)
        if effect is None:
            logger.debug("Effect %s not in catalog; passing through verbatim", effect_id)
        default_duration = effect.default_duration if effect else DEFAULT_DURATION
        default_amplifier = effect.default_amplifier if effect else DEFAULT_AMPLIFIER

        duration, duration_given = self._integer(raw, "duration", default_duration)
        amplifier, amplifier_given = self._integer(raw, "amplifier", default_amplifier)
        clamped_duration = clamp(duration, MIN_DURATION, MAX_DURATION)
        clamped_amplifier = clamp(amplifier, MIN_AMPLIFIER, MAX_AMPLIFIER)
        if duration_given and clamped_duration != duration:
            logger.info("Clamped duration %d -> %d", duration, clamped_duration)
        if amplifier_given and clamped_amplifier != amplifier:
            logger.info("Clamped amplifier %d -> %d", amplifier, clamped_amplifier)

        message = self._message(raw)

        try:
            return PackConfig(
                pack_name=pack_name,
                namespace=namespace,
                item_id=item_id,
                effect_id=effect_id,
                duration=clamped_duration,
                amplifier=clamped_amplifier,
                message=message,
            )
        except ModelValidationError as exc:
            error = exc.errors()[0]
            field = str(error.get("loc", ("config",))[0])
            raise ValidationError(field, f"{field}: {error.get('msg')}") from exc

    @staticmethod
    def _lookup(raw: Mapping[str, Any], field: str) -> Any:
        for key in FIELD_ALIASES[field]:
            if key in raw and raw[key] is not None:
                return raw[key]
        return None

    def _string(self, raw: Mapping[str, Any], field: str) -> str:
        value = self._lookup(raw, field)
        if value is None:
            return ""
        return str(value).strip()

    def _integer(self, raw: Mapping[str, Any], field: str, default: int) -> Tuple[int, bool]:
        """Return (value, was_supplied); fractional input truncates toward zero."""
        value = self._lookup(raw, field)
        if value is None or (isinstance(value, str) and not value.strip()):
            return default, False

        if isinstance(value, bool):
            raise InvalidNumberError(field, value)
        if isinstance(value, int):
            return value, True

        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (TypeError, ValueError):
            raise InvalidNumberError(field, value)
        if math.isnan(number) or math.isinf(number):
            raise InvalidNumberError(field, value)
        return int(number), True

    def _message(self, raw: Mapping[str, Any]) -> Optional[str]:
        value = self._lookup(raw, "message")
        if value is None:
            return None
        message = str(value).strip()[:MAX_MESSAGE_LENGTH].strip()
        return message or None


_default_normalizer = ConfigNormalizer()


def normalize_pack_config(raw: Optional[Mapping[str, Any]]) -> PackConfig:
    """Module-level shortcut for ConfigNormalizer().normalize(raw)."""
    return _default_normalizer.normalize(raw)
