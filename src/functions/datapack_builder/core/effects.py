"""
Static effect catalog.

Maps status effect identifiers to display metadata and the defaults a client
pre-fills when the effect is selected. The catalog is built once at import
and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class EffectOption:
    """Display metadata and defaults for one status effect."""

    id: str
    label: str
    default_duration: int
    default_amplifier: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "defaultDuration": self.default_duration,
            "defaultAmplifier": self.default_amplifier,
            "description": self.description,
        }


_EFFECT_OPTIONS = (
    EffectOption(
        id="minecraft:speed",
        label="Speed",
        default_duration=10,
        default_amplifier=1,
        description="Increases walking speed while the item is held.",
    ),
    EffectOption(
        id="minecraft:haste",
        label="Haste",
        default_duration=10,
        default_amplifier=1,
        description="Mine and attack faster.",
    ),
    EffectOption(
        id="minecraft:strength",
        label="Strength",
        default_duration=8,
        default_amplifier=0,
        description="Increases melee damage.",
    ),
    EffectOption(
        id="minecraft:jump_boost",
        label="Jump Boost",
        default_duration=10,
        default_amplifier=1,
        description="Jump higher and take less fall damage.",
    ),
    EffectOption(
        id="minecraft:regeneration",
        label="Regeneration",
        default_duration=6,
        default_amplifier=0,
        description="Slowly restores health over time.",
    ),
    EffectOption(
        id="minecraft:resistance",
        label="Resistance",
        default_duration=10,
        default_amplifier=0,
        description="Reduces incoming damage.",
    ),
    EffectOption(
        id="minecraft:fire_resistance",
        label="Fire Resistance",
        default_duration=15,
        default_amplifier=0,
        description="Immunity to fire and lava damage.",
    ),
    EffectOption(
        id="minecraft:water_breathing",
        label="Water Breathing",
        default_duration=15,
        default_amplifier=0,
        description="Breathe underwater.",
    ),
    EffectOption(
        id="minecraft:night_vision",
        label="Night Vision",
        default_duration=20,
        default_amplifier=0,
        description="See clearly in the dark. Longer durations avoid the flicker near expiry.",
    ),
    EffectOption(
        id="minecraft:invisibility",
        label="Invisibility",
        default_duration=10,
        default_amplifier=0,
        description="Become invisible to other players and most mobs.",
    ),
    EffectOption(
        id="minecraft:slow_falling",
        label="Slow Falling",
        default_duration=10,
        default_amplifier=0,
        description="Fall slowly and take no fall damage.",
    ),
    EffectOption(
        id="minecraft:dolphins_grace",
        label="Dolphin's Grace",
        default_duration=10,
        default_amplifier=0,
        description="Swim much faster.",
    ),
    EffectOption(
        id="minecraft:luck",
        label="Luck",
        default_duration=30,
        default_amplifier=0,
        description="Better loot table rolls.",
    ),
)

EFFECT_CATALOG: Mapping[str, EffectOption] = MappingProxyType(
    {option.id: option for option in _EFFECT_OPTIONS}
)

DEFAULT_EFFECT: EffectOption = EFFECT_CATALOG["minecraft:speed"]


def get_effect(effect_id: Optional[str]) -> Optional[EffectOption]:
    """
    Look up an effect by identifier.

    Bare paths such as ``"speed"`` resolve under the ``minecraft`` namespace,
    the same way the game resolves them.
    """
    if not effect_id:
        return None
    key = effect_id.strip()
    if ":" not in key:
        key = f"minecraft:{key}"
    return EFFECT_CATALOG.get(key)


def list_effects() -> List[EffectOption]:
    """All catalog entries in display order."""
    return list(EFFECT_CATALOG.values())
