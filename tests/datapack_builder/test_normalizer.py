"""
Test config normalization.

Tests edge cases including:
- Defaults for missing fields
- Clamping of duration and amplifier
- Namespace and identifier rejection
- Numeric coercion failures
- Message truncation
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.functions.datapack_builder.core.contracts import (
    InvalidIdentifierError,
    InvalidNamespaceError,
    InvalidNumberError,
    PackConfig,
    ValidationError,
)
from src.functions.datapack_builder.core.effects import EFFECT_CATALOG, get_effect, list_effects
from src.functions.datapack_builder.core.processing import (
    ConfigNormalizer,
    normalize_pack_config,
    slugify,
)


class TestDefaults:
    """Missing fields fall back to documented defaults."""

    def test_empty_record_uses_defaults(self):
        config = normalize_pack_config({})

        assert config.pack_name == "Agentic Artifact"
        assert config.namespace == "agentic_artifact"
        assert config.item_id == "minecraft:emerald"
        assert config.effect_id == "minecraft:speed"
        assert config.duration == 10
        assert config.amplifier == 1
        assert config.message is None

    def test_none_record_uses_defaults(self):
        assert normalize_pack_config(None) == normalize_pack_config({})

    def test_namespace_defaults_to_slugified_pack_name(self):
        config = normalize_pack_config({"packName": "Амулет стремительности"})

        assert config.namespace == "amulet_stremitelnosti"

    def test_blank_strings_fall_back(self):
        config = normalize_pack_config({"packName": "  ", "itemId": "", "effectId": " "})

        assert config.pack_name == "Agentic Artifact"
        assert config.item_id == "minecraft:emerald"
        assert config.effect_id == "minecraft:speed"

    def test_catalog_defaults_for_selected_effect(self):
        config = normalize_pack_config({"effectId": "minecraft:night_vision"})

        assert config.duration == 20
        assert config.amplifier == 0

    def test_unknown_effect_passes_through(self):
        config = normalize_pack_config({"effectId": "mymod:zoomies"})

        assert config.effect_id == "mymod:zoomies"
        assert config.duration == 10
        assert config.amplifier == 1

    def test_snake_case_and_legacy_keys(self):
        config = normalize_pack_config({
            "modName": "Old Name",
            "item_id": "minecraft:stick",
            "effect_id": "minecraft:haste",
        })

        assert config.pack_name == "Old Name"
        assert config.item_id == "minecraft:stick"
        assert config.effect_id == "minecraft:haste"

    def test_string_fields_are_trimmed(self):
        config = normalize_pack_config({"packName": "  Speed Amulet ", "namespace": " amulet_speed "})

        assert config.pack_name == "Speed Amulet"
        assert config.namespace == "amulet_speed"


class TestClamping:
    """Out-of-range numbers are corrected, not rejected."""

    def test_duration_clamped_high(self):
        assert normalize_pack_config({"duration": 999}).duration == 60

    def test_duration_clamped_low(self):
        assert normalize_pack_config({"duration": 0}).duration == 2

    def test_amplifier_clamped_low(self):
        assert normalize_pack_config({"amplifier": -5}).amplifier == 0

    def test_amplifier_clamped_high(self):
        assert normalize_pack_config({"amplifier": 12}).amplifier == 4

    @pytest.mark.parametrize("raw, expected", [
        ("15", 15),
        (" 15 ", 15),
        ("15.9", 15),
        (15.0, 15),
        ("1e3", 60),
    ])
    def test_numeric_coercion(self, raw, expected):
        assert normalize_pack_config({"duration": raw}).duration == expected

    def test_empty_numeric_string_uses_default(self):
        assert normalize_pack_config({"duration": ""}).duration == 10


class TestRejection:
    """Inputs that would corrupt paths or commands are rejected."""

    def test_bad_namespace_rejected(self):
        with pytest.raises(InvalidNamespaceError) as exc_info:
            normalize_pack_config({"namespace": "Bad Name!"})

        assert exc_info.value.field == "namespace"

    def test_valid_namespace_unchanged(self):
        assert normalize_pack_config({"namespace": "amulet_speed"}).namespace == "amulet_speed"

    def test_namespace_with_hyphen_accepted(self):
        assert normalize_pack_config({"namespace": "speed-amulet-2"}).namespace == "speed-amulet-2"

    @pytest.mark.parametrize("value", ["fast", "nan", "inf", True, [10], {"v": 1}])
    def test_invalid_duration(self, value):
        with pytest.raises(InvalidNumberError) as exc_info:
            normalize_pack_config({"duration": value})

        assert exc_info.value.field == "duration"

    def test_invalid_amplifier(self):
        with pytest.raises(InvalidNumberError) as exc_info:
            normalize_pack_config({"amplifier": "two"})

        assert exc_info.value.field == "amplifier"

    @pytest.mark.parametrize("effect_id", [
        "minecraft:speed 10 1 true",
        "minecraft:speed\nsay hi",
        "Minecraft:Speed",
    ])
    def test_effect_id_must_be_resource_location(self, effect_id):
        with pytest.raises(InvalidIdentifierError):
            normalize_pack_config({"effectId": effect_id})

    @pytest.mark.parametrize("item_id", [
        "minecraft:emerald\nsay hi",
        "minecraft:\temerald",
        "minecraft:emerald\x7f",
    ])
    def test_item_id_with_control_characters_rejected(self, item_id):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            normalize_pack_config({"itemId": item_id})

        assert exc_info.value.field == "item_id"

    def test_validation_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            normalize_pack_config({"namespace": "UPPER"})

    def test_class_and_shortcut_agree(self):
        raw = {"packName": "Speed Amulet", "duration": "7"}

        assert ConfigNormalizer().normalize(raw) == normalize_pack_config(raw)

    def test_error_carries_field_name(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_pack_config({"amplifier": "lots"})

        assert exc_info.value.field == "amplifier"
        assert "amplifier" in str(exc_info.value)


class TestMessage:
    """Message handling."""

    def test_message_truncated(self):
        config = normalize_pack_config({"message": "x" * 500})

        assert config.message == "x" * 120

    def test_blank_message_suppressed(self):
        assert normalize_pack_config({"message": "   "}).message is None

    def test_message_kept(self):
        assert normalize_pack_config({"message": 'He said "hi"'}).message == 'He said "hi"'


class TestPackConfig:
    """Model-level guarantees."""

    def test_config_is_frozen(self):
        config = normalize_pack_config({})

        with pytest.raises(Exception):
            config.duration = 30

    def test_direct_construction_still_validates_namespace(self):
        with pytest.raises(PydanticValidationError):
            PackConfig(namespace="Bad Name!")

    def test_function_ids_and_archive_name(self):
        config = PackConfig(namespace="amulet_speed")

        assert config.load_function == "amulet_speed:load"
        assert config.tick_function == "amulet_speed:tick"
        assert config.archive_name == "amulet_speed-datapack.zip"


class TestSlugify:
    """Display name slugs."""

    def test_latin(self):
        assert slugify("Speed Amulet!") == "speed_amulet"

    def test_cyrillic_keeps_multi_letter_mappings(self):
        assert slugify("Щит Жизни") == "shchit_zhizni"

    def test_empty_falls_back(self):
        assert slugify("!!!") == "custom_mod"
        assert slugify("", fallback="pack") == "pack"


class TestEffectCatalog:
    """Static effect reference data."""

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            EFFECT_CATALOG["minecraft:speed"] = None

    def test_bare_path_resolves_to_minecraft(self):
        assert get_effect("speed") is EFFECT_CATALOG["minecraft:speed"]

    def test_unknown_effect(self):
        assert get_effect("minecraft:levitation_plus") is None
        assert get_effect(None) is None

    def test_defaults_within_valid_ranges(self):
        for option in list_effects():
            assert 2 <= option.default_duration <= 60
            assert 0 <= option.default_amplifier <= 4
