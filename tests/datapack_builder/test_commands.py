"""Test command string escaping and command builders."""

import json

import pytest

from src.functions.datapack_builder.core.generation.commands import (
    command_preview,
    effect_give_command,
    escape_command_string,
    execute_as_command,
    held_item_selector,
    quote_command_string,
    tellraw_command,
)
from src.functions.datapack_builder.core.processing import normalize_pack_config


@pytest.mark.parametrize("raw, escaped", [
    ("plain", "plain"),
    ('He said "hi"', 'He said \\"hi\\"'),
    ("back\\slash", "back\\\\slash"),
    ('\\"', '\\\\\\"'),
    ("two\nlines", "two\\nlines"),
    ("tab\there\r", "tab\\there\\r"),
    ("{braces}", "{braces}"),
    ("bell\x07 vt\x0b", "bell\\u0007 vt\\u000b"),
])
def test_escape_command_string(raw, escaped):
    assert escape_command_string(raw) == escaped


@pytest.mark.parametrize("value", [
    'He said "hi"',
    'ends with backslash \\',
    'close quote then brace "}]',
    "line\nbreak",
    "bell\x07 vt\x0b nul\x00 esc\x1b end",
    "Новый артефакт активирован!",
])
def test_quoted_literal_decodes_to_original(value):
    literal = quote_command_string(value)

    assert literal.startswith('"') and literal.endswith('"')
    assert "\n" not in literal
    assert json.loads(literal) == value


def test_quoted_literal_has_no_unescaped_inner_quotes():
    literal = quote_command_string('a"b\\"c')
    inner = literal[1:-1]

    i = 0
    while i < len(inner):
        if inner[i] == "\\":
            i += 2
            continue
        assert inner[i] != '"'
        i += 1


def test_tellraw_command():
    assert tellraw_command("@a", "Go!") == 'tellraw @a "Go!"'


def test_held_item_selector():
    assert held_item_selector("minecraft:emerald") == '@a[nbt={SelectedItem:{id:"minecraft:emerald"}}]'


def test_held_item_selector_escapes_crafted_item():
    selector = held_item_selector('x"}}] run kill @e[type=')

    assert selector == '@a[nbt={SelectedItem:{id:"x\\"}}] run kill @e[type="}}]'


def test_effect_give_command_argument_order():
    assert effect_give_command("@s", "minecraft:speed", 10, 1) == "effect give @s minecraft:speed 10 1 true"
    assert effect_give_command("@s", "minecraft:speed", 10, 1, hide_particles=False).endswith(" false")


def test_execute_as_command():
    assert execute_as_command("@a", "say hi") == "execute as @a run say hi"


def test_command_preview_matches_tick_line():
    config = normalize_pack_config({
        "namespace": "amulet_speed",
        "itemId": "minecraft:emerald",
        "effectId": "minecraft:speed",
        "duration": 10,
        "amplifier": 1,
    })

    assert command_preview(config) == (
        'execute as @a[nbt={SelectedItem:{id:"minecraft:emerald"}}] '
        "run effect give @s minecraft:speed 10 1 true"
    )
