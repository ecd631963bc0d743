"""
Command text builders for generated function scripts.

Every user-supplied value embedded in a command goes through
``quote_command_string`` first. Identifiers that the host parses unquoted
(effect ids) are validated by the normalizer before they reach this module.
"""

from __future__ import annotations

from ..contracts.pack_config import PackConfig

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(char: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    if ord(char) < 0x20:
        return f"\\u{ord(char):04x}"
    return char


def escape_command_string(value: str) -> str:
    """Escape backslashes, double quotes and control characters for a quoted literal."""
    return "".join(_escape_char(char) for char in value)


def quote_command_string(value: str) -> str:
    """
    Render ``value`` as a double-quoted string literal.

    The result is valid both as a JSON string (tellraw text component) and as
    a quoted SNBT string, and decodes back to ``value``.
    """
    return f'"{escape_command_string(value)}"'


def tellraw_command(selector: str, text: str) -> str:
    return f"tellraw {selector} {quote_command_string(text)}"


def held_item_selector(item_id: str, base: str = "@a") -> str:
    """Selector matching entities whose selected hotbar slot holds ``item_id``."""
    return f"{base}[nbt={{SelectedItem:{{id:{quote_command_string(item_id)}}}}}]"


def effect_give_command(
    target: str,
    effect_id: str,
    duration: int,
    amplifier: int,
    hide_particles: bool = True,
) -> str:
    """Build ``effect give <target> <effect> <seconds> <amplifier> <hideParticles>``."""
    flag = "true" if hide_particles else "false"
    return f"effect give {target} {effect_id} {int(duration)} {int(amplifier)} {flag}"


def execute_as_command(selector: str, command: str) -> str:
    return f"execute as {selector} run {command}"


def command_preview(config: PackConfig) -> str:
    """The per-tick command line a client shows before downloading."""
    return execute_as_command(
        held_item_selector(config.item_id),
        effect_give_command("@s", config.effect_id, config.duration, config.amplifier),
    )
