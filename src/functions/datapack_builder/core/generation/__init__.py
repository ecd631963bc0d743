"""
Pack generation services.

Builds function scripts and metadata for a PackConfig and serializes them
into a deterministic zip archive.
"""

from .archive import write_zip
from .commands import (
    command_preview,
    effect_give_command,
    escape_command_string,
    execute_as_command,
    held_item_selector,
    quote_command_string,
    tellraw_command,
)
from .pack_builder import PackAssembler, assemble_pack

__all__ = [
    "PackAssembler",
    "assemble_pack",
    "write_zip",
    "command_preview",
    "effect_give_command",
    "escape_command_string",
    "execute_as_command",
    "held_item_selector",
    "quote_command_string",
    "tellraw_command",
]
