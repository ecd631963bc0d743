"""
Datapack assembly service.

Builds the full list of pack files for a PackConfig and serializes it into a
zip archive. File generation and serialization are separate steps so the
generated content can be inspected without decoding an archive.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from ..config import (
    FUNCTION_DIR_TEMPLATE,
    FUNCTION_EXTENSION,
    LOAD_TAG_PATH,
    PACK_METADATA_PATH,
    TICK_TAG_PATH,
    AssemblerSettings,
)
from ..contracts.generated_pack import GeneratedPack, PackFile
from ..contracts.pack_config import NAMESPACE_PATTERN, EmptyNamespaceError, PackConfig
from .archive import write_zip
from .commands import (
    effect_give_command,
    execute_as_command,
    held_item_selector,
    tellraw_command,
)

logger = logging.getLogger(__name__)


def _json_bytes(payload: Dict[str, Any]) -> bytes:
    return (json.dumps(payload, ensure_ascii=False, indent=2) + "\n").encode("utf-8")


def _script_bytes(lines: List[str]) -> bytes:
    return ("\n".join(lines) + "\n").encode("utf-8")


class PackAssembler:
    """
    Generates datapack files and archives them.

    Files are emitted in a fixed order:
    - pack.mcmeta with the pinned pack_format
    - load and tick function tags registering this pack's scripts
    - the load script (optional broadcast)
    - the tick script (effect for players holding the item)

    Example:
        assembler = PackAssembler()
        archive = assembler.assemble(config)
    """

    def __init__(self, settings: Optional[AssemblerSettings] = None):
        self.settings = settings or AssemblerSettings()

    def assemble(self, config: PackConfig) -> bytes:
        """
        Build the archive for ``config``.

        Raises:
            EmptyNamespaceError: If the config carries no usable namespace
        """
        pack = self.build_pack(config)
        archive = write_zip(pack.files, compression_level=self.settings.compression_level)
        logger.info(
            "Assembled %s: %d files, %d bytes",
            pack.archive_name,
            len(pack.files),
            len(archive),
        )
        return archive

    def build_pack(self, config: PackConfig) -> GeneratedPack:
        """Generate every pack file in archive order without serializing."""
        namespace = config.namespace or ""
        # PackConfig.model_construct() skips validation, so check again here.
        if not namespace or not NAMESPACE_PATTERN.fullmatch(namespace):
            raise EmptyNamespaceError(namespace)

        function_dir = FUNCTION_DIR_TEMPLATE.format(namespace=namespace)
        files = (
            PackFile(PACK_METADATA_PATH, self._metadata(config)),
            PackFile(LOAD_TAG_PATH, _json_bytes({"values": [config.load_function]})),
            PackFile(TICK_TAG_PATH, _json_bytes({"values": [config.tick_function]})),
            PackFile(f"{function_dir}/load{FUNCTION_EXTENSION}", self._load_script(config)),
            PackFile(f"{function_dir}/tick{FUNCTION_EXTENSION}", self._tick_script(config)),
        )
        return GeneratedPack(archive_name=config.archive_name, files=files)

    def _metadata(self, config: PackConfig) -> bytes:
        return _json_bytes(
            {
                "pack": {
                    "pack_format": self.settings.pack_format,
                    "description": f"{config.pack_name} (generated datapack)",
                }
            }
        )

    def _load_script(self, config: PackConfig) -> bytes:
        # The host runs #minecraft:load once per (re)load, so no guard state.
        lines = [f"# {config.load_function}: runs once when the datapack loads"]
        if config.message:
            lines.append(tellraw_command("@a", config.message))
        return _script_bytes(lines)

    def _tick_script(self, config: PackConfig) -> bytes:
        # Re-applied every tick while held; the effect lapses on its own once dropped.
        command = execute_as_command(
            held_item_selector(config.item_id),
            effect_give_command(
                "@s",
                config.effect_id,
                config.duration,
                config.amplifier,
                hide_particles=True,
            ),
        )
        return _script_bytes([f"# {config.tick_function}: runs every server tick", command])


def assemble_pack(config: PackConfig, settings: Optional[AssemblerSettings] = None) -> bytes:
    """Assemble ``config`` with a one-off PackAssembler."""
    return PackAssembler(settings).assemble(config)
