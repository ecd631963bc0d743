"""Assembler settings and host-format constants."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.shared.utils.config_validator import validate_int_env

# Java Edition 1.20.5/1.20.6. Later formats rename the "functions" and
# "tags/functions" directories to their singular forms.
PACK_FORMAT = 41

PACK_METADATA_PATH = "pack.mcmeta"
LOAD_TAG_PATH = "data/minecraft/tags/functions/load.json"
TICK_TAG_PATH = "data/minecraft/tags/functions/tick.json"
FUNCTION_DIR_TEMPLATE = "data/{namespace}/functions"
FUNCTION_EXTENSION = ".mcfunction"

# Earliest timestamp a zip entry can carry.
ARCHIVE_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


class AssemblerSettings(BaseModel):
    """Operational settings for pack assembly."""

    model_config = ConfigDict(frozen=True)

    pack_format: int = Field(default=PACK_FORMAT, ge=4, le=99)
    compression_level: int = Field(default=6, ge=0, le=9)

    @classmethod
    def from_env(cls) -> "AssemblerSettings":
        """
        Read settings from the environment.

        Environment variables:
            DATAPACK_PACK_FORMAT: pack_format written to pack.mcmeta
            DATAPACK_COMPRESSION_LEVEL: deflate level 0-9

        Raises:
            ConfigurationError: If a variable is set but invalid
        """
        return cls(
            pack_format=validate_int_env("DATAPACK_PACK_FORMAT", default=PACK_FORMAT, min_value=4, max_value=99),
            compression_level=validate_int_env("DATAPACK_COMPRESSION_LEVEL", default=6, min_value=0, max_value=9),
        )
