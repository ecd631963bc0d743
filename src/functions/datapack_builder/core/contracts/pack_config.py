"""
Pack configuration contracts and validation errors.

This module defines the strict, immutable configuration a datapack is built
from, plus the error taxonomy raised by the normalizer and the assembler.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_PACK_NAME = "Agentic Artifact"
DEFAULT_ITEM_ID = "minecraft:emerald"
DEFAULT_EFFECT_ID = "minecraft:speed"
DEFAULT_DURATION = 10
DEFAULT_AMPLIFIER = 1

MIN_DURATION = 2
MAX_DURATION = 60
MIN_AMPLIFIER = 0
MAX_AMPLIFIER = 4
MAX_MESSAGE_LENGTH = 120

NAMESPACE_PATTERN = re.compile(r"^[a-z0-9_-]+$")
# Namespace part is optional; the host resolves bare paths under "minecraft".
RESOURCE_LOCATION_PATTERN = re.compile(r"^(?:[a-z0-9_.-]+:)?[a-z0-9_./-]+$")


class ValidationError(ValueError):
    """Raised when user input cannot be turned into a PackConfig."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class InvalidNumberError(ValidationError):
    """A numeric field could not be parsed as a number."""

    def __init__(self, field: str, value: object):
        super().__init__(field, f"{field} must be a number, got {value!r}")
        self.value = value


class InvalidNamespaceError(ValidationError):
    """Namespace contains characters outside [a-z0-9_-]."""

    def __init__(self, namespace: str):
        super().__init__(
            "namespace",
            f"Invalid namespace {namespace!r}: only lowercase letters, digits, '_' and '-' are allowed",
        )
        self.namespace = namespace


class InvalidIdentifierError(ValidationError):
    """Identifier is not a syntactically valid resource location."""

    def __init__(self, field: str, identifier: str):
        super().__init__(field, f"Invalid {field} {identifier!r}: expected a resource location like 'minecraft:speed'")
        self.identifier = identifier


class AssemblyError(RuntimeError):
    """Internal invariant violation while assembling a pack."""
    pass


class EmptyNamespaceError(AssemblyError):
    """A config without a usable namespace reached the assembler."""

    def __init__(self, namespace: str = ""):
        super().__init__(f"Cannot assemble pack with namespace {namespace!r}")
        self.namespace = namespace


class PackConfig(BaseModel):
    """Validated, immutable datapack configuration."""

    model_config = ConfigDict(frozen=True)

    pack_name: str = Field(default=DEFAULT_PACK_NAME, min_length=1)
    namespace: str = Field(..., min_length=1, pattern=NAMESPACE_PATTERN.pattern)
    item_id: str = Field(default=DEFAULT_ITEM_ID, min_length=1)
    effect_id: str = Field(default=DEFAULT_EFFECT_ID, min_length=1, pattern=RESOURCE_LOCATION_PATTERN.pattern)
    duration: int = Field(default=DEFAULT_DURATION, ge=MIN_DURATION, le=MAX_DURATION)
    amplifier: int = Field(default=DEFAULT_AMPLIFIER, ge=MIN_AMPLIFIER, le=MAX_AMPLIFIER)
    message: Optional[str] = Field(default=None, max_length=MAX_MESSAGE_LENGTH)

    @field_validator("pack_name", "item_id")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "value must not be blank"
            raise ValueError(msg)
        return value

    @field_validator("message")
    @classmethod
    def _validate_message(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def load_function(self) -> str:
        """Resource location of the generated load script."""
        return f"{self.namespace}:load"

    @property
    def tick_function(self) -> str:
        """Resource location of the generated tick script."""
        return f"{self.namespace}:tick"

    @property
    def archive_name(self) -> str:
        return f"{self.namespace}-datapack.zip"
