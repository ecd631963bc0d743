"""Data contracts and error types for datapack generation."""

from .pack_config import (
    PackConfig,
    ValidationError,
    InvalidNumberError,
    InvalidNamespaceError,
    InvalidIdentifierError,
    AssemblyError,
    EmptyNamespaceError,
)
from .generated_pack import GeneratedPack, PackFile

__all__ = [
    # Configuration
    "PackConfig",
    # Validation errors
    "ValidationError",
    "InvalidNumberError",
    "InvalidNamespaceError",
    "InvalidIdentifierError",
    # Assembly errors
    "AssemblyError",
    "EmptyNamespaceError",
    # Generated output
    "GeneratedPack",
    "PackFile",
]
