"""Contracts for the in-memory file tree produced by the assembler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class PackFile:
    """A single archive entry: relative path and raw bytes."""

    path: str
    content: bytes

    def __post_init__(self):
        if not self.path or self.path.startswith("/") or "\\" in self.path:
            raise ValueError(f"Invalid pack file path: {self.path!r}")

    def text(self) -> str:
        return self.content.decode("utf-8")


@dataclass(frozen=True)
class GeneratedPack:
    """
    Ordered set of files that make up one datapack.

    The order of ``files`` is the order entries are written to the archive.
    """

    archive_name: str
    files: Tuple[PackFile, ...]

    def __post_init__(self):
        paths = [pack_file.path for pack_file in self.files]
        if len(paths) != len(set(paths)):
            raise ValueError("Duplicate paths in generated pack")

    @property
    def paths(self) -> List[str]:
        return [pack_file.path for pack_file in self.files]

    def get(self, path: str) -> PackFile:
        """Return the file stored at ``path``."""
        for pack_file in self.files:
            if pack_file.path == path:
                return pack_file
        raise KeyError(path)

    def to_dict(self) -> Dict[str, str]:
        """Map of path to decoded text, used for previews and debugging."""
        return {pack_file.path: pack_file.text() for pack_file in self.files}
