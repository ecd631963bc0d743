"""
Deterministic in-memory zip serialization.

Entries are written in the order given, with a fixed timestamp and fixed
permissions, so identical input always produces identical bytes.
"""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Iterable

from ..config import ARCHIVE_TIMESTAMP
from ..contracts.generated_pack import PackFile

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


def write_zip(files: Iterable[PackFile], compression_level: int = 6) -> bytes:
    """
    Serialize pack files into a deflate-compressed zip archive.

    Args:
        files: Entries in archive order; paths are used verbatim
        compression_level: zlib level 0-9

    Returns:
        The complete archive as bytes
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=compression_level) as zf:
        for pack_file in files:
            info = zipfile.ZipInfo(pack_file.path, date_time=ARCHIVE_TIMESTAMP)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = (FILE_MODE & 0xFFFF) << 16
            # Force a consistent creator platform regardless of host OS.
            info.create_system = 3
            zf.writestr(info, pack_file.content, compresslevel=compression_level)
            logger.debug("Archived %s (%d bytes)", pack_file.path, len(pack_file.content))
    return buf.getvalue()
