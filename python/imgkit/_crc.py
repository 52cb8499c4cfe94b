# python/imgkit/_crc.py
# Table-driven CRC-32 (ISO-3309, reversed polynomial 0xEDB88320) for PNG chunk checksums.
# The table is built on first use and shared for the lifetime of the process.
# RELEVANT FILES:python/imgkit/png.py,tests/test_crc.py

from __future__ import annotations

import threading
from typing import Optional, Tuple

CRC32_POLYNOMIAL = 0xEDB88320

_TABLE: Optional[Tuple[int, ...]] = None
_TABLE_LOCK = threading.Lock()


def _build_table() -> Tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = CRC32_POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return tuple(table)


def crc_table() -> Tuple[int, ...]:
    """Return the 256-entry CRC-32 lookup table, building it once."""
    global _TABLE
    table = _TABLE
    if table is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = _build_table()
            table = _TABLE
    return table


def crc32(data: bytes) -> int:
    """CRC-32 of ``data`` as an unsigned 32-bit integer.

    Matches ``zlib.crc32`` and the checksum PNG decoders verify on every chunk.
    """
    table = crc_table()
    reg = 0xFFFFFFFF
    for b in bytes(data):
        reg = table[(reg ^ b) & 0xFF] ^ (reg >> 8)
    return reg ^ 0xFFFFFFFF
