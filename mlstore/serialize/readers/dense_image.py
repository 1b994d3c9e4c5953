"""
Readers for binary Netpbm images (P5 greymaps, P6 pixmaps).

PPM pixels come back as interleaved R, G, B columns, matching ``PpmWriter``.
"""

from pathlib import Path
from typing import List, Tuple

import numpy as np

from ...base import MatrixReader
from ...file_types import DENSE, FileType
from ...registry import register_reader


def _header(data: bytes) -> Tuple[List[bytes], int]:
    """Split the four header tokens (magic, width, height, maxval) off *data*."""
    tokens, pos = [], 0
    while len(tokens) < 4:
        while pos < len(data) and data[pos : pos + 1].isspace():
            pos += 1
        if data[pos : pos + 1] == b"#":
            pos = data.index(b"\n", pos) + 1
            continue
        start = pos
        while pos < len(data) and not data[pos : pos + 1].isspace():
            pos += 1
        if start == pos:
            raise ValueError("Truncated Netpbm header")
        tokens.append(data[start:pos])
    return tokens, pos + 1  # single whitespace before the raster


def read_netpbm(path: Path, magic: bytes, channels: int) -> np.ndarray:
    data = Path(path).read_bytes()
    tokens, offset = _header(data)
    if tokens[0] != magic:
        raise ValueError(f"Expected a {magic.decode()} image, got {tokens[0][:8]!r}")

    width, height, maxval = (int(t) for t in tokens[1:])
    dtype = np.dtype("u1") if maxval < 256 else np.dtype(">u2")
    pixels = np.frombuffer(
        data, dtype=dtype, count=width * height * channels, offset=offset
    )
    return pixels.astype(dtype.newbyteorder("=")).reshape(height, width * channels)


@register_reader(DENSE, FileType.PGM)
class PgmReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        return read_netpbm(path, b"P5", 1)


@register_reader(DENSE, FileType.PPM)
class PpmReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        return read_netpbm(path, b"P6", 3)
