"""
Writers for dense matrices to Netpbm images.

Values are rounded and clipped to 0-255. Matrix rows are image rows, top to bottom.

Classes
-------
PgmWriter : MatrixWriter
    Binary greymap (P5), one pixel per element (FileType.PGM).
PpmWriter : MatrixWriter
    Binary pixmap (P6); each row holds interleaved R, G, B values, so the column
    count must be a multiple of 3 (FileType.PPM).
"""

from pathlib import Path

import numpy as np

from ...base import MatrixWriter
from ...file_types import DENSE, FileType
from ...registry import register_writer


def to_pixels(matrix: np.ndarray) -> np.ndarray:
    if matrix.dtype.kind not in "biuf":
        raise TypeError(f"Cannot store elements of type '{matrix.dtype}' as pixels")
    return np.clip(np.rint(matrix.astype(np.float64)), 0, 255).astype(np.uint8)


def write_netpbm(path: Path, magic: str, width: int, height: int, pixels: np.ndarray):
    with Path(path).open("wb") as f:
        f.write(f"{magic}\n{width} {height}\n255\n".encode("ascii"))
        f.write(np.ascontiguousarray(pixels).tobytes())


@register_writer(DENSE, FileType.PGM)
class PgmWriter(MatrixWriter):
    def write(self, matrix: np.ndarray, path: Path):
        n_rows, n_cols = matrix.shape
        write_netpbm(path, "P5", n_cols, n_rows, to_pixels(matrix))


@register_writer(DENSE, FileType.PPM)
class PpmWriter(MatrixWriter):
    def write(self, matrix: np.ndarray, path: Path):
        n_rows, n_cols = matrix.shape
        if n_cols % 3:
            raise ValueError(
                f"PPM rows hold R,G,B triples; {n_cols} columns is not a multiple of 3"
            )
        write_netpbm(path, "P6", n_cols // 3, n_rows, to_pixels(matrix))
