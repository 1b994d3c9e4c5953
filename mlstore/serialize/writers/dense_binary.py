"""
Writers for dense matrices to binary formats.

Both formats store elements in column-major order, little-endian. Raw binary
converts every element to float64, the only type its reader knows.

Classes
-------
RawBinaryWriter : MatrixWriter
    Float64 element bytes only; the shape is not stored (FileType.RAW_BINARY).
ArmaBinaryWriter : MatrixWriter
    Element bytes behind an ``ARMA_MAT_BIN`` header (FileType.ARMA_BINARY).
"""

from pathlib import Path

import numpy as np

from ...base import MatrixWriter
from ...file_types import DENSE, FileType
from ...registry import register_writer
from .. import arma


def column_major_bytes(matrix: np.ndarray) -> bytes:
    return matrix.astype(arma.storage_dtype(matrix.dtype), copy=False).tobytes(order="F")


def raw_bytes(matrix: np.ndarray) -> bytes:
    """Column-major float64 bytes; the raw layout cannot tag its element type."""
    if np.iscomplexobj(matrix):
        raise TypeError(f"Raw binary cannot hold complex elements (got {matrix.dtype})")
    return matrix.astype(arma.RAW_DTYPE, copy=False).tobytes(order="F")


@register_writer(DENSE, FileType.RAW_BINARY)
class RawBinaryWriter(MatrixWriter):
    def write(self, matrix: np.ndarray, path: Path):
        with Path(path).open("wb") as f:
            f.write(raw_bytes(matrix))


@register_writer(DENSE, FileType.ARMA_BINARY)
class ArmaBinaryWriter(MatrixWriter):
    """
    Layout::

        ARMA_MAT_BIN_FN008\\n
        <rows> <cols>\\n
        <rows * cols elements, column-major>
    """

    def write(self, matrix: np.ndarray, path: Path):
        n_rows, n_cols = matrix.shape
        head = f"{arma.header(arma.MAT_BIN, matrix.dtype)}\n{n_rows} {n_cols}\n"
        with Path(path).open("wb") as f:
            f.write(head.encode("ascii"))
            f.write(column_major_bytes(matrix))
