"""
Readers for dense matrices stored as binary.

Classes
-------
RawBinaryReader : MatrixReader
    Headerless float64 elements; the shape is unknown, so the result is a single
    column (FileType.RAW_BINARY).
ArmaBinaryReader : MatrixReader
    ``ARMA_MAT_BIN`` header, size line, then column-major elements
    (FileType.ARMA_BINARY).
"""

from pathlib import Path

import numpy as np

from ...base import MatrixReader
from ...file_types import DENSE, FileType
from ...registry import register_reader
from .. import arma

def read_raw_column(path: Path) -> np.ndarray:
    data = Path(path).read_bytes()
    return np.frombuffer(data, dtype=arma.RAW_DTYPE).astype(np.float64).reshape(-1, 1)


@register_reader(DENSE, FileType.RAW_BINARY)
class RawBinaryReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        return read_raw_column(path)


@register_reader(DENSE, FileType.ARMA_BINARY)
class ArmaBinaryReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        with Path(path).open("rb") as f:
            dtype, sizes = arma.read_binary_header(f, arma.MAT_BIN)
            if len(sizes) != 2:
                raise ValueError(f"Malformed size line {sizes}")
            n_rows, n_cols = sizes
            values = np.frombuffer(f.read(), dtype=dtype, count=n_rows * n_cols)

        return values.astype(dtype.newbyteorder("=")).reshape((n_rows, n_cols), order="F")
