"""
Readers for dense matrices stored as text.

Classes
-------
CsvReader : MatrixReader
    Comma-separated values without header (FileType.CSV).
RawAsciiReader : MatrixReader
    Whitespace-separated values without header (FileType.RAW_ASCII).
ArmaAsciiReader : MatrixReader
    ``ARMA_MAT_TXT`` header, size line, then whitespace-separated values
    (FileType.ARMA_ASCII).
"""

from pathlib import Path

import numpy as np
import pandas as pd

from ...base import MatrixReader
from ...file_types import DENSE, FileType
from ...registry import register_reader
from .. import arma


@register_reader(DENSE, FileType.CSV)
class CsvReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        return pd.read_csv(path, header=None, float_precision="round_trip").to_numpy()


@register_reader(DENSE, FileType.RAW_ASCII)
class RawAsciiReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        return pd.read_csv(
            path, header=None, sep=r"\s+", float_precision="round_trip"
        ).to_numpy()


@register_reader(DENSE, FileType.ARMA_ASCII)
class ArmaAsciiReader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        with Path(path).open("r", encoding="utf-8") as f:
            dtype = arma.parse_header(f.readline(), arma.MAT_TXT)
            n_rows, n_cols = (int(v) for v in f.readline().split())
            if n_rows * n_cols == 0:
                return np.empty((n_rows, n_cols), dtype=dtype.newbyteorder("="))
            values = pd.read_csv(
                f, header=None, sep=r"\s+", float_precision="round_trip"
            ).to_numpy(dtype=dtype.newbyteorder("="))

        if values.shape != (n_rows, n_cols):
            raise ValueError(
                f"Header announces {n_rows}x{n_cols} elements, "
                f"found {values.shape[0]}x{values.shape[1]}"
            )
        return values
