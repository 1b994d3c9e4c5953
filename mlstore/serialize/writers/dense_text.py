"""
Writers for dense matrices to text formats.

Classes
-------
CsvWriter : MatrixWriter
    Comma-separated values, no header (FileType.CSV).
RawAsciiWriter : MatrixWriter
    Space-separated values, no header (FileType.RAW_ASCII).
ArmaAsciiWriter : MatrixWriter
    Space-separated values behind an ``ARMA_MAT_TXT`` header (FileType.ARMA_ASCII).

Examples
--------
>>> CsvWriter().write(np.eye(2), Path("eye.csv"))
>>> print(Path("eye.csv").read_text())
1.0,0.0
0.0,1.0
"""

from pathlib import Path

import numpy as np
import pandas as pd

from ...base import MatrixWriter
from ...file_types import DENSE, FileType
from ...registry import register_writer
from .. import arma


def _to_text(matrix: np.ndarray, f, sep: str):
    # one matrix row per line, shortest round-trip float repr
    pd.DataFrame(matrix).to_csv(f, sep=sep, header=False, index=False, lineterminator="\n")


@register_writer(DENSE, FileType.CSV)
class CsvWriter(MatrixWriter):
    def write(self, matrix: np.ndarray, path: Path):
        with Path(path).open("w", encoding="utf-8", newline="") as f:
            _to_text(matrix, f, ",")


@register_writer(DENSE, FileType.RAW_ASCII)
class RawAsciiWriter(MatrixWriter):
    def write(self, matrix: np.ndarray, path: Path):
        with Path(path).open("w", encoding="utf-8", newline="") as f:
            _to_text(matrix, f, " ")


@register_writer(DENSE, FileType.ARMA_ASCII)
class ArmaAsciiWriter(MatrixWriter):
    """
    Layout::

        ARMA_MAT_TXT_FN008
        2 3
        1.0 2.0 3.0
        4.0 5.0 6.0
    """

    def write(self, matrix: np.ndarray, path: Path):
        data = matrix.astype(arma.storage_dtype(matrix.dtype), copy=False)
        n_rows, n_cols = data.shape
        with Path(path).open("w", encoding="utf-8", newline="") as f:
            f.write(arma.header(arma.MAT_TXT, data.dtype) + "\n")
            f.write(f"{n_rows} {n_cols}\n")
            _to_text(data, f, " ")
