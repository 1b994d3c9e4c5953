"""
Readers for sparse matrices stored as binary.

Classes
-------
SparseArmaBinaryReader : MatrixReader
    ``ARMA_SPM_BIN`` header, size line, then values, row indices and column pointers
    (FileType.ARMA_BINARY).
SparseRawBinaryReader : MatrixReader
    Headerless float64 elements, returned as a single column (FileType.RAW_BINARY).
"""

from pathlib import Path

import numpy as np
import scipy.sparse as sp

from ...base import MatrixReader
from ...file_types import SPARSE, FileType
from ...registry import register_reader
from .. import arma
from .dense_binary import read_raw_column


@register_reader(SPARSE, FileType.ARMA_BINARY)
class SparseArmaBinaryReader(MatrixReader):
    def read(self, path: Path) -> sp.csc_matrix:
        with Path(path).open("rb") as f:
            dtype, sizes = arma.read_binary_header(f, arma.SPM_BIN)
            if len(sizes) != 3:
                raise ValueError(f"Malformed size line {sizes}")
            n_rows, n_cols, nnz = sizes
            body = f.read()

        values = np.frombuffer(body, dtype=dtype, count=nnz)
        offset = nnz * dtype.itemsize
        indices = np.frombuffer(body, dtype=arma.INDEX_DTYPE, count=nnz, offset=offset)
        offset += nnz * arma.INDEX_DTYPE.itemsize
        indptr = np.frombuffer(body, dtype=arma.INDEX_DTYPE, count=n_cols + 1, offset=offset)

        return sp.csc_matrix(
            (
                values.astype(dtype.newbyteorder("=")),
                indices.astype(np.int64),
                indptr.astype(np.int64),
            ),
            shape=(n_rows, n_cols),
        )


@register_reader(SPARSE, FileType.RAW_BINARY)
class SparseRawBinaryReader(MatrixReader):
    def read(self, path: Path) -> sp.csc_matrix:
        matrix = sp.csc_matrix(read_raw_column(path))
        matrix.eliminate_zeros()
        return matrix
