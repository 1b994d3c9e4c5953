"""
Writers for sparse matrices to binary formats.

Classes
-------
SparseArmaBinaryWriter : MatrixWriter
    Compressed-sparse-column arrays behind an ``ARMA_SPM_BIN`` header
    (FileType.ARMA_BINARY).
SparseRawBinaryWriter : MatrixWriter
    Every element as float64, zeros included, in column-major order (FileType.RAW_BINARY).
"""

from pathlib import Path

from ...base import MatrixWriter, element_array
from ...file_types import SPARSE, FileType
from ...registry import register_writer
from .. import arma
from .dense_binary import raw_bytes


@register_writer(SPARSE, FileType.ARMA_BINARY)
class SparseArmaBinaryWriter(MatrixWriter):
    """
    Layout::

        ARMA_SPM_BIN_FN008\\n
        <rows> <cols> <nnz>\\n
        <nnz values><nnz row indices, u8><cols + 1 column pointers, u8>
    """

    def write(self, matrix, path: Path):
        csc = matrix.tocsc(copy=True)
        csc.sum_duplicates()
        csc.eliminate_zeros()

        dtype = arma.storage_dtype(csc.dtype)
        n_rows, n_cols = csc.shape
        head = f"{arma.header(arma.SPM_BIN, dtype)}\n{n_rows} {n_cols} {csc.nnz}\n"
        with Path(path).open("wb") as f:
            f.write(head.encode("ascii"))
            f.write(csc.data.astype(dtype).tobytes())
            f.write(csc.indices.astype(arma.INDEX_DTYPE).tobytes())
            f.write(csc.indptr.astype(arma.INDEX_DTYPE).tobytes())


@register_writer(SPARSE, FileType.RAW_BINARY)
class SparseRawBinaryWriter(MatrixWriter):
    def write(self, matrix, path: Path):
        with Path(path).open("wb") as f:
            f.write(raw_bytes(element_array(matrix)))
