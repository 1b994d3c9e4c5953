"""
Writer for sparse matrices to coordinate text.

One ``row col value`` line per non-zero (zero-based indices), in column-major order.
If the bottom-right element is zero it is written anyway with value 0, so a reader can
recover the matrix size.
Complex matrices are rejected; the reader parses real values only.

Classes
-------
CoordAsciiWriter : MatrixWriter
    Serializes a sparse matrix to .tsv/.txt (FileType.COORD_ASCII).
"""

from pathlib import Path

import numpy as np

from ...base import MatrixWriter
from ...file_types import SPARSE, FileType
from ...registry import register_writer


def _fmt(value) -> str:
    return str(value.item())


@register_writer(SPARSE, FileType.COORD_ASCII)
class CoordAsciiWriter(MatrixWriter):
    def write(self, matrix, path: Path):
        if np.iscomplexobj(matrix):
            raise TypeError(
                f"Coordinate text cannot hold complex elements (got {matrix.dtype})"
            )
        coo = matrix.tocoo(copy=True)
        coo.sum_duplicates()
        coo.eliminate_zeros()
        order = np.lexsort((coo.row, coo.col))
        rows, cols, vals = coo.row[order], coo.col[order], coo.data[order]

        n_rows, n_cols = coo.shape
        with Path(path).open("w", encoding="utf-8", newline="") as f:
            for r, c, v in zip(rows, cols, vals):
                f.write(f"{r} {c} {_fmt(v)}\n")

            last = (n_rows - 1, n_cols - 1)
            has_last = len(rows) > 0 and (int(rows[-1]), int(cols[-1])) == last
            if n_rows and n_cols and not has_last:
                f.write(f"{last[0]} {last[1]} {_fmt(coo.dtype.type(0))}\n")
