"""
Reader for sparse matrices stored as coordinate text.

Each non-empty line holds ``row col value`` with zero-based indices. The matrix size is
one past the largest row and column index seen, which the writer's bottom-right entry
guarantees.
"""

from pathlib import Path

import numpy as np
import pandas as pd
import scipy.sparse as sp

from ...base import MatrixReader
from ...file_types import SPARSE, FileType
from ...registry import register_reader


@register_reader(SPARSE, FileType.COORD_ASCII)
class CoordAsciiReader(MatrixReader):
    def read(self, path: Path) -> sp.csc_matrix:
        if Path(path).stat().st_size == 0:
            return sp.csc_matrix((0, 0))

        df = pd.read_csv(
            path,
            header=None,
            sep=r"\s+",
            names=["row", "col", "value"],
            float_precision="round_trip",
        )
        if df[["row", "col"]].isna().any().any() or (df[["row", "col"]] < 0).any().any():
            raise ValueError("Coordinate lines need non-negative row and column indices")

        rows = df["row"].to_numpy(dtype=np.int64)
        cols = df["col"].to_numpy(dtype=np.int64)
        shape = (int(rows.max()) + 1, int(cols.max()) + 1)

        matrix = sp.coo_matrix((df["value"].to_numpy(), (rows, cols)), shape=shape).tocsc()
        matrix.eliminate_zeros()
        return matrix
