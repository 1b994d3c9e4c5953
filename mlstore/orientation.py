"""
Orientation adapter.

mlstore follows the column-per-point convention: a matrix in memory has one column per
observation and one row per dimension. Most on-disk tabular data is the other way round,
so saves transpose by default and loads transpose back.
"""

import numpy as np
import scipy.sparse as sp


def as_dense(matrix) -> np.ndarray:
    """Return *matrix* as a 2-D ndarray; 1-D input becomes a single column."""
    arr = np.asarray(matrix)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    elif arr.ndim == 0:
        arr = arr.reshape(1, 1)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {arr.ndim} dimensions")
    if arr.dtype.kind not in "biufc":
        raise TypeError(f"Matrix elements must be numeric, got '{arr.dtype}'")
    return arr


def orient(matrix, transpose: bool = True):
    """
    Apply the save-time orientation to *matrix*.

    Parameters
    ----------
    matrix : array-like or scipy.sparse matrix
        Payload as held by the caller.
    transpose : bool
        If True, return the transpose; otherwise return the payload unchanged.

    Returns
    -------
    numpy.ndarray or scipy.sparse.csc_matrix
        A transposed view (dense) or a new CSC matrix (sparse). The caller's object is
        never modified.
    """
    if sp.issparse(matrix):
        return (matrix.T if transpose else matrix).tocsc(copy=True)

    arr = as_dense(matrix)
    return arr.T if transpose else arr
