"""
Writer for dense matrices to HDF5 files.

The matrix is stored as a single 2-D dataset named ``dataset`` (dimensions ``rows`` and
``cols``), written through xarray's h5netcdf backend.

Classes
-------
Hdf5Writer : MatrixWriter
    Serializes a dense matrix to .h5/.hdf5/.hdf/.he5 (FileType.HDF5).
"""

from pathlib import Path

import numpy as np
import xarray as xr

from ...base import MatrixWriter
from ...file_types import DENSE, FileType
from ...registry import register_writer

DATASET_NAME = "dataset"
DIMS = ("rows", "cols")


@register_writer(DENSE, FileType.HDF5)
class Hdf5Writer(MatrixWriter):
    def write(self, matrix: np.ndarray, path: Path):
        """
        Write *matrix* as the ``dataset`` variable of an HDF5 file.

        Parameters
        ----------
        matrix : numpy.ndarray
            2-D matrix after orientation.
        path : pathlib.Path
            Path to the HDF5 file.
        """
        ds = xr.Dataset({DATASET_NAME: (DIMS, np.ascontiguousarray(matrix))})
        ds.to_netcdf(Path(path), engine="h5netcdf")
