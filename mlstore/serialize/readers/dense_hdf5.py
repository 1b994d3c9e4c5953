"""
HDF5 reader for dense matrices.

Reads the dataset named ``dataset``. Files produced by other HDF5 writers carry no
dimension scales, so phony dimension names are generated for them.

Classes
-------
Hdf5Reader : MatrixReader
    Reads .h5/.hdf5/.hdf/.he5 files (FileType.HDF5).
"""

from pathlib import Path

import numpy as np
import xarray as xr

from ...base import MatrixReader
from ...file_types import DENSE, FileType
from ...registry import register_reader
from ..writers.dense_hdf5 import DATASET_NAME


@register_reader(DENSE, FileType.HDF5)
class Hdf5Reader(MatrixReader):
    def read(self, path: Path) -> np.ndarray:
        """
        Parse an HDF5 file and return its ``dataset`` variable.

        Parameters
        ----------
        path : pathlib.Path
            Path to the HDF5 file.

        Returns
        -------
        numpy.ndarray
            2-D matrix in on-disk orientation.
        """
        with xr.open_dataset(path, engine="h5netcdf", phony_dims="sort") as ds:
            if DATASET_NAME not in ds:
                raise ValueError(f"No '{DATASET_NAME}' variable in '{path}'")
            values = ds[DATASET_NAME].values
        if values.ndim == 1:
            values = values.reshape(-1, 1)
        return values
