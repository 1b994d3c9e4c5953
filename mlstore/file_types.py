"""
File-type vocabularies for the mlstore I/O package.

Two disjoint families are modelled as two separate enums so a tabular token can never
be handed to the model path (or vice versa):

- ``FileType``    : encodings for dense and sparse numeric matrices.
- ``ModelFormat`` : encodings for serializable model objects.

Both carry an ``AUTO_DETECT`` member meaning "derive from the filename extension".

Constants
---------
TABULAR_EXTENSIONS
    Lower-case extension -> candidate FileTypes, in save-priority order.
MODEL_EXTENSIONS
    Lower-case extension -> candidate ModelFormats, in save-priority order.
DENSE_TYPES, SPARSE_TYPES
    FileTypes each payload kind can be written as.
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class FileType(Enum):
    """Concrete on-disk encodings for numeric matrices."""

    AUTO_DETECT = "auto_detect"
    CSV = "csv"
    RAW_ASCII = "raw_ascii"
    ARMA_ASCII = "arma_ascii"
    PGM = "pgm"
    PPM = "ppm"
    RAW_BINARY = "raw_binary"
    ARMA_BINARY = "arma_binary"
    HDF5 = "hdf5"
    COORD_ASCII = "coord_ascii"  # sparse only

    def __str__(self) -> str:
        return self.value


class ModelFormat(Enum):
    """Concrete on-disk encodings for serializable models."""

    AUTO_DETECT = "auto_detect"
    JSON = "json"
    XML = "xml"
    BIN = "bin"

    def __str__(self) -> str:
        return self.value


PayloadKind = str  # "dense" | "sparse"

DENSE: PayloadKind = "dense"
SPARSE: PayloadKind = "sparse"

# ── extension tables ---------------------------------------------------------
# First entry of each tuple is the save default; ambiguous entries are only
# disambiguated by content when loading.
TABULAR_EXTENSIONS: Dict[str, Tuple[FileType, ...]] = {
    "csv": (FileType.CSV,),
    "txt": (
        FileType.CSV,
        FileType.RAW_ASCII,
        FileType.ARMA_ASCII,
        FileType.COORD_ASCII,
    ),
    "pgm": (FileType.PGM,),
    "ppm": (FileType.PPM,),
    "bin": (FileType.ARMA_BINARY, FileType.RAW_BINARY),
    "hdf5": (FileType.HDF5,),
    "hdf": (FileType.HDF5,),
    "h5": (FileType.HDF5,),
    "he5": (FileType.HDF5,),
    "tsv": (FileType.COORD_ASCII,),
}

MODEL_EXTENSIONS: Dict[str, Tuple[ModelFormat, ...]] = {
    "json": (ModelFormat.JSON,),
    "xml": (ModelFormat.XML,),
    "bin": (ModelFormat.BIN,),
}

# ── payload capabilities -----------------------------------------------------
DENSE_TYPES: FrozenSet[FileType] = frozenset(
    {
        FileType.CSV,
        FileType.RAW_ASCII,
        FileType.ARMA_ASCII,
        FileType.PGM,
        FileType.PPM,
        FileType.RAW_BINARY,
        FileType.ARMA_BINARY,
        FileType.HDF5,
    }
)

SPARSE_TYPES: FrozenSet[FileType] = frozenset(
    {FileType.COORD_ASCII, FileType.RAW_BINARY, FileType.ARMA_BINARY}
)

SUPPORTED_TYPES: Dict[PayloadKind, FrozenSet[FileType]] = {
    DENSE: DENSE_TYPES,
    SPARSE: SPARSE_TYPES,
}
