"""
mlstore: save and load numeric matrices and serializable models.

Overview
--------
The `mlstore` package picks an on-disk encoding from the filename extension (or an
explicit override), applies the row/column orientation convention, and delegates to a
format plug-in. Every entry point shares one failure contract: with ``fatal=False``
(the default) a failure emits one ``IOWarning`` and the call returns False (saves) or
None (loads); with ``fatal=True`` the failure is raised as an ``MlstoreError``.

- **File types**: `FileType` (dense/sparse matrices) and `ModelFormat` (models) are
  separate enums; a token of one family is never accepted by the other.

- **Resolution**: saves settle ambiguous extensions by a fixed priority (`.txt` -> CSV,
  `.bin` -> ArmaBinary for matrices, BIN for models); loads peek at the file content.

- **Orientation**: matrices hold one point per column. With ``transpose=True`` (the
  default) each point is written as one on-disk row.

- **Registries**: plug-ins register themselves per (payload kind, file type) or per
  model format, so new formats need no change to the dispatch logic.

Typical usage
-------------
>>> import numpy as np, mlstore
>>> mlstore.save("points.csv", np.random.rand(3, 100))
True
>>> X = mlstore.load("points.csv")
>>> mlstore.save_model("model.json", "model", my_model, fatal=True)
True

Submodules
----------
- `base`           : Abstract base classes (Serializable, readers, writers).
- `file_types`     : File-type enums and extension tables.
- `resolve`        : Filename/override -> file type resolution.
- `orientation`    : Transpose handling.
- `report`         : Outcome type and fatal/warning policy.
- `options`        : DataOptions aggregate.
- `registry`       : Plug-in registries and the save/load entry points.
- `serialize_boot` : Imports every plug-in so it registers.
- `serialize`      : Reader/writer plug-ins for each format.
"""

# ensure all plug-ins register
from . import serialize_boot
from .base import Serializable
from .errors import (
    DecodingFailure,
    EncodingFailure,
    IOWarning,
    MlstoreError,
    ResolutionError,
    SerializationFailure,
    UnknownExtension,
    UnsupportedForPayloadKind,
)
from .file_types import FileType, ModelFormat
from .options import DataOptions
from .registry import (
    load,
    load_model,
    load_sparse,
    load_with_options,
    register_model,
    save,
    save_model,
    save_sparse,
    save_with_options,
)

_ = serialize_boot  # to prevent unused import removal by linters

__version__ = "0.1.0"

__all__ = [
    "save",
    "save_sparse",
    "save_model",
    "save_with_options",
    "load",
    "load_sparse",
    "load_model",
    "load_with_options",
    "register_model",
    "Serializable",
    "DataOptions",
    "FileType",
    "ModelFormat",
    "MlstoreError",
    "ResolutionError",
    "UnknownExtension",
    "UnsupportedForPayloadKind",
    "EncodingFailure",
    "SerializationFailure",
    "DecodingFailure",
    "IOWarning",
]
