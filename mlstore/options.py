"""
Options aggregate for the unified save/load entry points.

Examples
--------
>>> opts = DataOptions(fatal=True, file_type="csv")
>>> save_with_options("points.txt", X, opts)
True
"""

from dataclasses import dataclass

from .file_types import FileType
from .resolve import coerce_file_type


@dataclass
class DataOptions:
    """
    Settings for matrix I/O.

    Attributes
    ----------
    fatal : bool
        Raise on failure instead of warning and returning False/None.
    transpose : bool
        Transpose between the in-memory and the on-disk orientation.
    file_type : FileType or str
        Explicit file type, or AUTO_DETECT to use the filename extension.

    Raises
    ------
    UnsupportedForPayloadKind
        At construction, if *file_type* names no matrix file type. A bad token is a
        programming error, so it raises even with ``fatal=False``; the flag governs
        the save or load the options are later used for.
    """

    fatal: bool = False
    transpose: bool = True
    file_type: FileType = FileType.AUTO_DETECT

    def __post_init__(self):
        self.file_type = coerce_file_type(self.file_type)
