"""
Writer for models to binary archives.

A ``MLSTORE_BIN`` magic line followed by the pickled archive
``{name: {"tag": ..., "state": ...}}``. Only plain trees are pickled, so the matching
reader can refuse every global lookup.

Classes
-------
BinModelWriter : ModelWriter
    Serializes a named model entry to .bin (ModelFormat.BIN).
"""

import pickle
from pathlib import Path

from ...base import ModelWriter
from ...file_types import ModelFormat
from ...registry import register_model_writer

MAGIC = b"MLSTORE_BIN\n"
PICKLE_PROTOCOL = 4


@register_model_writer(ModelFormat.BIN)
class BinModelWriter(ModelWriter):
    def write(self, name: str, entry: dict, path: Path):
        payload = pickle.dumps({name: entry}, protocol=PICKLE_PROTOCOL)
        with Path(path).open("wb") as f:
            f.write(MAGIC)
            f.write(payload)
