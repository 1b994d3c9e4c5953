"""
Writer for models to JSON archives.

The file is a single JSON object ``{name: {"tag": ..., "state": ...}}``.

Classes
-------
JsonModelWriter : ModelWriter
    Serializes a named model entry to .json (ModelFormat.JSON).
"""

import json
from pathlib import Path

from ...base import ModelWriter
from ...file_types import ModelFormat
from ...registry import register_model_writer


@register_model_writer(ModelFormat.JSON)
class JsonModelWriter(ModelWriter):
    def write(self, name: str, entry: dict, path: Path):
        # encode first so a rejected state never truncates an existing file
        text = json.dumps({name: entry}, indent=2)
        with Path(path).open("w", encoding="utf-8") as f:
            f.write(text + "\n")
