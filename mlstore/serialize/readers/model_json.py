"""
JSON archive reader for models.

Classes
-------
JsonModelReader : ModelReader
    Reads .json archives written by ``JsonModelWriter``.
"""

import json
from pathlib import Path

from ...base import ModelReader
from ...file_types import ModelFormat
from ...registry import register_model_reader
from ..archive import check_archive


@register_model_reader(ModelFormat.JSON)
class JsonModelReader(ModelReader):
    def read(self, path: Path):
        with Path(path).open("r", encoding="utf-8") as f:
            archive = json.load(f)
        return check_archive(archive, path)
