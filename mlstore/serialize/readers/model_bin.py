"""
Binary archive reader for models.

Archives only ever contain plain trees, so unpickling refuses every global lookup;
a file that tries to reference a class or function is rejected instead of executed.
"""

import io
import pickle
from pathlib import Path

from ...base import ModelReader
from ...errors import DecodingFailure
from ...file_types import ModelFormat
from ...registry import register_model_reader
from ..archive import check_archive
from ..writers.model_bin import MAGIC


class _PlainUnpickler(pickle.Unpickler):
    def find_class(self, module, name):
        raise pickle.UnpicklingError(f"Refusing to load global '{module}.{name}'")


@register_model_reader(ModelFormat.BIN)
class BinModelReader(ModelReader):
    def read(self, path: Path):
        data = Path(path).read_bytes()
        if not data.startswith(MAGIC):
            raise DecodingFailure(f"'{path}' is not an mlstore binary archive")

        try:
            archive = _PlainUnpickler(io.BytesIO(data[len(MAGIC) :])).load()
        except (pickle.UnpicklingError, EOFError) as err:
            raise DecodingFailure(f"Corrupt binary archive '{path}': {err}") from err
        return check_archive(archive, path)
