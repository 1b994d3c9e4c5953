"""
XML archive reader for models.

Parses the ``<archive>/<object>/<item>`` layout written by ``XmlModelWriter`` back into
plain trees.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from ...base import ModelReader
from ...errors import DecodingFailure
from ...file_types import ModelFormat
from ...registry import register_model_reader
from ..archive import check_archive

_SCALARS = {
    "str": lambda text: text or "",
    "int": int,
    "float": float,
    "bool": lambda text: text == "true",
}


def from_element(item: ET.Element) -> Any:
    kind = item.get("type")
    if kind == "null":
        return None
    if kind == "list":
        return [from_element(child) for child in item]
    if kind == "dict":
        return {child.get("key"): from_element(child) for child in item}
    if kind in _SCALARS:
        return _SCALARS[kind](item.text)
    raise ValueError(f"Unknown item type '{kind}'")


@register_model_reader(ModelFormat.XML)
class XmlModelReader(ModelReader):
    def read(self, path: Path):
        try:
            root = ET.parse(Path(path)).getroot()
        except ET.ParseError as err:
            raise DecodingFailure(f"'{path}' is not well-formed XML: {err}") from err
        if root.tag != "archive":
            raise DecodingFailure(f"'{path}' has root <{root.tag}>, expected <archive>")

        archive = {}
        for obj in root.iter("object"):
            items = list(obj)
            if len(items) != 1:
                raise DecodingFailure(f"Object '{obj.get('name')}' must hold one item")
            archive[obj.get("name")] = {
                "tag": obj.get("tag"),
                "state": from_element(items[0]),
            }
        return check_archive(archive, path)
