"""
Writer for models to XML archives.

Layout::

    <?xml version='1.0' encoding='utf-8'?>
    <archive>
      <object name="myModel" tag="linear_regression">
        <item type="dict">
          <item key="intercept" type="float">0.5</item>
          ...
        </item>
      </object>
    </archive>

Item types are ``dict``, ``list``, ``str``, ``int``, ``float``, ``bool`` and ``null``;
children of a ``dict`` item carry a ``key`` attribute.

Classes
-------
XmlModelWriter : ModelWriter
    Serializes a named model entry to .xml (ModelFormat.XML).
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Optional

from ...base import ModelWriter
from ...file_types import ModelFormat
from ...registry import register_model_writer

# characters outside the XML 1.0 Char production, plus CR which parsers rewrite to LF
_FORBIDDEN = re.compile("[^\x09\x0A\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def xml_text(value: str, what: str) -> str:
    """Return *value*, raising ValueError if an XML archive cannot round-trip it."""
    bad = _FORBIDDEN.search(value)
    if bad:
        raise ValueError(
            f"{what} {value!r} holds {bad.group()!r}, which XML archives cannot store"
        )
    return value


def to_element(value: Any, key: Optional[str] = None) -> ET.Element:
    item = ET.Element("item")
    if key is not None:
        item.set("key", xml_text(key, "Key"))

    if value is None:
        item.set("type", "null")
    elif isinstance(value, bool):
        item.set("type", "bool")
        item.text = "true" if value else "false"
    elif isinstance(value, int):
        item.set("type", "int")
        item.text = str(value)
    elif isinstance(value, float):
        item.set("type", "float")
        item.text = repr(value)
    elif isinstance(value, str):
        item.set("type", "str")
        item.text = xml_text(value, "String")
    elif isinstance(value, list):
        item.set("type", "list")
        item.extend(to_element(v) for v in value)
    elif isinstance(value, dict):
        item.set("type", "dict")
        item.extend(to_element(v, k) for k, v in value.items())
    else:
        raise TypeError(f"Cannot store {type(value).__name__} in an XML archive")
    return item


@register_model_writer(ModelFormat.XML)
class XmlModelWriter(ModelWriter):
    def write(self, name: str, entry: dict, path: Path):
        root = ET.Element("archive")
        obj = ET.SubElement(
            root,
            "object",
            name=xml_text(name, "Name"),
            tag=xml_text(str(entry["tag"]), "Tag"),
        )
        obj.append(to_element(entry["state"]))
        ET.indent(root)
        ET.ElementTree(root).write(Path(path), encoding="utf-8", xml_declaration=True)
