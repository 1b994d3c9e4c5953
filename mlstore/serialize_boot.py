"""
Import every plug-in module under ``mlstore.serialize``.

Importing a plug-in runs its registration decorator, which fills one of the four
registries in ``mlstore.registry``:

- matrix writers and readers, keyed by (payload kind, FileType),
- model writers and readers, keyed by ModelFormat.

``mlstore/__init__.py`` imports this module first, so the save and load entry points
always see the complete set of formats.

Attributes
----------
loaded : list of str
    Dotted names of the imported plug-in modules, in discovery order.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Iterator

# mlstore/serialize, next to this file
_serialize_dir = Path(__file__).resolve().parent / "serialize"


def _plugin_modules() -> Iterator[str]:
    # walk_packages descends into serialize/readers and serialize/writers
    prefix = f"{__package__}.serialize."
    for info in pkgutil.walk_packages([str(_serialize_dir)], prefix=prefix):
        if not info.ispkg:
            yield info.name


loaded = [importlib.import_module(name).__name__ for name in _plugin_modules()]
