"""
Conversion between model states and plain trees.

A plain tree only holds dicts with string keys, lists, str, int, float, bool and None,
so every archive format can store it. numpy arrays become tagged dict nodes::

    {"__ndarray__": True, "dtype": "float64", "shape": [2, 3], "data": [...]}

with ``data`` in C order. Complex arrays store ``[real, imag]`` pairs.
"""

from typing import Any

import numpy as np

NDARRAY_KEY = "__ndarray__"


def _array_to_plain(arr: np.ndarray, where: str) -> dict:
    if arr.dtype.kind not in "biufc":
        raise TypeError(f"{where}: arrays of dtype '{arr.dtype}' cannot be serialized")
    flat = arr.ravel(order="C")
    if arr.dtype.kind == "c":
        data = [[float(v.real), float(v.imag)] for v in flat]
    else:
        data = flat.tolist()
    return {
        NDARRAY_KEY: True,
        "dtype": arr.dtype.str,
        "shape": list(arr.shape),
        "data": data,
    }


def to_plain(value: Any, where: str = "state") -> Any:
    """
    Reduce *value* to a plain tree.

    Raises
    ------
    TypeError
        If *value* contains a dict with a non-string key or a value of an
        unsupported type.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, np.ndarray):
        return _array_to_plain(value, where)
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, dict):
        plain = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{where}: dict keys must be strings, got {key!r}")
            if key == NDARRAY_KEY:
                raise TypeError(f"{where}: '{NDARRAY_KEY}' is a reserved key")
            plain[key] = to_plain(item, f"{where}.{key}")
        return plain
    if isinstance(value, (list, tuple)):
        return [to_plain(item, f"{where}[{i}]") for i, item in enumerate(value)]
    raise TypeError(f"{where}: cannot serialize value of type {type(value).__name__}")


def from_plain(value: Any) -> Any:
    """Inverse of :func:`to_plain`; tagged nodes become numpy arrays again."""
    if isinstance(value, dict):
        if value.get(NDARRAY_KEY) is True:
            dtype = np.dtype(value["dtype"])
            data = value["data"]
            if dtype.kind == "c":
                data = [complex(re, im) for re, im in data]
            return np.array(data, dtype=dtype).reshape(value["shape"])
        return {key: from_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [from_plain(item) for item in value]
    return value
