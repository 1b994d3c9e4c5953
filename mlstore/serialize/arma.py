"""
Armadillo header conventions shared by the ArmaASCII and ArmaBinary plug-ins.

Headers look like ``ARMA_MAT_BIN_FN008``: a prefix naming the container and encoding,
followed by an element token (F = float, I = integer, C = complex; S/U/N = signed,
unsigned, n/a; then the element size in bytes). Binary payloads are little-endian.
"""

from typing import BinaryIO, List, Tuple

import numpy as np

MAT_TXT = "ARMA_MAT_TXT"
MAT_BIN = "ARMA_MAT_BIN"
SPM_BIN = "ARMA_SPM_BIN"

_TOKENS = {
    "IU001": np.dtype("u1"),
    "IS001": np.dtype("i1"),
    "IU002": np.dtype("<u2"),
    "IS002": np.dtype("<i2"),
    "IU004": np.dtype("<u4"),
    "IS004": np.dtype("<i4"),
    "IU008": np.dtype("<u8"),
    "IS008": np.dtype("<i8"),
    "FN004": np.dtype("<f4"),
    "FN008": np.dtype("<f8"),
    "FC008": np.dtype("<c8"),
    "FC016": np.dtype("<c16"),
}
_BY_KIND = {(dt.kind, dt.itemsize): token for token, dt in _TOKENS.items()}

INDEX_DTYPE = np.dtype("<u8")

# headerless raw binary always holds float64 elements
RAW_DTYPE = np.dtype("<f8")


def storage_dtype(dtype) -> np.dtype:
    """Little-endian dtype used on disk for matrices of *dtype*."""
    dtype = np.dtype(dtype)
    if dtype.kind == "b":
        return np.dtype("u1")
    if dtype.kind == "f" and dtype.itemsize < 4:
        return np.dtype("<f4")
    if (dtype.kind, dtype.itemsize) not in _BY_KIND:
        raise TypeError(f"Element type '{dtype}' has no Armadillo equivalent")
    return _TOKENS[_BY_KIND[(dtype.kind, dtype.itemsize)]]


def header(prefix: str, dtype) -> str:
    dtype = storage_dtype(dtype)
    return f"{prefix}_{_BY_KIND[(dtype.kind, dtype.itemsize)]}"


def parse_header(line: str, prefix: str) -> np.dtype:
    """Return the element dtype named by a header line, checking its prefix."""
    line = line.strip()
    if not line.startswith(prefix + "_"):
        raise ValueError(f"Expected a '{prefix}' header, got '{line[:32]}'")
    token = line[len(prefix) + 1 :]
    try:
        return _TOKENS[token]
    except KeyError as err:
        raise ValueError(f"Unknown element token '{token}'") from err


def read_binary_header(f: BinaryIO, prefix: str) -> Tuple[np.dtype, List[int]]:
    """Read the two header lines of a binary file: element dtype and sizes."""
    dtype = parse_header(f.readline().decode("ascii", errors="replace"), prefix)
    sizes = [int(v) for v in f.readline().decode("ascii").split()]
    return dtype, sizes
