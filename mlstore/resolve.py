"""
Format resolution: filename (+ optional explicit type) -> concrete file type.

Save direction
--------------
The file does not exist yet, so ambiguous extensions are settled by the static
priority order of ``file_types.TABULAR_EXTENSIONS`` / ``MODEL_EXTENSIONS``:

- tabular ``.txt`` -> CSV (CoordASCII for sparse payloads)
- tabular ``.bin`` -> ArmaBinary
- model   ``.bin`` -> BIN

Load direction
--------------
Ambiguous extensions are settled by peeking at the first bytes of the file.

Functions
---------
extension(filename)
    Lower-case substring after the final '.' of the basename.
coerce_file_type(value), coerce_model_format(value)
    Accept an enum member or its string value.
resolve_file_type(filename, file_type, kind)
    Save-direction resolution for matrices.
check_payload_kind(file_type, kind)
    Reject file types that cannot hold the payload kind.
resolve_model_format(filename, fmt)
    Save-direction resolution for models.
detect_file_type(filename, file_type, kind)
    Load-direction resolution for matrices (content peeking).
"""

import os
from pathlib import Path
from typing import Tuple, Union

from .errors import DecodingFailure, UnknownExtension, UnsupportedForPayloadKind
from .file_types import (
    DENSE,
    MODEL_EXTENSIONS,
    SPARSE,
    SUPPORTED_TYPES,
    TABULAR_EXTENSIONS,
    FileType,
    ModelFormat,
    PayloadKind,
)
from .serialize import arma

_PEEK_BYTES = 4096


def extension(filename: Union[str, Path]) -> str:
    """
    Return the lower-case extension of *filename*, without the dot.

    Raises
    ------
    UnknownExtension
        If the filename is empty or its basename carries no '.'.
    """
    name = os.path.basename(os.fspath(filename))
    _, dot, ext = name.rpartition(".")
    if not dot or not ext:
        raise UnknownExtension(
            f"Cannot determine file type of '{filename}': no extension given"
        )
    return ext.lower()


def coerce_file_type(value) -> FileType:
    if isinstance(value, FileType):
        return value
    if isinstance(value, ModelFormat):
        raise UnsupportedForPayloadKind(
            f"Model format '{value}' is not a matrix file type"
        )
    try:
        return FileType(str(value).lower())
    except ValueError as err:
        raise UnsupportedForPayloadKind(
            f"'{value}' is not a matrix file type"
        ) from err


def coerce_model_format(value) -> ModelFormat:
    if isinstance(value, ModelFormat):
        return value
    if isinstance(value, FileType):
        raise UnsupportedForPayloadKind(
            f"Matrix file type '{value}' is not a model format"
        )
    try:
        return ModelFormat(str(value).lower())
    except ValueError as err:
        raise UnsupportedForPayloadKind(f"'{value}' is not a model format") from err


def check_payload_kind(file_type: FileType, kind: PayloadKind) -> FileType:
    if file_type not in SUPPORTED_TYPES[kind]:
        raise UnsupportedForPayloadKind(
            f"File type '{file_type}' cannot hold a {kind} matrix"
        )
    return file_type


def _tabular_candidates(filename, kind: PayloadKind) -> Tuple[FileType, ...]:
    ext = extension(filename)
    try:
        candidates = TABULAR_EXTENSIONS[ext]
    except KeyError as err:
        raise UnknownExtension(
            f"Unknown extension '.{ext}' for matrix file '{filename}'"
        ) from err

    usable = tuple(c for c in candidates if c in SUPPORTED_TYPES[kind])
    if not usable:
        raise UnsupportedForPayloadKind(
            f"Extension '.{ext}' of '{filename}' cannot hold a {kind} matrix"
        )
    return usable


def resolve_file_type(
    filename, file_type=FileType.AUTO_DETECT, kind: PayloadKind = DENSE
) -> FileType:
    """
    Resolve the file type a matrix save should use.

    An explicit *file_type* is returned unchanged; otherwise the first candidate of the
    extension that suits *kind* wins.

    Parameters
    ----------
    filename : str or pathlib.Path
        Target file.
    file_type : FileType or str
        Explicit type, or ``FileType.AUTO_DETECT``.
    kind : {"dense", "sparse"}
        Structural kind of the payload.

    Returns
    -------
    FileType

    Raises
    ------
    UnknownExtension
        The extension is missing or unknown to the tabular family.
    UnsupportedForPayloadKind
        The extension is known but none of its types can hold *kind*, or the explicit
        token is not a tabular type.
    """
    file_type = coerce_file_type(file_type)
    if file_type is not FileType.AUTO_DETECT:
        return file_type
    return _tabular_candidates(filename, kind)[0]


def resolve_model_format(filename, fmt=ModelFormat.AUTO_DETECT) -> ModelFormat:
    """Resolve the archive format a model save (or load) should use."""
    fmt = coerce_model_format(fmt)
    if fmt is not ModelFormat.AUTO_DETECT:
        return fmt

    ext = extension(filename)
    try:
        return MODEL_EXTENSIONS[ext][0]
    except KeyError as err:
        raise UnknownExtension(
            f"Unknown extension '.{ext}' for model file '{filename}'"
        ) from err


# ── load direction -----------------------------------------------------------
def _peek(filename) -> bytes:
    try:
        with Path(filename).open("rb") as f:
            return f.read(_PEEK_BYTES)
    except OSError as err:
        raise DecodingFailure(f"Cannot open '{filename}' for reading: {err}") from err


def _guess_from_content(head: bytes, candidates: Tuple[FileType, ...], kind) -> FileType:
    if FileType.ARMA_BINARY in candidates or FileType.RAW_BINARY in candidates:
        magic = (arma.SPM_BIN if kind == SPARSE else arma.MAT_BIN).encode("ascii")
        if head.startswith(magic) and FileType.ARMA_BINARY in candidates:
            return FileType.ARMA_BINARY
        return FileType.RAW_BINARY

    text_magic = arma.MAT_TXT.encode("ascii")
    if head.startswith(text_magic) and FileType.ARMA_ASCII in candidates:
        return FileType.ARMA_ASCII
    first_line = head.split(b"\n", 1)[0]
    if b"," in first_line and FileType.CSV in candidates:
        return FileType.CSV
    if FileType.RAW_ASCII in candidates:
        return FileType.RAW_ASCII
    return candidates[0]


def detect_file_type(
    filename, file_type=FileType.AUTO_DETECT, kind: PayloadKind = DENSE
) -> FileType:
    """
    Resolve the file type of an existing matrix file.

    Same as :func:`resolve_file_type`, except that an extension with several usable
    candidates is disambiguated by inspecting the start of the file.

    Raises
    ------
    DecodingFailure
        If the file has to be inspected but cannot be opened.
    """
    file_type = coerce_file_type(file_type)
    if file_type is not FileType.AUTO_DETECT:
        return file_type

    candidates = _tabular_candidates(filename, kind)
    if len(candidates) == 1:
        return candidates[0]
    return _guess_from_content(_peek(filename), candidates, kind)
