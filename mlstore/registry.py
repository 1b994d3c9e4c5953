"""
Global registries and entry points for mlstore serialization plug-ins.

This module manages the registration and lookup of matrix and model readers/writers
and provides the public save and load functions. Every entry point resolves the file
type, dispatches to the registered plug-in, and hands the resulting ``Outcome`` to
``report.report`` so failures either raise (``fatal=True``) or warn and return
False/None.

Functions
---------
register_writer(kind, file_type), register_reader(kind, file_type)
    Decorators registering a matrix plug-in for a payload kind and file type.
register_model_writer(fmt), register_model_reader(fmt)
    Decorators registering a model archive plug-in.
register_model(tag)
    Decorator registering a Serializable class so it can be loaded by tag.
save(filename, matrix, fatal, transpose, file_type)
    Save a dense matrix.
save_sparse(filename, matrix, fatal, transpose)
    Save a sparse matrix.
save_model(filename, name, obj, fatal, fmt)
    Save a Serializable model under a registered name.
save_with_options(filename, matrix, opts)
    Save a dense or sparse matrix using a DataOptions aggregate.
load, load_sparse, load_model, load_with_options
    Symmetric load functions.
"""

from pathlib import Path
from typing import Dict, Tuple, Type

import scipy.sparse as sp

from .base import MatrixReader, MatrixWriter, ModelReader, ModelWriter, Serializable
from .errors import (
    DecodingFailure,
    EncodingFailure,
    MlstoreError,
    SerializationFailure,
    UnsupportedForPayloadKind,
)
from .file_types import DENSE, SPARSE, FileType, ModelFormat, PayloadKind
from .options import DataOptions
from .orientation import orient
from .report import Outcome, report
from .resolve import (
    check_payload_kind,
    detect_file_type,
    resolve_file_type,
    resolve_model_format,
)
from .state import from_plain, to_plain

WriterKey = Tuple[PayloadKind, FileType]  # ("dense", FileType.CSV)
ReaderKey = Tuple[PayloadKind, FileType]

_writers: Dict[WriterKey, MatrixWriter] = {}
_readers: Dict[ReaderKey, MatrixReader] = {}
_model_writers: Dict[ModelFormat, ModelWriter] = {}
_model_readers: Dict[ModelFormat, ModelReader] = {}
_models: Dict[str, Type[Serializable]] = {}


def register_writer(kind: PayloadKind, file_type: FileType):
    def decorator(cls):
        _writers[(kind, file_type)] = cls()
        return cls

    return decorator


def register_reader(kind: PayloadKind, file_type: FileType):
    def decorator(cls):
        _readers[(kind, file_type)] = cls()
        return cls

    return decorator


def register_model_writer(fmt: ModelFormat):
    def decorator(cls):
        _model_writers[fmt] = cls()
        return cls

    return decorator


def register_model_reader(fmt: ModelFormat):
    def decorator(cls):
        _model_readers[fmt] = cls()
        return cls

    return decorator


def register_model(tag: str):
    def decorator(cls):
        if not issubclass(cls, Serializable):
            raise TypeError(f"{cls.__name__} does not implement Serializable")
        _models[tag] = cls
        return cls

    return decorator


def _chained(error_cls, message: str, cause: BaseException) -> MlstoreError:
    error = error_cls(message)
    error.__cause__ = cause
    return error


# ── matrix dispatch ----------------------------------------------------------
def _save_matrix(filename, matrix, kind: PayloadKind, transpose, file_type) -> Outcome:
    # resolution errors are reported before anything touches the disk
    try:
        resolved = check_payload_kind(resolve_file_type(filename, file_type, kind), kind)
    except MlstoreError as err:
        return Outcome.failure(err)

    writer = _writers.get((kind, resolved))
    if writer is None:
        return Outcome.failure(
            UnsupportedForPayloadKind(f"No writer for {kind} matrices to '{resolved}' files")
        )

    try:
        writer.write(orient(matrix, transpose), Path(filename))
    except MlstoreError as err:
        return Outcome.failure(err)
    except (OSError, ValueError, TypeError) as err:
        return Outcome.failure(
            _chained(
                EncodingFailure,
                f"Cannot save {kind} matrix to '{filename}' as {resolved}: {err}",
                err,
            )
        )
    return Outcome.success()


def _load_matrix(filename, kind: PayloadKind, transpose, file_type) -> Outcome:
    try:
        resolved = check_payload_kind(detect_file_type(filename, file_type, kind), kind)
    except MlstoreError as err:
        return Outcome.failure(err)

    reader = _readers.get((kind, resolved))
    if reader is None:
        return Outcome.failure(
            UnsupportedForPayloadKind(f"No reader for {kind} matrices in '{resolved}' files")
        )

    path = Path(filename)
    if not path.is_file():
        return Outcome.failure(DecodingFailure(f"Cannot open '{filename}': no such file"))

    try:
        matrix = reader.read(path)
    except MlstoreError as err:
        return Outcome.failure(err)
    except (OSError, ValueError, TypeError) as err:
        return Outcome.failure(
            _chained(
                DecodingFailure,
                f"Cannot load {kind} matrix from '{filename}' as {resolved}: {err}",
                err,
            )
        )
    return Outcome.success(orient(matrix, transpose))


def save(
    filename,
    matrix,
    fatal: bool = False,
    transpose: bool = True,
    file_type=FileType.AUTO_DETECT,
) -> bool:
    """
    Save a dense matrix, guessing the file type from the extension.

    Parameters
    ----------
    filename : str or pathlib.Path
        File to write.
    matrix : array-like
        Matrix with one column per point.
    fatal : bool
        Raise on failure instead of warning and returning False.
    transpose : bool
        Write one point per line (default True).
    file_type : FileType or str
        Explicit file type; bypasses extension detection.

    Returns
    -------
    bool
        True on success, False on a non-fatal failure.

    Raises
    ------
    MlstoreError
        On failure when *fatal* is True.
    TypeError
        If *matrix* is sparse; use ``save_sparse``.
    """
    if sp.issparse(matrix):
        raise TypeError("save() expects a dense matrix; use save_sparse()")
    return report(_save_matrix(filename, matrix, DENSE, transpose, file_type), fatal)


def save_sparse(filename, matrix, fatal: bool = False, transpose: bool = True) -> bool:
    """
    Save a sparse matrix as coordinate text (.tsv, .txt) or binary (.bin).

    The file type always comes from the extension.

    Raises
    ------
    MlstoreError
        On failure when *fatal* is True.
    TypeError
        If *matrix* is not a scipy.sparse matrix.
    """
    if not sp.issparse(matrix):
        raise TypeError("save_sparse() expects a scipy.sparse matrix")
    outcome = _save_matrix(filename, matrix, SPARSE, transpose, FileType.AUTO_DETECT)
    return report(outcome, fatal)


def save_with_options(filename, matrix, opts: DataOptions) -> bool:
    """
    Save a dense or sparse matrix with settings taken from *opts*.

    *opts* is only read, never modified, so the same options object can be reused.
    """
    kind = SPARSE if sp.issparse(matrix) else DENSE
    outcome = _save_matrix(filename, matrix, kind, opts.transpose, opts.file_type)
    return report(outcome, opts.fatal)


def load(
    filename,
    fatal: bool = False,
    transpose: bool = True,
    file_type=FileType.AUTO_DETECT,
):
    """
    Load a dense matrix, detecting the file type from extension and content.

    Returns
    -------
    numpy.ndarray or None
        The matrix (one column per point when *transpose* is True), or None on a
        non-fatal failure.
    """
    outcome = _load_matrix(filename, DENSE, transpose, file_type)
    return outcome.value if report(outcome, fatal) else None


def load_sparse(filename, fatal: bool = False, transpose: bool = True):
    """Load a sparse matrix; returns a ``scipy.sparse.csc_matrix`` or None."""
    outcome = _load_matrix(filename, SPARSE, transpose, FileType.AUTO_DETECT)
    return outcome.value if report(outcome, fatal) else None


def load_with_options(filename, opts: DataOptions, sparse: bool = False):
    kind = SPARSE if sparse else DENSE
    outcome = _load_matrix(filename, kind, opts.transpose, opts.file_type)
    return outcome.value if report(outcome, opts.fatal) else None


# ── model dispatch -----------------------------------------------------------
def _save_model(filename, name, obj: Serializable, fmt) -> Outcome:
    try:
        resolved = resolve_model_format(filename, fmt)
    except MlstoreError as err:
        return Outcome.failure(err)

    writer = _model_writers.get(resolved)
    if writer is None:
        return Outcome.failure(
            UnsupportedForPayloadKind(f"No writer for models to '{resolved}' files")
        )
    if not isinstance(name, str) or not name:
        return Outcome.failure(
            SerializationFailure(f"Invalid registered name {name!r} for '{filename}'")
        )

    try:
        entry = {"tag": obj.tag(), "state": to_plain(obj.to_state())}
    except (TypeError, ValueError) as err:
        return Outcome.failure(
            _chained(SerializationFailure, f"Cannot serialize '{name}': {err}", err)
        )

    try:
        writer.write(name, entry, Path(filename))
    except MlstoreError as err:
        return Outcome.failure(err)
    except (OSError, ValueError, TypeError) as err:
        return Outcome.failure(
            _chained(
                SerializationFailure,
                f"Cannot save '{name}' to '{filename}' as {resolved}: {err}",
                err,
            )
        )
    return Outcome.success()


def _load_model(filename, name, fmt) -> Outcome:
    try:
        resolved = resolve_model_format(filename, fmt)
    except MlstoreError as err:
        return Outcome.failure(err)

    reader = _model_readers.get(resolved)
    if reader is None:
        return Outcome.failure(
            UnsupportedForPayloadKind(f"No reader for models in '{resolved}' files")
        )

    path = Path(filename)
    if not path.is_file():
        return Outcome.failure(DecodingFailure(f"Cannot open '{filename}': no such file"))

    try:
        archive = reader.read(path)
    except MlstoreError as err:
        return Outcome.failure(err)
    except (OSError, ValueError, TypeError, KeyError) as err:
        return Outcome.failure(
            _chained(DecodingFailure, f"Cannot read '{filename}' as {resolved}: {err}", err)
        )

    if name not in archive:
        return Outcome.failure(
            DecodingFailure(f"No object named '{name}' in '{filename}'")
        )
    tag = archive[name].get("tag")
    cls = _models.get(tag)
    if cls is None:
        return Outcome.failure(
            DecodingFailure(f"Object '{name}' has unregistered model tag '{tag}'")
        )

    try:
        obj = cls.from_state(from_plain(archive[name].get("state")))
    except (TypeError, ValueError, KeyError) as err:
        return Outcome.failure(
            _chained(DecodingFailure, f"Cannot rebuild '{name}' ({tag}): {err}", err)
        )
    return Outcome.success(obj)


def save_model(
    filename, name: str, obj: Serializable, fatal: bool = False, fmt=ModelFormat.AUTO_DETECT
) -> bool:
    """
    Save a model under *name*, guessing the format from the extension.

    Load the file later with ``load_model`` and the same *name*.

    Parameters
    ----------
    filename : str or pathlib.Path
        File to write (.json, .xml or .bin).
    name : str
        Registered name of the object inside the file.
    obj : Serializable
        Model to save.
    fatal : bool
        Raise on failure instead of warning and returning False.
    fmt : ModelFormat or str
        Explicit format; bypasses extension detection.

    Raises
    ------
    MlstoreError
        On failure when *fatal* is True.
    TypeError
        If *obj* does not implement Serializable.
    """
    if not isinstance(obj, Serializable):
        raise TypeError(f"{type(obj).__name__} does not implement Serializable")
    return report(_save_model(filename, name, obj, fmt), fatal)


def load_model(filename, name: str, fatal: bool = False, fmt=ModelFormat.AUTO_DETECT):
    """Load the model stored under *name*; returns it, or None on a non-fatal failure."""
    outcome = _load_model(filename, name, fmt)
    return outcome.value if report(outcome, fatal) else None
