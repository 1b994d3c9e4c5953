"""
Base interfaces for serialization in mlstore.

Defines the capability a model must expose to be saved, and the contracts of the
matrix and model format plug-ins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

import numpy as np

Tag = str  # e.g. "linear_regression", "kmeans"
State = Dict[str, Any]  # plain tree: dict/list/str/int/float/bool/None/ndarray


class Serializable(ABC):
    """
    Common contract for any model that can be saved or loaded.

    Methods
    -------
    tag() : str
        Return a short identifier, registered with ``@register_model``.
    to_state() : dict
        Return the model's state as a tree of plain values and ndarrays.
    from_state(state) : Serializable
        Rebuild a model from the output of ``to_state``.
    """

    # --- identity ---------------------------------------------------------
    @abstractmethod
    def tag(self) -> Tag:
        """
        Return a short string identifier for the model class.

        Returns
        -------
        str
            Identifier string, e.g. 'linear_regression'.
        """
        pass

    # --- state ------------------------------------------------------------
    @abstractmethod
    def to_state(self) -> State:
        """
        Return the model parameters as a nested dict.

        Returns
        -------
        dict
            Keys are strings; values are plain Python values, lists, dicts or
            numpy arrays.
        """
        pass

    @classmethod
    @abstractmethod
    def from_state(cls, state: State) -> "Serializable":
        """
        Construct a model from a state produced by ``to_state``.

        Parameters
        ----------
        state : dict
            Decoded model state.

        Returns
        -------
        Serializable
            New model instance.
        """
        pass


class MatrixWriter(ABC):
    """
    Encodes one matrix payload kind to one file type.

    Methods
    -------
    write(matrix, path) -> None
        Persist the already-oriented matrix to the given path.
    """

    @abstractmethod
    def write(self, matrix: Any, path: Path) -> None:
        """
        Persist *matrix* to *path*.

        Parameters
        ----------
        matrix : numpy.ndarray or scipy.sparse.csc_matrix
            Matrix after orientation; must not be modified.
        path : pathlib.Path
            The file path to write to.
        """
        pass


class MatrixReader(ABC):
    """
    Decodes one file type into one matrix payload kind.

    Methods
    -------
    read(path) -> numpy.ndarray | scipy.sparse.csc_matrix
        Parse the file, in on-disk orientation.
    """

    @abstractmethod
    def read(self, path: Path) -> Any: ...


class ModelWriter(ABC):
    """Writes a single named model entry to an archive file."""

    @abstractmethod
    def write(self, name: str, entry: Dict[str, Any], path: Path) -> None:
        """
        Persist the archive entry ``{"tag": ..., "state": ...}`` under *name*.

        Parameters
        ----------
        name : str
            Registered name of the model inside the file.
        entry : dict
            Tag and plain-tree state of the model.
        path : pathlib.Path
            The file path to write to.
        """
        pass


class ModelReader(ABC):
    """Reads every named entry of an archive file."""

    @abstractmethod
    def read(self, path: Path) -> Dict[str, Dict[str, Any]]:
        """Return ``{name: {"tag": ..., "state": ...}}`` for the archive at *path*."""
        ...


def element_array(matrix) -> np.ndarray:
    """Dense ndarray view of a dense or sparse matrix."""
    if hasattr(matrix, "toarray"):
        return matrix.toarray()
    return np.asarray(matrix)
