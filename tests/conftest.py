"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import mlstore' works without an install,
and provides small matrices and a registered model shared by the test modules.
"""
import sys
from pathlib import Path

import numpy as np
import pytest
import scipy.sparse as sp

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from mlstore import Serializable, register_model  # noqa: E402


@register_model("linear_model")
class LinearModel(Serializable):
    """Minimal model used to exercise the model save/load path."""

    def __init__(self, weights, intercept=0.0, name="", hyper=None):
        self.weights = np.asarray(weights, dtype=np.float64)
        self.intercept = intercept
        self.name = name
        self.hyper = hyper or {}

    def tag(self):
        return "linear_model"

    def to_state(self):
        return {
            "weights": self.weights,
            "intercept": self.intercept,
            "name": self.name,
            "hyper": self.hyper,
        }

    @classmethod
    def from_state(cls, state):
        return cls(state["weights"], state["intercept"], state["name"], state["hyper"])

    def __eq__(self, other):
        return (
            isinstance(other, LinearModel)
            and np.array_equal(self.weights, other.weights)
            and self.weights.dtype == other.weights.dtype
            and self.intercept == other.intercept
            and self.name == other.name
            and self.hyper == other.hyper
        )


@pytest.fixture
def matrix_3x2() -> np.ndarray:
    """3 dimensions x 2 points; rows of the on-disk file are its columns."""
    return np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


@pytest.fixture
def random_matrix() -> np.ndarray:
    return np.random.default_rng(42).normal(size=(4, 7))


@pytest.fixture
def sparse_2x3() -> sp.csc_matrix:
    return sp.csc_matrix(np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 2.5]]))


@pytest.fixture
def linear_model() -> LinearModel:
    return LinearModel(
        weights=[[0.5, -1.25], [2.0, 3.5]],
        intercept=0.125,
        name="demo",
        hyper={"lambda": 0.01, "iterations": 100, "normalize": True, "solver": None},
    )
