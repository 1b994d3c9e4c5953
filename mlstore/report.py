"""
Failure reporting shared by every save and load entry point.

Inner dispatch returns an ``Outcome``; the public wrapper hands it to :func:`report`,
which either raises the carried error (``fatal=True``) or emits one ``IOWarning`` and
returns False.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Optional

from .errors import IOWarning, MlstoreError


@dataclass(frozen=True)
class Outcome:
    """Result of one dispatch: a value on success, an error otherwise."""

    value: Any = None
    error: Optional[MlstoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = True) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: MlstoreError) -> "Outcome":
        return cls(error=error)


def report(outcome: Outcome, fatal: bool, stacklevel: int = 3) -> bool:
    """
    Apply the fatal/non-fatal policy to *outcome*.

    Parameters
    ----------
    outcome : Outcome
        Result of the dispatch.
    fatal : bool
        Raise on failure instead of warning.
    stacklevel : int
        Passed to ``warnings.warn`` so the warning points at the caller's line.

    Returns
    -------
    bool
        True on success, False after a non-fatal failure.

    Raises
    ------
    MlstoreError
        The carried error, when the outcome failed and *fatal* is True.
    """
    if outcome.ok:
        return True
    if fatal:
        raise outcome.error
    warnings.warn(str(outcome.error), IOWarning, stacklevel=stacklevel)
    return False
