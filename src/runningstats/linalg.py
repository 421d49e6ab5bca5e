from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from runningstats.config import FLOAT_DTYPE, SINGULAR_CONDITION_LIMIT
from runningstats.errors import NonSquareMatrixError, SingularMatrixError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def checked_inverse(matrix: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Invert a square matrix, refusing inputs without a trustworthy inverse.

    Args:
        matrix: A square 2D array-like of numbers.

    Raises:
        NonSquareMatrixError: If `matrix` is not 2D or not square.
        SingularMatrixError: If `matrix` is singular or too ill-conditioned
            (condition number above ``SINGULAR_CONDITION_LIMIT``).

    Returns:
        The inverse matrix as a float64 array.
    """
    a = np.asarray(matrix, dtype=FLOAT_DTYPE)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise NonSquareMatrixError(f"Cannot invert matrix of shape {a.shape}: "
                                   f"a square 2D matrix is required.")
    if a.shape[0] == 0:
        raise NonSquareMatrixError("Cannot invert an empty matrix.")

    try:
        cond = np.linalg.cond(a)
        if not np.isfinite(cond) or cond > SINGULAR_CONDITION_LIMIT:
            raise SingularMatrixError(f"Matrix is singular to working precision (condition number {cond:.3e}).")
        inverse = np.linalg.inv(a)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(f"Matrix is singular: {e}") from e

    logger.debug(f"Inverted {a.shape[0]}x{a.shape[1]} matrix (condition number {cond:.3e}).")
    return inverse
