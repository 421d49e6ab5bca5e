from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

import numpy as np

from runningstats.config import FLOAT_DTYPE, UNSET
from runningstats.errors import NoDataError
from runningstats.utils import is_real_number

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsSummary:
    """Snapshot of a non-empty accumulator."""
    count: int
    mean: float
    maximum: float


class RunningStats:
    """
    Running mean and running maximum over a stream of numeric observations.

    Each call to :meth:`record` updates the statistics in O(1). The raw values
    are kept in :attr:`history` but are never used to compute the mean or max.
    """
    def __init__(self) -> None:
        self._count: int = 0
        self._mean: float = UNSET
        self._max: float = UNSET
        self._values: list[float] = []

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> RunningStats:
        """Create an accumulator and record every value of ``values`` in order."""
        return cls().record_many(values)

    def __repr__(self) -> str:
        if self.is_empty:
            return f"{self.__class__.__name__}(empty)"
        return f"{self.__class__.__name__}(count={self._count}, mean={self._mean!r}, max={self._max!r})"

    def __len__(self) -> int:
        return self._count

    @property
    def count(self) -> int:
        """Number of observations recorded so far."""
        return self._count

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    @property
    def history(self) -> npt.NDArray[np.float64]:
        """Copy of every recorded value, in recording order."""
        return np.array(self._values, dtype=FLOAT_DTYPE)

    def record(self, value: float) -> None:
        """
        Record one observation.

        Args:
            value: A real number. ``bool`` is not accepted.

        Raises:
            TypeError: If `value` is not a real number. The accumulator is left unchanged.
        """
        if not is_real_number(value):
            raise TypeError(f"Observation must be a real number, got {type(value).__name__}: {value!r}")
        value = float(value)

        self._count += 1
        # UNSET only seeds the state; the first observation always replaces it
        if self._count == 1:
            self._max = value
            self._mean = value
        else:
            if value > self._max or math.isnan(value):
                self._max = value
            self._mean += (value - self._mean) / self._count
        self._values.append(value)

    def record_many(self, values: Iterable[float]) -> RunningStats:
        """Record each value in order. Returns ``self``."""
        before = self._count
        for value in values:
            self.record(value)
        logger.debug(f"Recorded {self._count - before} observations (total {self._count}).")
        return self

    def current_mean(self) -> float:
        """
        Running arithmetic mean of all recorded observations.

        Raises:
            NoDataError: If nothing has been recorded yet.
        """
        if self.is_empty:
            raise NoDataError("Mean is undefined: no observations recorded.")
        return self._mean

    def current_max(self) -> float:
        """
        Largest observation recorded so far.

        Raises:
            NoDataError: If nothing has been recorded yet.
        """
        if self.is_empty:
            raise NoDataError("Maximum is undefined: no observations recorded.")
        return self._max

    def summary(self) -> StatsSummary:
        return StatsSummary(count=self._count, mean=self.current_mean(), maximum=self.current_max())

    def plot_history(self, name: str = "") -> None:
        """Plot the recorded values together with the running mean."""
        import matplotlib.pyplot as plt

        if self.is_empty:
            logger.warning("No observations recorded, nothing to plot.")
            return

        values = self.history
        steps = np.arange(1, values.size + 1)
        running_mean = np.cumsum(values) / steps

        plt.figure(figsize=(10, 5))
        plt.plot(steps, values, marker='o', label='observation')
        plt.plot(steps, running_mean, 'r', lw=2, label='running mean')
        plt.axhline(self._max, color='gray', linestyle=':', label='max')
        plt.title(f'Observation History {name}'.strip())
        plt.xlabel('Observation')
        plt.ylabel('Value')
        plt.legend()
        plt.grid(True)
        plt.show()
