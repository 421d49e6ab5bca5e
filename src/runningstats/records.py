"""
Labeled Records
Numeric measurements tagged with a label, and one accumulator per label.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from runningstats.accumulator import RunningStats, StatsSummary
from runningstats.utils import sorted_items

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Measurement:
    label: str
    value: float
    unit: str = ""


class MeasurementLog:
    """
    Routes measurements to a :class:`RunningStats` per label.

    Accumulators are created on the first measurement for a label.
    """
    def __init__(self) -> None:
        self._stats: dict[str, RunningStats] = {}

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, label: object) -> bool:
        return label in self._stats

    def add(self, measurement: Measurement) -> None:
        stats = self._stats.get(measurement.label)
        if stats is None:
            stats = RunningStats()
            stats.record(measurement.value)
            logger.debug(f"New label: {measurement.label!r}")
            self._stats[measurement.label] = stats
        else:
            stats.record(measurement.value)

    def extend(self, measurements: Iterable[Measurement]) -> None:
        for measurement in measurements:
            self.add(measurement)

    def stats(self, label: str) -> RunningStats:
        """
        Accumulator for ``label``.

        Raises:
            KeyError: If no measurement with that label was added.
        """
        try:
            return self._stats[label]
        except KeyError:
            raise KeyError(f"No measurements recorded for label {label!r}") from None

    def labels(self) -> list[str]:
        return sorted(self._stats)

    def summaries(self) -> dict[str, StatsSummary]:
        """Summary per label, ordered by label."""
        return {label: stats.summary() for label, stats in sorted_items(self._stats)}
