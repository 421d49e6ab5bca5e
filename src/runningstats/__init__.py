"""Running mean / maximum accumulators and small numeric helpers."""
from runningstats.accumulator import RunningStats, StatsSummary
from runningstats.errors import (
    NoDataError,
    NonSquareMatrixError,
    ObservationParseError,
    SingularMatrixError,
    StatisticsError,
)
from runningstats.io import iter_observations, read_observations
from runningstats.linalg import checked_inverse
from runningstats.logging_config import setup_logging
from runningstats.records import Measurement, MeasurementLog

__all__ = [
    "RunningStats",
    "StatsSummary",
    "Measurement",
    "MeasurementLog",
    "checked_inverse",
    "iter_observations",
    "read_observations",
    "setup_logging",
    "StatisticsError",
    "NoDataError",
    "ObservationParseError",
    "NonSquareMatrixError",
    "SingularMatrixError",
]
