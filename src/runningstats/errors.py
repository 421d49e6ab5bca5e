"""Exceptions raised by runningstats."""


class StatisticsError(Exception):
    """Base class for all runningstats errors."""


class NoDataError(StatisticsError, LookupError):
    """A running statistic was queried before any observation was recorded."""


class ObservationParseError(StatisticsError, ValueError):
    """
    A cell in an observation file could not be read as a number.

    Attributes:
        path: File the bad cell came from.
        line_number: 1-based line number of the bad cell.
        text: The offending cell text.
    """

    def __init__(self, path: str, line_number: int, text: str) -> None:
        self.path = path
        self.line_number = line_number
        self.text = text
        super().__init__(f"{path}:{line_number}: cannot parse {text!r} as a number")


class NonSquareMatrixError(StatisticsError, ValueError):
    """Matrix inverse requested for something that is not a square 2D matrix."""


class SingularMatrixError(StatisticsError, ValueError):
    """Matrix inverse requested for a singular (or numerically singular) matrix."""
