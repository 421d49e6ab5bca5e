"""
Observation File Reader
Streams numeric observations out of CSV / plain-text files.

The file is always opened in a ``with`` block, so it is closed whether the
read finishes, fails on a bad cell, or the generator is closed early.
"""
from __future__ import annotations

import csv
import logging
import os
from typing import Iterator, Union

from runningstats.accumulator import RunningStats
from runningstats.config import COMMENT_PREFIX, DEFAULT_DELIMITER
from runningstats.errors import ObservationParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _parse_cell(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def iter_observations(
    path: PathLike,
    column: int = 0,
    delimiter: str = DEFAULT_DELIMITER,
) -> Iterator[float]:
    """
    Yield observations from one column of a delimited text file.

    Blank lines and lines starting with ``#`` are skipped. If the first data
    row does not parse as a number it is treated as a header.

    Args:
        path: File to read.
        column: 0-based column index.
        delimiter: Column separator.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ObservationParseError: If a cell after the header is not numeric or the column is missing.
    """
    filepath = os.fspath(path)
    logger.info(f"Reading observations from: {filepath}")
    count = 0
    with open(filepath, newline='', encoding='utf-8') as f:
        reader = csv.reader(f, delimiter=delimiter)
        first_row = True
        for row in reader:
            line_number = reader.line_num
            if not row or not "".join(row).strip() or row[0].lstrip().startswith(COMMENT_PREFIX):
                continue

            if column >= len(row):
                raise ObservationParseError(filepath, line_number, "")
            cell = row[column].strip()
            value = _parse_cell(cell)
            if value is None:
                if first_row:
                    logger.debug(f"Skipping header row: {row}")
                    first_row = False
                    continue
                raise ObservationParseError(filepath, line_number, cell)

            first_row = False
            count += 1
            yield value
    logger.debug(f"Read {count} observations from {filepath}.")


def read_observations(
    path: PathLike,
    column: int = 0,
    delimiter: str = DEFAULT_DELIMITER,
) -> RunningStats:
    """Fill a new :class:`RunningStats` from a file. See :func:`iter_observations`."""
    return RunningStats.from_iterable(iter_observations(path, column=column, delimiter=delimiter))
