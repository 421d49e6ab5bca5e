"""
Configuration & Constants
=========================
Central registry for numeric constants and bundled resource paths.

Exports:
    FLOAT_DTYPE: dtype used for stored observation histories.
    UNSET: sentinel for a running statistic with no observations (NaN).
    SINGULAR_CONDITION_LIMIT: condition number above which a matrix is
        treated as singular by ``checked_inverse``.
    COMMENT_PREFIX: lines starting with this are ignored in observation files.
    ASSETS_PATH (str): Absolute path to the packaged assets directory.
    SAMPLE_OBSERVATIONS_PATH (str): Absolute path to the bundled sample data.
"""
import logging
import os
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource shipped inside the runningstats package.
    """
    # Assets live in src/runningstats/assets/ and install as package data
    package_dir: Path = Path(__file__).resolve().parent
    return os.path.join(str(package_dir), relative_path)


# Numerics
FLOAT_DTYPE = np.float64
UNSET: float = float("nan")
SINGULAR_CONDITION_LIMIT: float = 1.0 / np.finfo(np.float64).eps

# Observation files
COMMENT_PREFIX: str = "#"
DEFAULT_DELIMITER: str = ","

# Logging
PACKAGE_LOGGER_NAME: str = "runningstats"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'

# Paths
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_OBSERVATIONS_PATH: str = os.path.join(ASSETS_PATH, "sample_observations.csv")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
