"""Environment-driven settings.

    INPINCODE_DATA_FILE   Path to a GeoNames-format IN.txt dump.
                          Defaults to the sample bundled with the package.
    INPINCODE_LOG_LEVEL   Log level used by the command line tool.
"""

import os
from pathlib import Path

BUNDLED_DATA_FILE = Path(__file__).parent / "data" / "IN.txt"
DEFAULT_LOG_LEVEL = "WARNING"


def data_file() -> Path:
    """Return the configured data file path, read at call time."""
    return Path(os.environ.get("INPINCODE_DATA_FILE", str(BUNDLED_DATA_FILE)))


def log_level() -> str:
    return os.environ.get("INPINCODE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
