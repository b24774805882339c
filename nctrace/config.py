"""
Central configuration for nctrace constants and shared defaults.
"""

import logging

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

# Source syntax
COMMENT_CHAR: str = "("  # comments run from here to end of line
LINE_NUMBER_CODE: str = "N"

# Input/output defaults
DEFAULT_ENCODING: str = "utf-8"
CSV_DELIMITER: str = ","
TRACE_COLUMNS: tuple[str, ...] = ("index", "x", "y", "z")

LOG_LEVEL_DEFAULT: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
