"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; this module only wires
the root logger once, from the application factory.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from app.core.config import LogFormatEnum, LogLevelEnum

SIMPLE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
SIMPLE_DATEFMT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: LogLevelEnum | str = LogLevelEnum.INFO,
    fmt: LogFormatEnum | str = LogFormatEnum.simple,
) -> None:
    """Install a single stderr handler on the root logger.

    Existing root handlers are removed so repeated calls do not duplicate
    output.
    """
    level_name = level.value if isinstance(level, LogLevelEnum) else str(level).upper()
    fmt_name = fmt.value if isinstance(fmt, LogFormatEnum) else str(fmt)

    root = logging.getLogger()
    root.setLevel(level_name)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if fmt_name == LogFormatEnum.json.value:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=SIMPLE_FORMAT, datefmt=SIMPLE_DATEFMT))
    root.addHandler(handler)

    logging.captureWarnings(True)
