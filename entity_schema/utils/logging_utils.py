import logging
import sys
from typing import Optional


DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a threshold level."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Route log records to stdout or stderr depending on their level.

    Records below ``stderr_level`` go to stdout, the rest to stderr, so that
    lint reports piped from stdout stay free of diagnostics.

    Args:
        level: Minimum level handled at all.
        stderr_level: First level that is written to stderr.
        formatter: Formatter shared by both handlers.
        logger_name: Logger to configure; the root logger when omitted.

    Returns:
        The configured logger.
    """
    target = logging.getLogger(logger_name)
    for handler in list(target.handlers):
        target.removeHandler(handler)
    target.setLevel(level)

    formatter = formatter or logging.Formatter(DEFAULT_LOG_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    low = logging.StreamHandler(stream=sys.stdout)
    low.setLevel(logging.DEBUG)
    low.addFilter(_BelowLevelFilter(stderr_level))
    low.setFormatter(formatter)

    high = logging.StreamHandler(stream=sys.stderr)
    high.setLevel(stderr_level)
    high.setFormatter(formatter)

    target.addHandler(low)
    target.addHandler(high)
    return target
