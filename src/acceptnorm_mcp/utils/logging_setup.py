"""Logging setup with header-safe formatting.

Accept headers are client-controlled text and end up in debug logs, so
the formatter escapes control characters before records are written.
This keeps a crafted header from forging extra log lines.
"""

import logging
import re
import sys

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def escape_control_chars(value: str) -> str:
    """Replace control characters (except tab) with ``\\xNN`` escapes."""
    return _CONTROL_CHARS.sub(lambda m: f"\\x{ord(m.group(0)):02x}", value)


class HeaderSafeFormatter(logging.Formatter):
    """Formatter that escapes control characters in log messages.

    :param record: Log record to format
    :type record: logging.LogRecord
    :return: Formatted log message on a single line
    :rtype: str
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.args:
            try:
                record.msg = record.msg % record.args
                record.args = None
            except (TypeError, ValueError):
                # leave mismatched args for logging's own error report
                pass
        record.msg = escape_control_chars(str(record.msg))
        return super().format(record)


_LOGGING_CONFIGURED = False


def setup_logging(level: str = "INFO") -> None:
    """Set up root logging once with a header-safe stderr handler.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    formatter = HeaderSafeFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    # stdout carries the MCP stdio transport
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )

    # Let uvicorn records flow through our handler in HTTP mode
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        uv_logger = logging.getLogger(logger_name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True

    _LOGGING_CONFIGURED = True
