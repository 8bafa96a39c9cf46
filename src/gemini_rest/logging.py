from __future__ import annotations

import logging
import logging.handlers
import os
import re
from pathlib import Path

# Header values that must never reach a log line.
_HEADER_PATTERN = re.compile(r"(X-GEMINI-(?:APIKEY|PAYLOAD|SIGNATURE)['\"]?\s*[:=]\s*['\"]?)[^'\",\s}]+")

_secrets: set[str] = set()


def redact_secrets(*values: str | None) -> None:
    """Register API keys or secrets to be masked in every log record."""
    _secrets.update(v for v in values if v)


def redact(message: str) -> str:
    message = _HEADER_PATTERN.sub(r"\1***", message)
    for secret in _secrets:
        message = message.replace(secret, "***")
    return message


class RedactingFilter(logging.Filter):
    """Masks Gemini auth headers and registered secrets."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact(record.getMessage())
        record.args = None
        return True


def configure_logging(log_dir: Path | None = None) -> None:
    """Configure console logging and, when ``log_dir`` is given, a rotating log file."""
    level_name = os.environ.get("GEMINI_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    redacting = RedactingFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(redacting)
    root_logger.addHandler(console_handler)

    # aiohttp is only interesting when debugging requests
    if level > logging.DEBUG:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "gemini_rest.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(redacting)
        root_logger.addHandler(file_handler)
