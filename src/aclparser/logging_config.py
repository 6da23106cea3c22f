import logging
import re
from pathlib import Path
from typing import Optional


class SensitiveDataFilter(logging.Filter):
    """Filter to mask subscription credentials in logs"""

    PATTERNS = {
        "query_secret": r"([?&](?:token|key|password|passwd|auth|secret)=)[^&\s#]+",
        "userinfo": r"(https?://)[^/\s:@]+:[^/\s@]+@",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()

        # Mask credential query parameters, e.g. ?token=abc
        message = re.sub(self.PATTERNS["query_secret"], r"\1[MASKED]", message, flags=re.IGNORECASE)

        # Mask user:password@ in URLs
        message = re.sub(self.PATTERNS["userinfo"], r"\1[MASKED]@", message)

        record.msg = message
        record.args = None
        return True


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    mask_sensitive: bool = True,
):
    """Setup logging with optional file output and sensitive data filtering"""

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers to avoid duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        # Handler-level so records from child loggers are masked too
        if mask_sensitive:
            handler.addFilter(SensitiveDataFilter())
        root_logger.addHandler(handler)
