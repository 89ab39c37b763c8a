from __future__ import annotations
import logging
import os
import sys
from typing import Optional


# Defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "lisp> "
DEFAULT_CONTINUATION_PROMPT = "...   "
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_log_level() -> str:
    return os.environ.get("MINILISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("MINILISP_RECURSION_LIMIT")
    if not raw or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"MINILISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None


def get_prompts() -> tuple[str, str]:
    return (
        os.environ.get("MINILISP_PROMPT", DEFAULT_PROMPT),
        os.environ.get("MINILISP_CONTINUATION_PROMPT", DEFAULT_CONTINUATION_PROMPT),
    )


def configure_logging(level: Optional[str] = None, stream=None) -> logging.Logger:
    """Attach a stderr handler to the `minilisp` logger.

    The library itself installs no handlers; this is for the command line.
    """
    level = (level or get_log_level()).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {level!r}")
    logger = logging.getLogger("minilisp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def apply_recursion_limit(limit: Optional[int] = None) -> None:
    limit = limit if limit is not None else get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
