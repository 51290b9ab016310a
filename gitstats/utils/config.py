from __future__ import annotations

import logging
import os

from gitstats.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TOP_FILES,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_TOP_FILES,
)

logger = logging.getLogger(__name__)


def _parse_top_files(raw: str | None) -> int:
    if not raw:
        return DEFAULT_TOP_FILES
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning(
            "Ignoring %s=%r; using default of %d", ENV_TOP_FILES, raw, DEFAULT_TOP_FILES
        )
        return DEFAULT_TOP_FILES
    return value


def get_stats_config() -> tuple[str, str | None, int]:
    """Return settings after loading environment variables.

    Returns:
        Tuple of (log_level, log_file, top_files) loaded from environment
    """
    from dotenv import find_dotenv, load_dotenv

    # Real environment variables win over values from the .env file
    try:
        env_path = find_dotenv(usecwd=True)
    except Exception:
        env_path = ""
    load_dotenv(dotenv_path=env_path if env_path else None, override=False)

    # Treat empty strings as absent
    log_level = os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    log_file = os.getenv(ENV_LOG_FILE) or None
    top_files = _parse_top_files(os.getenv(ENV_TOP_FILES))
    return log_level, log_file, top_files
