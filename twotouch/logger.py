import logging
import os
import sys

logger = logging.getLogger("twotouch")

if not logger.handlers:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)  # below WARNING
    stderr_handler.setLevel(logging.WARNING)  # WARNING and above

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)


def set_level(level: str) -> bool:
    """Change the package log level, e.g. after a ``.env`` file was loaded.

    An unknown level name falls back to INFO with a warning instead of
    raising, so a bad setting never stops the codec from loading.

    Returns:
        True if *level* was recognised
    """
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        logger.setLevel(logging.INFO)
        logger.warning(f"⚠️ Unknown log level '{level}', using INFO")
        return False
    logger.setLevel(resolved)
    return True


set_level(os.environ.get("TWOTOUCH_LOG_LEVEL", "INFO"))
