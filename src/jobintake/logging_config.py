from __future__ import annotations

import logging

from jobintake.config import get_settings


_LOG_CONFIGURED = False

# Chatty at DEBUG; the multipart parser logs every part it reads.
QUIET_LOGGERS = ("multipart", "python_multipart")


def configure_logging() -> None:
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    _LOG_CONFIGURED = True
