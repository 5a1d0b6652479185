from __future__ import annotations

import logging

from rentassist.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOG_CONFIGURED = False


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging once per process from ``settings.log_level``.

    Called by both the CLI and ``create_app`` so a server started through
    ``uvicorn --factory`` logs in the same format as ``rentassist serve``.
    SQLAlchemy engine logging stays at WARNING unless the app runs at DEBUG,
    since statement parameters carry applicant PII.
    """
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if level > logging.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("rentassist").setLevel(level)
    _LOG_CONFIGURED = True
