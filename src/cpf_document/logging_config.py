from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Sends ``cpf_document`` logs to the current stderr at ``level``.

    Replaces the handler installed by an earlier call, so repeated calls
    never stack handlers and always follow the current ``sys.stderr``.
    Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger("cpf_document")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    for old in [h for h in logger.handlers if getattr(h, "_cpf_document", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._cpf_document = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
