"""Logging configuration helpers."""

import logging

_CONTEXT_FIELDS = ("photo_id", "mode", "status")


class _ContextFormatter(logging.Formatter):
    """Append photo context passed through ``extra`` to each line."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{name}={getattr(record, name)}"
            for name in _CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        ]
        if context:
            return f"{message} [{' '.join(context)}]"
        return message


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("photobooth")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_ContextFormatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
