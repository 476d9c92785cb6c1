import logging
import sys

from stockroom.settings import settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter() -> logging.Formatter:
    if settings.log_json:
        from pythonjsonlogger.json import JsonFormatter

        return JsonFormatter(fmt=JSON_FORMAT, rename_fields={"asctime": "timestamp", "levelname": "level"})
    return logging.Formatter(TEXT_FORMAT)


def configure_logging(*, web: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    The console entry point calls this with the defaults. The web app passes
    ``web=True``, which also holds uvicorn's per-request access log at WARNING
    unless ``settings.log_access`` is on.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # Faker logs every locale lookup at DEBUG while seeding.
    logging.getLogger("faker").setLevel(max(level, logging.INFO))

    if web and not settings.log_access:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
