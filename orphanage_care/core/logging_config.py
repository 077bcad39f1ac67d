"""
Logging setup for the service.

Everything comes from ``Settings``: level, line format, the optional log
file, and the level applied to the MongoDB driver's own loggers (very
chatty at DEBUG). Handlers are attached the first time only, so building
several apps in one process, as the tests do, does not duplicate output.
"""

import logging
from pathlib import Path
from typing import Optional

from orphanage_care.core.config import Settings, settings as default_settings

# third-party loggers that follow ``Settings.driver_log_level`` instead of ``log_level``
DRIVER_LOGGERS = ("pymongo", "motor")


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(config: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Attach console (and file) handlers to ``logger``, the root logger by default.

    Returns False when the logger already had handlers and was left alone.
    """
    config = config or default_settings
    target = logger or logging.getLogger()
    if target.handlers:
        return False

    target.setLevel(_level(config.log_level))
    formatter = logging.Formatter(fmt=config.log_format, datefmt=config.log_datefmt)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        target.addHandler(handler)

    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(_level(config.driver_log_level))
    return True
