"""Apply LoggingConfig to the package logger hierarchy."""

import logging

from .settings import LoggingConfig

_PACKAGE_LOGGER = "regulated_assets"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """
    Set level and a single stream handler on the ``regulated_assets`` logger.

    In ``json`` format records are emitted as-is, since StructuredLogger
    already renders them as JSON lines. Calling this again replaces the
    handler rather than stacking another one.
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(config.level)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_regulated_assets_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s" if config.format == "json" else _TEXT_FORMAT))
    handler._regulated_assets_handler = True
    package_logger.addHandler(handler)
    return package_logger
