"""
Structured logging setup.

Library modules get their loggers from ``get_logger``: structlog bound loggers
wrapped around stdlib loggers under the ``ultan`` namespace, so their events are
filtered by stdlib levels and routed through whatever handlers the host has.
Importing the package only sets the ``ultan`` stdlib logger level; structlog's
global configuration is left to the application, which may call
``configure_logging()`` once at startup.
"""

import logging

import structlog

from ultan.config import UltanConfig, get_config

PACKAGE_LOGGER = "ultan"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def set_package_level(config: UltanConfig | None = None) -> None:
    """Apply the configured level to the ``ultan`` stdlib logger only."""
    config = config or get_config()
    logging.getLogger(PACKAGE_LOGGER).setLevel(config.logging.level)


def configure_logging(config: UltanConfig | None = None, *, configure_root: bool = True) -> None:
    """Configure structlog on top of the stdlib logging machinery."""
    config = config or get_config()

    renderer: structlog.types.Processor
    if config.logging.format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    if configure_root:
        logging.basicConfig(format="%(message)s", level=config.logging.level)
        logging.getLogger().setLevel(config.logging.level)
    set_package_level(config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
