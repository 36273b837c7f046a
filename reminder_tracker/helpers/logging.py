from logging import Logger, _nameToLevel, basicConfig

from structlog import (
    configure_once,
    get_logger as structlog_get_logger,
    make_filtering_bound_logger,
)
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    TimeStamper,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import PositionalArgumentsFormatter
from structlog.typing import Processor

from reminder_tracker.helpers.config import CONFIG
from reminder_tracker.helpers.config_models.monitoring import LoggingFormatEnum

_config = CONFIG.monitoring.logging


def _renderers() -> list[Processor]:
    """
    Final processors, depending on the configured output format.
    """
    if _config.format == LoggingFormatEnum.JSON:
        return [
            # Exceptions as plain text, JSON cannot hold traceback objects
            format_exc_info,
            JSONRenderer(ensure_ascii=False),  # Keep Vietnamese labels readable
        ]
    return [
        # Pretty printing in a terminal session
        ConsoleRenderer(),
    ]


# Default logging level for all the dependencies
basicConfig(level=_config.sys_level.value)

# Configure application logging
configure_once(
    cache_logger_on_first_use=True,
    context_class=dict,
    wrapper_class=make_filtering_bound_logger(_nameToLevel[_config.app_level.value]),
    processors=[
        # Add contextvars support, like the reminder id
        merge_contextvars,
        # Add log level
        add_log_level,
        # Enable %s-style formatting
        PositionalArgumentsFormatter(),
        # Add timestamp
        TimeStamper(fmt="iso", utc=True),
        # Add exceptions info
        StackInfoRenderer(),
        # Decode Unicode to str
        UnicodeDecoder(),
        *_renderers(),
    ],
)

# Framework does not exactly expose Logger, but that's easier to work with
logger: Logger = structlog_get_logger("reminder-tracker")
