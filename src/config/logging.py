"""Structured logging setup (structlog on top of stdlib ``logging``).

Every log line goes through the same processor chain whether it was emitted
by structlog (``structlog.get_logger``) or by a stdlib logger (Django,
DRF, third-party code):

- context variables (``request_id`` bound by the request middleware),
- log level and logger name,
- ISO timestamp,
- PII/secret masking (``mask_sensitive_data``).

The final rendering is JSON by default; ``console`` gives a coloured,
human-readable output for local development.
"""

import re

import structlog

# Keeps the first character of the local part, e.g. ``man@turtle.sea`` ->
# ``m***@turtle.sea``.
EMAIL_PATTERN = re.compile(
    r"(?P<first>[A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@(?P<domain>[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+)"
)

SECRET_PATTERN = re.compile(
    r"(?P<key>password|passwd|secret|token|authorization)"
    r"""(?P<sep>\s*[=:]\s*["']?)[^\s,}"']+""",
    re.IGNORECASE,
)

MASK = "***MASKED***"


def mask_value(value: str) -> str:
    value = SECRET_PATTERN.sub(lambda m: f"{m.group('key')}{m.group('sep')}{MASK}", value)
    return EMAIL_PATTERN.sub(lambda m: f"{m.group('first')}***@{m.group('domain')}", value)


def mask_sensitive_data(_, __, event_dict):
    """Processor that masks email addresses, passwords and tokens in log values."""
    for key, value in list(event_dict.items()):
        if isinstance(value, str):
            event_dict[key] = mask_value(value)
    return event_dict


SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    mask_sensitive_data,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_structlog() -> None:
    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_logging_config(level: str = "INFO", fmt: str = "json") -> dict:
    """Return a ``LOGGING`` dict for Django's ``dictConfig`` call."""
    if fmt == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    renderer,
                ],
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "django.server": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }
