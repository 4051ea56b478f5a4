"""
Logging is opt-in, the handlers are named in the environment::

    export OPENAPI3DSL_LOGGING_HANDLERS=console,debug

``debug`` writes /tmp/openapi3dsl-debug.log, ``syslog`` logs to /dev/log.
"""

import logging.config
import os

ENVIRONMENT = "OPENAPI3DSL_LOGGING_HANDLERS"

HANDLERS = {
    "console": ("%(message)s", {"class": "logging.StreamHandler"}),
    "syslog": (
        "%(name)-9s %(levelname)-4s %(message)s",
        {"class": "logging.handlers.SysLogHandler", "address": "/dev/log", "facility": "user"},
    ),
    "debug": (
        "%(asctime)s %(name)-9s %(levelname)-4s %(message)s",
        {"class": "logging.handlers.WatchedFileHandler", "filename": "/tmp/openapi3dsl-debug.log"},
    ),
}

handlers = None


def init():
    """
    configure the openapi3dsl logger once, with the handlers named in the environment

    :raises ValueError: for a handler name which is not in HANDLERS
    """
    global handlers

    if handlers is not None:
        return

    names = [i for i in os.environ.get(ENVIRONMENT, "").split(",") if len(i)]
    if unknown := sorted(set(names) - HANDLERS.keys()):
        raise ValueError(f"{ENVIRONMENT}: unknown handler {', '.join(unknown)}")

    handlers = names
    if not names:
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {name: {"format": HANDLERS[name][0]} for name in names},
            "handlers": {name: dict(HANDLERS[name][1], level="DEBUG", formatter=name) for name in names},
            "loggers": {
                "openapi3dsl": {"level": "DEBUG", "handlers": names},
            },
        }
    )
