"""Structlog setup for dynaform and the engine diagnostics channel."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from dynaform.settings import Settings, get_settings

if TYPE_CHECKING:
    from structlog.typing import EventDict, Processor

ENGINE_LOGGER_NAME = "dynaform.engine"

_LOGGING_CONFIGURED = False


def _rename_event_key(
    logger: logging.Logger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    """Store the log event under `message` in JSON records."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _output_processors(*, json_output: bool) -> list[Processor]:
    if json_output:
        return [_rename_event_key, structlog.processors.JSONRenderer(sort_keys=True)]
    return [structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(
    *,
    settings: Settings | None = None,
    force: bool = False,
    console: bool | None = None,
) -> None:
    """Configure structlog and stdlib logging for dynaform.

    Records are JSON lines unless `LOG_JSON` is off. Engine diagnostics are meant
    to be read by the person driving the form, so callers that turn diagnostics
    on can pass `console=True` to get human-readable lines whatever `LOG_JSON` says.

    Args:
        settings (Settings | None): Settings to read; the cached settings when omitted.
        force (bool): Reconfigure even when logging was already configured.
        console (bool | None): Override the renderer choice; None follows `LOG_JSON`.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603

    if _LOGGING_CONFIGURED and not force:
        return

    config = settings or get_settings()
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    json_output = config.log_json if console is None else not console

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=handlers,
        force=force,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.format_exc_info,
            *_output_processors(json_output=json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str = "dynaform") -> structlog.BoundLogger:
    """Return a dynaform logger, configuring logging lazily."""
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)


def get_engine_logger(mount_target_id: str) -> structlog.BoundLogger:
    """Return the diagnostics logger of the engine rendering into `mount_target_id`.

    Every record carries the mount target so diagnostics of several forms on one
    document can be told apart.
    """
    return get_logger(ENGINE_LOGGER_NAME).bind(mount_target_id=mount_target_id)
