"""Logfire setup.

Services open a span per operation and log outcomes as structured events:

    with logfire.span("vote_service.cast", comment_id=comment_id):
        logfire.info("Vote transition", previous=..., resulting_vote=...)
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from doccomments.config import ObservabilitySettings, Settings

SERVICE_NAME = "doccomments"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise having a token
    is taken as the wish to send.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, console output always on.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)
    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            span_style="indented",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement of the engine inside the current service span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
