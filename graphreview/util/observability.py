"""Logfire setup.

Services, use cases and the comment section log through logfire directly:

    import logfire

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.create_comment", review_id=str(review_id)):
        ...

This module configures logfire once per process and instruments FastAPI,
SQLAlchemy and httpx.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from graphreview.config import Settings

SERVICE_NAME = "graph-review-comments"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the API process.

    Spans are exported when a token is set, unless
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says otherwise. The console always
    gets them.
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = observability.logfire_token is not None

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request by method and path.

    Headers are left out so the ``auth_token`` cookie never reaches a trace.
    """

    def request_attributes(request, attributes):
        return {**attributes, "method": request.method, "path": request.url.path}

    logfire.instrument_fastapi(
        app, capture_headers=False, request_attributes_mapper=request_attributes
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace comment store queries."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to the email service and the comments API."""
    logfire.instrument_httpx()
