"""Slack payload dispatch: handshake, message events, and button clicks."""

import logging

from fastapi import BackgroundTasks, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from liveness_relay.models.slack import (
    InteractionEvent,
    MessageEvent,
    UnsupportedPayload,
    UrlVerification,
    parse_slack_payload,
)
from liveness_relay.slack.orchestrator import ConfirmationOrchestrator

logger = logging.getLogger(__name__)


def get_orchestrator(request: Request) -> ConfirmationOrchestrator:
    """FastAPI dependency returning the orchestrator built in the app lifespan."""
    return request.app.state.orchestrator


def handle_slack_payload(
    payload: dict,
    background_tasks: BackgroundTasks,
    orchestrator: ConfirmationOrchestrator,
) -> Response:
    """Acknowledge a Slack payload and schedule any work after the response.

    - url_verification: echo the challenge verbatim as plain text
    - message event: prompt for confirmation in the background
    - button click: resolve the confirmation in the background
    - anything else: acknowledge with 200
    """
    event = parse_slack_payload(payload)
    logger.debug("Slack payload received", extra={"payload_type": type(event).__name__})

    if isinstance(event, UrlVerification):
        logger.info("Received Slack URL verification challenge")
        return PlainTextResponse(event.challenge)

    if isinstance(event, MessageEvent):
        background_tasks.add_task(orchestrator.handle_message, event)
        return JSONResponse({"ok": True})

    if isinstance(event, InteractionEvent):
        # The 200 response is the interaction ack; it is sent before the task runs
        background_tasks.add_task(orchestrator.handle_interaction, event)
        return JSONResponse({"ok": True})

    if isinstance(event, UnsupportedPayload):
        logger.debug("Ignoring unsupported Slack payload type %s", event.type)
        return JSONResponse({"ok": True})

    raise TypeError(f"Unhandled Slack payload variant: {type(event).__name__}")
