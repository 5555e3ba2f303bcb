"""Slack webhook router with signature verification."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse, Response

from liveness_relay.slack.handlers import get_orchestrator, handle_slack_payload
from liveness_relay.slack.orchestrator import ConfirmationOrchestrator
from liveness_relay.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_slack_request),
    orchestrator: ConfirmationOrchestrator = Depends(get_orchestrator),
) -> Response:
    """Receive Slack Events API and interactivity webhooks.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    to prevent a second prompt for the same message.
    """
    if request.headers.get("X-Slack-Retry-Num"):
        return JSONResponse({"ok": True})

    return handle_slack_payload(payload, background_tasks, orchestrator)
