"""Slack request signature verification as a FastAPI dependency."""

import json
import logging
from urllib.parse import parse_qs

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from liveness_relay.config import get_settings

logger = logging.getLogger(__name__)


async def verify_slack_request(request: Request) -> dict:
    """Verify Slack request signature and return the parsed payload.

    Reads the raw body FIRST (before any parsing) to ensure the signature
    verification uses the exact bytes Slack signed. Events API requests are
    JSON; interactive (button) requests are form-encoded with the JSON in a
    `payload` field.

    Raises HTTPException(403) if the signature is invalid. A signed body that
    is not a JSON object yields an empty dict, which is acknowledged and ignored.
    """
    settings = get_settings()
    # Undecodable bytes become U+FFFD and fail the signature check
    body = (await request.body()).decode("utf-8", errors="replace")

    timestamp = request.headers.get("X-Slack-Request-Timestamp")
    signature = request.headers.get("X-Slack-Signature")

    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)

    try:
        valid = verifier.is_valid(body=body, timestamp=timestamp, signature=signature)
    except ValueError:
        # Non-numeric timestamp header
        valid = False
    if not valid:
        raise HTTPException(status_code=403, detail="Invalid Slack signature")

    try:
        if request.headers.get("Content-Type", "").startswith(
            "application/x-www-form-urlencoded"
        ):
            form = parse_qs(body)
            payload = json.loads(form["payload"][0])
        else:
            payload = json.loads(body)
    except (KeyError, IndexError, ValueError):
        logger.warning("Unparseable Slack payload acknowledged without processing")
        return {}

    if not isinstance(payload, dict):
        logger.warning("Non-object Slack payload acknowledged without processing")
        return {}
    return payload
