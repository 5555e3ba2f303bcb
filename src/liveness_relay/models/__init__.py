"""Data models for the liveness relay."""

from liveness_relay.models.slack import (
    ConfirmationAction,
    ConfirmationOutcome,
    InteractionEvent,
    MessageEvent,
    PromptRequest,
    SlackPayload,
    UnsupportedPayload,
    UrlVerification,
    parse_slack_payload,
)
from liveness_relay.models.verification import VerificationLink

__all__ = [
    "ConfirmationAction",
    "ConfirmationOutcome",
    "InteractionEvent",
    "MessageEvent",
    "PromptRequest",
    "SlackPayload",
    "UnsupportedPayload",
    "UrlVerification",
    "VerificationLink",
    "parse_slack_payload",
]
