"""Slack ingress: webhook handling, signature verification, and the confirmation flow."""

from liveness_relay.slack.client import get_own_bot_ids, get_slack_client, reset_client
from liveness_relay.slack.notifier import post_prompt, post_thread_reply
from liveness_relay.slack.orchestrator import ConfirmationOrchestrator
from liveness_relay.slack.router import router

__all__ = [
    "ConfirmationOrchestrator",
    "get_own_bot_ids",
    "get_slack_client",
    "post_prompt",
    "post_thread_reply",
    "reset_client",
    "router",
]
