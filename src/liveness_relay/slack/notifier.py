"""Slack thread replies for the confirmation flow.

All functions are fire-and-forget: they catch and log SlackApiError but never
raise, so a failed chat post cannot interrupt the flow that called it.
"""

import logging

from slack_sdk.errors import SlackApiError

from liveness_relay.models.slack import PromptRequest
from liveness_relay.slack.client import get_slack_client

logger = logging.getLogger(__name__)


async def post_prompt(prompt: PromptRequest) -> None:
    """Post the Yes/No confirmation prompt as a thread reply."""
    try:
        client = await get_slack_client()
        await client.chat_postMessage(
            channel=prompt.channel_id,
            thread_ts=prompt.thread_ts,
            text=prompt.text,
            blocks=prompt.blocks,
        )
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.error(
            "Failed to post confirmation prompt to %s (%s)",
            prompt.channel_id,
            error_code,
            exc_info=True,
        )


async def post_thread_reply(channel_id: str, thread_ts: str, text: str) -> None:
    """Post a plain-text reply in a thread.

    Args:
        channel_id: Slack channel ID.
        thread_ts: Timestamp of the message to reply under.
        text: Reply text.
    """
    try:
        client = await get_slack_client()
        await client.chat_postMessage(
            channel=channel_id,
            thread_ts=thread_ts,
            text=text,
        )
    except SlackApiError:
        logger.warning("Failed to post thread reply in %s: %s", channel_id, text, exc_info=True)
