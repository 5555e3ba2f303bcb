"""Async Slack client singleton and bot identity lookup.

Creates a cached AsyncWebClient instance configured with the bot token from
application settings, and caches this bot's own ids (from auth.test) so the
orchestrator can ignore messages the bot posted itself.
"""

import logging

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from liveness_relay.config import get_settings

logger = logging.getLogger(__name__)

_client: AsyncWebClient | None = None
_own_ids: frozenset[str] | None = None


async def get_slack_client() -> AsyncWebClient:
    """Return a cached async Slack client instance.

    Creates the client on first call using slack_bot_token from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = AsyncWebClient(token=settings.slack_bot_token)
    return _client


async def get_own_bot_ids() -> frozenset[str]:
    """Return the bot id and bot user id of this app, cached after first success.

    On an auth.test failure an empty set is returned and nothing is cached,
    so the lookup is retried on the next event.
    """
    global _own_ids
    if _own_ids is None:
        client = await get_slack_client()
        try:
            response = await client.auth_test()
        except SlackApiError:
            logger.warning("auth.test failed; cannot identify own bot messages", exc_info=True)
            return frozenset()
        _own_ids = frozenset(
            value for value in (response.get("bot_id"), response.get("user_id")) if value
        )
    return _own_ids


def reset_client() -> None:
    """Reset the cached client and bot ids. Used for testing."""
    global _client, _own_ids
    _client = None
    _own_ids = None
