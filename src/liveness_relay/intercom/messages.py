"""Intercom in-app message delivery of verification links."""

import logging

import httpx

from liveness_relay.config import Settings
from liveness_relay.errors import NotificationError

logger = logging.getLogger(__name__)

LIVENESS_MESSAGE_TEMPLATE = (
    "For security verification, please complete your liveness check:\n{link}"
)


class IntercomDispatcher:
    """Sends in-app messages from the configured admin to a player."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self._client = client
        self._url = settings.intercom_base_url.rstrip("/") + "/messages"
        self._token = settings.intercom_token
        self._admin_id = settings.intercom_admin_id

    async def send_liveness_message(self, external_player_id: str, link: str) -> bool:
        """Send the liveness link to the player as an in-app message.

        Returns True when Intercom accepts the message (2xx), False otherwise.
        Raises NotificationError if the request itself fails.
        """
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        body = {
            "message_type": "inapp",
            "from": {"type": "admin", "id": self._admin_id},
            "to": {"type": "user", "user_id": external_player_id},
            "body": LIVENESS_MESSAGE_TEMPLATE.format(link=link),
        }

        try:
            response = await self._client.post(self._url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            raise NotificationError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            logger.warning(
                "Intercom rejected message for player %s",
                external_player_id,
                extra={"status_code": response.status_code, "body": response.text[:200]},
            )
            return False

        logger.info("Intercom message sent to player %s", external_player_id)
        return True
