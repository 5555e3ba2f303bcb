"""Sumsub WebSDK liveness link creation.

One POST per confirmed request, no retries: a failed call surfaces as
LinkCreationError and the caller decides what to tell the operator.
"""

import logging

import httpx

from liveness_relay.config import Settings
from liveness_relay.errors import LinkCreationError
from liveness_relay.models.verification import VerificationLink

logger = logging.getLogger(__name__)

WEBSDK_LINK_PATH = "/resources/applicants/-/websdkLink"


class SumsubLinkProvider:
    """Mints short-lived liveness-check links for a player."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self._client = client
        self._url = settings.sumsub_base_url.rstrip("/") + WEBSDK_LINK_PATH
        self._app_token = settings.sumsub_app_token
        self._secret_key = settings.sumsub_secret_key
        self._level_name = settings.sumsub_level_name
        self._ttl_seconds = settings.sumsub_link_ttl_seconds

    async def create_liveness_link(self, external_player_id: str) -> VerificationLink:
        """Request a liveness-only WebSDK link for the given external player id.

        Raises:
            ValueError: external_player_id is empty.
            LinkCreationError: network failure, non-2xx status, or no `url`
                in the response body.
        """
        if not external_player_id:
            raise ValueError("external_player_id must not be empty")

        headers = {
            "X-External-User-ID": external_player_id,
            "Content-Type": "application/json",
            "X-App-Token": self._app_token,
            "X-App-Access-Token": self._secret_key,
        }
        body = {"levelName": self._level_name, "ttlInSecs": self._ttl_seconds}

        try:
            response = await self._client.post(self._url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            raise LinkCreationError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise LinkCreationError(_error_detail(response), status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise LinkCreationError(
                "response body is not JSON", status_code=response.status_code
            ) from exc

        link_url = data.get("url") if isinstance(data, dict) else None
        if not isinstance(link_url, str) or not link_url:
            raise LinkCreationError(
                "response has no url field", status_code=response.status_code
            )

        logger.info("Created Sumsub liveness link for player %s", external_player_id)
        return VerificationLink(
            url=link_url,
            external_player_id=external_player_id,
            ttl_seconds=self._ttl_seconds,
        )


def _error_detail(response: httpx.Response) -> str:
    """Best-effort human-readable error from a Sumsub error body."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(data, dict) and data.get("description"):
        return str(data["description"])
    return response.text[:200] or response.reason_phrase
