"""Confirmation flow: prompt on channel messages, act on Yes/No clicks.

Per message the flow is Idle -> AwaitingConfirmation -> Confirmed | Declined.
No state is kept between the prompt and the click: the Yes button carries the
original message text, and the player id is extracted from it on click.
"""

import logging

from cachetools import TTLCache

from liveness_relay.config import Settings
from liveness_relay.errors import DownstreamError
from liveness_relay.extraction import extract_external_player_id
from liveness_relay.intercom.messages import IntercomDispatcher
from liveness_relay.models.slack import (
    ConfirmationAction,
    ConfirmationOutcome,
    InteractionEvent,
    MessageEvent,
)
from liveness_relay.slack.blocks import build_confirmation_prompt
from liveness_relay.slack.client import get_own_bot_ids
from liveness_relay.slack.notifier import post_prompt, post_thread_reply
from liveness_relay.sumsub.links import SumsubLinkProvider

logger = logging.getLogger(__name__)

# Message subtypes that are not new substantive messages
IGNORED_SUBTYPES = frozenset(
    {"message_changed", "message_deleted", "channel_join", "thread_broadcast"}
)

SENT_TEXT = "Liveness link sent to player via Intercom."
DECLINED_TEXT = "Ok, no liveness will be initiated."
EXTRACTION_FAILED_TEXT = "Could not extract external_player_id."
DUPLICATE_TEXT = "Liveness was already requested from this prompt."
DOWNSTREAM_FAILED_TEXT = "Could not complete verification request: {detail}"

_CLAIM_CACHE_SIZE = 1024


class ConfirmationOrchestrator:
    """Turns channel messages into confirmed liveness requests."""

    def __init__(
        self,
        settings: Settings,
        link_provider: SumsubLinkProvider,
        dispatcher: IntercomDispatcher,
    ) -> None:
        self._target_channel_id = settings.target_channel_id
        self._link_provider = link_provider
        self._dispatcher = dispatcher
        self._claimed: TTLCache | None = None
        if settings.dedupe_confirmations:
            self._claimed = TTLCache(
                maxsize=_CLAIM_CACHE_SIZE, ttl=settings.sumsub_link_ttl_seconds
            )

    def should_prompt(
        self, event: MessageEvent, own_bot_ids: frozenset[str] = frozenset()
    ) -> bool:
        """Return True if the message should get a confirmation prompt.

        Skips messages without text, outside the target channel, with a
        non-substantive subtype, or posted by this bot.
        """
        if not event.text:
            return False
        if event.channel_id != self._target_channel_id:
            return False
        if event.subtype in IGNORED_SUBTYPES:
            return False
        if event.bot_id in own_bot_ids or event.user_id in own_bot_ids:
            return False
        return True

    async def handle_message(self, event: MessageEvent) -> ConfirmationOutcome:
        """Post a Yes/No prompt under the message if it passes the filters."""
        own_bot_ids = await get_own_bot_ids()
        if not self.should_prompt(event, own_bot_ids):
            logger.debug(
                "Ignoring message %s in %s (subtype=%s)",
                event.timestamp,
                event.channel_id,
                event.subtype,
            )
            return ConfirmationOutcome.IGNORED

        await post_prompt(build_confirmation_prompt(event))
        logger.info("Posted confirmation prompt for message %s", event.timestamp)
        return ConfirmationOutcome.PROMPTED

    async def handle_interaction(self, interaction: InteractionEvent) -> ConfirmationOutcome:
        """Resolve a Yes/No click. Must run after the interaction is acknowledged."""
        logger.info(
            "Received %s from %s on prompt %s",
            interaction.action.value,
            interaction.user_id,
            interaction.message_ts,
        )
        if interaction.action == ConfirmationAction.NO:
            await self._reply(interaction, DECLINED_TEXT)
            return ConfirmationOutcome.DECLINED
        return await self._confirm(interaction)

    async def _confirm(self, interaction: InteractionEvent) -> ConfirmationOutcome:
        """Extract -> create link -> send message -> reply, strictly in order."""
        if not self._claim(interaction):
            logger.warning("Duplicate confirmation ignored for prompt %s", interaction.message_ts)
            await self._reply(interaction, DUPLICATE_TEXT)
            return ConfirmationOutcome.DUPLICATE

        external_player_id = extract_external_player_id(interaction.payload)
        if external_player_id is None:
            logger.warning("No external_player_id in prompt %s", interaction.message_ts)
            self._release(interaction)
            await self._reply(interaction, EXTRACTION_FAILED_TEXT)
            return ConfirmationOutcome.EXTRACTION_FAILED

        try:
            link = await self._link_provider.create_liveness_link(external_player_id)
            delivered = await self._dispatcher.send_liveness_message(
                external_player_id, link.url
            )
        except DownstreamError as exc:
            logger.error(
                "Liveness request failed for player %s: %s",
                external_player_id,
                exc,
                extra={"downstream_service": exc.service, "status_code": exc.status_code},
            )
            return await self._fail(interaction, str(exc))
        except Exception:
            self._release(interaction)
            raise

        if not delivered:
            logger.error("Intercom did not accept message for player %s", external_player_id)
            return await self._fail(interaction, "Intercom did not accept the message")

        await self._reply(interaction, SENT_TEXT)
        logger.info("Liveness link sent to player %s", external_player_id)
        return ConfirmationOutcome.CONFIRMED

    async def _fail(self, interaction: InteractionEvent, detail: str) -> ConfirmationOutcome:
        # Release the claim so the operator can click Yes again
        self._release(interaction)
        await self._reply(interaction, DOWNSTREAM_FAILED_TEXT.format(detail=detail))
        return ConfirmationOutcome.DOWNSTREAM_FAILED

    def _claim(self, interaction: InteractionEvent) -> bool:
        """Mark the prompt as confirmed. False if it already was."""
        if self._claimed is None:
            return True
        key = (interaction.channel_id, interaction.message_ts)
        if key in self._claimed:
            return False
        self._claimed[key] = True
        return True

    def _release(self, interaction: InteractionEvent) -> None:
        if self._claimed is not None:
            self._claimed.pop((interaction.channel_id, interaction.message_ts), None)

    async def _reply(self, interaction: InteractionEvent, text: str) -> None:
        await post_thread_reply(interaction.channel_id, interaction.thread_ts, text)
