"""Slack webhook payload variants and the confirmation prompt model.

Inbound payloads are parsed into a closed set of variants so the gateway can
branch on type instead of probing dict keys.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ConfirmationAction(str, Enum):
    """Button action ids on the confirmation prompt."""

    YES = "send_liveness_yes"
    NO = "send_liveness_no"


class ConfirmationOutcome(str, Enum):
    """Terminal result of handling one message or interaction."""

    PROMPTED = "prompted"
    IGNORED = "ignored"
    CONFIRMED = "confirmed"
    DECLINED = "declined"
    EXTRACTION_FAILED = "extraction_failed"
    DOWNSTREAM_FAILED = "downstream_failed"
    DUPLICATE = "duplicate"


class UrlVerification(BaseModel):
    """Slack endpoint ownership handshake."""

    model_config = ConfigDict(frozen=True)

    challenge: str


class MessageEvent(BaseModel):
    """A message event from the Events API (inner `event` of an event_callback)."""

    model_config = ConfigDict(frozen=True)

    channel_id: str
    timestamp: str  # Slack message ts, e.g., "1234567890.123456"
    text: str = ""
    subtype: str | None = None
    user_id: str | None = None
    bot_id: str | None = None
    thread_ts: str | None = None


class InteractionEvent(BaseModel):
    """A button click on the confirmation prompt (block_actions payload)."""

    model_config = ConfigDict(frozen=True)

    action: ConfirmationAction
    payload: str  # Button value; the original message text for YES
    channel_id: str
    message_ts: str  # ts of the prompt message
    thread_ts: str  # ts of the thread the prompt lives in
    user_id: str | None = None


class UnsupportedPayload(BaseModel):
    """Any payload this service does not act on. Acknowledged and dropped."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None


SlackPayload = UrlVerification | MessageEvent | InteractionEvent | UnsupportedPayload


class PromptRequest(BaseModel):
    """A threaded Yes/No confirmation message ready for chat.postMessage."""

    channel_id: str
    thread_ts: str
    text: str
    blocks: list[dict]


def parse_slack_payload(payload: dict) -> SlackPayload:
    """Map a raw Slack webhook payload onto one of the known variants."""
    payload_type = payload.get("type")

    if payload_type == "url_verification":
        challenge = payload.get("challenge")
        if isinstance(challenge, str):
            return UrlVerification(challenge=challenge)
        return UnsupportedPayload(type=payload_type)

    if payload_type == "event_callback":
        return _parse_message_event(payload.get("event") or {})

    if payload_type == "block_actions":
        return _parse_block_actions(payload)

    return UnsupportedPayload(type=payload_type)


def _parse_message_event(event: dict) -> SlackPayload:
    if event.get("type") != "message":
        return UnsupportedPayload(type=event.get("type"))
    if not event.get("channel") or not event.get("ts"):
        return UnsupportedPayload(type="message")

    return MessageEvent(
        channel_id=event["channel"],
        timestamp=event["ts"],
        text=event.get("text") or "",
        subtype=event.get("subtype"),
        user_id=event.get("user"),
        bot_id=event.get("bot_id"),
        thread_ts=event.get("thread_ts"),
    )


def _parse_block_actions(payload: dict) -> SlackPayload:
    actions = payload.get("actions") or []
    if not actions:
        return UnsupportedPayload(type="block_actions")

    action = actions[0]
    try:
        action_id = ConfirmationAction(action.get("action_id"))
    except ValueError:
        return UnsupportedPayload(type="block_actions")

    channel_id = (payload.get("channel") or {}).get("id")
    message = payload.get("message") or {}
    message_ts = message.get("ts")
    if not channel_id or not message_ts:
        return UnsupportedPayload(type="block_actions")

    return InteractionEvent(
        action=action_id,
        payload=action.get("value") or "",
        channel_id=channel_id,
        message_ts=message_ts,
        thread_ts=message.get("thread_ts") or message_ts,
        user_id=(payload.get("user") or {}).get("id"),
    )
