"""Tests for Slack payload parsing into event variants."""

import pytest
from pydantic import ValidationError

from liveness_relay.models.slack import (
    ConfirmationAction,
    InteractionEvent,
    MessageEvent,
    UnsupportedPayload,
    UrlVerification,
    parse_slack_payload,
)


def _block_actions(**overrides: object) -> dict:
    """Build a block_actions payload for a Yes click with overrides."""
    base = {
        "type": "block_actions",
        "user": {"id": "U_OPERATOR"},
        "channel": {"id": "C0BETBY001"},
        "message": {"ts": "1700000001.000200", "thread_ts": "1700000000.000100"},
        "actions": [
            {
                "action_id": "send_liveness_yes",
                "value": '{"external_player_id":"abc123"}',
            }
        ],
    }
    base.update(overrides)
    return base


# -- Handshake --


def test_url_verification():
    """url_verification payloads carry the challenge."""
    parsed = parse_slack_payload({"type": "url_verification", "challenge": "xyz"})
    assert parsed == UrlVerification(challenge="xyz")


def test_url_verification_without_challenge_is_unsupported():
    """A handshake without a challenge string is not echoed."""
    parsed = parse_slack_payload({"type": "url_verification"})
    assert isinstance(parsed, UnsupportedPayload)


# -- Message events --


def test_message_event():
    """event_callback with a message event maps all fields."""
    payload = {
        "type": "event_callback",
        "event": {
            "type": "message",
            "channel": "C0BETBY001",
            "ts": "1700000000.000100",
            "text": "hello",
            "user": "U1",
            "bot_id": "B1",
        },
    }
    parsed = parse_slack_payload(payload)
    assert parsed == MessageEvent(
        channel_id="C0BETBY001",
        timestamp="1700000000.000100",
        text="hello",
        user_id="U1",
        bot_id="B1",
    )


def test_message_event_without_text_has_empty_text():
    """File-only messages parse with empty text."""
    payload = {
        "type": "event_callback",
        "event": {"type": "message", "channel": "C1", "ts": "1.2", "subtype": "file_share"},
    }
    parsed = parse_slack_payload(payload)
    assert isinstance(parsed, MessageEvent)
    assert parsed.text == ""
    assert parsed.subtype == "file_share"


def test_non_message_event_is_unsupported():
    """Other event types are not message events."""
    payload = {"type": "event_callback", "event": {"type": "app_mention", "channel": "C1"}}
    parsed = parse_slack_payload(payload)
    assert parsed == UnsupportedPayload(type="app_mention")


def test_message_event_without_channel_is_unsupported():
    """A message event lacking channel or ts cannot be prompted."""
    payload = {"type": "event_callback", "event": {"type": "message", "text": "hi"}}
    assert isinstance(parse_slack_payload(payload), UnsupportedPayload)


def test_message_event_is_frozen():
    """Parsed events are immutable."""
    event = MessageEvent(channel_id="C1", timestamp="1.2", text="hi")
    with pytest.raises(ValidationError):
        event.text = "changed"


# -- Interactions --


def test_block_actions_yes():
    """A Yes click maps action, value, channel and thread."""
    parsed = parse_slack_payload(_block_actions())
    assert parsed == InteractionEvent(
        action=ConfirmationAction.YES,
        payload='{"external_player_id":"abc123"}',
        channel_id="C0BETBY001",
        message_ts="1700000001.000200",
        thread_ts="1700000000.000100",
        user_id="U_OPERATOR",
    )


def test_block_actions_thread_defaults_to_message_ts():
    """Without message.thread_ts the prompt itself is the thread anchor."""
    parsed = parse_slack_payload(_block_actions(message={"ts": "1700000001.000200"}))
    assert isinstance(parsed, InteractionEvent)
    assert parsed.thread_ts == "1700000001.000200"


def test_block_actions_no():
    """A No click carries the sentinel value."""
    payload = _block_actions(actions=[{"action_id": "send_liveness_no", "value": "no"}])
    parsed = parse_slack_payload(payload)
    assert isinstance(parsed, InteractionEvent)
    assert parsed.action == ConfirmationAction.NO
    assert parsed.payload == "no"


def test_block_actions_unknown_action_is_unsupported():
    """Clicks on buttons this service does not own are ignored."""
    payload = _block_actions(actions=[{"action_id": "other", "value": "x"}])
    assert isinstance(parse_slack_payload(payload), UnsupportedPayload)


def test_block_actions_without_actions_is_unsupported():
    """An empty actions list is ignored."""
    assert isinstance(parse_slack_payload(_block_actions(actions=[])), UnsupportedPayload)


def test_block_actions_without_message_is_unsupported():
    """Without a message ts there is no thread to reply in."""
    payload = _block_actions()
    del payload["message"]
    assert isinstance(parse_slack_payload(payload), UnsupportedPayload)


@pytest.mark.parametrize("payload", [{}, {"type": "view_submission"}, {"type": None}])
def test_other_payloads_are_unsupported(payload: dict):
    """Any other payload type is acknowledged and dropped."""
    assert isinstance(parse_slack_payload(payload), UnsupportedPayload)
