"""Tests for the confirmation prompt builder."""

from liveness_relay.models.slack import MessageEvent
from liveness_relay.slack.blocks import (
    MAX_BUTTON_VALUE_LENGTH,
    build_confirmation_prompt,
    confirmation_value,
)

RAW_TEXT = 'Forwarded: {"external_player_id":"abc123","brand":"x"}'


def _buttons(prompt) -> dict:
    """Return buttons keyed by action_id."""
    actions = next(block for block in prompt.blocks if block["type"] == "actions")
    return {element["action_id"]: element for element in actions["elements"]}


def test_prompt_threads_on_original_message():
    """The prompt is a reply in the originating message's thread."""
    event = MessageEvent(channel_id="C1", timestamp="1700000000.000100", text=RAW_TEXT)
    prompt = build_confirmation_prompt(event)
    assert prompt.channel_id == "C1"
    assert prompt.thread_ts == "1700000000.000100"
    assert prompt.text == "Send liveness?"
    assert prompt.blocks[0] == {
        "type": "section",
        "text": {"type": "mrkdwn", "text": "*Send liveness?*"},
    }


def test_yes_button_carries_raw_text_verbatim():
    """The Yes value is the original text, unchanged."""
    event = MessageEvent(channel_id="C1", timestamp="1.2", text=RAW_TEXT)
    buttons = _buttons(build_confirmation_prompt(event))
    assert buttons["send_liveness_yes"]["value"] == RAW_TEXT
    assert buttons["send_liveness_yes"]["text"] == {"type": "plain_text", "text": "Yes"}


def test_no_button_carries_sentinel_only():
    """The No value is the sentinel and never the original text."""
    event = MessageEvent(channel_id="C1", timestamp="1.2", text=RAW_TEXT)
    buttons = _buttons(build_confirmation_prompt(event))
    assert buttons["send_liveness_no"]["value"] == "no"
    assert buttons["send_liveness_no"]["text"] == {"type": "plain_text", "text": "No"}


def test_oversized_text_reduced_to_id_fragment():
    """Texts over the Slack value limit keep only the id fragment."""
    text = "x" * MAX_BUTTON_VALUE_LENGTH + ' "external_player_id": "abc123"'
    assert confirmation_value(text) == '"external_player_id": "abc123"'


def test_oversized_text_without_id_is_truncated():
    """Oversized texts without an id are cut to the limit."""
    text = "y" * (MAX_BUTTON_VALUE_LENGTH + 50)
    assert confirmation_value(text) == "y" * MAX_BUTTON_VALUE_LENGTH
