"""Block Kit builder for the "Send liveness?" confirmation prompt."""

from liveness_relay.extraction import extract_external_player_id
from liveness_relay.models.slack import ConfirmationAction, MessageEvent, PromptRequest

PROMPT_TEXT = "Send liveness?"
DECLINE_VALUE = "no"

# Slack rejects button values longer than this
MAX_BUTTON_VALUE_LENGTH = 2000


def build_confirmation_prompt(event: MessageEvent) -> PromptRequest:
    """Build the Yes/No prompt threaded on the originating message.

    The Yes button carries the original message text so the player id can be
    extracted again when the button is clicked; nothing is stored server-side.
    """
    return PromptRequest(
        channel_id=event.channel_id,
        thread_ts=event.timestamp,
        text=PROMPT_TEXT,
        blocks=[
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"*{PROMPT_TEXT}*"},
            },
            {
                "type": "actions",
                "elements": [
                    {
                        "type": "button",
                        "text": {"type": "plain_text", "text": "Yes"},
                        "action_id": ConfirmationAction.YES.value,
                        "value": confirmation_value(event.text),
                    },
                    {
                        "type": "button",
                        "text": {"type": "plain_text", "text": "No"},
                        "action_id": ConfirmationAction.NO.value,
                        "value": DECLINE_VALUE,
                    },
                ],
            },
        ],
    )


def confirmation_value(text: str) -> str:
    """Return the Yes button value for a message text.

    The raw text is used verbatim when it fits. Oversized texts are reduced to
    the id fragment so extraction still works on click.
    """
    if len(text) <= MAX_BUTTON_VALUE_LENGTH:
        return text
    external_player_id = extract_external_player_id(text)
    if external_player_id is not None:
        fragment = f'"external_player_id": "{external_player_id}"'
        if len(fragment) <= MAX_BUTTON_VALUE_LENGTH:
            return fragment
    return text[:MAX_BUTTON_VALUE_LENGTH]
