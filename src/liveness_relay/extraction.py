"""External player id extraction from free-text Slack messages."""

import re

# Matches a JSON-like fragment: "external_player_id": "<value>"
EXTERNAL_PLAYER_ID_PATTERN = re.compile(r'"external_player_id"\s*:\s*"([^"]+)"')


def extract_external_player_id(text: str) -> str | None:
    """Return the first external_player_id value found in text, or None.

    Case-sensitive key match; the value must be double-quoted and non-empty.
    """
    match = EXTERNAL_PLAYER_ID_PATTERN.search(text)
    return match.group(1) if match else None
