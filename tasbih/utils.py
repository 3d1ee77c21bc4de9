"""
Design (utils.py)
- Purpose: Reusable helpers: share URL construction, keyboard shortcut mapping, count formatting.
- Inputs: Page URL, share text, pressed key, phrase list.
- Outputs: Helper results (strings or None).
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from typing import Optional, Sequence
from urllib.parse import quote

from .config import FACEBOOK_URL_PREFIX, SHARE_TEXT, WHATSAPP_URL_PREFIX

# Characters JavaScript's encodeURIComponent leaves alone (besides alphanumerics)
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """
    Purpose: Percent-encode a value the way share endpoints expect (encodeURIComponent rules).
    Inputs: value (any text, UTF-8 encoded before escaping)
    Outputs: Escaped string.
    """
    return quote(value, safe=_URI_COMPONENT_SAFE)


def whatsapp_url(page_url: str, text: str = SHARE_TEXT) -> str:
    """
    Purpose: Build a wa.me share link carrying the dedication text followed by the page URL.
    """
    return f"{WHATSAPP_URL_PREFIX}{encode_uri_component(text)}%20{encode_uri_component(page_url)}"


def facebook_url(page_url: str) -> str:
    return f"{FACEBOOK_URL_PREFIX}{encode_uri_component(page_url)}"


def phrase_for_key(key: str, phrases: Sequence[str]) -> Optional[str]:
    """
    Purpose: Map keyboard shortcut "1".."N" to the phrase at that position.
    Inputs: key (Tk event char; may be empty), phrases in display order.
    Outputs: Phrase or None if the key is not a shortcut.
    """
    if len(key) != 1 or not key.isdecimal():
        return None
    index = int(key) - 1
    if 0 <= index < len(phrases):
        return phrases[index]
    return None


def format_count(count: int) -> str:
    return f"{count:,}"
