"""
Input handling between the window and the counter store.

Design:
- Receives discrete inputs (a tap on a phrase, a key press, the reset command, share/copy
  requests) and turns them into CounterStore calls.
- After every state change:
    1) render(snapshot) so the display is repainted,
    2) fire the matching feedback effects (pulse + tone, or message + notification).
- Reset only runs when confirm(prompt) returns True; the store itself never prompts.
- Effects are fire-and-forget: an exception from one is logged and dropped, it never
  undoes or blocks a state change.
 - Methods:
    tap(phrase), press_key(char, ctrl), request_reset(), copy_link(url), share(target, url), refresh()
- Thread-safety: Tk main thread only.
"""

import logging
from typing import Callable, Optional

from .config import (
    APP_TITLE,
    COPY_COLOR,
    COPY_DONE_MESSAGE,
    RESET_COLOR,
    RESET_DONE_MESSAGE,
    RESET_PROMPT,
)
from .effects import Effects
from .models import Snapshot
from .repository import CounterStore
from .utils import facebook_url, phrase_for_key, whatsapp_url

logger = logging.getLogger(__name__)

SHARE_TARGETS = {
    "whatsapp": whatsapp_url,
    "facebook": facebook_url,
}


class TasbihController:
    def __init__(
        self,
        store: CounterStore,
        effects: Effects,
        confirm: Callable[[str], bool],
        render: Callable[[Snapshot], None],
    ):
        self.store = store
        self.effects = effects
        self.confirm = confirm
        self.render = render

    def _fire(self, effect: Callable, *args) -> None:
        try:
            effect(*args)
        except Exception:
            logger.exception("Feedback effect %s failed", getattr(effect, "__name__", effect))

    def refresh(self) -> None:
        self.render(self.store.snapshot())

    def tap(self, phrase: str) -> Optional[int]:
        count = self.store.increment(phrase)
        if count is None:
            return None
        self.render(self.store.snapshot())
        self._fire(self.effects.pulse, phrase)
        self._fire(self.effects.play_tone)
        return count

    def press_key(self, char: str, ctrl: bool = False) -> Optional[int]:
        """
        Purpose: Keyboard shortcuts. "1".."4" tap the matching phrase; Ctrl+R asks to reset.
        Outputs: New count for a tap; None otherwise.
        """
        if ctrl:
            if char.lower() == "r":
                self.request_reset()
            return None
        phrase = phrase_for_key(char, self.store.phrases)
        if phrase is None:
            return None
        return self.tap(phrase)

    def request_reset(self) -> bool:
        if not self.confirm(RESET_PROMPT):
            logger.info("Reset declined")
            return False
        self.store.reset_all()
        self.render(self.store.snapshot())
        self._fire(self.effects.show_message, RESET_DONE_MESSAGE, RESET_COLOR)
        self._fire(self.effects.notify, APP_TITLE, RESET_DONE_MESSAGE)
        return True

    def copy_link(self, page_url: str) -> None:
        self._fire(self.effects.copy_to_clipboard, page_url)
        self._fire(self.effects.show_message, COPY_DONE_MESSAGE, COPY_COLOR)

    def share(self, target: str, page_url: str) -> str:
        """
        Purpose: Open a third-party share page for the current page URL.
        Inputs: target ("whatsapp" or "facebook"), page_url
        Outputs: The URL that was opened.
        """
        try:
            build = SHARE_TARGETS[target]
        except KeyError:
            raise ValueError(f"unknown share target: {target!r}") from None
        url = build(page_url)
        self._fire(self.effects.open_url, url)
        return url
