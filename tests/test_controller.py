import pytest

from tasbih.config import COPY_DONE_MESSAGE, PHRASES, RESET_DONE_MESSAGE, RESET_PROMPT
from tasbih.controller import TasbihController
from tasbih.effects import Effects, NullEffects
from tasbih.repository import CounterStore
from tasbih.storage import MemoryStorage

A, B, C, D = PHRASES
PAGE_URL = "https://example.org/tasbih/"


class RecordingEffects(Effects):
    def __init__(self):
        self.calls = []

    def pulse(self, phrase):
        self.calls.append(("pulse", phrase))

    def play_tone(self):
        self.calls.append(("tone",))

    def show_message(self, text, color=None):
        self.calls.append(("message", text))

    def notify(self, title, message):
        self.calls.append(("notify", message))

    def copy_to_clipboard(self, text):
        self.calls.append(("copy", text))

    def open_url(self, url):
        self.calls.append(("open", url))


class BrokenEffects(NullEffects):
    def play_tone(self):
        raise RuntimeError("no audio device")

    def show_message(self, text, color=None):
        raise RuntimeError("window gone")


class Harness:
    def __init__(self, answer=True, effects=None):
        self.answer = answer
        self.prompts = []
        self.rendered = []
        self.store = CounterStore(MemoryStorage())
        self.effects = effects or RecordingEffects()
        self.controller = TasbihController(self.store, self.effects, self.confirm, self.rendered.append)

    def confirm(self, prompt):
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def harness():
    return Harness()


def test_refresh_renders_current_snapshot(harness):
    harness.controller.refresh()
    assert harness.rendered[-1].total == 0


def test_tap_increments_renders_and_fires_feedback(harness):
    assert harness.controller.tap(B) == 1
    assert harness.rendered[-1].counts[B] == 1
    assert harness.rendered[-1].total == 1
    assert harness.effects.calls == [("pulse", B), ("tone",)]


def test_tap_unknown_phrase_does_nothing(harness):
    assert harness.controller.tap("unknown") is None
    assert harness.rendered == []
    assert harness.effects.calls == []


@pytest.mark.parametrize("key, phrase", [("1", A), ("2", B), ("3", C), ("4", D)])
def test_number_keys_tap_phrases(harness, key, phrase):
    assert harness.controller.press_key(key) == 1
    assert harness.store.snapshot().counts[phrase] == 1


@pytest.mark.parametrize("key", ["0", "5", "a", "", " ", "12"])
def test_other_keys_are_ignored(harness, key):
    assert harness.controller.press_key(key) is None
    assert harness.store.snapshot().total == 0


def test_ctrl_r_asks_before_reset(harness):
    harness.controller.tap(A)
    harness.controller.press_key("r", ctrl=True)
    assert harness.prompts == [RESET_PROMPT]
    assert harness.store.snapshot().total == 0


def test_ctrl_with_digit_does_not_tap(harness):
    assert harness.controller.press_key("1", ctrl=True) is None
    assert harness.store.snapshot().total == 0
    assert harness.prompts == []


def test_declined_reset_keeps_counts():
    h = Harness(answer=False)
    h.controller.tap(C)
    h.controller.tap(C)
    rendered_before = len(h.rendered)

    assert h.controller.request_reset() is False
    assert h.store.snapshot().counts[C] == 2
    assert h.store.snapshot().total == 2
    assert len(h.rendered) == rendered_before
    assert ("message", RESET_DONE_MESSAGE) not in h.effects.calls


def test_confirmed_reset_zeroes_and_announces(harness):
    harness.controller.tap(A)
    harness.controller.tap(D)
    assert harness.controller.request_reset() is True
    snap = harness.rendered[-1]
    assert snap.total == 0
    assert set(snap.counts.values()) == {0}
    assert ("message", RESET_DONE_MESSAGE) in harness.effects.calls
    assert ("notify", RESET_DONE_MESSAGE) in harness.effects.calls


def test_failing_effects_do_not_block_state_changes():
    h = Harness(effects=BrokenEffects())
    assert h.controller.tap(A) == 1
    assert h.controller.request_reset() is True
    assert h.store.snapshot().total == 0


def test_copy_link(harness):
    harness.controller.copy_link(PAGE_URL)
    assert harness.effects.calls == [("copy", PAGE_URL), ("message", COPY_DONE_MESSAGE)]


def test_share_opens_target_url(harness):
    url = harness.controller.share("facebook", PAGE_URL)
    assert url == "https://www.facebook.com/sharer/sharer.php?u=https%3A%2F%2Fexample.org%2Ftasbih%2F"
    assert harness.effects.calls == [("open", url)]

    url = harness.controller.share("whatsapp", PAGE_URL)
    assert url.startswith("https://wa.me/?text=")
    assert url.endswith("%20https%3A%2F%2Fexample.org%2Ftasbih%2F")


def test_share_unknown_target(harness):
    with pytest.raises(ValueError):
        harness.controller.share("myspace", PAGE_URL)
