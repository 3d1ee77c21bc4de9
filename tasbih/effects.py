"""
Design (effects.py)
- Purpose: Capability interface for fire-and-forget side effects after a state change
           (button pulse, tone, transient message, desktop notification, clipboard, browser).
- Inputs: Phrase / text / URL arguments.
- Outputs: None; nothing returned is consumed by the counter.
- Side effects: Implementation-defined (ui.TkEffects talks to Tk, plyer and webbrowser).
- Thread-safety: Main thread only.
"""

from abc import ABC, abstractmethod


class Effects(ABC):
    @abstractmethod
    def pulse(self, phrase: str) -> None:
        """Briefly animate the button of a phrase."""

    @abstractmethod
    def play_tone(self) -> None:
        """Short audible click."""

    @abstractmethod
    def show_message(self, text: str, color: str | None = None) -> None:
        """Transient on-screen message."""

    @abstractmethod
    def notify(self, title: str, message: str) -> None:
        """Desktop notification (may be switched off by the user)."""

    @abstractmethod
    def copy_to_clipboard(self, text: str) -> None:
        ...

    @abstractmethod
    def open_url(self, url: str) -> None:
        ...


class NullEffects(Effects):
    """Does nothing. Used headless and in tests."""

    def pulse(self, phrase: str) -> None:
        pass

    def play_tone(self) -> None:
        pass

    def show_message(self, text: str, color: str | None = None) -> None:
        pass

    def notify(self, title: str, message: str) -> None:
        pass

    def copy_to_clipboard(self, text: str) -> None:
        pass

    def open_url(self, url: str) -> None:
        pass
