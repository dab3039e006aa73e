"""Voice dictation flow.

The speech engine lives outside this package; whatever drives it feeds the
recognised text to ``receive_transcript`` (or an engine error code to
``fail``). A transcript is never submitted without an explicit ``confirm``.
"""
from typing import Callable

MAX_CHARACTERS = 200

UNSUPPORTED_MESSAGE = "Voice input is not supported by the available speech engine."
_ERROR_MESSAGES = {
    "no-speech": "No speech detected. Please try again.",
    "not-allowed": (
        "Microphone access was denied. Please allow microphone access to use voice input."
    ),
}


def error_message(code: str) -> str:
    return _ERROR_MESSAGES.get(code, f"Error occurred: {code}")


class VoiceDictation:
    def __init__(self, on_confirm: Callable[[str], object], supported: bool = True) -> None:
        self._on_confirm = on_confirm
        self.supported = supported
        self.is_listening = False
        self.transcript = ""
        self.show_confirmation = False

    @property
    def character_count(self) -> str:
        return f"{len(self.transcript)}/{MAX_CHARACTERS} characters"

    def start_listening(self) -> str | None:
        """Begin a dictation. Returns a message instead when it cannot start."""
        if not self.supported:
            return UNSUPPORTED_MESSAGE
        if self.is_listening:
            return None
        self.is_listening = True
        return None

    def receive_transcript(self, text: str) -> str:
        self.is_listening = False
        self.transcript = text[:MAX_CHARACTERS]
        self.show_confirmation = True
        return self.transcript

    def fail(self, code: str) -> str:
        self.is_listening = False
        return error_message(code)

    def confirm(self) -> bool:
        # A blank transcript keeps the dialog open.
        if not self.transcript.strip():
            return False
        self._on_confirm(self.transcript)
        self.transcript = ""
        self.show_confirmation = False
        return True

    def cancel(self) -> None:
        self.transcript = ""
        self.show_confirmation = False
