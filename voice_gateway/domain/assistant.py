"""Voice assistant session - wires speech capabilities around the interpreter

The platform speech APIs are injected as small Protocol objects instead of
being reached through process-wide globals, so a host (browser bridge,
desktop app, test double) decides how listening and playback happen.
"""

import logging
from typing import Callable, Optional, Protocol

from voice_gateway.config import settings
from voice_gateway.domain.interpreter import interpret
from voice_gateway.domain.locales import get_locale
from voice_gateway.domain.models import CommandResult, DomainSnapshot


class SpeechRecognizer(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


class SpeechSynthesizer(Protocol):
    def speak(self, text: str, language: str, rate: float) -> None: ...


class VoiceAssistant:
    """One user's listening session"""

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        synthesizer: SpeechSynthesizer,
        snapshot_provider: Callable[[], DomainSnapshot],
        locale: Optional[str] = None,
        speech_rate: Optional[float] = None,
    ):
        self.recognizer = recognizer
        self.synthesizer = synthesizer
        self.snapshot_provider = snapshot_provider
        self.locale = get_locale(locale or settings.default_locale)
        self.speech_rate = speech_rate or settings.speech_rate
        self.is_listening = False
        self.transcript: Optional[str] = None
        self.last_result: Optional[CommandResult] = None

    def toggle_listening(self) -> None:
        """Microphone button: stop if listening, start otherwise"""
        if self.is_listening:
            self.recognizer.stop()
        else:
            self.recognizer.start()

    def on_recognition_started(self) -> None:
        self.is_listening = True

    def on_recognition_ended(self) -> None:
        self.is_listening = False

    def on_recognition_error(self, error: str) -> None:
        logging.warning(f"Speech recognition error: {error}", extra={"locale": self.locale.code})
        self.is_listening = False

    def handle_transcript(self, transcript: str) -> CommandResult:
        """Interpret a finished transcript against a fresh snapshot and speak the answer"""
        self.transcript = transcript
        result = interpret(transcript, self.snapshot_provider(), self.locale.code)
        self.last_result = result
        self._speak(result.speech)
        return result

    def repeat(self) -> bool:
        """Speak the previous answer again; False when nothing was answered yet"""
        if self.last_result is None:
            return False
        self._speak(self.last_result.speech)
        return True

    def _speak(self, text: str) -> None:
        self.synthesizer.speak(text, self.locale.voice, self.speech_rate)
