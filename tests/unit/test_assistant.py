"""Unit tests for the voice assistant session"""

import pytest
from voice_gateway.domain.assistant import VoiceAssistant
from voice_gateway.domain.exceptions import UnsupportedLocaleError
from voice_gateway.domain.models import DomainSnapshot


class FakeRecognizer:
    def __init__(self):
        self.calls = []

    def start(self):
        self.calls.append("start")

    def stop(self):
        self.calls.append("stop")


class FakeSynthesizer:
    def __init__(self):
        self.spoken = []

    def speak(self, text, language, rate):
        self.spoken.append((text, language, rate))


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def synthesizer():
    return FakeSynthesizer()


@pytest.fixture
def assistant(recognizer, synthesizer, snapshot):
    return VoiceAssistant(recognizer, synthesizer, lambda: snapshot, locale="es")


def test_toggle_starts_then_stops(assistant, recognizer):
    assistant.toggle_listening()
    assistant.on_recognition_started()
    assert assistant.is_listening

    assistant.toggle_listening()
    assistant.on_recognition_ended()
    assert not assistant.is_listening
    assert recognizer.calls == ["start", "stop"]


def test_recognition_error_stops_listening(assistant):
    assistant.on_recognition_started()
    assistant.on_recognition_error("no-speech")
    assert not assistant.is_listening


def test_transcript_is_answered_and_spoken(assistant, synthesizer):
    result = assistant.handle_transcript("pagos vencidos")

    assert assistant.transcript == "pagos vencidos"
    assert result.response == "Hay un pago vencido por un total de $500"
    assert synthesizer.spoken == [("Hay un pago vencido por un total de quinientos pesos", "es-ES", 0.8)]


def test_repeat(assistant, synthesizer):
    assert assistant.repeat() is False
    assert synthesizer.spoken == []

    assistant.handle_transcript("¿Cuánto debe Ana?")
    assert assistant.repeat() is True
    assert len(synthesizer.spoken) == 2
    assert synthesizer.spoken[0] == synthesizer.spoken[1]


def test_snapshot_is_read_per_transcript(recognizer, synthesizer, snapshot):
    snapshots = iter([snapshot, DomainSnapshot()])
    assistant = VoiceAssistant(recognizer, synthesizer, lambda: next(snapshots), locale="es")

    assert assistant.handle_transcript("pagos vencidos").response.startswith("Hay un pago vencido")
    assert assistant.handle_transcript("pagos vencidos").response == "No hay pagos vencidos. ¡Todo al día!"


def test_english_session_uses_english_voice(recognizer, synthesizer, snapshot):
    assistant = VoiceAssistant(recognizer, synthesizer, lambda: snapshot, locale="en", speech_rate=1.0)
    assistant.handle_transcript("Any overdue payments?")
    assert synthesizer.spoken[0][1:] == ("en-US", 1.0)


def test_unsupported_locale(recognizer, synthesizer, snapshot):
    with pytest.raises(UnsupportedLocaleError):
        VoiceAssistant(recognizer, synthesizer, lambda: snapshot, locale="fr")
