"""Command interpreter - main entry point of the question-answering pipeline"""

import logging
from datetime import datetime
from typing import Optional

from voice_gateway.domain.entities import extract_entities
from voice_gateway.domain.handlers import HANDLERS, handle_unknown
from voice_gateway.domain.intents import classify
from voice_gateway.domain.locales import get_locale
from voice_gateway.domain.models import CommandResult, DomainSnapshot, IntentType
from voice_gateway.domain.normalizer import normalize
from voice_gateway.domain.numerals import format_for_speech


def interpret(
    command: str,
    snapshot: DomainSnapshot,
    locale: str = "es",
    now: Optional[datetime] = None,
) -> CommandResult:
    """
    Answer a spoken or typed business question against the snapshot.

    Flow:
    1. Normalize the command, classify its intent and extract entities
    2. Run the intent handler (falls back to suggestions when it cannot
       answer, flagged as answered=False)
    3. Render currency in the answer as spoken words

    Any command string produces a result; only an unknown locale raises
    UnsupportedLocaleError. Pass `now` to pin relative dates ("este mes").
    """
    profile = get_locale(locale)
    now = now or datetime.now()

    normalized = normalize(command)
    intent = classify(normalized, profile.rules)
    logging.debug(
        "Intent detected",
        extra={"locale": profile.code, "intent": intent.type.value, "confidence": intent.confidence},
    )

    entities = extract_entities(command, profile, now)

    handler = HANDLERS[intent.type]
    answer = handler(command, normalized, entities, snapshot, profile, now)
    answered = answer is not None and intent.type != IntentType.UNKNOWN
    if answer is None:
        answer = handle_unknown(command, normalized, entities, snapshot, profile, now)

    return CommandResult(
        response=answer.text,
        speech=format_for_speech(answer.text, profile.speller),
        intent=intent,
        data=answer.data,
        answered=answered,
    )


def speak_text(text: str, locale: str = "es") -> str:
    """Speech-format arbitrary text with the locale's currency wording"""
    return format_for_speech(text, get_locale(locale).speller)
