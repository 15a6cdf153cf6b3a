"""Intent classification - ordered rule table, first match wins"""

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from voice_gateway.domain.models import Intent, IntentType

Predicate = Callable[[str], bool]

UNKNOWN_INTENT = Intent(type=IntentType.UNKNOWN, confidence=0.0)


@dataclass(frozen=True)
class IntentRule:
    """One row of a classification table"""

    predicate: Predicate
    type: IntentType
    confidence: float


def has(pattern: str) -> Predicate:
    """Predicate that searches the normalized text for pattern"""
    compiled = re.compile(pattern)
    return lambda text: compiled.search(text) is not None


def all_of(*predicates: Predicate) -> Predicate:
    return lambda text: all(p(text) for p in predicates)


def excluding(predicate: Predicate, excluded: Predicate) -> Predicate:
    """Match predicate unless excluded also matches"""
    return lambda text: predicate(text) and not excluded(text)


def classify(normalized_text: str, rules: Sequence[IntentRule]) -> Intent:
    """
    Map normalized text to an intent.

    Rules are evaluated top to bottom and the first matching predicate
    decides; there is no scoring across several matches.
    """
    for rule in rules:
        if rule.predicate(normalized_text):
            return Intent(type=rule.type, confidence=rule.confidence)
    return UNKNOWN_INTENT
