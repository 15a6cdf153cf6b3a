"""Entity extraction from the raw (non-normalized) command"""

import re
from datetime import datetime
from typing import Iterable, List, Optional

from voice_gateway.domain.locales import Locale
from voice_gateway.domain.models import ExtractedEntities, PeriodKind, TimePeriod
from voice_gateway.domain.normalizer import normalize

TRAILING_PUNCTUATION = re.compile(r"[?¿!¡.,;:]+$")
NUMBER = re.compile(r"\d+(?:\.\d+)?")
# Two capitalized words in a row, e.g. "Juan Pérez"
PROPER_NAME = re.compile(r"[A-ZÁÉÍÓÚÑ][a-záéíóúñ]+\s+[A-ZÁÉÍÓÚÑ][a-záéíóúñ]+")


def _filter_stop_words(words: Iterable[str], locale: Locale, min_length: int = 1) -> List[str]:
    return [w for w in words if normalize(w) not in locale.stop_words and len(w) >= min_length]


def extract_customer_name(command: str, locale: Locale) -> Optional[str]:
    """
    Pull a candidate customer name out of the command.

    Context templates are tried in order ("debe Juan Pérez", "cliente Juan
    Pérez", "de Juan Pérez", "para Juan Pérez"); each needs two or more
    words. Stop words are dropped from the captured span. As a last resort
    everything after "cuánto debe" is taken, which is how single-word names
    like "Ana" are found.
    """
    cleaned = TRAILING_PUNCTUATION.sub("", command).strip()

    for pattern in locale.name_patterns:
        match = pattern.search(cleaned)
        if match and match.group(1):
            words = _filter_stop_words(match.group(1).strip().split(), locale)
            if words:
                return " ".join(words)

    match = locale.loose_name_pattern.search(cleaned)
    if match and match.group(1):
        words = _filter_stop_words(match.group(1).strip().split(), locale, min_length=2)
        if words:
            return " ".join(words)

    return None


def extract_month(command: str, locale: Locale, now: datetime) -> Optional[int]:
    """Month index 0-11 named in the command; 'este mes' means the current month"""
    normalized = normalize(command)

    for index, pattern in enumerate(locale.month_patterns):
        if pattern.search(normalized):
            return index

    if locale.current_month_pattern.search(normalized):
        return now.month - 1

    return None


def extract_time_period(command: str, locale: Locale, now: datetime) -> TimePeriod:
    """
    Requested time window. An explicit month name wins over relative
    phrases, then this month, this week, today and this year are checked in
    that order. Nothing found means no filter.
    """
    normalized = normalize(command)

    month = extract_month(command, locale, now)
    if month is not None and not locale.current_month_pattern.search(normalized):
        return TimePeriod(kind=PeriodKind.SPECIFIC_MONTH, month=month)

    for kind, pattern in locale.period_patterns:
        if pattern.search(normalized):
            return TimePeriod(kind=kind)

    return TimePeriod(kind=PeriodKind.ALL)


def extract_numbers(command: str) -> List[float]:
    return [float(n) for n in NUMBER.findall(command)]


def extract_product_term(command: str, locale: Locale) -> Optional[str]:
    if locale.queries.product_lookup is None:
        return None
    match = locale.queries.product_lookup.search(command)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def has_proper_name(command: str) -> bool:
    return PROPER_NAME.search(command) is not None


def extract_entities(command: str, locale: Locale, now: datetime) -> ExtractedEntities:
    """Run every extractor over the command"""
    return ExtractedEntities(
        candidate_name=extract_customer_name(command, locale),
        month=extract_month(command, locale, now),
        time_period=extract_time_period(command, locale, now),
        numbers=extract_numbers(command),
    )
