"""Language profiles - everything language-specific the interpreter needs

A Locale bundles the intent table, extraction patterns, stop words, numeral
speller and phrasebook for one language. Handlers only ever read from it, so
supporting another language means registering another Locale value.
"""

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Pattern, Tuple

from voice_gateway.domain.exceptions import UnsupportedLocaleError
from voice_gateway.domain.intents import IntentRule, all_of, excluding, has
from voice_gateway.domain.models import IntentType, PeriodKind
from voice_gateway.domain.normalizer import normalize
from voice_gateway.domain.numerals import EnglishNumeralSpeller, NumeralSpeller, SpanishNumeralSpeller
from voice_gateway.domain.phrases import EnglishPhrasebook, Phrasebook, SpanishPhrasebook

# Letters allowed inside a spoken name, accents included
NAME_CHAR = "[a-záéíóúñüA-ZÁÉÍÓÚÑÜ]"
MULTI_WORD_NAME = rf"({NAME_CHAR}+(?:\s+{NAME_CHAR}+)+?)"


@dataclass(frozen=True)
class SubQueries:
    """Patterns (over normalized text) selecting a handler branch; None disables it"""

    total_products: Optional[Pattern[str]] = None
    low_stock: Optional[Pattern[str]] = None
    product_lookup: Optional[Pattern[str]] = None  # applied to the raw command
    top_debtors: Optional[Pattern[str]] = None
    total_debt: Optional[Pattern[str]] = None
    customer_totals: Optional[Pattern[str]] = None
    profit: Optional[Pattern[str]] = None


@dataclass(frozen=True)
class Locale:
    code: str
    voice: str  # BCP-47 tag handed to the speech synthesizer
    rules: Tuple[IntentRule, ...]
    stop_words: FrozenSet[str]
    month_patterns: Tuple[Pattern[str], ...]
    period_patterns: Tuple[Tuple[PeriodKind, Pattern[str]], ...]
    name_patterns: Tuple[Pattern[str], ...]
    loose_name_pattern: Pattern[str]
    operators: Tuple[Tuple[str, Pattern[str]], ...]
    queries: SubQueries
    speller: NumeralSpeller
    phrases: Phrasebook

    @property
    def current_month_pattern(self) -> Pattern[str]:
        return dict(self.period_patterns)[PeriodKind.MONTH]


def _stop_words(*words: str) -> FrozenSet[str]:
    return frozenset(normalize(w) for w in words)


SPANISH = Locale(
    code="es",
    voice="es-ES",
    rules=(
        IntentRule(
            all_of(has(r"calcula|cuanto es|suma|resta|multiplica|divide|por|mas|menos|entre"), has(r"\d+")),
            IntentType.CALCULATION,
            0.9,
        ),
        IntentRule(
            excluding(
                has(r"producto|inventario|stock|poco stock|bajo stock|cuantos productos|total.*producto"),
                has(r"debe|adeuda|pago|vencido"),
            ),
            IntentType.INVENTORY,
            0.85,
        ),
        IntentRule(has(r"pago|vencido|atrasado|pendiente"), IntentType.PAYMENTS, 0.85),
        IntentRule(
            has(r"debe|adeuda|deuda|quien.*mas|mayor.*deuda|mas.*endeudado"),
            IntentType.CUSTOMER_DEBT,
            0.8,
        ),
        IntentRule(has(r"cuantos.*cliente|total.*cliente|ganancia|utilidad|profit"), IntentType.STATS, 0.75),
    ),
    stop_words=_stop_words(
        "cuanto", "cuando", "donde", "como", "que", "cual", "quien", "quienes",
        "debe", "deben", "adeuda", "adeudan", "paga", "pagan", "total", "todos",
        "cliente", "clientes", "producto", "productos", "inventario", "stock",
        "mes", "año", "dia", "semana", "hoy", "ayer", "mañana",
        "el", "la", "los", "las", "un", "una", "unos", "unas",
        "de", "del", "en", "con", "sin", "para", "por", "a", "al",
        "este", "esta", "estos", "estas", "ese", "esa", "esos", "esas",
        "tiene", "tienen", "hay", "estan", "es", "son",
        "mas", "menos", "mayor", "menor", "igual", "diferente",
    ),
    month_patterns=tuple(re.compile(month) for month in SpanishPhrasebook.MONTHS),
    period_patterns=(
        (PeriodKind.MONTH, re.compile(r"este mes|mes actual")),
        (PeriodKind.WEEK, re.compile(r"esta semana|semana actual")),
        (PeriodKind.DAY, re.compile(r"hoy|este dia|dia actual")),
        (PeriodKind.YEAR, re.compile(r"este ano|ano actual")),
    ),
    name_patterns=(
        re.compile(rf"(?:debe|adeuda)\s+{MULTI_WORD_NAME}(?:\s+en\s+|\s*$)", re.IGNORECASE),
        re.compile(rf"cliente\s+{MULTI_WORD_NAME}(?:\s|$)", re.IGNORECASE),
        re.compile(rf"(?:de|del)\s+(?:cliente\s+)?{MULTI_WORD_NAME}(?:\s|$)", re.IGNORECASE),
        re.compile(rf"para\s+{MULTI_WORD_NAME}(?:\s|$)", re.IGNORECASE),
    ),
    loose_name_pattern=re.compile(r"(?:cuanto|cuánto|que|qué)\s+(?:debe|adeuda)\s+(.+)", re.IGNORECASE),
    operators=(
        ("+", re.compile(r"suma|\bmas\b|\+")),
        ("-", re.compile(r"resta|menos|-")),
        ("*", re.compile(r"multiplica|\bpor\b|\*")),
        ("/", re.compile(r"divide|entre|/")),
    ),
    queries=SubQueries(
        total_products=re.compile(r"cuantos productos|total.*producto|productos.*total"),
        low_stock=re.compile(r"poco stock|bajo stock|inventario bajo|stock bajo"),
        product_lookup=re.compile(r"producto\s+([a-záéíóúñ\s]+?)(?:\s|$)", re.IGNORECASE),
        top_debtors=re.compile(r"quien debe mas|mayor deuda|mas endeudado|cliente.*mas.*debe"),
        total_debt=re.compile(r"cuanto.*deben.*clientes|total.*deuda|deuda.*total"),
        customer_totals=re.compile(r"cuantos clientes|total.*cliente"),
        profit=re.compile(r"ganancia|utilidad|profit"),
    ),
    speller=SpanishNumeralSpeller(),
    phrases=SpanishPhrasebook(),
)


ENGLISH = Locale(
    code="en",
    voice="en-US",
    rules=(
        IntentRule(
            all_of(has(r"calculate|how much is|add|multiply|times|plus|minus"), has(r"\d+")),
            IntentType.CALCULATION,
            0.9,
        ),
        IntentRule(has(r"how many products|total products|products.*total"), IntentType.INVENTORY, 0.85),
        IntentRule(has(r"how much.*owe|total.*debt|debt.*total"), IntentType.CUSTOMER_DEBT, 0.8),
        IntentRule(has(r"overdue|late|past due"), IntentType.PAYMENTS, 0.85),
        IntentRule(has(r"low stock|low inventory"), IntentType.INVENTORY, 0.85),
        IntentRule(has(r"how many customers|total customers"), IntentType.STATS, 0.75),
        IntentRule(has(r"who owes (?:the )?most|biggest debt|highest debt"), IntentType.CUSTOMER_DEBT, 0.8),
        IntentRule(has(r"\bprofit|\bearnings\b"), IntentType.STATS, 0.75),
        IntentRule(has(r"\bproduct\s+\w"), IntentType.INVENTORY, 0.85),
    ),
    stop_words=_stop_words(
        "how", "much", "many", "what", "who", "does", "do", "owe", "owes", "total",
        "customer", "customers", "product", "products", "inventory", "stock",
        "month", "year", "day", "week", "today", "yesterday", "tomorrow",
        "the", "a", "an", "of", "for", "in", "on", "to", "with", "this", "that",
        "is", "are", "has", "have", "me", "my", "more", "less",
    ),
    month_patterns=tuple(re.compile(rf"\b{month}\b") for month in EnglishPhrasebook.MONTHS),
    period_patterns=(
        (PeriodKind.MONTH, re.compile(r"this month|current month")),
        (PeriodKind.WEEK, re.compile(r"this week|current week")),
        (PeriodKind.DAY, re.compile(r"today|this day")),
        (PeriodKind.YEAR, re.compile(r"this year|current year")),
    ),
    name_patterns=(
        re.compile(rf"does\s+{MULTI_WORD_NAME}\s+owe", re.IGNORECASE),
        re.compile(rf"customer\s+{MULTI_WORD_NAME}(?:\s|$)", re.IGNORECASE),
        re.compile(rf"(?:of|for)\s+(?:customer\s+)?{MULTI_WORD_NAME}(?:\s|$)", re.IGNORECASE),
    ),
    loose_name_pattern=re.compile(r"how\s+much\s+does\s+(.+?)\s+owe", re.IGNORECASE),
    operators=(
        ("+", re.compile(r"add|plus|\+")),
        ("-", re.compile(r"subtract|minus|-")),
        ("*", re.compile(r"multiply|times|\*")),
        ("/", re.compile(r"divide|/")),
    ),
    queries=SubQueries(
        total_products=re.compile(r"how many products|total products|products.*total"),
        low_stock=re.compile(r"low stock|low inventory"),
        product_lookup=re.compile(r"product\s+([a-z\s]+?)(?:\s|$)", re.IGNORECASE),
        top_debtors=re.compile(r"who owes (?:the )?most|biggest debt|highest debt"),
        total_debt=re.compile(r"how much do .*owe|total.*debt|debt.*total"),
        customer_totals=re.compile(r"how many customers|total customers"),
        profit=re.compile(r"\bprofit|\bearnings\b"),
    ),
    speller=EnglishNumeralSpeller(),
    phrases=EnglishPhrasebook(),
)


LOCALES: Dict[str, Locale] = {SPANISH.code: SPANISH, ENGLISH.code: ENGLISH}


def get_locale(code: str) -> Locale:
    """Return the language profile for code ('es' or 'en')"""
    try:
        return LOCALES[code]
    except KeyError:
        raise UnsupportedLocaleError(f"Unsupported locale: {code}") from None
