"""Intent handlers - compute answers from the snapshot

Every handler takes (command, normalized, entities, snapshot, locale, now) and
returns an Answer, or None when it cannot ground a reply and the caller should
fall back to the suggestions list. Handlers never raise for unexpected phrasing.
"""

import logging
import operator
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Pattern

from voice_gateway.config import settings
from voice_gateway.domain.entities import extract_product_term, has_proper_name
from voice_gateway.domain.locales import Locale
from voice_gateway.domain.models import DomainSnapshot, ExtractedEntities, IntentType, PeriodKind
from voice_gateway.domain.numerals import format_number
from voice_gateway.domain.resolver import find_customer, find_product
from voice_gateway.domain.time_window import time_window

OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}

UNPAID_STATUSES = ("pending", "overdue")


@dataclass
class Answer:
    """Handler output before speech formatting"""

    text: str
    data: Optional[Dict[str, Any]] = None


Handler = Callable[[str, str, ExtractedEntities, DomainSnapshot, Locale, datetime], Optional[Answer]]


def _matches(pattern: Optional[Pattern[str]], text: str) -> bool:
    return pattern is not None and pattern.search(text) is not None


def handle_calculation(
    command: str,
    normalized: str,
    entities: ExtractedEntities,
    snapshot: DomainSnapshot,
    locale: Locale,
    now: datetime,
) -> Optional[Answer]:
    """Two-operand arithmetic; operator chosen by keyword in add, subtract, multiply, divide order"""
    numbers = entities.numbers
    if len(numbers) < 2:
        return None
    a, b = numbers[0], numbers[1]

    symbol = next((s for s, pattern in locale.operators if pattern.search(normalized)), None)
    if symbol is None:
        return None

    data: Dict[str, Any] = {"operands": [a, b], "operator": symbol}

    if symbol == "/":
        if b == 0:
            return Answer(locale.phrases.division_by_zero(), data)
        result = a / b
        result_text = f"{result:.2f}"
    else:
        result = OPERATIONS[symbol](a, b)
        result_text = format_number(result)

    data["result"] = result
    text = locale.phrases.calculation(format_number(a), symbol, format_number(b), result_text)
    return Answer(text, data)


def handle_inventory(
    command: str,
    normalized: str,
    entities: ExtractedEntities,
    snapshot: DomainSnapshot,
    locale: Locale,
    now: datetime,
) -> Optional[Answer]:
    queries = locale.queries
    products = snapshot.products

    if _matches(queries.total_products, normalized):
        total = len(products)
        total_value = sum(p.price * p.quantity for p in products)
        total_stock = sum(p.quantity for p in products)
        return Answer(
            locale.phrases.inventory_totals(total, total_stock, total_value),
            {"total": total, "total_value": total_value, "total_stock": total_stock},
        )

    if _matches(queries.low_stock, normalized):
        low_stock = [p for p in products if p.quantity <= p.low_stock_threshold]
        if not low_stock:
            return Answer(locale.phrases.stock_sufficient(), {"low_stock": []})

        limit = settings.max_listed_items
        text = locale.phrases.low_stock(low_stock[:limit], len(low_stock), len(low_stock) > limit)
        return Answer(text, {"low_stock": low_stock})

    term = extract_product_term(command, locale)
    if term:
        product = find_product(term, products)
        if product is None:
            return Answer(locale.phrases.product_not_found(term), {"search": term})
        return Answer(locale.phrases.product_details(product), {"product": product})

    return None


def handle_payments(
    command: str,
    normalized: str,
    entities: ExtractedEntities,
    snapshot: DomainSnapshot,
    locale: Locale,
    now: datetime,
) -> Optional[Answer]:
    overdue = [p for p in snapshot.payments if p.status == "overdue"]
    if not overdue:
        return Answer(locale.phrases.no_overdue_payments(), {"overdue_payments": [], "overdue_amount": 0})

    overdue_amount = sum(p.amount for p in overdue)
    return Answer(
        locale.phrases.overdue_payments(len(overdue), overdue_amount),
        {"overdue_payments": overdue, "overdue_amount": overdue_amount},
    )


def handle_customer_debt(
    command: str,
    normalized: str,
    entities: ExtractedEntities,
    snapshot: DomainSnapshot,
    locale: Locale,
    now: datetime,
) -> Optional[Answer]:
    """
    Debt questions, checked in this order:
    - who owes the most (top debtors ranked)
    - total owed by everyone, unless a proper name like "Juan Pérez" is spoken
    - debt of one named customer, optionally restricted to a month
    """
    queries = locale.queries
    customers = snapshot.customers

    if _matches(queries.top_debtors, normalized):
        debtors = sorted((c for c in customers if c.total_debt > 0), key=lambda c: c.total_debt, reverse=True)
        top = debtors[: settings.max_listed_items]
        if not top:
            return Answer(locale.phrases.no_debtors(), {"top_debtors": []})
        return Answer(locale.phrases.top_debtors(top), {"top_debtors": top})

    if _matches(queries.total_debt, normalized) and not has_proper_name(command):
        total_debt = sum(c.total_debt for c in customers)
        with_debt = sum(1 for c in customers if c.total_debt > 0)
        return Answer(
            locale.phrases.total_debt(with_debt, total_debt),
            {"total_debt": total_debt, "customers_with_debt": with_debt},
        )

    name = entities.candidate_name
    logging.debug("Extracted customer name", extra={"candidate_name": name})
    if not name:
        return None

    customer = find_customer(name, customers, locale.stop_words)
    if customer is None:
        # A single stray letter is noise, not a name worth reporting
        if len(name) > 1:
            return Answer(locale.phrases.customer_not_found(name), {"search": name})
        return None

    month = entities.month
    if month is not None:
        month_debt = sum(
            p.amount
            for p in snapshot.payments
            if p.customer_id == customer.id and p.due_date.month == month + 1 and p.status in UNPAID_STATUSES
        )
        data = {"customer": customer, "debt": month_debt, "month": month}
        if month_debt > 0:
            return Answer(locale.phrases.customer_month_debt(customer.name, month_debt, month), data)
        return Answer(locale.phrases.customer_month_clear(customer.name, month), data)

    if customer.total_debt > 0:
        return Answer(
            locale.phrases.customer_debt(customer.name, customer.total_debt),
            {"customer": customer, "debt": customer.total_debt},
        )
    return Answer(locale.phrases.customer_clear(customer.name), {"customer": customer, "debt": 0})


def handle_stats(
    command: str,
    normalized: str,
    entities: ExtractedEntities,
    snapshot: DomainSnapshot,
    locale: Locale,
    now: datetime,
) -> Optional[Answer]:
    queries = locale.queries

    if _matches(queries.customer_totals, normalized):
        total = len(snapshot.customers)
        active = sum(1 for c in snapshot.customers if c.is_active)
        return Answer(locale.phrases.customer_totals(total, active), {"total": total, "active_customers": active})

    if _matches(queries.profit, normalized):
        period = entities.time_period
        in_window = time_window(period, now)

        paid = [p for p in snapshot.payments if p.status == "paid" and in_window(p.due_date)]
        profit = sum(p.amount for p in paid)

        # Potential margin of the stock on hand only makes sense without a time filter
        if period.kind == PeriodKind.ALL:
            profit += sum((p.price - p.purchase_price) * p.quantity for p in snapshot.products)

        if profit > 0:
            return Answer(
                locale.phrases.profit(period, profit),
                {"profit": profit, "period": period, "payment_count": len(paid)},
            )
        return Answer(locale.phrases.no_profit(period), {"profit": 0, "period": period})

    return None


def handle_unknown(
    command: str,
    normalized: str,
    entities: ExtractedEntities,
    snapshot: DomainSnapshot,
    locale: Locale,
    now: datetime,
) -> Answer:
    return Answer(locale.phrases.unknown())


HANDLERS: Dict[IntentType, Handler] = {
    IntentType.CALCULATION: handle_calculation,
    IntentType.INVENTORY: handle_inventory,
    IntentType.PAYMENTS: handle_payments,
    IntentType.CUSTOMER_DEBT: handle_customer_debt,
    IntentType.STATS: handle_stats,
    IntentType.UNKNOWN: handle_unknown,
}
