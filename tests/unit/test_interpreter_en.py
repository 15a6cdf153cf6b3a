"""Unit tests for English command interpretation"""

import pytest
from voice_gateway.domain.interpreter import interpret
from voice_gateway.domain.models import IntentType


def ask(command, snapshot, now):
    return interpret(command, snapshot, "en", now=now)


def test_inventory_totals(snapshot, now):
    result = ask("How many products do I have?", snapshot, now)
    assert result.response == "You have 3 products in inventory with a total of 13 units worth $2,135"
    assert result.speech.endswith("worth two thousand one hundred thirty five dollars")
    assert result.intent.type == IntentType.INVENTORY


def test_low_stock(snapshot, now):
    assert ask("Show low stock items", snapshot, now).response == (
        "There are 2 products with low stock: Silla has 2 units, Lámpara has 1 unit"
    )


def test_product_lookup(snapshot, now):
    assert ask("Tell me about product Mesa", snapshot, now).response == (
        "Mesa: sale price $200, purchase price $120, 10 units in stock"
    )


def test_overdue_payments(snapshot, now):
    result = ask("Any overdue payments?", snapshot, now)
    assert result.response == "There is 1 overdue payment totaling $500"
    assert result.speech == "There is 1 overdue payment totaling five hundred dollars"
    assert result.intent.type == IntentType.PAYMENTS


def test_total_debt(snapshot, now):
    assert ask("How much do customers owe?", snapshot, now).response == "3 customers owe a total of $4,600"


def test_named_customer_debt(snapshot, now):
    result = ask("How much does Juan Pérez owe?", snapshot, now)
    assert result.response == "Juan Pérez owes a total of $1,500"
    assert result.speech == "Juan Pérez owes a total of one thousand five hundred dollars"


def test_named_customer_without_debt(snapshot, now):
    assert ask("How much does Ana owe?", snapshot, now).response == "Ana has no pending debts"


def test_top_debtors(snapshot, now):
    assert ask("Who owes the most?", snapshot, now).response == (
        "The customers with the most debt are: 1. Pedro López owes $2,300, "
        "2. Juan Pérez owes $1,500, 3. María García owes $800"
    )


def test_customer_totals(snapshot, now):
    assert ask("How many customers do I have?", snapshot, now).response == "You have 4 customers, 3 are active"


@pytest.mark.parametrize(
    "command, expected",
    [
        ("What is the profit this month?", "Profit this month is $500"),
        ("Profit in January", "Profit in January is $150"),
        ("Profit in December", "No profit recorded in December"),
    ],
)
def test_profit(snapshot, now, command, expected):
    assert ask(command, snapshot, now).response == expected


def test_calculation(snapshot, now):
    result = ask("Calculate 25 times 8", snapshot, now)
    assert result.response == "25 times 8 equals 200"
    assert result.intent.type == IntentType.CALCULATION


def test_division_by_zero(snapshot, now):
    assert ask("Calculate 9 divide by 0", snapshot, now).response == "Cannot divide by zero"


def test_unknown(snapshot, now):
    result = ask("What is the weather?", snapshot, now)
    assert result.intent.type == IntentType.UNKNOWN
    assert result.response.startswith("I can help you")
