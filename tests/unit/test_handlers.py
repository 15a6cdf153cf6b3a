"""Unit tests for intent handlers fed with extracted entities"""

from voice_gateway.domain.handlers import handle_calculation, handle_customer_debt, handle_stats
from voice_gateway.domain.locales import SPANISH
from voice_gateway.domain.models import ExtractedEntities, PeriodKind, TimePeriod


def test_calculation_uses_extracted_numbers(snapshot, now):
    entities = ExtractedEntities(numbers=[6.0, 7.0])
    answer = handle_calculation("multiplica", "multiplica", entities, snapshot, SPANISH, now)
    assert answer.text == "6 por 7 es igual a 42"


def test_customer_debt_uses_candidate_name_and_month(snapshot, now):
    """Test that the handler trusts the entity bundle rather than re-reading the command"""
    entities = ExtractedEntities(candidate_name="Juan Pérez", month=2)
    answer = handle_customer_debt("debe", "debe", entities, snapshot, SPANISH, now)
    assert answer.text == "Juan Pérez debe $500 en marzo"
    assert answer.data["debt"] == 500


def test_customer_debt_without_candidate_name(snapshot, now):
    assert handle_customer_debt("debe", "debe", ExtractedEntities(), snapshot, SPANISH, now) is None


def test_stats_profit_uses_extracted_period(snapshot, now):
    entities = ExtractedEntities(time_period=TimePeriod(PeriodKind.SPECIFIC_MONTH, month=0))
    answer = handle_stats("ganancia", "ganancia", entities, snapshot, SPANISH, now)
    assert answer.text == "La ganancia de enero es de $150"
