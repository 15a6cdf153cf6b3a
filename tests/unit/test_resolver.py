"""Unit tests for customer and product resolution"""

import pytest
from voice_gateway.domain.locales import SPANISH
from voice_gateway.domain.models import Customer, Product
from voice_gateway.domain.resolver import find_customer, find_product


@pytest.fixture
def juan() -> Customer:
    return Customer(id="c1", name="Juan Pérez", total_debt=1500)


@pytest.mark.parametrize("search", ["Juan", "Pérez", "juan perez", "JUAN PÉREZ"])
def test_variants_resolve_to_same_customer(juan, search):
    assert find_customer(search, [juan]) == juan


def test_exact_match_beats_earlier_partial_match(juan):
    juanita = Customer(id="c0", name="Juanita Ruiz")
    assert find_customer("Juan Pérez", [juanita, juan]) == juan


def test_containment_returns_first_in_snapshot_order(juan):
    juanita = Customer(id="c0", name="Juanita Ruiz")
    assert find_customer("juan", [juanita, juan]) == juanita


def test_all_words_in_any_order(juan):
    juanita = Customer(id="c0", name="Juanita Ruiz")
    assert find_customer("Pérez Juan", [juanita, juan]) == juan


def test_partial_word_overlap_is_last_resort(juan):
    juanita = Customer(id="c0", name="Juanita Ruiz")
    assert find_customer("Pedro Pérez", [juanita, juan]) == juan


def test_no_match(juan):
    assert find_customer("Roberto Gómez", [juan]) is None


def test_blank_and_stop_words_never_match():
    customers = [Customer(id="c9", name="Clientes Varios")]
    assert find_customer("", customers) is None
    assert find_customer("   ", customers) is None
    assert find_customer("cliente", customers, SPANISH.stop_words) is None


def test_resolution_does_not_mutate_snapshot(juan):
    customers = [juan]
    find_customer("Juan", customers)
    assert customers == [Customer(id="c1", name="Juan Pérez", total_debt=1500)]


def test_find_product_ignores_accents():
    lamp = Product(id="p3", name="Lámpara", price=35, purchase_price=20, quantity=1, low_stock_threshold=2)
    assert find_product("lampara", [lamp]) == lamp
    assert find_product("sofá", [lamp]) is None
