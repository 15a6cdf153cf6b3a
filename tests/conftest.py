"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime
from fastapi.testclient import TestClient
from voice_gateway.api.main import create_app
from voice_gateway.domain.models import Customer, DomainSnapshot, Payment, Product


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def now() -> datetime:
    """Fixed reference time: Saturday 15 March 2025, mid-morning"""
    return datetime(2025, 3, 15, 10, 30)


@pytest.fixture
def customers() -> list[Customer]:
    return [
        Customer(id="c1", name="Juan Pérez", total_debt=1500, category="Regular"),
        Customer(id="c2", name="María García", total_debt=800, category="VIP"),
        Customer(id="c3", name="Ana", total_debt=0, category="New"),
        Customer(id="c4", name="Pedro López", total_debt=2300, category="Inactive"),
    ]


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(id="p1", name="Silla", price=50, purchase_price=30, quantity=2, low_stock_threshold=5),
        Product(id="p2", name="Mesa", price=200, purchase_price=120, quantity=10, low_stock_threshold=3),
        Product(id="p3", name="Lámpara", price=35, purchase_price=20, quantity=1, low_stock_threshold=2),
    ]


@pytest.fixture
def payments() -> list[Payment]:
    return [
        Payment(id="pay1", customer_id="c1", amount=500, due_date=date(2025, 3, 10), status="overdue"),
        Payment(id="pay2", customer_id="c1", amount=1000, due_date=date(2025, 4, 5), status="pending"),
        Payment(id="pay3", customer_id="c2", amount=300, due_date=date(2025, 3, 14), status="paid"),
        Payment(id="pay4", customer_id="c2", amount=800, due_date=date(2025, 2, 20), status="pending"),
        Payment(id="pay5", customer_id="c4", amount=200, due_date=date(2025, 3, 15), status="paid"),
        Payment(id="pay6", customer_id="c4", amount=150, due_date=date(2025, 1, 10), status="paid"),
    ]


@pytest.fixture
def snapshot(customers, products, payments) -> DomainSnapshot:
    """Small shop: four customers, three products, six payments"""
    return DomainSnapshot(customers=customers, products=products, payments=payments)


@pytest.fixture
def snapshot_payload(snapshot: DomainSnapshot) -> dict:
    """The same snapshot as a JSON request body fragment"""
    return {
        "customers": [
            {"id": c.id, "name": c.name, "total_debt": c.total_debt, "category": c.category}
            for c in snapshot.customers
        ],
        "products": [
            {
                "id": p.id,
                "name": p.name,
                "price": p.price,
                "purchase_price": p.purchase_price,
                "quantity": p.quantity,
                "low_stock_threshold": p.low_stock_threshold,
            }
            for p in snapshot.products
        ],
        "payments": [
            {
                "id": p.id,
                "customer_id": p.customer_id,
                "amount": p.amount,
                "due_date": p.due_date.isoformat(),
                "status": p.status,
            }
            for p in snapshot.payments
        ],
    }
