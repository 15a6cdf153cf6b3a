"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional

from voice_gateway.domain.models import Customer, DomainSnapshot, Payment, Product

LocaleCode = Literal["es", "en"]


class CustomerSchema(BaseModel):
    id: str
    name: str
    total_debt: float = Field(0.0, ge=0)
    category: str = "Regular"

    def to_domain(self) -> Customer:
        return Customer(id=self.id, name=self.name, total_debt=self.total_debt, category=self.category)


class ProductSchema(BaseModel):
    id: str
    name: str
    price: float = Field(..., ge=0)
    purchase_price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)
    low_stock_threshold: int = Field(0, ge=0)
    category: str = ""

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            purchase_price=self.purchase_price,
            quantity=self.quantity,
            low_stock_threshold=self.low_stock_threshold,
            category=self.category,
        )


class PaymentSchema(BaseModel):
    id: str
    customer_id: Optional[str] = None
    amount: float = Field(..., ge=0)
    due_date: date
    status: Literal["pending", "paid", "overdue"]
    description: str = ""

    def to_domain(self) -> Payment:
        return Payment(
            id=self.id,
            customer_id=self.customer_id,
            amount=self.amount,
            due_date=self.due_date,
            status=self.status,
            description=self.description,
        )


class SnapshotSchema(BaseModel):
    """Business records the host loaded for this question"""

    customers: List[CustomerSchema] = []
    products: List[ProductSchema] = []
    payments: List[PaymentSchema] = []

    def to_domain(self) -> DomainSnapshot:
        return DomainSnapshot(
            customers=tuple(c.to_domain() for c in self.customers),
            products=tuple(p.to_domain() for p in self.products),
            payments=tuple(p.to_domain() for p in self.payments),
        )


class InterpretRequest(BaseModel):
    """Request body for POST /v1/interpret"""

    command: str = Field(..., description="Transcript or typed question")
    locale: Optional[LocaleCode] = Field(None, description="Defaults to the configured locale")
    snapshot: SnapshotSchema = Field(default_factory=SnapshotSchema)
    now: Optional[datetime] = Field(None, description="Reference time for relative periods")


class InterpretResponse(BaseModel):
    """Response for POST /v1/interpret"""

    response: str
    speech: str
    intent: str
    confidence: float
    answered: bool
    data: Optional[Dict[str, Any]] = None


class SpeechRequest(BaseModel):
    """Request body for POST /v1/speech"""

    text: str
    locale: Optional[LocaleCode] = None


class SpeechResponse(BaseModel):
    """Response for POST /v1/speech"""

    speech: str
