"""Domain models - pure Python dataclasses for the business snapshot and interpreter results"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Customer:
    """Customer record as seen by the assistant"""

    id: str
    name: str
    total_debt: float = 0.0
    category: str = "Regular"  # "VIP" | "Regular" | "New" | "Inactive"

    @property
    def is_active(self) -> bool:
        return self.category != "Inactive"


@dataclass(frozen=True)
class Product:
    """Inventory item"""

    id: str
    name: str
    price: float
    purchase_price: float
    quantity: int
    low_stock_threshold: int
    category: str = ""


@dataclass(frozen=True)
class Payment:
    """Receivable owed by a customer"""

    id: str
    customer_id: Optional[str]
    amount: float
    due_date: date
    status: str  # "pending" | "paid" | "overdue"
    description: str = ""


@dataclass(frozen=True)
class DomainSnapshot:
    """Read-only view of the business records for one interpretation call"""

    customers: Tuple[Customer, ...] = ()
    products: Tuple[Product, ...] = ()
    payments: Tuple[Payment, ...] = ()

    def __post_init__(self) -> None:
        # Callers may hand in lists
        object.__setattr__(self, "customers", tuple(self.customers))
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(self, "payments", tuple(self.payments))


class IntentType(str, Enum):
    CALCULATION = "calculation"
    INVENTORY = "inventory"
    PAYMENTS = "payments"
    CUSTOMER_DEBT = "customer_debt"
    STATS = "stats"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Intent:
    """Classified intent; confidence is informational only"""

    type: IntentType
    confidence: float


class PeriodKind(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    SPECIFIC_MONTH = "specific_month"
    YEAR = "year"
    ALL = "all"


@dataclass(frozen=True)
class TimePeriod:
    """Time window requested by the caller"""

    kind: PeriodKind = PeriodKind.ALL
    month: Optional[int] = None  # 0-11, only for SPECIFIC_MONTH


@dataclass
class ExtractedEntities:
    """Entities pulled out of the raw command"""

    candidate_name: Optional[str] = None
    month: Optional[int] = None
    time_period: TimePeriod = field(default_factory=TimePeriod)
    numbers: List[float] = field(default_factory=list)


@dataclass
class CommandResult:
    """Output of one interpretation call"""

    response: str
    speech: str
    intent: Intent
    data: Optional[Dict[str, Any]] = None
    answered: bool = True  # False when the suggestions list was returned
