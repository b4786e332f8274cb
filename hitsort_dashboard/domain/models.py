"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

# Seller placeholder for cards still in inventory
NOT_SOLD = "NOT_SOLD"

CARD_ID_PREFIX = "HS"

AMOUNT_OPTIONS = (0, 39, 49, 69, 79, 40, 50, 70, 80)


class PaymentType(str, Enum):
    UPI = "UPI"
    CASH = "CASH"
    REFERRED = "REFERRED"


class ExpenditureCategory(str, Enum):
    STALL = "Stall"
    CASHBACK = "Cashback"
    PRIZE = "Prize"
    ITEMS = "Items"
    CARDS = "Cards"


class StaffMember(str, Enum):
    """Fixed roster of people who sell cards and spend cash"""

    SAHITH = "Sahith"
    PANDU = "Pandu"
    BHARATH = "Bharath"
    MANOJ = "Manoj"
    ANAND = "Anand"
    RATNAKAR = "Ratnakar"
    YAGNESH = "Yagnesh"
    PAVAN = "Pavan"


@dataclass(frozen=True)
class CardRecord:
    """One card sale, or an unsold inventory slot"""

    card_id: str
    seller_name: Optional[str] = None  # None when absent, NOT_SOLD for inventory
    number_of_games: int = 0
    amount: int = 0  # whole rupees
    payment_type: Optional[PaymentType] = None
    date: Optional[datetime] = None

    @property
    def is_sold(self) -> bool:
        return bool(self.seller_name) and self.seller_name != NOT_SOLD


@dataclass(frozen=True)
class ExpenditureRecord:
    """One spend event attributed to a person"""

    used_for: str
    amount: int
    used_by: str


@dataclass
class OverallStats:
    total_cards: int = 0
    sold_cards: int = 0
    total_revenue: int = 0
    total_games: int = 0
    total_expenditures: int = 0


@dataclass
class SellerSettlementRow:
    """Revenue a seller generated against the cash they handed back"""

    name: str
    cards_sold: int = 0
    revenue: int = 0
    games: int = 0
    submitted: int = 0
    balance: int = 0


@dataclass(frozen=True)
class ExpenditureItem:
    used_for: str
    amount: int


@dataclass
class PersonExpenditureSummary:
    name: str
    total_amount: int = 0
    items: List[ExpenditureItem] = field(default_factory=list)


PageMarker = Union[int, str]


@dataclass
class CardPage:
    """One page of the card table plus navigation controls"""

    items: List[CardRecord]
    page: int
    total_pages: int
    total_items: int
    window: List[PageMarker]


@dataclass
class Dashboard:
    """Every derived view rendered from a single snapshot"""

    stats: OverallStats
    sellers: List[SellerSettlementRow]
    expenditures: List[PersonExpenditureSummary]
    seller_options: List[str]
    cards: CardPage
