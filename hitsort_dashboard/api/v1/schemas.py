"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List, Literal, Optional, Union

from hitsort_dashboard.domain.models import (
    AMOUNT_OPTIONS,
    ExpenditureCategory,
    PaymentType,
    StaffMember,
)


class LoginRequest(BaseModel):
    """Request body for POST /v1/auth/login"""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str


class CardUpdateRequest(BaseModel):
    """Card sale form - PUT /v1/cards"""

    card_number: str = Field(..., min_length=1, description="Numeric part of the card id, e.g. 7 for HS07")
    seller_name: StaffMember
    number_of_games: Literal[1, 2]
    amount: int = Field(..., ge=0, description="Card price in rupees")
    payment_type: PaymentType

    @field_validator("amount")
    @classmethod
    def amount_is_a_price_option(cls, value: int) -> int:
        if value not in AMOUNT_OPTIONS:
            raise ValueError(f"amount must be one of {sorted(set(AMOUNT_OPTIONS))}")
        return value


class ExpenditureUpdateRequest(BaseModel):
    """Expenditure form - PUT /v1/expenditures"""

    used_for: ExpenditureCategory
    amount: int = Field(..., gt=0, description="Amount spent in rupees")
    used_by: StaffMember


class UpdateResponse(BaseModel):
    """Confirmation passed back from the record store"""

    message: str
    record: dict = {}


class SettlementSubmissionRequest(BaseModel):
    """Request body for POST /v1/settlements"""

    seller_name: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0, description="Cash handed back in rupees")
    note: Optional[str] = None


class SettlementSubmissionResponse(BaseModel):
    submission_id: str
    seller_name: str
    amount: int
    created_at: str


class SettlementHistoryResponse(BaseModel):
    """Response for GET /v1/settlements/{seller_name}"""

    seller_name: str
    submissions: List[SettlementSubmissionResponse]


class SettlementTotalsResponse(BaseModel):
    """Response for GET /v1/settlements"""

    submitted: dict[str, int]


class StatsSchema(BaseModel):
    total_cards: int
    sold_cards: int
    total_revenue: int
    total_games: int
    total_expenditures: int


class SellerSettlementSchema(BaseModel):
    name: str
    cards_sold: int
    revenue: int
    games: int
    submitted: int
    balance: int


class ExpenditureItemSchema(BaseModel):
    used_for: str
    amount: int


class PersonExpenditureSchema(BaseModel):
    name: str
    total_amount: int
    items: List[ExpenditureItemSchema]


class CardSchema(BaseModel):
    """Single row of the card table"""

    card_id: str
    seller_name: Optional[str]
    number_of_games: int
    amount: int
    payment_type: Optional[PaymentType]
    date: Optional[datetime]
    date_display: str


class CardPageSchema(BaseModel):
    items: List[CardSchema]
    page: int
    total_pages: int
    total_items: int
    window: List[Union[int, str]]


class DashboardResponse(BaseModel):
    """Response for GET /v1/dashboard"""

    stats: StatsSchema
    sellers: List[SellerSettlementSchema]
    expenditures: List[PersonExpenditureSchema]
    seller_options: List[str]
    cards: CardPageSchema
