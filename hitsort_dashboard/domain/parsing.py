"""Boundary parsing of raw record-store payloads into domain records.

This is the only place raw JSON values are interpreted. Everything past this
module works on validated integers and closed vocabularies, so aggregates can
never pick up a non-numeric value.
"""

import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from hitsort_dashboard.domain.exceptions import InvalidRecordError
from hitsort_dashboard.domain.models import (
    CARD_ID_PREFIX,
    CardRecord,
    ExpenditureRecord,
    PaymentType,
)

logger = logging.getLogger(__name__)


def coerce_int(value: Any, field_name: str = "value", record_id: str = "") -> int:
    """
    Coerce a raw numeric field to a non-negative integer.

    Missing values contribute 0 silently. Malformed values (non-numeric
    strings, fractional or non-finite numbers, negatives, booleans) also
    contribute 0 but are logged so bad upstream data is visible.
    """
    if value is None or value == "":
        return 0

    coerced: Optional[int] = None
    if isinstance(value, bool):
        coerced = None
    elif isinstance(value, int):
        coerced = value
    elif isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            coerced = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            coerced = int(text)

    if coerced is None or coerced < 0:
        logger.warning(
            "Coerced malformed numeric field to 0",
            extra={"field": field_name, "record_id": record_id, "raw_value": repr(value)},
        )
        return 0
    return coerced


def parse_payment_type(value: Any) -> Optional[PaymentType]:
    if not value:
        return None
    try:
        return PaymentType(str(value).upper())
    except ValueError:
        logger.warning("Unknown payment type", extra={"raw_value": repr(value)})
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_card(raw: Dict[str, Any]) -> CardRecord:
    """Build a CardRecord from a record-store JSON object"""
    if not isinstance(raw, dict):
        raise TypeError(f"Expected a card object, got {type(raw).__name__}")
    card_id = str(raw.get("cardId") or "")
    seller_name = raw.get("sellerName") or None

    return CardRecord(
        card_id=card_id,
        seller_name=str(seller_name) if seller_name is not None else None,
        number_of_games=coerce_int(raw.get("numberOfGames"), "numberOfGames", card_id),
        amount=coerce_int(raw.get("amount"), "amount", card_id),
        payment_type=parse_payment_type(raw.get("paymentType")),
        date=parse_timestamp(raw.get("date")),
    )


def parse_expenditure(raw: Dict[str, Any]) -> ExpenditureRecord:
    """Build an ExpenditureRecord from a record-store JSON object"""
    if not isinstance(raw, dict):
        raise TypeError(f"Expected an expenditure object, got {type(raw).__name__}")
    used_by = str(raw.get("usedBy") or "")
    return ExpenditureRecord(
        used_for=str(raw.get("usedFor") or ""),
        amount=coerce_int(raw.get("amount"), "amount", used_by),
        used_by=used_by,
    )


def parse_cards(payload: Any) -> List[CardRecord]:
    if not isinstance(payload, list):
        raise TypeError(f"Expected a list of cards, got {type(payload).__name__}")
    return [parse_card(item) for item in payload]


def parse_expenditures(payload: Any) -> List[ExpenditureRecord]:
    if not isinstance(payload, list):
        raise TypeError(f"Expected a list of expenditures, got {type(payload).__name__}")
    return [parse_expenditure(item) for item in payload]


def format_card_id(entry: str) -> str:
    """
    Turn a numeric form entry into a card id.

    Example:
        "7" -> "HS07", "123" -> "HS123", "HS7" -> "HS07"
    """
    text = entry.strip()
    if text.upper().startswith(CARD_ID_PREFIX):
        text = text[len(CARD_ID_PREFIX):]

    if not (text.isascii() and text.isdigit()):
        raise InvalidRecordError(f"Card number must be numeric, got {entry!r}")

    return f"{CARD_ID_PREFIX}{text.zfill(2)}"
