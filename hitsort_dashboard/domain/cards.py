"""Card table ordering and filtering"""

import re
from typing import List, Sequence

from hitsort_dashboard.domain.models import CARD_ID_PREFIX, CardRecord

_LEADING_DIGITS = re.compile(r"\s*([0-9]+)")


def card_number(card_id: str) -> int:
    """
    Numeric sort key of a card id.

    The "HS" prefix is stripped and leading digits are read, so any suffix
    width parses ("HS7", "HS07" and "HS007" are all 7). A missing or
    non-numeric suffix sorts as 0.
    """
    if not card_id:
        return 0
    suffix = card_id.replace(CARD_ID_PREFIX, "", 1)
    match = _LEADING_DIGITS.match(suffix)
    return int(match.group(1)) if match else 0


def normalize_sort(cards: Sequence[CardRecord]) -> List[CardRecord]:
    """Return cards ordered by card number; equal numbers keep input order"""
    return sorted(cards, key=lambda card: card_number(card.card_id))


def filter_cards(
    cards: Sequence[CardRecord],
    search_term: str = "",
    seller_filter: str = "",
) -> List[CardRecord]:
    """
    Apply the card table search box and seller dropdown.

    A card matches when the search term is empty or appears (case-insensitively)
    in its card id or seller name, AND the seller filter is empty or equals
    its seller name exactly.
    """
    needle = search_term.lower()

    def matches(card: CardRecord) -> bool:
        matches_search = (
            not needle
            or needle in card.card_id.lower()
            or needle in (card.seller_name or "").lower()
        )
        matches_seller = not seller_filter or card.seller_name == seller_filter
        return matches_search and matches_seller

    return [card for card in cards if matches(card)]


def seller_options(cards: Sequence[CardRecord]) -> List[str]:
    """Distinct names of sellers with at least one sale, in card order"""
    return list(dict.fromkeys(card.seller_name for card in cards if card.is_sold))
