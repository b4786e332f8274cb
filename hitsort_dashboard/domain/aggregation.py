"""Aggregation engine - statistics, seller settlement and expenditure summaries"""

from typing import Dict, List, Mapping, Optional, Sequence

from hitsort_dashboard.domain.models import (
    CardRecord,
    ExpenditureItem,
    ExpenditureRecord,
    OverallStats,
    PersonExpenditureSummary,
    SellerSettlementRow,
)


def compute_overall_stats(
    cards: Sequence[CardRecord],
    expenditures: Sequence[ExpenditureRecord],
) -> OverallStats:
    """
    Headline numbers for the dashboard.

    Revenue and games are summed over every card, sold or not: an unsold card
    carrying an amount still counts toward total revenue.
    """
    return OverallStats(
        total_cards=len(cards),
        sold_cards=sum(1 for card in cards if card.is_sold),
        total_revenue=sum(card.amount for card in cards),
        total_games=sum(card.number_of_games for card in cards),
        total_expenditures=sum(exp.amount for exp in expenditures),
    )


def compute_seller_settlement(
    cards: Sequence[CardRecord],
    settlement_input: Optional[Mapping[str, int]] = None,
) -> List[SellerSettlementRow]:
    """
    Group sold cards by seller and reconcile against submitted cash.

    Sellers are grouped in the order they are first seen in `cards`, then
    ordered by revenue descending. The sort is stable, so sellers with equal
    revenue keep first-seen order.

    Args:
        cards: Card snapshot, normally already passed through normalize_sort
        settlement_input: Cash submitted to date per seller name. Sellers
            missing from the map (or no map at all) have submitted 0.
    """
    submitted_by_seller = settlement_input or {}
    rows: Dict[str, SellerSettlementRow] = {}

    for card in cards:
        if not card.is_sold:
            continue
        row = rows.get(card.seller_name)
        if row is None:
            row = rows[card.seller_name] = SellerSettlementRow(name=card.seller_name)
        row.cards_sold += 1
        row.revenue += card.amount
        row.games += card.number_of_games

    for row in rows.values():
        row.submitted = submitted_by_seller.get(row.name, 0)
        row.balance = row.revenue - row.submitted

    return sorted(rows.values(), key=lambda row: row.revenue, reverse=True)


def compute_expenditure_summary(
    expenditures: Sequence[ExpenditureRecord],
) -> List[PersonExpenditureSummary]:
    """Per-person spend, largest spender first, items kept in record order"""
    summaries: Dict[str, PersonExpenditureSummary] = {}

    for exp in expenditures:
        # Unattributed spend still counts in overall totals
        if not exp.used_by:
            continue
        summary = summaries.get(exp.used_by)
        if summary is None:
            summary = summaries[exp.used_by] = PersonExpenditureSummary(name=exp.used_by)
        summary.total_amount += exp.amount
        summary.items.append(ExpenditureItem(used_for=exp.used_for, amount=exp.amount))

    return sorted(summaries.values(), key=lambda s: s.total_amount, reverse=True)
