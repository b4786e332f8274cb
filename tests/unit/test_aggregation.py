"""Unit tests for overall stats, seller settlement and expenditure summaries"""

import pytest
from hitsort_dashboard.domain.models import (
    NOT_SOLD,
    CardRecord,
    ExpenditureItem,
    ExpenditureRecord,
)
from hitsort_dashboard.domain.aggregation import (
    compute_expenditure_summary,
    compute_overall_stats,
    compute_seller_settlement,
)
from hitsort_dashboard.domain.cards import normalize_sort


def test_overall_stats(sample_cards, sample_expenditures):
    """Test totals over sold and unsold cards"""
    stats = compute_overall_stats(sample_cards, sample_expenditures)

    assert stats.total_cards == 6
    assert stats.sold_cards == 4  # NOT_SOLD and missing seller excluded
    assert stats.total_revenue == 240
    assert stats.total_games == 7
    assert stats.total_expenditures == 1120


def test_overall_stats_counts_unsold_revenue():
    """Test unsold inventory carrying an amount still counts toward revenue"""
    cards = [
        CardRecord(card_id="HS02", seller_name=NOT_SOLD, amount=50),
        CardRecord(card_id="HS01", seller_name="Ana", amount=40, number_of_games=1),
    ]

    stats = compute_overall_stats(cards, [])

    assert stats.sold_cards == 1
    assert stats.total_revenue == 90


def test_overall_stats_empty_snapshot():
    """Test empty collections produce a fully populated zero result"""
    stats = compute_overall_stats([], [])

    assert stats.total_cards == 0
    assert stats.sold_cards == 0
    assert stats.total_revenue == 0
    assert stats.total_games == 0
    assert stats.total_expenditures == 0


def test_sold_cards_counts_records_not_sellers():
    """Test sold count is per card, not per distinct seller"""
    cards = [CardRecord(card_id=f"HS0{i}", seller_name="Pandu", amount=40) for i in range(1, 4)]

    assert compute_overall_stats(cards, []).sold_cards == 3


def test_seller_settlement_single_seller():
    """Test scenario with one sold card and one unsold card"""
    cards = normalize_sort([
        CardRecord(card_id="HS02", seller_name=NOT_SOLD, amount=50),
        CardRecord(card_id="HS01", seller_name="Ana", amount=40, number_of_games=1),
    ])

    rows = compute_seller_settlement(cards)

    assert len(rows) == 1
    row = rows[0]
    assert (row.name, row.cards_sold, row.revenue, row.games, row.submitted, row.balance) == (
        "Ana", 1, 40, 1, 0, 40,
    )


def test_seller_settlement_groups_and_orders_by_revenue(sample_cards):
    """Test grouping per seller, highest revenue first"""
    rows = compute_seller_settlement(normalize_sort(sample_cards))

    assert [row.name for row in rows] == ["Sahith", "Pandu", "Manoj"]
    sahith = rows[0]
    assert sahith.cards_sold == 2
    assert sahith.revenue == 110
    assert sahith.games == 3


def test_seller_settlement_ties_keep_first_seen_order():
    """Test sellers with equal revenue stay in first-encountered order"""
    cards = [
        CardRecord(card_id="HS01", seller_name="Pavan", amount=40),
        CardRecord(card_id="HS02", seller_name="Anand", amount=80),
        CardRecord(card_id="HS03", seller_name="Manoj", amount=40),
    ]

    rows = compute_seller_settlement(cards)

    assert [row.name for row in rows] == ["Anand", "Pavan", "Manoj"]


def test_seller_settlement_applies_submitted_cash(sample_cards):
    """Test balance is revenue minus submitted, unknown sellers submit 0"""
    rows = compute_seller_settlement(normalize_sort(sample_cards), {"Sahith": 100, "Nobody": 999})
    by_name = {row.name: row for row in rows}

    assert by_name["Sahith"].submitted == 100
    assert by_name["Sahith"].balance == 10
    assert by_name["Pandu"].submitted == 0
    assert by_name["Pandu"].balance == 80
    assert "Nobody" not in by_name


def test_seller_settlement_revenue_reconciles(sample_cards):
    """Test settlement revenue adds up to revenue of sold cards only"""
    rows = compute_seller_settlement(sample_cards)

    assert sum(row.revenue for row in rows) == sum(c.amount for c in sample_cards if c.is_sold)


def test_seller_settlement_does_not_mutate_input(sample_cards):
    """Test input snapshot is left untouched"""
    before = list(sample_cards)
    compute_seller_settlement(sample_cards, {"Sahith": 10})
    assert sample_cards == before


def test_expenditure_summary_scenario():
    """Test one person with two items"""
    expenditures = [
        ExpenditureRecord(used_by="X", used_for="Items", amount=20),
        ExpenditureRecord(used_by="X", used_for="Prize", amount=30),
    ]

    summary = compute_expenditure_summary(expenditures)

    assert len(summary) == 1
    assert summary[0].name == "X"
    assert summary[0].total_amount == 50
    assert summary[0].items == [ExpenditureItem("Items", 20), ExpenditureItem("Prize", 30)]


def test_expenditure_summary_orders_by_total(sample_expenditures):
    """Test largest spender first, items in record order"""
    summary = compute_expenditure_summary(sample_expenditures)

    assert [s.name for s in summary] == ["Anand", "Pavan"]
    assert summary[0].total_amount == 800
    assert [item.used_for for item in summary[1].items] == ["Items", "Cards"]


def test_expenditure_summary_ties_keep_first_seen_order():
    expenditures = [
        ExpenditureRecord(used_by="Pandu", used_for="Stall", amount=100),
        ExpenditureRecord(used_by="Manoj", used_for="Stall", amount=100),
    ]

    assert [s.name for s in compute_expenditure_summary(expenditures)] == ["Pandu", "Manoj"]


def test_expenditure_summary_skips_unattributed_spend():
    """Test records without a person are left out of per-person rows"""
    expenditures = [
        ExpenditureRecord(used_by="", used_for="Stall", amount=100),
        ExpenditureRecord(used_by="Manoj", used_for="Items", amount=10),
    ]

    summary = compute_expenditure_summary(expenditures)

    assert [s.name for s in summary] == ["Manoj"]
    assert compute_overall_stats([], expenditures).total_expenditures == 110


@pytest.mark.parametrize("expenditures", [[], ()])
def test_expenditure_summary_empty(expenditures):
    assert compute_expenditure_summary(expenditures) == []
