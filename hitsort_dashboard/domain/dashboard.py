"""Dashboard composition - the single entry point into the aggregation engine"""

from typing import Mapping, Optional, Sequence

from hitsort_dashboard.domain.aggregation import (
    compute_expenditure_summary,
    compute_overall_stats,
    compute_seller_settlement,
)
from hitsort_dashboard.domain.cards import filter_cards, normalize_sort, seller_options
from hitsort_dashboard.domain.models import CardRecord, Dashboard, ExpenditureRecord
from hitsort_dashboard.domain.pagination import TableState, paginate


def build_dashboard(
    cards: Sequence[CardRecord],
    expenditures: Sequence[ExpenditureRecord],
    settlement_input: Optional[Mapping[str, int]] = None,
    table: TableState = TableState(),
) -> Dashboard:
    """
    Recompute every derived view from a fresh snapshot.

    Flow:
    1. Order cards by card number
    2. Overall stats, seller settlement and expenditure summaries
    3. Filter the ordered cards with the table search and seller filter
    4. Cut the requested page and its navigation window

    Nothing is cached between calls; the inputs are never mutated.
    """
    ordered = normalize_sort(cards)
    filtered = filter_cards(ordered, table.search_term, table.seller_filter)

    return Dashboard(
        stats=compute_overall_stats(ordered, expenditures),
        sellers=compute_seller_settlement(ordered, settlement_input),
        expenditures=compute_expenditure_summary(expenditures),
        seller_options=seller_options(ordered),
        cards=paginate(filtered, table.page),
    )
