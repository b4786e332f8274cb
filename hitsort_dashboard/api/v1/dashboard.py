"""GET /v1/dashboard - Sales, settlement and expenditure reports"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from hitsort_dashboard.api.v1.schemas import (
    CardPageSchema,
    CardSchema,
    DashboardResponse,
    ExpenditureItemSchema,
    PersonExpenditureSchema,
    SellerSettlementSchema,
    StatsSchema,
)
from hitsort_dashboard.api.dependencies import get_record_store_client, get_request_id, get_store_session
from hitsort_dashboard.infrastructure.clients.auth import StoreSession
from hitsort_dashboard.infrastructure.clients.record_store import RecordStoreClient
from hitsort_dashboard.infrastructure.database.session import get_db
from hitsort_dashboard.infrastructure.database.repositories import SettlementRepository
from hitsort_dashboard.domain.dashboard import build_dashboard
from hitsort_dashboard.domain.exceptions import AuthenticationError, RecordStoreError
from hitsort_dashboard.domain.models import Dashboard
from hitsort_dashboard.domain.pagination import TableState
from hitsort_dashboard.infrastructure.observability.metrics import record_dashboard
from hitsort_dashboard.infrastructure.observability.logging import log_dashboard_built
from hitsort_dashboard.utils.date_utils import format_display_date

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    request: Request,
    search: str = Query("", description="Case-insensitive match on card id or seller"),
    seller: str = Query("", description="Exact seller name, empty for all"),
    page: int = Query(1, ge=1, description="Card table page, 50 cards per page"),
    session: StoreSession = Depends(get_store_session),
    db: Session = Depends(get_db),
    store: RecordStoreClient = Depends(get_record_store_client),
):
    """
    Build every dashboard view from a fresh snapshot.

    Flow:
    1. Fetch cards and expenditures from the record store
    2. Load submitted cash per seller from the settlement ledger
    3. Run the aggregation engine
    4. Return stats, settlement rows, expenditure summaries and one card page
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        cards = await store.get_cards(session)
        expenditures = await store.get_expenditures(session)

    except AuthenticationError as e:
        logging.warning(f"Session rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail="Session expired, please log in again")

    except RecordStoreError as e:
        logging.error(f"Record store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Failed to load dashboard data")

    settlement_input = SettlementRepository(db).submitted_totals()
    table = TableState(search_term=search, seller_filter=seller, page=page)
    dashboard = build_dashboard(cards, expenditures, settlement_input, table)

    duration_ms = (time.time() - start_time) * 1000
    record_dashboard(dashboard)
    log_dashboard_built(request_id, dashboard, duration_ms)

    return to_response(dashboard)


def to_response(dashboard: Dashboard) -> DashboardResponse:
    stats = dashboard.stats
    return DashboardResponse(
        stats=StatsSchema(
            total_cards=stats.total_cards,
            sold_cards=stats.sold_cards,
            total_revenue=stats.total_revenue,
            total_games=stats.total_games,
            total_expenditures=stats.total_expenditures,
        ),
        sellers=[
            SellerSettlementSchema(
                name=row.name,
                cards_sold=row.cards_sold,
                revenue=row.revenue,
                games=row.games,
                submitted=row.submitted,
                balance=row.balance,
            )
            for row in dashboard.sellers
        ],
        expenditures=[
            PersonExpenditureSchema(
                name=summary.name,
                total_amount=summary.total_amount,
                items=[ExpenditureItemSchema(used_for=item.used_for, amount=item.amount) for item in summary.items],
            )
            for summary in dashboard.expenditures
        ],
        seller_options=dashboard.seller_options,
        cards=CardPageSchema(
            items=[
                CardSchema(
                    card_id=card.card_id,
                    seller_name=card.seller_name,
                    number_of_games=card.number_of_games,
                    amount=card.amount,
                    payment_type=card.payment_type,
                    date=card.date,
                    date_display=format_display_date(card.date),
                )
                for card in dashboard.cards.items
            ],
            page=dashboard.cards.page,
            total_pages=dashboard.cards.total_pages,
            total_items=dashboard.cards.total_items,
            window=dashboard.cards.window,
        ),
    )
