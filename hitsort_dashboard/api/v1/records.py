"""PUT /v1/cards and PUT /v1/expenditures - Data-entry forms"""

import logging
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Request

from hitsort_dashboard.api.v1.schemas import CardUpdateRequest, ExpenditureUpdateRequest, UpdateResponse
from hitsort_dashboard.api.dependencies import get_record_store_client, get_request_id, get_store_session
from hitsort_dashboard.infrastructure.clients.auth import StoreSession
from hitsort_dashboard.infrastructure.clients.record_store import RecordStoreClient
from hitsort_dashboard.infrastructure.observability.metrics import record_form_submission
from hitsort_dashboard.domain.exceptions import AuthenticationError, InvalidRecordError, RecordStoreError
from hitsort_dashboard.domain.models import CardRecord, ExpenditureRecord
from hitsort_dashboard.domain.parsing import format_card_id

router = APIRouter()


@router.put("/cards", response_model=UpdateResponse)
async def update_card(
    request_body: CardUpdateRequest,
    request: Request,
    session: StoreSession = Depends(get_store_session),
    store: RecordStoreClient = Depends(get_record_store_client),
):
    """
    Register a card sale.

    The card number is padded to two digits and prefixed, so 7 is stored
    as HS07.
    """
    request_id = get_request_id(request)

    try:
        card_id = format_card_id(request_body.card_number)
    except InvalidRecordError as e:
        record_form_submission("card", accepted=False)
        raise HTTPException(status_code=422, detail=str(e))

    card = CardRecord(
        card_id=card_id,
        seller_name=request_body.seller_name.value,
        number_of_games=request_body.number_of_games,
        amount=request_body.amount,
        payment_type=request_body.payment_type,
    )

    try:
        result = await store.update_card(session, card)
    except AuthenticationError as e:
        record_form_submission("card", accepted=False)
        logging.warning(f"Session rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail="Session expired, please log in again")
    except RecordStoreError as e:
        record_form_submission("card", accepted=False)
        logging.error(f"Card update failed: {e}", extra={"request_id": request_id, "card_id": card_id})
        raise HTTPException(status_code=503, detail="Failed to update card. Please try again.")

    record_form_submission("card", accepted=True)
    logging.info("Card updated", extra={"request_id": request_id, "card_id": card_id})
    return UpdateResponse(message="Card updated successfully!", record=_as_record(result))


@router.put("/expenditures", response_model=UpdateResponse)
async def update_expenditure(
    request_body: ExpenditureUpdateRequest,
    request: Request,
    session: StoreSession = Depends(get_store_session),
    store: RecordStoreClient = Depends(get_record_store_client),
):
    """Register a spend event"""
    request_id = get_request_id(request)

    expenditure = ExpenditureRecord(
        used_for=request_body.used_for.value,
        amount=request_body.amount,
        used_by=request_body.used_by.value,
    )

    try:
        result = await store.update_expenditure(session, expenditure)
    except AuthenticationError as e:
        record_form_submission("expenditure", accepted=False)
        logging.warning(f"Session rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail="Session expired, please log in again")
    except RecordStoreError as e:
        record_form_submission("expenditure", accepted=False)
        logging.error(f"Expenditure update failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Failed to update Expenditure. Please try again.")

    record_form_submission("expenditure", accepted=True)
    return UpdateResponse(message="Expenditure updated successfully!", record=_as_record(result))


def _as_record(result: Any) -> dict:
    return result if isinstance(result, dict) else {"result": result}
