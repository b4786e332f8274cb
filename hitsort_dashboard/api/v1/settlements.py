"""POST/GET /v1/settlements - Cash submitted back by sellers"""

import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from hitsort_dashboard.api.v1.schemas import (
    SettlementHistoryResponse,
    SettlementSubmissionRequest,
    SettlementSubmissionResponse,
    SettlementTotalsResponse,
)
from hitsort_dashboard.api.dependencies import get_request_id, get_store_session
from hitsort_dashboard.infrastructure.database.session import get_db
from hitsort_dashboard.infrastructure.database.repositories import SettlementRepository
from hitsort_dashboard.infrastructure.observability.metrics import record_form_submission

router = APIRouter(dependencies=[Depends(get_store_session)])


@router.post("/settlements", response_model=SettlementSubmissionResponse, status_code=201)
def create_submission(
    request_body: SettlementSubmissionRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Record cash a seller handed back.

    Submissions add up: the seller's "submitted" figure on the dashboard is
    the sum of everything recorded here.
    """
    repo = SettlementRepository(db)
    submission = repo.record_submission(
        seller_name=request_body.seller_name,
        amount=request_body.amount,
        note=request_body.note,
    )
    db.commit()
    db.refresh(submission)

    record_form_submission("settlement", accepted=True)
    logging.info(
        "Settlement recorded",
        extra={
            "request_id": get_request_id(request),
            "seller_name": submission.seller_name,
            "amount": submission.amount,
        },
    )

    return SettlementSubmissionResponse(
        submission_id=str(submission.id),
        seller_name=submission.seller_name,
        amount=submission.amount,
        created_at=submission.created_at.isoformat(),
    )


@router.get("/settlements", response_model=SettlementTotalsResponse)
def get_submitted_totals(db: Session = Depends(get_db)):
    """Total cash submitted per seller"""
    return SettlementTotalsResponse(submitted=SettlementRepository(db).submitted_totals())


@router.get("/settlements/{seller_name}", response_model=SettlementHistoryResponse)
def get_seller_submissions(seller_name: str, db: Session = Depends(get_db)):
    """Recent cash hand-overs for one seller, newest first"""
    submissions = SettlementRepository(db).list_submissions(seller_name, limit=50)

    return SettlementHistoryResponse(
        seller_name=seller_name,
        submissions=[
            SettlementSubmissionResponse(
                submission_id=str(s.id),
                seller_name=s.seller_name,
                amount=s.amount,
                created_at=s.created_at.isoformat(),
            )
            for s in submissions
        ],
    )
