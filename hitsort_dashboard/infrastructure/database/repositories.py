"""Data access layer for the settlement ledger"""

from typing import Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from hitsort_dashboard.infrastructure.database.models import SettlementSubmission


class SettlementRepository:
    """Repository for cash submitted back by sellers"""

    def __init__(self, db: Session):
        self.db = db

    def record_submission(self, seller_name: str, amount: int, note: Optional[str] = None) -> SettlementSubmission:
        """Persist one cash hand-over"""
        submission = SettlementSubmission(seller_name=seller_name, amount=amount, note=note)
        self.db.add(submission)
        self.db.flush()  # Get ID without committing
        return submission

    def submitted_totals(self) -> Dict[str, int]:
        """Total submitted per seller, the settlement input of the aggregation engine"""
        rows = (
            self.db.query(SettlementSubmission.seller_name, func.sum(SettlementSubmission.amount))
            .group_by(SettlementSubmission.seller_name)
            .all()
        )
        return {seller_name: int(total or 0) for seller_name, total in rows}

    def list_submissions(self, seller_name: str, limit: int = 50) -> List[SettlementSubmission]:
        """Fetch recent submissions for a seller"""
        return (
            self.db.query(SettlementSubmission)
            .filter(SettlementSubmission.seller_name == seller_name)
            .order_by(SettlementSubmission.created_at.desc())
            .limit(limit)
            .all()
        )
