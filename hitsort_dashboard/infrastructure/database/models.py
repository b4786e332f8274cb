"""SQLAlchemy ORM models for the settlement ledger"""

import uuid
from sqlalchemy import Column, BigInteger, DateTime, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class SettlementSubmission(Base):
    """Cash a seller handed back against their card sales"""

    __tablename__ = "settlement_submission"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    seller_name = Column(Text, nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
