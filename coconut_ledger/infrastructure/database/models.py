"""SQLAlchemy ORM models for the ledger record store"""

import uuid
from sqlalchemy import Column, Date, DateTime, Float, Integer
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class LedgerTransaction(Base):
    """One day's purchase/sale entry. Append-only."""

    __tablename__ = "ledger_transaction"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False, index=True)
    purchase_price = Column(Float, nullable=False)
    sold_quantity = Column(Integer, nullable=False)
    sell_price = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
