"""Data access layer for ledger records"""

from datetime import date
from typing import List
from sqlalchemy.orm import Session
from coconut_ledger.infrastructure.database.models import LedgerTransaction


class TransactionRepository:
    """Repository for ledger transactions"""

    def __init__(self, db: Session):
        self.db = db

    def create_transaction(
        self,
        record_date: date,
        purchase_price: float,
        sold_quantity: int,
        sell_price: float,
    ) -> LedgerTransaction:
        """Persist a new ledger entry"""
        db_transaction = LedgerTransaction(
            date=record_date,
            purchase_price=purchase_price,
            sold_quantity=sold_quantity,
            sell_price=sell_price,
        )
        self.db.add(db_transaction)
        self.db.flush()  # Get ID without committing
        return db_transaction

    def list_transactions(self) -> List[LedgerTransaction]:
        """Fetch every entry, newest date first"""
        return (
            self.db.query(LedgerTransaction)
            .order_by(LedgerTransaction.date.desc(), LedgerTransaction.created_at.desc())
            .all()
        )
