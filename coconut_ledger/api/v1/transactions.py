"""GET/POST /v1/transactions - the ledger record store resource"""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coconut_ledger.api.v1.schemas import TransactionCreate, TransactionSchema
from coconut_ledger.api.dependencies import get_request_id
from coconut_ledger.infrastructure.database.session import get_db
from coconut_ledger.infrastructure.database.repositories import TransactionRepository
from coconut_ledger.infrastructure.database.models import LedgerTransaction
from coconut_ledger.infrastructure.observability.metrics import records_created_counter

router = APIRouter()


def _to_schema(row: LedgerTransaction) -> TransactionSchema:
    return TransactionSchema(
        id=str(row.id),
        date=row.date,
        purchase_price=row.purchase_price,
        sold_quantity=row.sold_quantity,
        sell_price=row.sell_price,
    )


@router.get("/transactions", response_model=List[TransactionSchema])
def list_transactions(db: Session = Depends(get_db)):
    """
    Return every ledger record, newest date first.

    Consumers must not rely on this ordering.
    """
    repo = TransactionRepository(db)
    return [_to_schema(row) for row in repo.list_transactions()]


@router.post("/transactions", response_model=TransactionSchema, status_code=201)
def create_transaction(
    request_body: TransactionCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Record one day's entry. The date defaults to today when omitted.

    Multiple entries for the same day are kept as separate line items.
    """
    request_id = get_request_id(request)

    try:
        repo = TransactionRepository(db)
        row = repo.create_transaction(
            record_date=request_body.date or date.today(),
            purchase_price=request_body.purchase_price,
            sold_quantity=request_body.sold_quantity,
            sell_price=request_body.sell_price,
        )
        db.commit()
        db.refresh(row)

    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Failed to save record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to save record")

    records_created_counter.inc()
    logging.info(
        "Record created",
        extra={"request_id": request_id, "record_id": str(row.id), "record_date": row.date.isoformat()},
    )
    return _to_schema(row)
