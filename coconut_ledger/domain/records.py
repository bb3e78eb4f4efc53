"""Record store document mapping - the boundary between stored documents and Record values"""

import logging
import math
from typing import Any, Dict, Iterable, List

from coconut_ledger.domain.exceptions import MalformedRecordError
from coconut_ledger.domain.models import Record
from coconut_ledger.infrastructure.observability.metrics import malformed_records_counter
from coconut_ledger.utils.date_utils import parse_record_date

# Documents written by the legacy entry form use Thai field names
LEGACY_FIELD_NAMES = {
    "วันที่": "date",
    "ราคาซื้อมะพร้าว": "purchasePrice",
    "จำนวนขายมะพร้าว": "soldQuantity",
    "ราคาขายมะพร้าว": "sellPrice",
    "_id": "id",
}

SNAKE_CASE_FIELD_NAMES = {
    "purchase_price": "purchasePrice",
    "sold_quantity": "soldQuantity",
    "sell_price": "sellPrice",
}


def normalize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Map legacy and snake_case keys to the neutral camelCase field names"""
    normalized: Dict[str, Any] = {}
    for key, value in document.items():
        name = LEGACY_FIELD_NAMES.get(key) or SNAKE_CASE_FIELD_NAMES.get(key) or key
        normalized.setdefault(name, value)
    return normalized


def _number(document: Dict[str, Any], name: str) -> float:
    if name not in document or document[name] is None:
        raise MalformedRecordError(f"Missing field '{name}'")
    value = document[name]
    # bool is an int subclass
    if isinstance(value, bool):
        raise MalformedRecordError(f"Field '{name}' is not numeric: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f"Field '{name}' is not numeric: {value!r}") from e
    if not math.isfinite(number) or number < 0:
        raise MalformedRecordError(f"Field '{name}' must be a non-negative number: {value!r}")
    return number


def parse_record(document: Dict[str, Any]) -> Record:
    """
    Build a Record from one store document.

    Raises:
        MalformedRecordError: On an unparseable date or a missing, non-numeric
            or negative business field
    """
    if not isinstance(document, dict):
        raise MalformedRecordError(f"Record is not an object: {document!r}")
    doc = normalize_document(document)

    try:
        record_date = parse_record_date(doc.get("date"))
    except ValueError as e:
        raise MalformedRecordError(f"Invalid date: {doc.get('date')!r}") from e

    quantity = _number(doc, "soldQuantity")
    if quantity != int(quantity):
        raise MalformedRecordError(f"Field 'soldQuantity' must be a whole number: {quantity!r}")

    return Record(
        id=str(doc.get("id", "")),
        date=record_date,
        purchase_price=_number(doc, "purchasePrice"),
        sold_quantity=int(quantity),
        sell_price=_number(doc, "sellPrice"),
    )


def parse_records(documents: Iterable[Dict[str, Any]]) -> List[Record]:
    """
    Parse a fetched record set, dropping malformed documents.

    One bad document never aborts the whole report; it is logged and
    counted instead.
    """
    records = []
    for document in documents:
        try:
            records.append(parse_record(document))
        except MalformedRecordError as e:
            malformed_records_counter.inc()
            record_id = document.get("id") or document.get("_id") if isinstance(document, dict) else None
            logging.warning(f"Skipping malformed record: {e}", extra={"record_id": str(record_id or "")})
    return records
