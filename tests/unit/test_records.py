"""Unit tests for mapping store documents to Record values"""

import pytest
from datetime import date
from coconut_ledger.domain.exceptions import MalformedRecordError
from coconut_ledger.domain.records import normalize_document, parse_record, parse_records


def test_parse_record_neutral_fields():
    record = parse_record(
        {"id": "abc", "date": "2024-01-05", "purchasePrice": 10, "soldQuantity": 100, "sellPrice": 15}
    )

    assert record.id == "abc"
    assert record.date == date(2024, 1, 5)
    assert record.purchase_price == 10
    assert record.sold_quantity == 100
    assert record.sell_price == 15


def test_parse_record_legacy_thai_fields():
    """Documents written with the legacy Thai keys map to neutral fields"""
    record = parse_record(
        {
            "_id": "65a0f1",
            "วันที่": "2024-01-20T00:00:00.000Z",
            "ราคาซื้อมะพร้าว": 12,
            "จำนวนขายมะพร้าว": 50,
            "ราคาขายมะพร้าว": 16,
        }
    )

    assert record.id == "65a0f1"
    assert record.date == date(2024, 1, 20)
    assert record.profit == 200


def test_normalize_document_prefers_first_key():
    doc = normalize_document({"sell_price": 3, "sellPrice": 4})
    assert doc["sellPrice"] == 3


@pytest.mark.parametrize(
    "document",
    [
        {"date": "not-a-date", "purchasePrice": 1, "soldQuantity": 1, "sellPrice": 1},
        {"date": None, "purchasePrice": 1, "soldQuantity": 1, "sellPrice": 1},
        {"purchasePrice": 1, "soldQuantity": 1, "sellPrice": 1},
        {"date": "2024-01-01", "soldQuantity": 1, "sellPrice": 1},
        {"date": "2024-01-01", "purchasePrice": "ten", "soldQuantity": 1, "sellPrice": 1},
        {"date": "2024-01-01", "purchasePrice": 1, "soldQuantity": True, "sellPrice": 1},
        {"date": "2024-01-01", "purchasePrice": -1, "soldQuantity": 1, "sellPrice": 1},
        {"date": "2024-01-01", "purchasePrice": 1, "soldQuantity": 1.5, "sellPrice": 1},
        "not a document",
    ],
)
def test_parse_record_malformed(document):
    with pytest.raises(MalformedRecordError):
        parse_record(document)


def test_parse_record_numeric_strings():
    record = parse_record(
        {"id": 7, "date": "2024-03-01", "purchasePrice": "10.5", "soldQuantity": "4", "sellPrice": "12"}
    )
    assert record.id == "7"
    assert record.purchase_price == 10.5
    assert record.sold_quantity == 4


def test_parse_records_skips_malformed():
    """One bad document never takes down the rest"""
    documents = [
        {"id": "ok1", "date": "2024-01-05", "purchasePrice": 10, "soldQuantity": 100, "sellPrice": 15},
        {"id": "bad", "date": "yesterday", "purchasePrice": 10, "soldQuantity": 100, "sellPrice": 15},
        {"id": "ok2", "date": "2024-02-01", "purchasePrice": 11, "soldQuantity": 80, "sellPrice": 14},
    ]

    records = parse_records(documents)

    assert [r.id for r in records] == ["ok1", "ok2"]


def test_parse_records_empty():
    assert parse_records([]) == []
