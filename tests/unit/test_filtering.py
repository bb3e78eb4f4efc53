"""Unit tests for the filter engine"""

import pytest
from datetime import date
from coconut_ledger.domain.models import FilterMode
from coconut_ledger.domain.filtering import filter_by_period, filter_records


@pytest.mark.parametrize("mode", list(FilterMode))
def test_filter_empty_input(mode):
    """Every mode maps an empty record set to an empty list"""
    assert filter_records([], mode, date(2024, 1, 5)) == []


def test_filter_all_is_identity(sample_records):
    result = filter_records(sample_records, FilterMode.ALL, date(1999, 1, 1))
    assert result == sample_records
    assert result is not sample_records


def test_filter_day(sample_records, make_record):
    """Day mode keeps every record for that day, including duplicates"""
    extra = make_record("jan20b", date(2024, 1, 20), 9, 10, 12)
    records = sample_records + [extra]

    result = filter_records(records, FilterMode.DAY, date(2024, 1, 20))

    assert [r.id for r in result] == ["jan20", "jan20b"]


def test_filter_month(sample_records, make_record):
    """Month mode needs both month and year to match"""
    other_year = make_record("jan2023", date(2023, 1, 10), 10, 1, 11)
    records = [other_year] + sample_records

    result = filter_records(records, FilterMode.MONTH, date(2024, 1, 31))

    assert [r.id for r in result] == ["jan5", "jan20"]


def test_filter_year(sample_records, make_record):
    other_year = make_record("dec2023", date(2023, 12, 31), 10, 1, 11)
    records = sample_records + [other_year]

    result = filter_records(records, FilterMode.YEAR, date(2024, 6, 1))

    assert [r.id for r in result] == ["jan5", "jan20", "feb1"]


def test_filter_preserves_order_and_input(sample_records):
    reversed_records = list(reversed(sample_records))
    snapshot = list(reversed_records)

    result = filter_records(reversed_records, FilterMode.YEAR, date(2024, 1, 1))

    assert [r.id for r in result] == ["feb1", "jan20", "jan5"]
    assert reversed_records == snapshot


def test_filter_accepts_mode_string(sample_records):
    assert len(filter_records(sample_records, "month", date(2024, 2, 14))) == 1


def test_filter_by_period_all(sample_records):
    assert filter_by_period(sample_records) == sample_records


def test_filter_by_period_month_without_year(sample_records, make_record):
    """A month with no year matches that month in every year"""
    jan_2023 = make_record("jan2023", date(2023, 1, 2), 10, 1, 11)
    records = sample_records + [jan_2023]

    result = filter_by_period(records, month=1)

    assert [r.id for r in result] == ["jan5", "jan20", "jan2023"]


def test_filter_by_period_year_and_month(sample_records):
    assert [r.id for r in filter_by_period(sample_records, year=2024, month=2)] == ["feb1"]
    assert filter_by_period(sample_records, year=2023) == []
