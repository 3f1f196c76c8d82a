"""Tests for the CSV record loader."""

import pytest
from datetime import date

from agrex_app.data.loaders import (
    CSV_HEADER,
    count_records,
    load_and_validate,
    load_from_csv,
    parse_csv_row,
    preview_csv,
)
from agrex_app.data.models import MarketIndicator, ProductType
from agrex_app.errors import MalformedDataError, MissingDataError

HEADER = ",".join(CSV_HEADER)


@pytest.fixture
def write_csv(tmp_path):
    def _write(*lines: str, name: str = "exports.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


class TestParseRow:
    """Test single-row parsing."""

    def test_valid_row(self):
        record = parse_csv_row(["2025-01-15", "OLIVE_OIL", "3500.50", "120.5", "France", "RISING"])

        assert record.date == date(2025, 1, 15)
        assert record.product is ProductType.OLIVE_OIL
        assert record.price_per_ton == 3500.50
        assert record.volume == 120.5
        assert record.destination_country == "France"
        assert record.indicator is MarketIndicator.RISING

    def test_whitespace_and_case_tolerated(self):
        record = parse_csv_row([" 2025-01-15", "dates ", "100", "10", " Italy ", "stable"])
        assert record.product is ProductType.DATES
        assert record.destination_country == "Italy"

    def test_wrong_column_count(self):
        with pytest.raises(MalformedDataError) as exc_info:
            parse_csv_row(["2025-01-15", "OLIVE_OIL", "3500"])
        assert exc_info.value.expected_format == HEADER

    @pytest.mark.parametrize("row", [
        ["15/01/2025", "OLIVE_OIL", "1", "1", "France", "STABLE"],
        ["2025-01-15", "BANANAS", "1", "1", "France", "STABLE"],
        ["2025-01-15", "OLIVE_OIL", "abc", "1", "France", "STABLE"],
        ["2025-01-15", "OLIVE_OIL", "1", "1", "France", "BOOMING"],
        ["2025-01-15", "OLIVE_OIL", "-5", "1", "France", "STABLE"],
    ])
    def test_unparsable_fields(self, row):
        with pytest.raises(MalformedDataError):
            parse_csv_row(row)


class TestLoadFromCsv:
    """Test whole-file loading."""

    def test_load(self, write_csv):
        path = write_csv(
            HEADER,
            "2025-01-15,OLIVE_OIL,3500.0,120.0,France,RISING",
            "2025-01-16,WHEAT,950.0,800.0,Libya,STABLE",
        )

        records = load_from_csv(path)

        assert [r.product for r in records] == [ProductType.OLIVE_OIL, ProductType.WHEAT]

    def test_bad_and_blank_rows_skipped(self, write_csv):
        path = write_csv(
            HEADER,
            "2025-01-15,OLIVE_OIL,3500.0,120.0,France,RISING",
            "",
            "not,a,valid,row",
            "2025-01-17,DATES,oops,50.0,Italy,STABLE",
            "2025-01-18,DATES,2600.0,50.0,Italy,STABLE",
        )

        records = load_from_csv(path)

        assert len(records) == 2
        assert records[1].date == date(2025, 1, 18)

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingDataError):
            load_from_csv(tmp_path / "absent.csv")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(MalformedDataError):
            load_from_csv(path)

    def test_header_only(self, write_csv):
        assert load_from_csv(write_csv(HEADER)) == []

    def test_unexpected_header_still_loads(self, write_csv):
        path = write_csv("a,b,c,d,e,f", "2025-01-15,OLIVE_OIL,3500.0,120.0,France,RISING")
        assert len(load_from_csv(path)) == 1


class TestLoaderHelpers:
    """Test validation, counting and preview."""

    def test_load_and_validate_drops_zero_values(self, write_csv):
        path = write_csv(
            HEADER,
            "2025-01-15,OLIVE_OIL,3500.0,120.0,France,RISING",
            "2025-01-16,OLIVE_OIL,0,120.0,France,RISING",
            "2025-01-17,OLIVE_OIL,3500.0,0,France,RISING",
        )
        assert len(load_and_validate(path)) == 1

    def test_count_records(self, write_csv):
        path = write_csv(HEADER, "x", "y", "z")
        assert count_records(path) == 3

    def test_count_records_missing(self, tmp_path):
        with pytest.raises(MissingDataError):
            count_records(tmp_path / "absent.csv")

    def test_preview(self, write_csv):
        rows = [f"2025-01-{day:02d},WHEAT,900.0,500.0,Spain,STABLE" for day in range(1, 11)]
        path = write_csv(HEADER, *rows)

        preview = preview_csv(path, 3)

        assert [r.date.day for r in preview] == [1, 2, 3]

    def test_preview_skips_bad_rows(self, write_csv):
        path = write_csv(HEADER, "garbage", "2025-01-02,WHEAT,900.0,500.0,Spain,STABLE")
        assert len(preview_csv(path, 5)) == 1
