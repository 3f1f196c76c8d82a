"""
CSV loader for export records.

Reads the 6-column format
`date,product,pricePerTon,volume,destinationCountry,marketIndicator`
with ISO-8601 dates and upper-case enum names. Rows that fail to parse are
skipped with a warning rather than aborting the whole file.
"""

import csv
from datetime import date
from pathlib import Path
from typing import Union

import structlog

from ..errors import InvalidArgumentError, MalformedDataError, MissingDataError
from .models import ExportRecord, MarketIndicator, ProductType

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]

CSV_HEADER = ("date", "product", "pricePerTon", "volume", "destinationCountry", "marketIndicator")
EXPECTED_FORMAT = ",".join(CSV_HEADER)


def parse_csv_row(row: list[str]) -> ExportRecord:
    """
    Parse one CSV row into an ExportRecord.

    Raises:
        MalformedDataError: wrong column count or unparsable field
    """
    if len(row) != len(CSV_HEADER):
        raise MalformedDataError(
            f"Invalid CSV line format. Expected {len(CSV_HEADER)} columns, found {len(row)}",
            raw_data=",".join(row),
            expected_format=EXPECTED_FORMAT,
        )

    fields = [part.strip() for part in row]
    try:
        return ExportRecord(
            date=date.fromisoformat(fields[0]),
            product=ProductType(fields[1].upper()),
            price_per_ton=float(fields[2]),
            volume=float(fields[3]),
            destination_country=fields[4],
            indicator=MarketIndicator(fields[5].upper()),
        )
    except (ValueError, InvalidArgumentError) as e:
        raise MalformedDataError(
            f"Error parsing CSV line: {e}",
            raw_data=",".join(row),
            expected_format=EXPECTED_FORMAT,
        ) from e


def _require_file(path: PathLike) -> Path:
    file_path = Path(path)
    if not file_path.exists():
        raise MissingDataError(f"File not found: {file_path}", data_type="csv")
    return file_path


def _check_header(header: list[str], file_path: Path) -> None:
    lowered = [column.strip().lower() for column in header]
    if "date" not in lowered or "product" not in lowered:
        logger.warning(
            "CSV header might be invalid",
            path=str(file_path),
            header=",".join(header),
            expected=EXPECTED_FORMAT,
        )


def load_from_csv(path: PathLike) -> list[ExportRecord]:
    """
    Load every parseable record from a CSV file.

    Raises:
        MissingDataError: file does not exist
        MalformedDataError: file is empty
    """
    file_path = _require_file(path)
    logger.info("Loading export records from CSV", path=str(file_path))

    records = []
    skipped = 0

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            raise MalformedDataError("CSV file is empty", expected_format=EXPECTED_FORMAT)

        _check_header(header, file_path)

        for row in reader:
            if not row or all(not cell.strip() for cell in row):
                continue
            try:
                records.append(parse_csv_row(row))
            except MalformedDataError as e:
                skipped += 1
                logger.warning(
                    "Skipped CSV line",
                    path=str(file_path),
                    line_number=reader.line_num,
                    error=str(e),
                )

    logger.info("Loaded export records", path=str(file_path), count=len(records), skipped=skipped)
    return records


def load_and_validate(path: PathLike) -> list[ExportRecord]:
    """Load records and drop those with a non-positive price or volume."""
    records = load_from_csv(path)
    valid = [record for record in records if record.price_per_ton > 0 and record.volume > 0]

    invalid_count = len(records) - len(valid)
    if invalid_count:
        logger.info("Filtered out invalid records", count=invalid_count)
    return valid


def count_records(path: PathLike) -> int:
    """Number of data lines after the header."""
    file_path = _require_file(path)
    with open(file_path, encoding="utf-8") as f:
        f.readline()
        return sum(1 for _ in f)


def preview_csv(path: PathLike, limit: int) -> list[ExportRecord]:
    """First `limit` parseable records of a CSV file."""
    file_path = _require_file(path)
    preview: list[ExportRecord] = []

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if len(preview) >= limit:
                break
            try:
                preview.append(parse_csv_row(row))
            except MalformedDataError:
                logger.warning("Skipped invalid line", path=str(file_path), line_number=reader.line_num)

    logger.info("Loaded preview records", path=str(file_path), count=len(preview))
    return preview
