"""
File exporters for records, predictions and statistics.

CSV output uses the same column layout the loader reads; JSON output is an
indented array with ISO dates and enum names.
"""

import csv
import json
from pathlib import Path
from typing import Any, Sequence, Union

import structlog

from ..models.statistics import PriceStatistics
from .loaders import CSV_HEADER
from .models import ExportRecord, PricePrediction

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]

PREDICTION_HEADER = ("predictionDate", "product", "predictedPrice", "confidence", "modelName", "status")


def record_to_dict(record: ExportRecord) -> dict[str, Any]:
    return {
        "date": record.date.isoformat(),
        "product": record.product.value,
        "pricePerTon": record.price_per_ton,
        "volume": record.volume,
        "destinationCountry": record.destination_country,
        "marketIndicator": record.indicator.value,
    }


def prediction_to_dict(prediction: PricePrediction) -> dict[str, Any]:
    return {
        "predictionDate": prediction.prediction_date.isoformat(),
        "product": prediction.product.value,
        "predictedPrice": prediction.predicted_price,
        "confidence": prediction.confidence,
        "modelName": prediction.strategy_name,
        "status": prediction.status.value,
    }


def _prepare(path: PathLike) -> Path:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def _write_csv(path: PathLike, header: Sequence[str], rows: list[dict[str, Any]]) -> None:
    file_path = _prepare(path)
    with open(file_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(header))
        writer.writeheader()
        writer.writerows(rows)


def _write_json(path: PathLike, rows: list[dict[str, Any]]) -> None:
    file_path = _prepare(path)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2, ensure_ascii=False)


def export_to_csv(records: Sequence[ExportRecord], path: PathLike) -> None:
    _write_csv(path, CSV_HEADER, [record_to_dict(record) for record in records])
    logger.info("Exported records to CSV", path=str(path), count=len(records))


def export_predictions_to_csv(predictions: Sequence[PricePrediction], path: PathLike) -> None:
    _write_csv(path, PREDICTION_HEADER, [prediction_to_dict(p) for p in predictions])
    logger.info("Exported predictions to CSV", path=str(path), count=len(predictions))


def export_to_json(records: Sequence[ExportRecord], path: PathLike) -> None:
    _write_json(path, [record_to_dict(record) for record in records])
    logger.info("Exported records to JSON", path=str(path), count=len(records))


def export_predictions_to_json(predictions: Sequence[PricePrediction], path: PathLike) -> None:
    _write_json(path, [prediction_to_dict(p) for p in predictions])
    logger.info("Exported predictions to JSON", path=str(path), count=len(predictions))


def export_statistics_to_text(statistics: PriceStatistics, path: PathLike) -> None:
    file_path = _prepare(path)
    file_path.write_text(statistics.to_text(), encoding="utf-8")
    logger.info("Exported statistics to text", path=str(path))
