#!/usr/bin/env python3
"""
Basic Usage Example - AgrEx Export Intelligence Engine

This script runs the whole pipeline on synthetic Tunisian export data. It
shows how to:
- Load configuration and configure logging
- Build and load a prediction strategy
- Generate sample export records
- Analyze exports and aggregate the resulting predictions
- Produce reports and export files

Run: python examples/basic_usage.py [output_dir]
"""

import sys
from pathlib import Path

from agrex_app.config.loader import ConfigLoader
from agrex_app.data import exporters
from agrex_app.data.generator import ExportDataGenerator
from agrex_app.engine import IntelligenceEngine
from agrex_app.errors import ModelError, PredictionError
from agrex_app.logging import configure_from_params
from agrex_app.metrics.calculator import MarketStatisticsCalculator
from agrex_app.persistence import InMemoryExportRepository
from agrex_app.prediction import create_strategy
from agrex_app.reporting import LLMReportService


def print_section(title: str) -> None:
    print()
    print("=" * 80)
    print(title)
    print("=" * 80)


def main() -> int:
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("output")

    config = ConfigLoader.create().build_config()
    configure_from_params(config.logging)

    print("╔═══════════════════════════════════════════════════════════╗")
    print("║   Tunisian Agricultural Export Intelligence System        ║")
    print("╚═══════════════════════════════════════════════════════════╝")

    print_section("1. Initializing services")
    strategy = create_strategy(config.strategy)
    try:
        strategy.load_model()
    except ModelError as e:
        print(f"❌ Could not load {e.model_name}: {e}")
        return 1

    report_service = LLMReportService(config.report)
    engine = IntelligenceEngine(strategy, report_service)
    for key, value in engine.service_info().items():
        print(f"   {key}: {value}")

    print_section("2. Generating sample export data")
    generator = ExportDataGenerator(history_years=config.generator.history_years)
    exports = generator.generate_exports(config.generator.record_count)

    repository = InMemoryExportRepository()
    repository.save_all_exports(exports)

    for record in exports[:10]:
        print(f"   {record.product.french_name:<15} | {record.price_per_ton:8.2f} TND/ton | "
              f"{record.volume:6.1f} tons | {record.destination_country:<14} | {record.indicator.value}")
    print(f"   ... {len(exports)} records in total")

    print_section("3. Market statistics")
    overview = MarketStatisticsCalculator().market_overview(exports)
    print(overview["price"].to_text())
    print("   Average price by product:")
    for product, price in overview["average_price_by_product"].items():
        print(f"   - {product.french_name:<15} {price:10.2f} TND")
    print("   Volume by country:")
    for country, volume in overview["total_volume_by_country"].items():
        print(f"   - {country:<15} {volume:10.1f} tons")

    print_section("4. Price predictions")
    try:
        predictions = engine.analyze_exports(exports)
    except PredictionError as e:
        print(f"❌ Analysis failed: {e}")
        return 1

    repository.save_all_predictions(predictions)
    print(engine.prediction_statistics(predictions).to_text())

    print("   Average predicted price by product:")
    for product, price in engine.average_price_by_product(predictions).items():
        print(f"   - {product.french_name:<15} {price:10.2f} TND")

    best = engine.find_best_prediction(predictions)
    if best is not None:
        print(f"   Best prediction: {best.product.french_name} at {best.predicted_price:.2f} TND "
              f"({best.confidence_percentage:.1f}% confidence)")

    print_section("5. Reports")
    print(engine.generate_summary(predictions))
    print()
    print(engine.generate_intelligence_report(predictions))

    print_section("6. Exporting results")
    exporters.export_to_csv(exports, output_dir / "exports.csv")
    exporters.export_to_json(exports, output_dir / "exports.json")
    exporters.export_predictions_to_csv(predictions, output_dir / "predictions.csv")
    exporters.export_predictions_to_json(predictions, output_dir / "predictions.json")
    exporters.export_statistics_to_text(overview["price"], output_dir / "price_statistics.txt")
    print(f"   Files written to {output_dir}/")
    print(f"   Repository: {repository.stats().to_dict()}")

    strategy.unload_model()
    print()
    print("✅ Demo completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
