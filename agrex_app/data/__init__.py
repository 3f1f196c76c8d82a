"""
Export data module.

Canonical record and prediction models, the synthetic record generator,
and CSV/JSON import-export for the surrounding tooling.
"""
