"""
Utility functions module.

Common helpers for date handling and numeric rounding shared across the
prediction strategies, data generator and exporters.

Date Semantics:
- "Today" is always obtained through an injectable callable so that
  strategies and generators can be pinned to a fixed date in tests
- Record and prediction dates are calendar dates without time of day
"""
