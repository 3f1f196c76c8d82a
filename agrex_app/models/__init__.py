"""
Result models module.

Immutable snapshots produced by the statistics engine and the
intelligence engine. Follows functional programming principles with
frozen dataclasses.
"""
