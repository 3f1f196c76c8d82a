"""
Configuration module.

Frozen default parameters, YAML-backed loading with layered overrides,
and validation of user supplied settings.
"""
