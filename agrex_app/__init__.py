"""
AgrEx App - Tunisian Agricultural Export Intelligence

Simulates Tunisian agricultural export records, runs rule-based price
predictions over them, computes descriptive statistics and renders
market reports, optionally through an external text-generation model.
"""

__version__ = "0.1.0"
__author__ = "AgrEx Team"
