"""Market report generation"""

from .base import ReportGenerator
from .llm_report import LLMReportService

__all__ = ["ReportGenerator", "LLMReportService"]
