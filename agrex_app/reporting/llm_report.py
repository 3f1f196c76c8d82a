"""Chat-completion backed report generator with a templated fallback."""

import json
import os
import socket
from typing import Any, Optional, Sequence
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..config.defaults import ReportParams
from ..data.models import PricePrediction
from ..errors import InvalidArgumentError, ReportGenerationError
from ..logging.config import get_report_logger
from .base import ReportGenerator

logger = get_report_logger(__name__)

MARKET_REPORT_PROMPT = """Analyze the following price predictions for Tunisian agricultural exports and generate an intelligent market report:

{data}

Provide a detailed analysis including:
1. General market trends
2. Strategic recommendations for exporters
3. Identified risks
4. Export opportunities

Write the report in a professional tone suitable for business decision-makers.
"""

SUMMARY_PROMPT = """Generate an executive summary in 3-4 sentences for the following Tunisian agricultural export price predictions:

{data}

Focus on key insights and overall market direction.
"""


class LLMReportService(ReportGenerator):
    """
    Report generator backed by a chat-completion endpoint.

    Supports a local Ollama server and the OpenAI API. Without a usable
    backend, or when a call fails, reports are rendered from a fixed
    template so callers always get text back.
    """

    def __init__(self, params: Optional[ReportParams] = None):
        self.params = params or ReportParams()
        self.logger = logger
        self._api_key: Optional[str] = None
        self._backend_ready = self._initialize_backend()

    def _initialize_backend(self) -> bool:
        provider = self.params.provider

        if provider == "ollama":
            self.logger.info(
                "Using local LLM",
                provider=provider,
                base_url=self.params.base_url,
                model=self.params.model_name,
            )
            return True

        if provider == "openai":
            api_key = os.environ.get(self.params.api_key_env)
            if not api_key:
                self.logger.warning(
                    "API key environment variable not set, using fallback reports",
                    provider=provider,
                    env_var=self.params.api_key_env,
                )
                return False
            self._api_key = api_key
            self.logger.info("Using cloud LLM", provider=provider, model=self.params.model_name)
            return True

        self.logger.info("LLM disabled, using fallback reports", provider=provider)
        return False

    def is_ready(self) -> bool:
        return self._backend_ready

    def model_info(self) -> str:
        if not self._backend_ready:
            return "LLM not initialized - using fallback mode"
        if self.params.provider == "ollama":
            return "Ollama (Local Model)"
        return "OpenAI (Cloud API)"

    def generate_market_report(self, predictions: Sequence[PricePrediction]) -> str:
        self._require_predictions(predictions)
        self.logger.info("Generating market report", prediction_count=len(predictions))

        data = "\n".join(
            f"Product: {p.product.french_name}, Predicted Price: {p.predicted_price:.2f} TND, "
            f"Confidence: {p.confidence_percentage:.2f}%"
            for p in predictions
        )
        prompt = MARKET_REPORT_PROMPT.format(data=data)

        if self._backend_ready:
            try:
                report = self._complete(prompt)
                self.logger.info("Market report generated")
                return report
            except ReportGenerationError as e:
                self.logger.warning("LLM generation failed, using fallback", error=str(e))

        return fallback_market_report(predictions)

    def generate_summary_report(self, predictions: Sequence[PricePrediction]) -> str:
        self._require_predictions(predictions)
        self.logger.info("Generating executive summary", prediction_count=len(predictions))

        data = ", ".join(f"{p.product.french_name}: {p.predicted_price} TND" for p in predictions)
        prompt = SUMMARY_PROMPT.format(data=data)

        if self._backend_ready:
            try:
                summary = self._complete(prompt)
                self.logger.info("Summary report generated")
                return summary
            except ReportGenerationError as e:
                self.logger.warning("LLM generation failed, using fallback", error=str(e))

        return fallback_summary(predictions)

    def _require_predictions(self, predictions: Optional[Sequence[PricePrediction]]) -> None:
        if not predictions:
            raise InvalidArgumentError("Predictions list cannot be None or empty", argument="predictions")

    def _complete(self, prompt: str) -> str:
        """Send one user message to the backend and return the reply text."""
        url, payload = self._build_request(prompt)
        data = json.dumps(payload).encode('utf-8')
        headers = {
            'Content-Type': 'application/json',
            'Content-Length': str(len(data)),
            'User-Agent': 'agrex-app/1.0'
        }
        if self._api_key:
            headers['Authorization'] = f"Bearer {self._api_key}"

        req = Request(url, data=data, headers=headers, method="POST")

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                body = json.loads(response.read().decode('utf-8'))
        except HTTPError as e:
            raise ReportGenerationError(
                f"HTTP {e.code}: {e.reason}",
                provider=self.params.provider,
                status_code=e.code,
            ) from e
        except (URLError, OSError, socket.timeout) as e:
            raise ReportGenerationError(
                f"Network error: {e}", provider=self.params.provider
            ) from e
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ReportGenerationError(
                f"Unreadable response body: {e}", provider=self.params.provider
            ) from e

        return self._extract_content(body)

    def _build_request(self, prompt: str) -> tuple[str, dict[str, Any]]:
        base_url = self.params.base_url.rstrip("/")
        messages = [{"role": "user", "content": prompt}]

        if self.params.provider == "ollama":
            return f"{base_url}/api/chat", {
                "model": self.params.model_name,
                "messages": messages,
                "stream": False,
                "options": {"temperature": self.params.temperature},
            }

        return f"{base_url}/v1/chat/completions", {
            "model": self.params.model_name,
            "messages": messages,
            "temperature": self.params.temperature,
        }

    def _extract_content(self, body: dict[str, Any]) -> str:
        try:
            if self.params.provider == "ollama":
                content = body["message"]["content"]
            else:
                content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ReportGenerationError(
                f"Unexpected response shape: {e}", provider=self.params.provider
            ) from e

        if not isinstance(content, str) or not content.strip():
            raise ReportGenerationError("Empty completion", provider=self.params.provider)
        return content


def _average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def fallback_market_report(predictions: Sequence[PricePrediction]) -> str:
    """Deterministic market report used when no LLM answer is available."""
    lines = [
        "=== MARKET INTELLIGENCE REPORT ===",
        "(Generated without LLM - Basic Analysis)",
        "",
        "PRICE PREDICTIONS SUMMARY:",
    ]
    for p in predictions:
        lines.append(
            f"- {p.product.french_name}: {p.predicted_price:.2f} TND "
            f"(Confidence: {p.confidence_percentage:.1f}%)"
        )

    avg_price = _average([p.predicted_price for p in predictions])
    avg_confidence = _average([p.confidence for p in predictions])

    lines.extend([
        "",
        f"AVERAGE PREDICTED PRICE: {avg_price:.2f} TND",
        f"AVERAGE CONFIDENCE: {avg_confidence * 100:.1f}%",
        "",
        "Note: For detailed AI-generated insights, please configure LLM integration.",
    ])
    return "\n".join(lines) + "\n"


def fallback_summary(predictions: Sequence[PricePrediction]) -> str:
    """Deterministic executive summary used when no LLM answer is available."""
    avg_price = _average([p.predicted_price for p in predictions])
    return (
        f"Executive Summary: Analyzed {len(predictions)} Tunisian agricultural export predictions. "
        f"Average predicted price: {avg_price:.2f} TND. "
        "Overall market confidence is moderate. "
        "Detailed insights require LLM integration."
    )
