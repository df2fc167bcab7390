from __future__ import annotations

import base64
import json
import logging

import httpx

from growthsim.ingest.parser import merge_sources
from growthsim.insights.base import InsightEngineError
from growthsim.insights.prompts import (
    IMAGE_PROMPT,
    METRICS_PROMPT,
    METRICS_SCHEMA,
    SYSTEM_PROMPT,
    build_insight_payload,
)
from growthsim.models.insights import AIInsights
from growthsim.models.profile import DetectedMetrics, UserProfile
from growthsim.models.scores import ScoreBreakdown
from growthsim.utils.http_client import JsonHttpClient, redact
from growthsim.utils.text import strip_code_fences

logger = logging.getLogger(__name__)

API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiInsightEngine:
    """Metric extraction, image OCR and career insights via the Gemini REST API."""

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash", timeout: float = 60.0):
        if not api_key:
            raise ValueError("A Gemini API key is required")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    def extract_metrics(self, profile: UserProfile) -> DetectedMetrics:
        context = merge_sources(profile.input_sources)
        body = {
            "contents": [{"role": "user", "parts": [{"text": METRICS_PROMPT.format(context=context)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": METRICS_SCHEMA,
            },
        }
        data = _parse_json(self._generate(body), "metric extraction")
        return DetectedMetrics.from_dict(data)

    def extract_image_text(self, image_bytes: bytes, mime_type: str) -> str:
        body = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {
                            "inlineData": {
                                "mimeType": mime_type,
                                "data": base64.b64encode(image_bytes).decode("ascii"),
                            }
                        },
                        {"text": IMAGE_PROMPT},
                    ],
                }
            ],
        }
        return self._generate(body)

    def generate_insights(
        self,
        profile: UserProfile,
        target_role: str,
        scores: ScoreBreakdown,
    ) -> AIInsights:
        body = {
            "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
            "contents": [
                {"role": "user", "parts": [{"text": build_insight_payload(profile, target_role, scores)}]}
            ],
            "generationConfig": {"responseMimeType": "application/json"},
        }
        try:
            data = _parse_json(self._generate(body), "career insights")
        except InsightEngineError as e:
            raise InsightEngineError(f"Failed to fetch AI career insights. {e}") from e
        return AIInsights.from_dict(data)

    def _generate(self, body: dict) -> str:
        url = API_URL.format(model=self.model)
        try:
            with JsonHttpClient(timeout=self.timeout) as client:
                data = client.post_json(url, body, headers={"x-goog-api-key": self.api_key})
        except httpx.HTTPStatusError as e:
            logger.error("Gemini returned HTTP %s: %s", e.response.status_code, redact(e.response.text[:500]))
            raise InsightEngineError(f"AI service error (HTTP {e.response.status_code}).") from e
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", redact(str(e)))
            raise InsightEngineError("Could not reach the AI service. Please check your connection.") from e
        except ValueError as e:
            logger.error("Gemini returned a non-JSON body: %s", e)
            raise InsightEngineError("The AI service returned an unreadable response.") from e

        text = _candidate_text(data)
        if not text:
            logger.warning("Gemini returned no candidate text: %s", str(data)[:300])
            raise InsightEngineError("The AI service returned an empty response.")
        return text


def _candidate_text(data: dict) -> str:
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict)).strip()


def _parse_json(text: str, context: str) -> dict:
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON from Gemini during %s: %s", context, text[:300])
        raise InsightEngineError(f"The AI service returned malformed {context}.") from e
    if not isinstance(data, dict):
        raise InsightEngineError(f"The AI service returned malformed {context}.")
    return data
