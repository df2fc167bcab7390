from __future__ import annotations

from typing import Protocol

from growthsim.models.insights import AIInsights
from growthsim.models.profile import DetectedMetrics, UserProfile
from growthsim.models.scores import ScoreBreakdown


class InsightEngineError(Exception):
    """Remote insight call failed. The message is safe to show to the user."""


class MetricsExtractor(Protocol):
    def extract_metrics(self, profile: UserProfile) -> DetectedMetrics: ...


class InsightGenerator(Protocol):
    def generate_insights(
        self,
        profile: UserProfile,
        target_role: str,
        scores: ScoreBreakdown,
    ) -> AIInsights: ...


class ImageTextExtractor(Protocol):
    def extract_image_text(self, image_bytes: bytes, mime_type: str) -> str: ...
