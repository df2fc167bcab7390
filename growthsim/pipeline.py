from __future__ import annotations

import logging
from dataclasses import dataclass

from growthsim.insights.base import InsightEngineError, InsightGenerator, MetricsExtractor
from growthsim.models.insights import AIInsights
from growthsim.models.profile import UserProfile
from growthsim.models.scores import ScoreBreakdown
from growthsim.scoring.calculator import calculate_scores

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    pass


@dataclass
class AnalysisResult:
    profile: UserProfile
    scores: ScoreBreakdown
    insights: AIInsights | None = None


def analyze_profile(
    profile: UserProfile,
    target_role: str,
    extractor: MetricsExtractor,
    generator: InsightGenerator | None = None,
) -> AnalysisResult:
    """Attach detected metrics, score the result, then ask for insights.

    The input profile is left untouched; the returned profile carries the
    metrics. Without a generator only metrics and scores are produced.
    """
    if not profile.has_sources:
        raise AnalysisError("Minimum one source required for analysis.")

    try:
        metrics = extractor.extract_metrics(profile)
    except InsightEngineError as e:
        raise AnalysisError(str(e)) from e

    updated = profile.with_metrics(metrics)
    scores = calculate_scores(updated)
    logger.info(
        "Scored profile: overall=%d skills=%d projects=%d internships=%d certifications=%d",
        scores.overall_score,
        scores.skills_score,
        scores.projects_score,
        scores.internships_score,
        scores.certifications_score,
    )

    if generator is None:
        return AnalysisResult(profile=updated, scores=scores)

    try:
        insights = generator.generate_insights(updated, target_role, scores)
    except InsightEngineError as e:
        raise AnalysisError(str(e)) from e

    return AnalysisResult(profile=updated, scores=scores, insights=insights)
