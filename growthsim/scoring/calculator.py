from __future__ import annotations

import math

from growthsim.models.profile import DetectedMetrics, UserProfile
from growthsim.models.scores import ScoreBreakdown

# Points per detected item, capped at MAX_CATEGORY_SCORE
POINTS_PER_ITEM = {
    "skills": 15,
    "projects": 25,
    "internships": 50,
    "certifications": 35,
}

# Summation order matters for float parity with the displayed formula
WEIGHTS = {
    "skills": 0.30,
    "projects": 0.25,
    "internships": 0.20,
    "certifications": 0.15,
    "profile_quality": 0.10,
}

MAX_CATEGORY_SCORE = 100

EDUCATION_BONUS = 40
INTERESTS_BONUS = 30
SKILL_BREADTH_BONUS = 30
SKILL_BREADTH_THRESHOLD = 2  # strictly more than this many skills


def calculate_scores(profile: UserProfile) -> ScoreBreakdown:
    metrics = profile.detected_metrics or DetectedMetrics()
    counts = {name: _count(getattr(metrics, name, None)) for name in POINTS_PER_ITEM}
    interests = _count(getattr(metrics, "interests", None))

    category = {
        name: min(counts[name] * points, MAX_CATEGORY_SCORE)
        for name, points in POINTS_PER_ITEM.items()
    }
    quality = _profile_quality(profile.education, counts["skills"], interests)

    weighted = (
        category["skills"] * WEIGHTS["skills"]
        + category["projects"] * WEIGHTS["projects"]
        + category["internships"] * WEIGHTS["internships"]
        + category["certifications"] * WEIGHTS["certifications"]
        + quality * WEIGHTS["profile_quality"]
    )

    return ScoreBreakdown(
        skills_score=category["skills"],
        projects_score=category["projects"],
        internships_score=category["internships"],
        certifications_score=category["certifications"],
        overall_score=_round_half_up(weighted),
    )


def _profile_quality(education, skill_count: int, interest_count: int) -> int:
    quality = 0
    if isinstance(education, str) and education:
        quality += EDUCATION_BONUS
    if interest_count > 0:
        quality += INTERESTS_BONUS
    if skill_count > SKILL_BREADTH_THRESHOLD:
        quality += SKILL_BREADTH_BONUS
    return quality


def _count(value) -> int:
    if isinstance(value, (list, tuple)):
        return len(value)
    return 0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
