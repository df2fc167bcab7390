from __future__ import annotations

from growthsim.models.profile import DetectedMetrics, UserProfile
from growthsim.models.scores import ScoreBreakdown
from growthsim.scoring.calculator import calculate_scores

GENERIC_PLACEHOLDERS = {
    "internships": "Future Internship",
    "certifications": "Future Cert",
}


class Simulation:
    """What-if view over a profile. The baseline is copied and never mutated."""

    def __init__(self, baseline: UserProfile):
        self._baseline = baseline.copy()
        if self._baseline.detected_metrics is None:
            self._baseline.detected_metrics = DetectedMetrics()
        self._current_scores = calculate_scores(self._baseline)
        self.profile = self._baseline.copy()

    @property
    def metrics(self) -> DetectedMetrics:
        return self.profile.detected_metrics

    def toggle_achievement(self, label: str) -> bool:
        """Add or remove a hypothetical project. Returns True when now active."""
        return _toggle(self.metrics.projects, label)

    def toggle_generic(self, kind: str) -> bool:
        if kind not in GENERIC_PLACEHOLDERS:
            raise ValueError(f"Cannot simulate {kind!r}. Use one of: {', '.join(GENERIC_PLACEHOLDERS)}")
        return _toggle(getattr(self.metrics, kind), GENERIC_PLACEHOLDERS[kind])

    def is_active(self, label: str) -> bool:
        return label in self.metrics.projects

    def is_generic_active(self, kind: str) -> bool:
        baseline = getattr(self._baseline.detected_metrics, kind)
        return len(getattr(self.metrics, kind)) > len(baseline)

    @property
    def current_scores(self) -> ScoreBreakdown:
        return self._current_scores

    @property
    def simulated_scores(self) -> ScoreBreakdown:
        return calculate_scores(self.profile)

    @property
    def score_delta(self) -> dict[str, int]:
        return self.simulated_scores.delta(self._current_scores)

    def reset(self) -> None:
        self.profile = self._baseline.copy()


def _toggle(items: list[str], label: str) -> bool:
    if label in items:
        items[:] = [i for i in items if i != label]
        return False
    items.append(label)
    return True
