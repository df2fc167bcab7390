from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ScoreBreakdown:
    skills_score: int = 0
    projects_score: int = 0
    internships_score: int = 0
    certifications_score: int = 0
    overall_score: int = 0

    @property
    def growth_index(self) -> str:
        return "High" if self.overall_score < 50 else "Stable"

    def to_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def delta(self, other: ScoreBreakdown) -> dict[str, int]:
        """Per-field difference ``self - other``."""
        return {f.name: getattr(self, f.name) - getattr(other, f.name) for f in fields(self)}
