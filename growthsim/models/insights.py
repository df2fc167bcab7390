from __future__ import annotations

from dataclasses import dataclass, field

PRIORITIES = ("High", "Medium", "Low")


def _strings(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v]


@dataclass
class ProjectRecommendation:
    title: str
    description: str = ""
    skills_gained: list[str] = field(default_factory=list)


@dataclass
class SkillRoadmapItem:
    skill: str
    priority: str = "Medium"
    reason: str = ""


@dataclass
class FutureSimulation:
    if_user_completes: list[str] = field(default_factory=list)
    expected_score_range: str = ""


@dataclass
class AIInsights:
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    project_recommendations: list[ProjectRecommendation] = field(default_factory=list)
    skill_roadmap: list[SkillRoadmapItem] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    internship_categories: list[str] = field(default_factory=list)
    hackathon_categories: list[str] = field(default_factory=list)
    career_explanation: str = ""
    future_simulation: FutureSimulation = field(default_factory=FutureSimulation)

    @classmethod
    def from_dict(cls, data: dict) -> AIInsights:
        if not isinstance(data, dict):
            return cls()

        projects = []
        for item in data.get("project_recommendations") or []:
            if not isinstance(item, dict) or not item.get("title"):
                continue
            projects.append(
                ProjectRecommendation(
                    title=str(item["title"]),
                    description=str(item.get("description", "") or ""),
                    skills_gained=_strings(item.get("skills_gained")),
                )
            )

        roadmap = []
        for item in data.get("skill_roadmap") or []:
            if not isinstance(item, dict) or not item.get("skill"):
                continue
            priority = str(item.get("priority", "")).strip().capitalize()
            if priority not in PRIORITIES:
                priority = "Medium"
            roadmap.append(
                SkillRoadmapItem(
                    skill=str(item["skill"]),
                    priority=priority,
                    reason=str(item.get("reason", "") or ""),
                )
            )

        sim = data.get("future_simulation") or {}
        if not isinstance(sim, dict):
            sim = {}

        return cls(
            strengths=_strings(data.get("strengths")),
            weaknesses=_strings(data.get("weaknesses")),
            project_recommendations=projects,
            skill_roadmap=roadmap,
            certifications=_strings(data.get("certifications")),
            internship_categories=_strings(data.get("internship_categories")),
            hackathon_categories=_strings(data.get("hackathon_categories")),
            career_explanation=str(data.get("career_explanation", "") or ""),
            future_simulation=FutureSimulation(
                if_user_completes=_strings(sim.get("if_user_completes")),
                expected_score_range=str(sim.get("expected_score_range", "") or ""),
            ),
        )
