from __future__ import annotations

import json
from pathlib import Path

import yaml

from growthsim.models.profile import UserProfile
from growthsim.models.scores import ScoreBreakdown

ROLES_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "roles.yaml"

DEFAULT_ROLES = [
    "Frontend Developer",
    "Backend Developer",
    "Full Stack Developer",
    "Data Scientist",
    "Data Analyst",
    "AI Engineer",
    "ML Engineer",
    "Cloud Architect",
    "Cybersecurity Analyst",
    "Product Manager",
    "DevOps Engineer",
]

DEFAULT_ROLE = "Full Stack Developer"

SYSTEM_PROMPT = """
You are an expert AI reasoning engine called:
AI Career Intelligence & Growth Simulator

Your task is to process student career profiles provided in multiple formats and generate:
- Career readiness score analysis
- Strengths & weaknesses
- Personalized project recommendations
- Skill roadmap
- Certification suggestions
- Internship and hackathon guidance
- What-if career simulations

REASONING RULES:
1. Merge content from all input sources (text, pdf, docx, image) into a single user profile context.
2. Detect skills, projects, internships, certifications, and interests from all sources.
3. Generate recommendations based on missing skills, role requirements, and growth potential.
4. Personalize project, internship, hackathon, skill, and certification suggestions according to the target role.
5. Always explain why each recommendation matters in a career growth context.
6. Simulate what the profile would look like if the user completed suggested projects/skills/certs and update the expected score range.
7. Be realistic; do not invent specific company names for internships or certifications. Use categories or industry-recognized examples.
8. Keep recommendations actionable and student-focused.
9. Always prioritize clarity, conciseness, and explainable reasoning.

OUTPUT REQUIREMENTS:
Always respond in strict JSON, no markdown, no emojis, no extra commentary.

Output structure:
{
  "strengths": ["string"],
  "weaknesses": ["string"],
  "project_recommendations": [
    {"title": "string", "description": "string", "skills_gained": ["string"]}
  ],
  "skill_roadmap": [
    {"skill": "string", "priority": "High | Medium | Low", "reason": "string"}
  ],
  "certifications": ["string"],
  "internship_categories": ["string"],
  "hackathon_categories": ["string"],
  "career_explanation": "string",
  "future_simulation": {
    "if_user_completes": ["string"],
    "expected_score_range": "string"
  }
}
""".strip()

METRICS_PROMPT = """Extract the following details from this career profile context.
If not explicitly found, make a reasonable inference based on common patterns.

Context:
{context}
"""

IMAGE_PROMPT = (
    "Extract all text from this image as cleanly as possible. "
    "Focus on career details, skills, and experience."
)

METRICS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        name: {"type": "ARRAY", "items": {"type": "STRING"}}
        for name in ("skills", "projects", "internships", "certifications", "interests")
    },
    "required": ["skills", "projects", "internships", "certifications", "interests"],
}


def load_roles(path: Path | str = ROLES_PATH) -> list[str]:
    path = Path(path)
    if not path.exists():
        return list(DEFAULT_ROLES)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    roles = data.get("roles", []) if isinstance(data, dict) else []
    return [str(r) for r in roles if r] or list(DEFAULT_ROLES)


def build_insight_payload(profile: UserProfile, target_role: str, scores: ScoreBreakdown) -> str:
    payload = {
        "user_profile": {
            "name": profile.name,
            "education": profile.education,
            "input_sources": [s.to_dict() for s in profile.input_sources],
        },
        "target_role": target_role,
        "system_scores": scores.to_dict(),
    }
    return json.dumps(payload)
