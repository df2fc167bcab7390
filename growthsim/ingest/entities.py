from __future__ import annotations

import json
import re
from pathlib import Path

from growthsim.models.profile import DetectedMetrics, UserProfile
from growthsim.utils.text import is_bullet, split_items, strip_bullet

SKILLS_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "skills_seed.json"

_SKILLS_CACHE: dict[str, list[str]] | None = None

# Section headings that introduce each metric, matched at line start
SECTION_HEADINGS = {
    "projects": r"(?:personal |academic |key |side )?projects?",
    "internships": r"internships?|work experience|experience",
    "certifications": r"certifications?|certificates?|licen[cs]es(?: & certifications)?",
    "interests": r"interests?|hobbies|areas of interest",
    "skills": r"(?:technical |core |key )?skills|technologies|tech stack",
}

_HEADING_RE = re.compile(
    r"^\s*(?P<heading>" + "|".join(f"(?:{p})" for p in SECTION_HEADINGS.values()) + r")\s*(?:[:\-]\s*(?P<rest>.*))?$",
    re.IGNORECASE,
)

_INTERNSHIP_RE = re.compile(r"\b(?:intern|internship|trainee|apprentice)\b", re.IGNORECASE)


def _load_skills_dict(path: Path = SKILLS_PATH) -> dict[str, list[str]]:
    global _SKILLS_CACHE
    if _SKILLS_CACHE is not None:
        return _SKILLS_CACHE
    with open(path, encoding="utf-8") as f:
        _SKILLS_CACHE = json.load(f)
    return _SKILLS_CACHE


def extract_skills(text: str) -> list[str]:
    skills_dict = _load_skills_dict()
    text_lower = text.lower()
    found: set[str] = set()

    all_skills: list[str] = []
    for category_skills in skills_dict.values():
        all_skills.extend(category_skills)

    # Longest first so multi-word skills match before their parts
    all_skills.sort(key=len, reverse=True)

    for skill in all_skills:
        pattern = r"(?<![\w+#])" + re.escape(skill.lower()) + r"(?![\w+#])"
        if re.search(pattern, text_lower):
            found.add(skill.lower())

    return sorted(found)


def _section_for(heading: str) -> str | None:
    for name, pattern in SECTION_HEADINGS.items():
        if re.fullmatch(pattern, heading.strip(), re.IGNORECASE):
            return name
    return None


def extract_sections(text: str) -> dict[str, list[str]]:
    """Collect items listed under headings like "Projects:" or "Interests -"."""
    sections: dict[str, list[str]] = {name: [] for name in SECTION_HEADINGS}
    current: str | None = None

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        match = _HEADING_RE.match(stripped)
        if match and not is_bullet(stripped):
            current = _section_for(match.group("heading"))
            rest = (match.group("rest") or "").strip()
            if current and rest:
                sections[current].extend(split_items(rest))
            continue
        if current is None:
            continue
        if is_bullet(stripped):
            item = strip_bullet(stripped)
            if current in ("projects", "internships", "certifications"):
                # One entry per bullet; descriptions often contain commas
                sections[current].append(item.split(":")[0].strip())
            else:
                sections[current].extend(split_items(item))
        elif current == "internships" and _INTERNSHIP_RE.search(stripped):
            sections[current].append(stripped)
        elif len(stripped) < 60 and stripped.endswith(":"):
            current = None

    return sections


def _unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        key = item.lower()
        if item and key not in seen:
            seen.add(key)
            result.append(item)
    return result


def extract_metrics_from_text(text: str) -> DetectedMetrics:
    sections = extract_sections(text)

    skills = _unique(extract_skills(text) + [s.lower() for s in sections["skills"]])
    internships = [i for i in sections["internships"] if _INTERNSHIP_RE.search(i)]

    return DetectedMetrics(
        skills=skills,
        projects=_unique(sections["projects"]),
        internships=_unique(internships),
        certifications=_unique(sections["certifications"]),
        interests=_unique(sections["interests"]),
    )


class KeywordMetricsExtractor:
    """Offline metrics extractor. Used when no AI key is configured."""

    def extract_metrics(self, profile: UserProfile) -> DetectedMetrics:
        return extract_metrics_from_text("\n\n".join(s.content for s in profile.input_sources))
