from __future__ import annotations

from dataclasses import dataclass, field

METRIC_FIELDS = ("skills", "projects", "internships", "certifications", "interests")


def _clean_labels(value) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


@dataclass
class InputSource:
    type: str  # "text", "pdf", "docx", "html", "image"
    label: str
    content: str
    filename: str | None = None

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "label": self.label,
            "filename": self.filename,
            "content": self.content,
        }


@dataclass
class DetectedMetrics:
    skills: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    internships: list[str] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)

    def copy(self) -> DetectedMetrics:
        return DetectedMetrics(**{name: list(getattr(self, name)) for name in METRIC_FIELDS})

    def to_dict(self) -> dict:
        return {name: list(getattr(self, name)) for name in METRIC_FIELDS}

    @classmethod
    def from_dict(cls, data: dict | None) -> DetectedMetrics:
        # AI output is not trusted to follow the schema
        if not isinstance(data, dict):
            return cls()
        return cls(**{name: _clean_labels(data.get(name)) for name in METRIC_FIELDS})


@dataclass
class UserProfile:
    name: str = ""
    education: str = ""
    input_sources: list[InputSource] = field(default_factory=list)
    detected_metrics: DetectedMetrics | None = None

    @property
    def has_sources(self) -> bool:
        return bool(self.input_sources)

    def copy(self) -> UserProfile:
        return UserProfile(
            name=self.name,
            education=self.education,
            input_sources=list(self.input_sources),
            detected_metrics=self.detected_metrics.copy() if self.detected_metrics else None,
        )

    def with_metrics(self, metrics: DetectedMetrics) -> UserProfile:
        updated = self.copy()
        updated.detected_metrics = metrics.copy()
        return updated

    def add_source(self, source: InputSource) -> None:
        self.input_sources.append(source)

    def remove_source(self, index: int) -> None:
        if 0 <= index < len(self.input_sources):
            del self.input_sources[index]
