from __future__ import annotations

import json
import logging
from pathlib import Path

from growthsim.models.profile import DetectedMetrics, UserProfile

logger = logging.getLogger(__name__)

LOCAL_PROFILE_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "local_profile.json"


class ProfileStore:
    """Optional local persistence of the career profile.

    Input sources and their extracted text are never written; a restored
    profile keeps its detected metrics but must be re-uploaded to re-analyse.
    """

    def __init__(self, storage_path: Path | str = LOCAL_PROFILE_PATH):
        self.storage_path = Path(storage_path)

    def is_persisted(self) -> bool:
        return self.storage_path.exists()

    def save_profile(self, profile: UserProfile, target_role: str = "") -> None:
        data = {
            "name": profile.name,
            "education": profile.education,
            "detected_metrics": profile.detected_metrics.to_dict() if profile.detected_metrics else None,
            "target_role": target_role,
        }
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def load_profile(self) -> tuple[UserProfile, str] | None:
        if not self.storage_path.exists():
            return None
        try:
            data = json.loads(self.storage_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable profile file %s: %s", self.storage_path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring profile file %s: not a JSON object", self.storage_path)
            return None
        return _profile_from_dict(data), str(data.get("target_role", "") or "")

    def delete_all(self) -> bool:
        if self.storage_path.exists():
            self.storage_path.unlink()
            return True
        return False

    def export_profile(self) -> str | None:
        if not self.storage_path.exists():
            return None
        return self.storage_path.read_text(encoding="utf-8")

    def import_profile(self, json_str: str) -> bool:
        try:
            data = json.loads(json_str)
        except (json.JSONDecodeError, TypeError):
            return False
        if not isinstance(data, dict):
            return False
        if "education" not in data and "detected_metrics" not in data:
            return False
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return True


def _profile_from_dict(data: dict) -> UserProfile:
    metrics = data.get("detected_metrics")
    return UserProfile(
        name=str(data.get("name", "") or ""),
        education=str(data.get("education", "") or ""),
        detected_metrics=DetectedMetrics.from_dict(metrics) if metrics is not None else None,
    )
