from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from growthsim.ingest.entities import KeywordMetricsExtractor
from growthsim.insights.base import InsightGenerator, MetricsExtractor
from growthsim.insights.gemini import GeminiInsightEngine
from growthsim.utils.http_client import register_secrets

logger = logging.getLogger(__name__)

API_KEYS_PATH = Path(__file__).resolve().parent.parent / "data" / "api_keys.json"

DEFAULT_MODEL = "gemini-2.0-flash"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    gemini_timeout_s: float = 60.0
    log_level: str = "INFO"

    @property
    def ai_enabled(self) -> bool:
        return bool(self.gemini_api_key)


def load_settings() -> Settings:
    try:
        timeout = float(os.environ.get("GEMINI_TIMEOUT_S", "60"))
    except ValueError:
        logger.warning("Ignoring invalid GEMINI_TIMEOUT_S=%r", os.environ.get("GEMINI_TIMEOUT_S"))
        timeout = 60.0
    settings = Settings(
        gemini_api_key=os.environ.get("GEMINI_API_KEY", "").strip(),
        gemini_model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
        gemini_timeout_s=timeout,
        log_level=os.environ.get("GROWTHSIM_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
    register_secrets([settings.gemini_api_key])
    return settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# API keys entered in the UI: stored locally, applied to os.environ
# ---------------------------------------------------------------------------
def load_api_keys(path: Path | str = API_KEYS_PATH) -> dict:
    path = Path(path)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_api_keys(keys: dict, path: Path | str = API_KEYS_PATH) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(keys, indent=2), encoding="utf-8")


def apply_api_keys(keys: dict) -> None:
    for env_var, value in keys.items():
        if value:
            os.environ[env_var] = value


# ---------------------------------------------------------------------------
# Collaborator selection
# ---------------------------------------------------------------------------
def _gemini(settings: Settings) -> GeminiInsightEngine:
    return GeminiInsightEngine(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        timeout=settings.gemini_timeout_s,
    )


def get_metrics_extractor(settings: Settings) -> MetricsExtractor:
    if settings.ai_enabled:
        return _gemini(settings)
    return KeywordMetricsExtractor()


def get_insight_generator(settings: Settings) -> InsightGenerator | None:
    if settings.ai_enabled:
        return _gemini(settings)
    return None


def get_image_reader(settings: Settings) -> GeminiInsightEngine | None:
    if settings.ai_enabled:
        return _gemini(settings)
    return None
