import json
import os

from growthsim.config import (
    Settings,
    apply_api_keys,
    get_image_reader,
    get_insight_generator,
    get_metrics_extractor,
    load_api_keys,
    load_settings,
    save_api_keys,
)
from growthsim.ingest.entities import KeywordMetricsExtractor
from growthsim.insights.gemini import GeminiInsightEngine
from growthsim.insights.prompts import DEFAULT_ROLES, load_roles


def test_load_settings_defaults(monkeypatch):
    for var in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_TIMEOUT_S", "GROWTHSIM_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings()
    assert settings == Settings()
    assert not settings.ai_enabled


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", " abc123456 ")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "15")
    monkeypatch.setenv("GROWTHSIM_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.gemini_api_key == "abc123456"
    assert settings.gemini_model == "gemini-pro"
    assert settings.gemini_timeout_s == 15.0
    assert settings.log_level == "DEBUG"
    assert settings.ai_enabled


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "soon")
    assert load_settings().gemini_timeout_s == 60.0


def test_offline_collaborators():
    settings = Settings()
    assert isinstance(get_metrics_extractor(settings), KeywordMetricsExtractor)
    assert get_insight_generator(settings) is None
    assert get_image_reader(settings) is None


def test_gemini_collaborators():
    settings = Settings(gemini_api_key="abc123456", gemini_model="gemini-pro")
    extractor = get_metrics_extractor(settings)
    assert isinstance(extractor, GeminiInsightEngine)
    assert extractor.model == "gemini-pro"
    assert isinstance(get_insight_generator(settings), GeminiInsightEngine)
    assert isinstance(get_image_reader(settings), GeminiInsightEngine)


def test_api_keys_roundtrip(tmp_path, monkeypatch):
    path = tmp_path / "keys.json"
    assert load_api_keys(path) == {}
    save_api_keys({"GEMINI_API_KEY": "secret-value"}, path)
    assert load_api_keys(path) == {"GEMINI_API_KEY": "secret-value"}

    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    apply_api_keys(load_api_keys(path))
    assert os.environ["GEMINI_API_KEY"] == "secret-value"


def test_load_api_keys_invalid_file(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_api_keys(path) == {}
    path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    assert load_api_keys(path) == {}


def test_load_roles_from_yaml(tmp_path):
    path = tmp_path / "roles.yaml"
    path.write_text("roles:\n  - Game Developer\n  - QA Engineer\n", encoding="utf-8")
    assert load_roles(path) == ["Game Developer", "QA Engineer"]


def test_load_roles_missing_file(tmp_path):
    assert load_roles(tmp_path / "missing.yaml") == DEFAULT_ROLES


def test_shipped_roles_file():
    roles = load_roles()
    assert "Full Stack Developer" in roles
    assert len(roles) == len(DEFAULT_ROLES)
