from __future__ import annotations

import httpx

_SECRETS: list[str] = []


def register_secrets(values: list[str]) -> None:
    """Register credentials that must be masked in any logged or displayed text."""
    _SECRETS.clear()
    for value in values:
        cleaned = (value or "").strip()
        if len(cleaned) >= 8:
            _SECRETS.append(cleaned)


def redact(text: str) -> str:
    for secret in _SECRETS:
        text = text.replace(secret, secret[:4] + "***")
    return text


class JsonHttpClient:
    """Thin httpx wrapper for JSON APIs. Use as a context manager."""

    def __init__(self, timeout: float = 60.0, headers: dict[str, str] | None = None):
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout, connect=10.0),
            follow_redirects=True,
            headers={"User-Agent": "CareerGrowthSimulator/1.0", **(headers or {})},
        )

    def post_json(self, url: str, payload: dict, **kwargs) -> dict:
        resp = self._client.post(url, json=payload, **kwargs)
        resp.raise_for_status()
        return resp.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
