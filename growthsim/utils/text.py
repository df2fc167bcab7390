from __future__ import annotations

import html
import re

_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+")
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def clean_html(raw: str) -> str:
    text = re.sub(r"<br\s*/?>|</p>|</li>", "\n", raw, flags=re.IGNORECASE)
    text = re.sub(r"<(script|style)[^>]*>.*?</\1>", " ", text, flags=re.IGNORECASE | re.DOTALL)
    text = re.sub(r"<[^>]+>", " ", text)
    return collapse_whitespace(html.unescape(text))


def collapse_whitespace(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def strip_code_fences(text: str) -> str:
    """Models sometimes wrap JSON in markdown fences despite being told not to."""
    return _FENCE_RE.sub("", text.strip())


def split_items(text: str) -> list[str]:
    """Split a comma/semicolon/bullet separated fragment into clean labels."""
    items: list[str] = []
    for line in text.split("\n"):
        line = _BULLET_RE.sub("", line)
        for part in re.split(r"[;,|]", line):
            part = part.strip(" .\t")
            if len(part) > 1:
                items.append(part)
    return items


def is_bullet(line: str) -> bool:
    return bool(_BULLET_RE.match(line))


def strip_bullet(line: str) -> str:
    return _BULLET_RE.sub("", line).strip()
