from __future__ import annotations

import io
import logging
from pathlib import Path

from growthsim.insights.base import ImageTextExtractor
from growthsim.models.profile import InputSource
from growthsim.utils.text import clean_html, collapse_whitespace

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


def parse_pdf(file_bytes: bytes) -> str:
    from pypdf import PdfReader

    reader = PdfReader(io.BytesIO(file_bytes))
    pages = [page.extract_text() or "" for page in reader.pages]
    return collapse_whitespace("\n".join(pages))


def parse_docx(file_bytes: bytes) -> str:
    from docx import Document

    doc = Document(io.BytesIO(file_bytes))
    paragraphs = [p.text for p in doc.paragraphs if p.text.strip()]
    return collapse_whitespace("\n".join(paragraphs))


def parse_txt(file_bytes: bytes) -> str:
    return collapse_whitespace(file_bytes.decode("utf-8", errors="replace"))


def parse_html(file_bytes: bytes) -> str:
    return clean_html(file_bytes.decode("utf-8", errors="replace"))


PARSERS = {
    ".pdf": ("pdf", parse_pdf),
    ".docx": ("docx", parse_docx),
    ".txt": ("text", parse_txt),
    ".md": ("text", parse_txt),
    ".html": ("html", parse_html),
    ".htm": ("html", parse_html),
}


def parse_document(filename: str, file_bytes: bytes) -> str:
    ext = Path(filename).suffix.lower()
    entry = PARSERS.get(ext)
    if entry is None:
        raise ValueError(f"Unsupported file type: {ext}. Use PDF, DOCX, TXT, HTML or an image.")
    return entry[1](file_bytes)


def build_input_source(
    filename: str,
    file_bytes: bytes,
    image_reader: ImageTextExtractor | None = None,
) -> InputSource:
    ext = Path(filename).suffix.lower()
    if ext in IMAGE_MIME_TYPES:
        if image_reader is None:
            raise ValueError("Image uploads need an AI key configured for text extraction.")
        content = collapse_whitespace(image_reader.extract_image_text(file_bytes, IMAGE_MIME_TYPES[ext]))
        source_type = "image"
    else:
        content = parse_document(filename, file_bytes)
        source_type = PARSERS[ext][0]

    logger.info("Extracted %d chars from %s (%s)", len(content), filename, source_type)
    return InputSource(type=source_type, label=filename, filename=filename, content=content)


def manual_source(label: str, text: str) -> InputSource:
    content = collapse_whitespace(text or "")
    if not content:
        raise ValueError("Manual entry is empty.")
    return InputSource(type="text", label=label.strip() or "Manual entry", content=content)


def merge_sources(sources: list[InputSource]) -> str:
    return "\n\n".join(f"Source: {s.label}\nContent: {s.content}" for s in sources)
