from __future__ import annotations

import hashlib
import logging
from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfReader

from .models import ParsedBlock, ParsedDoc
from .signatures import detect_document_type, signature_matches

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = ("pdf", "docx", "txt")


class UnsupportedDocumentError(ValueError):
    pass


class DocumentExtractionError(ValueError):
    """The document could not be read. Distinct from a readable but empty one."""


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _parse_txt(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    for encoding in ("utf-8", "utf-16"):
        try:
            return content.decode(encoding), [], []
        except UnicodeDecodeError:
            continue
    return content.decode("latin-1"), [], ["Text decoded as latin-1."]


def _parse_pdf(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []

    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
                blocks.append(ParsedBlock(page=index, text=page_text))
    except Exception as exc:
        raise DocumentExtractionError("Unable to extract text from this PDF file.") from exc

    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), blocks, warnings


def _parse_docx(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []

    try:
        document = Document(BytesIO(content))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    except Exception as exc:
        raise DocumentExtractionError(
            "Failed to parse DOCX file. Please ensure the file is not corrupted."
        ) from exc

    for paragraph_text in paragraphs:
        blocks.append(ParsedBlock(page=None, text=paragraph_text))
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), blocks, warnings


_PARSERS = {
    "txt": _parse_txt,
    "pdf": _parse_pdf,
    "docx": _parse_docx,
}


def parse_bytes(
    filename: str,
    content: bytes,
    content_type: str | None = None,
    *,
    allowed_types: tuple[str, ...] = SUPPORTED_TYPES,
) -> ParsedDoc:
    """Extract plain text from an in-memory document.

    Raises UnsupportedDocumentError for types outside ``allowed_types`` and
    DocumentExtractionError when the payload cannot be read. A readable
    document without text comes back with empty ``text`` and a warning.
    """
    doc_type = detect_document_type(filename, content_type, allowed_types)
    if doc_type not in allowed_types:
        labels = " or ".join(kind.upper() for kind in allowed_types)
        raise UnsupportedDocumentError(f"Unsupported file type. Please upload a {labels} file.")

    if not signature_matches(doc_type, content):
        raise DocumentExtractionError(f"File signature does not match .{doc_type} content.")

    text, blocks, warnings = _PARSERS[doc_type](content)
    if warnings:
        logger.info("document_parse_warnings file=%s type=%s warnings=%s", filename, doc_type, warnings)

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, filename=filename),
        source_type=doc_type,
        filename=filename,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")

    extension = path.suffix.lower().lstrip(".")
    if extension not in SUPPORTED_TYPES:
        raise UnsupportedDocumentError(
            f"Unsupported file type '.{extension}'. Supported types: .txt, .pdf, .docx"
        )
    return parse_bytes(path.name, path.read_bytes())
