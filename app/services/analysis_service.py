from __future__ import annotations

import logging

from app.ats import check_ats_compliance
from app.core.config import settings
from app.parsing import parse_bytes
from app.schemas.ats import AnalyzeResponse, CVScoreResponse
from app.schemas.cv import CVData
from app.services.cv_text import render_cv_text

logger = logging.getLogger(__name__)

UPLOAD_TYPES = ("pdf", "docx")


class AnalysisRejectedError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def _preview(text: str) -> str:
    return text[: settings.preview_chars] + "..."


def analyze_text(text: str) -> AnalyzeResponse:
    if len((text or "").strip()) < settings.min_text_chars:
        raise AnalysisRejectedError("Unable to extract text from the document or document is too short.")

    analysis = check_ats_compliance(text)
    logger.info(
        "ats_analysis score=%s issues=%s chars=%s",
        analysis.score,
        len(analysis.issues),
        len(text),
    )
    return AnalyzeResponse(analysis=analysis, extracted_text=_preview(text))


def analyze_document(filename: str, content: bytes, content_type: str | None = None) -> AnalyzeResponse:
    """Upload gate: size cap, text extraction, then the minimum-length check.

    DocumentExtractionError and UnsupportedDocumentError from the parser are
    left to the caller so an unreadable file is never mistaken for a short one.
    """
    if len(content) > settings.max_upload_bytes:
        limit_mb = settings.max_upload_bytes // (1024 * 1024)
        raise AnalysisRejectedError(
            f"File size too large. Maximum size is {limit_mb}MB.",
            status_code=413,
        )

    parsed = parse_bytes(filename, content, content_type, allowed_types=UPLOAD_TYPES)
    logger.info(
        "document_parsed file=%s type=%s doc_id=%s chars=%s",
        filename,
        parsed.source_type,
        parsed.doc_id,
        parsed.characters,
    )
    return analyze_text(parsed.text)


def score_cv(cv: CVData) -> CVScoreResponse:
    cv_text = render_cv_text(cv)
    analysis = check_ats_compliance(cv_text)
    return CVScoreResponse(ats_score=analysis.score, analysis=analysis, cv_text=cv_text)
