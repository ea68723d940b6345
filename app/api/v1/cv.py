import asyncio

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from app.ats import check_ats_compliance, extract_contact_info
from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.parsing import DocumentExtractionError, UnsupportedDocumentError
from app.schemas.ats import AnalyzeResponse, AnalyzeTextRequest, ContactMatches, CVScoreResponse
from app.schemas.cv import CVData
from app.services.analysis_service import AnalysisRejectedError, analyze_document, analyze_text, score_cv

router = APIRouter()

_READ_CHUNK_BYTES = 1024 * 64


def _raise_analysis_http_error(exc: Exception) -> None:
    if isinstance(exc, AnalysisRejectedError):
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    if isinstance(exc, (DocumentExtractionError, UnsupportedDocumentError)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    raise exc


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File size too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)}MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/cv/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def cv_analyze(request: Request, file: UploadFile | None = File(default=None)):
    _ = request
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")

    filename = file.filename or "uploaded-file"
    payload = await _read_upload(file)
    try:
        return await asyncio.to_thread(analyze_document, filename, payload, file.content_type)
    except (AnalysisRejectedError, DocumentExtractionError, UnsupportedDocumentError) as exc:
        _raise_analysis_http_error(exc)


@router.post("/cv/analyze-text", response_model=AnalyzeResponse)
@rate_limit()
async def cv_analyze_text(request: Request, payload: AnalyzeTextRequest):
    _ = request
    try:
        return analyze_text(payload.text)
    except AnalysisRejectedError as exc:
        _raise_analysis_http_error(exc)


@router.post("/cv/score", response_model=CVScoreResponse)
@rate_limit()
async def cv_score(request: Request, payload: CVData):
    _ = request
    return score_cv(payload)


@router.post("/cv/check", summary="Raw ATS check", description="Score text without the minimum-length gate.")
@rate_limit()
async def cv_check(request: Request, payload: AnalyzeTextRequest):
    _ = request
    return check_ats_compliance(payload.text).model_dump(mode="json")


@router.post("/cv/contact-info", response_model=ContactMatches)
@rate_limit()
async def cv_contact_info(request: Request, payload: AnalyzeTextRequest):
    _ = request
    return extract_contact_info(payload.text)
