import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_page_height_px
from config import settings
from models.requests import ATSCheckRequest, ATSHtmlCheckRequest, EnhanceRequest
from models.responses import ATSReport, EnhanceResponse
from models.schemas.resume_data import ResumeData
from services import ats_validator, pdf_parser, resume_generator
from services.ats_report import build_report
from services.snapshot_provider import HtmlSnapshotProvider, PdfSnapshotProvider

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


async def _read_upload(upload: UploadFile, allowed: tuple[str, ...]) -> bytes:
    if not upload.filename or not upload.filename.lower().endswith(allowed):
        raise HTTPException(
            status_code=400,
            detail=f"Only {', '.join(ext.lstrip('.').upper() for ext in allowed)} files are accepted",
        )

    content = await upload.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )
    return content


async def _enhance_and_check(resume_text: str, page_height_px: int) -> EnhanceResponse:
    resume = await resume_generator.enhance(resume_text)
    if resume is None:
        raise HTTPException(status_code=503, detail=resume_generator.GENERATION_FAILED_MESSAGE)

    # Nothing is rendered yet, so only content checks apply
    findings = ats_validator.validate(None, resume, page_height_px=page_height_px)
    return EnhanceResponse(resume=resume, report=build_report(findings))


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/ats/check", response_model=ATSReport)
@limiter.limit(settings.rate_limit)
async def ats_check(
    request: Request,
    body: ATSCheckRequest,
    page_height_px: int = Depends(get_page_height_px),
):
    findings = ats_validator.validate(body.snapshot, body.data, page_height_px=page_height_px)
    return build_report(findings)


@router.post("/ats/check/html", response_model=ATSReport)
@limiter.limit(settings.rate_limit)
async def ats_check_html(
    request: Request,
    body: ATSHtmlCheckRequest,
    page_height_px: int = Depends(get_page_height_px),
):
    snapshot = HtmlSnapshotProvider(body.html, body.rendered_height_px).snapshot()
    findings = ats_validator.validate(snapshot, body.data, page_height_px=page_height_px)
    return build_report(findings)


@router.post("/ats/check/pdf", response_model=ATSReport)
@limiter.limit(settings.rate_limit)
async def ats_check_pdf(
    request: Request,
    resume_file: UploadFile = File(...),
    data: str = Form(...),
    page_height_px: int = Depends(get_page_height_px),
):
    try:
        resume = ResumeData.model_validate_json(data)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )

    content = await _read_upload(resume_file, (".pdf",))

    try:
        snapshot = PdfSnapshotProvider(content).snapshot()
    except Exception:
        logger.exception("Could not inspect uploaded PDF")
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    findings = ats_validator.validate(snapshot, resume, page_height_px=page_height_px)
    return build_report(findings)


@router.post("/resume/enhance", response_model=EnhanceResponse)
@limiter.limit(settings.rate_limit)
async def enhance(
    request: Request,
    body: EnhanceRequest,
    page_height_px: int = Depends(get_page_height_px),
):
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is empty")
    return await _enhance_and_check(body.resume_text, page_height_px)


@router.post("/resume/enhance/upload", response_model=EnhanceResponse)
@limiter.limit(settings.rate_limit)
async def enhance_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    page_height_px: int = Depends(get_page_height_px),
):
    content = await _read_upload(resume_file, (".pdf", ".docx"))

    try:
        if resume_file.filename.lower().endswith(".pdf"):
            resume_text = pdf_parser.extract_text(content)
        else:
            resume_text = pdf_parser.extract_text_docx(content)
    except Exception:
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from file")

    return await _enhance_and_check(resume_text, page_height_px)
