"""
Resume Router - Resume analysis and ATS resume building via Gemini
"""
import logging
import os
import tempfile
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from ..models import MAX_FILE_PATH_LENGTH, MAX_USER_ID_LENGTH
from ..schemas.resume import AnalyzeResumeRequest
from ..services.analysis_store import AnalysisStore, get_analysis_store
from ..services.blob_store import S3BlobStore, get_blob_store
from ..services.gemini import GeminiModel, get_model_client
from ..services.normalizer import KIND_ANALYSIS, KIND_BUILD, normalize
from ..services.prompts import MODE_ANALYZE, MODE_BUILD, build_prompt
from ..services.text_extractor import extract_text_from_file

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resume", tags=["Resume"])


# ============================================================================
# Helper Functions
# ============================================================================

def download_resume_text(
    blob_store: S3BlobStore,
    file_path: str,
    content_type: Optional[str] = None
) -> str:
    """
    Download a resume blob to a temp file and extract its text.
    The temp file is removed whether or not extraction succeeds.
    """
    # Keep the extension so .pdf detection still works
    fd, temp_path = tempfile.mkstemp(suffix=os.path.splitext(file_path)[1])
    os.close(fd)
    try:
        blob_store.download(file_path, temp_path)
        return extract_text_from_file(temp_path, content_type)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def validate_analyze_request(data: AnalyzeResumeRequest) -> None:
    """Reject requests missing required fields before any I/O happens."""
    if not data.userId:
        raise HTTPException(status_code=400, detail="userId is required")
    if len(data.userId) > MAX_USER_ID_LENGTH:
        raise HTTPException(status_code=400, detail=f"userId must be at most {MAX_USER_ID_LENGTH} characters")
    if data.filePath and len(data.filePath) > MAX_FILE_PATH_LENGTH:
        raise HTTPException(status_code=400, detail=f"filePath must be at most {MAX_FILE_PATH_LENGTH} characters")

    if data.type == "text":
        if not data.resumeText or not data.resumeText.strip():
            raise HTTPException(status_code=400, detail="resumeText is required for text type")
    elif not data.filePath:
        raise HTTPException(status_code=400, detail="filePath is required")


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/analyze")
async def analyze_resume(
    data: AnalyzeResumeRequest,
    model: GeminiModel = Depends(get_model_client),
    blob_store: S3BlobStore = Depends(get_blob_store),
    store: AnalysisStore = Depends(get_analysis_store)
):
    """
    Analyze a resume, or build one from free-form details when mode="build".

    Text comes from resumeText (type="text") or from the uploaded blob at
    filePath. Analyses are saved per user; built resumes are not.
    """
    validate_analyze_request(data)

    mode = MODE_BUILD if data.mode == MODE_BUILD else MODE_ANALYZE

    try:
        if data.type == "text":
            resume_text = data.resumeText
        else:
            resume_text = await run_in_threadpool(
                download_resume_text, blob_store, data.filePath, data.contentType
            )

        reply = await model.generate(build_prompt(mode, resume_text))

        if mode == MODE_BUILD:
            return normalize(reply, KIND_BUILD)

        analysis = normalize(reply, KIND_ANALYSIS)
        await store.save(data.userId, analysis, resume_file_path=data.filePath)
        logger.info(f"Saved analysis for user {data.userId} (score={analysis.get('overallScore')})")

        return {"analysis": analysis}
    except Exception:
        logger.exception(f"Error analyzing resume for user {data.userId}")
        raise HTTPException(status_code=500, detail="Failed to analyze resume")
