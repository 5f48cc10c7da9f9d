import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from api.dependencies import get_vocabulary
from config import settings
from models.requests import ExtractTextRequest, RankCompaniesRequest, RankPeopleRequest
from models.responses import CompanyRankingResponse, PersonRankingResponse, ProfileResponse
from services import ranker, recommender
from services.errors import FormatDecodeError, UnsupportedFormat
from services.text_extractor import DocumentFormat, detect_format
from services.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/profiles/extract", response_model=ProfileResponse)
async def extract_profile(
    cv_file: UploadFile = File(...),
    vocab: Vocabulary = Depends(get_vocabulary),
):
    try:
        fmt = detect_format(cv_file.filename, cv_file.content_type)
    except UnsupportedFormat as exc:
        raise HTTPException(
            status_code=415,
            detail="Unsupported file type. Please upload a PDF, DOCX, or TXT file.",
        ) from exc

    # Read and validate size
    content = await cv_file.read()
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = await recommender.extract_document_text(content, fmt)
    except FormatDecodeError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc

    if not text.strip():
        raise HTTPException(status_code=422, detail="No text could be extracted from the document")

    profile = recommender.profile_from_text(text, vocab)
    return ProfileResponse(profile=profile, source_format=fmt.value, text_length=len(text))


@router.post("/profiles/extract/text", response_model=ProfileResponse)
async def extract_profile_text(
    body: ExtractTextRequest,
    vocab: Vocabulary = Depends(get_vocabulary),
):
    profile = recommender.profile_from_text(body.text, vocab)
    return ProfileResponse(
        profile=profile,
        source_format=DocumentFormat.TXT.value,
        text_length=len(body.text),
    )


@router.post("/rank/companies", response_model=CompanyRankingResponse)
async def rank_companies(
    body: RankCompaniesRequest,
    vocab: Vocabulary = Depends(get_vocabulary),
):
    results = ranker.rank_companies(body.candidates, body.profile, vocab)
    logger.info("Ranked %d companies", len(results))
    return CompanyRankingResponse(results=results)


@router.post("/rank/people", response_model=PersonRankingResponse)
async def rank_people(
    body: RankPeopleRequest,
    vocab: Vocabulary = Depends(get_vocabulary),
):
    results = ranker.rank_people(body.candidates, body.profile, vocab)
    logger.info("Ranked %d people", len(results))
    return PersonRankingResponse(results=results)
