from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_semantic_scorer
from config import settings
from models.requests import QuickSignalsRequest, RankMatchesRequest
from models.schemas.candidate_signals import CandidateSignals
from models.schemas.job_match import EnhancedJobMatch
from services.exceptions import RankingError
from services.job_sources import InMemoryJobStore
from services.ranking_engine import rank_jobs
from services.scoring.base import BaseSemanticScorer
from services.scoring.registry import resolve_scorer_name
from services.skill_intelligence import extract_candidate_signals

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "semantic_scorer": resolve_scorer_name(),
    }


@router.post("/signals/quick", response_model=CandidateSignals)
@limiter.limit("10/minute")
async def signals_quick(request: Request, body: QuickSignalsRequest):
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is empty")
    return extract_candidate_signals(body.resume_text)


@router.post("/matches/rank", response_model=list[EnhancedJobMatch])
@limiter.limit("10/minute")
async def rank_matches(
    request: Request,
    body: RankMatchesRequest,
    scorer: BaseSemanticScorer = Depends(get_semantic_scorer),
):
    store = InMemoryJobStore(jobs=body.jobs)
    try:
        return await rank_jobs(body.criteria, store, scorer, limit=body.limit)
    except RankingError as e:
        raise HTTPException(status_code=503, detail=str(e))
