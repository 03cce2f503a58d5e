"""Trust-aware hybrid job ranking.

Fetches a job corpus from storage and external aggregators, scores every
job through a pluggable semantic scorer, drops weak matches and fuses
semantic relevance with recency, liveness/trust and personalization into
one ordering. Ranked lists are cached per candidate request.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any

from config import settings
from models.schemas.candidate_profile import CandidateProfile, MatchCriteria
from models.schemas.job_listing import JobListing
from models.schemas.job_match import EnhancedJobMatch, SemanticScore
from services.exceptions import RankingError
from services.job_scoring import (
    compatibility_factors,
    fuse_scores,
    is_direct_from_company,
    is_verified_active,
    liveness_and_trust,
    personalization_score,
    recency_score,
)
from services.job_sources import JobAggregator, JobStore
from services.match_cache import MatchCache, cache_key
from services.scoring.base import BaseSemanticScorer

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_candidate_text(criteria: MatchCriteria) -> str:
    """Plain-text candidate description handed to the semantic scorer."""
    lines = [
        f"Skills: {', '.join(criteria.skills)}",
        f"Experience level: {criteria.experience}",
    ]
    if criteria.industry:
        lines.append(f"Industry: {criteria.industry}")
    if criteria.work_type:
        lines.append(f"Preferred work type: {criteria.work_type}")
    if criteria.location:
        lines.append(f"Location: {criteria.location}")
    if criteria.salary_expectation:
        lines.append(f"Salary expectation: {criteria.salary_expectation}")
    if criteria.summary:
        lines.append(criteria.summary)
    return "\n".join(lines)


def build_job_text(job: JobListing) -> str:
    """Plain-text job description handed to the semantic scorer."""
    lines = [f"Title: {job.title}"]
    if job.company:
        lines.append(f"Company: {job.company}")
    if job.skills:
        lines.append(f"Skills: {', '.join(job.skills)}")
    if job.requirements:
        lines.append(f"Requirements: {'; '.join(job.requirements)}")
    if job.experience_level:
        lines.append(f"Experience level: {job.experience_level}")
    if job.industry:
        lines.append(f"Industry: {job.industry}")
    if job.work_type:
        lines.append(f"Work type: {job.work_type}")
    if job.location:
        lines.append(f"Location: {job.location}")
    if job.description:
        lines.append(job.description)
    return "\n".join(lines)


def _creation_sort_key(job: JobListing) -> tuple[bool, float]:
    created = job.created_at or job.posted_date
    if created is None:
        return True, 0.0
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return False, -created.timestamp()


class RankingEngine:
    """Ranks a job corpus for one candidate at a time.

    Collaborators (storage, aggregators, scorer, cache) are injected so the
    engine can run against in-memory stubs. Limits and timeouts default to
    the configured settings.
    """

    def __init__(
        self,
        store: JobStore,
        aggregators: Sequence[JobAggregator] = (),
        scorer: BaseSemanticScorer | None = None,
        cache: MatchCache | None = None,
        *,
        top_n: int | None = None,
        corpus_limit: int | None = None,
        quality_floor: float | None = None,
        concurrency: int | None = None,
        scorer_timeout: float | None = None,
        source_timeout: float | None = None,
        now: Callable[[], datetime] = _utcnow,
    ):
        if scorer is None:
            from services.scoring.registry import get_scorer
            scorer = get_scorer()

        self.store = store
        self.aggregators = list(aggregators)
        self.scorer = scorer
        self.cache = cache
        self.top_n = top_n if top_n is not None else settings.ranking_top_n
        self.corpus_limit = corpus_limit if corpus_limit is not None else settings.ranking_corpus_limit
        self.quality_floor = quality_floor if quality_floor is not None else settings.ranking_quality_floor
        self.concurrency = concurrency or settings.scorer_concurrency
        self.scorer_timeout = scorer_timeout or settings.scorer_timeout_seconds
        self.source_timeout = source_timeout or settings.source_timeout_seconds
        self._now = now

    async def rank(self, criteria: MatchCriteria, limit: int | None = None) -> list[EnhancedJobMatch]:
        """Return matches ordered by final score, at most ``limit`` of them.

        Raises RankingError only when no job source answered. Individual
        source and scorer failures are logged and skipped.
        """
        limit = self.top_n if limit is None else min(limit, self.top_n)
        key = cache_key(criteria)

        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.info("Match cache hit for candidate %s", criteria.candidate_id)
                return cached[:limit]

        corpus = await self._fetch_corpus(criteria)
        corpus = sorted(corpus, key=_creation_sort_key)[:self.corpus_limit]

        scored = await self._score_corpus(criteria, corpus)
        now = self._now()
        matches = [
            self._build_match(criteria, job, semantic, now)
            for job, semantic in scored
            if semantic.relevance >= self.quality_floor
        ]
        # list.sort is stable, so ties keep corpus order
        matches.sort(key=lambda m: m.final_score, reverse=True)
        matches = matches[:self.top_n]

        logger.info(
            "Ranked %d of %d jobs for candidate %s",
            len(matches), len(corpus), criteria.candidate_id,
        )
        if self.cache is not None:
            self.cache.set(key, matches)
        return matches[:limit]

    async def get_personalized_feed(self, candidate_id: str, limit: int = 20) -> list[EnhancedJobMatch]:
        """Rank jobs for a stored candidate. Unknown candidates get an empty feed."""
        profile = await self.store.get_candidate_profile(candidate_id)
        if profile is None:
            logger.warning("No profile for candidate %s, returning empty feed", candidate_id)
            return []
        return await self.rank(MatchCriteria.from_profile(profile), limit=limit)

    async def update_match_preferences(self, candidate_id: str, preferences: dict[str, Any]) -> None:
        """Persist new preferences and drop every cached list for the candidate."""
        await self.store.save_candidate_preferences(candidate_id, preferences)
        if self.cache is not None:
            self.cache.invalidate_candidate(candidate_id)

    async def _fetch_corpus(self, criteria: MatchCriteria) -> list[JobListing]:
        names = ["storage"] + [agg.name or type(agg).__name__ for agg in self.aggregators]
        calls = [self.store.get_job_postings(criteria)] + [agg.fetch(criteria) for agg in self.aggregators]

        results = await asyncio.gather(
            *(asyncio.wait_for(call, timeout=self.source_timeout) for call in calls),
            return_exceptions=True,
        )

        corpus: list[JobListing] = []
        failures = 0
        for name, result in zip(names, results):
            if isinstance(result, BaseException):
                failures += 1
                logger.warning("Job source %s failed: %r", name, result)
                continue
            if name == "storage":
                corpus.extend(result)
            else:
                corpus.extend(self._tag_source(name, result))

        if failures == len(calls):
            raise RankingError("All job sources failed; no corpus to rank")
        return corpus

    @staticmethod
    def _tag_source(name: str, jobs: list[JobListing]) -> list[JobListing]:
        # Aggregated postings without an explicit source are not platform jobs
        return [
            job if "source" in job.model_fields_set else job.model_copy(update={"source": name})
            for job in jobs
        ]

    async def _score_corpus(
        self, criteria: MatchCriteria, corpus: list[JobListing]
    ) -> list[tuple[JobListing, SemanticScore]]:
        candidate_text = build_candidate_text(criteria)
        semaphore = asyncio.Semaphore(self.concurrency)

        async def score_one(job: JobListing) -> SemanticScore:
            async with semaphore:
                return await asyncio.wait_for(
                    self.scorer.score(
                        candidate_text,
                        build_job_text(job),
                        candidate_skills=criteria.skills,
                        job_skills=job.skills,
                    ),
                    timeout=self.scorer_timeout,
                )

        results = await asyncio.gather(*(score_one(job) for job in corpus), return_exceptions=True)

        scored: list[tuple[JobListing, SemanticScore]] = []
        for job, result in zip(corpus, results):
            if isinstance(result, BaseException):
                logger.warning("Skipping job %s, scoring failed: %r", job.id, result)
                continue
            scored.append((job, result))
        return scored

    def _build_match(
        self, criteria: MatchCriteria, job: JobListing, semantic: SemanticScore, now: datetime
    ) -> EnhancedJobMatch:
        recency = recency_score(job, now)
        liveness, trust, status = liveness_and_trust(job, now)
        personalization = personalization_score(criteria, job)

        return EnhancedJobMatch(
            job_id=job.id,
            title=job.title,
            company=job.company,
            match_score=semantic.relevance,
            confidence_level=semantic.confidence,
            skill_matches=semantic.skill_matches,
            explanation=semantic.explanation,
            semantic_relevance=semantic.relevance,
            recency_score=recency,
            liveness_score=liveness,
            personalization_score=personalization,
            final_score=fuse_scores(semantic.relevance, recency, liveness, personalization),
            trust_score=trust,
            liveness_status=status,
            is_verified_active=is_verified_active(trust, status),
            is_direct_from_company=is_direct_from_company(job),
            compatibility_factors=compatibility_factors(criteria, job),
        )


async def rank_jobs(
    candidate_profile: CandidateProfile | MatchCriteria,
    job_corpus_provider: JobStore,
    semantic_scorer: BaseSemanticScorer,
    aggregators: Sequence[JobAggregator] = (),
    limit: int = 50,
) -> list[EnhancedJobMatch]:
    """Rank a corpus for one candidate without caching."""
    if isinstance(candidate_profile, CandidateProfile):
        criteria = MatchCriteria.from_profile(candidate_profile)
    else:
        criteria = candidate_profile
    engine = RankingEngine(job_corpus_provider, aggregators, semantic_scorer)
    return await engine.rank(criteria, limit=limit)
