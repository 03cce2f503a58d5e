"""Per-job sub-scores used by the ranking engine.

All functions are pure: the caller passes the reference time, so results
are reproducible in tests.
"""

import math
from datetime import datetime, timezone

from models.schemas.candidate_profile import MatchCriteria
from models.schemas.job_listing import JobListing
from models.schemas.job_match import CompatibilityFactors
from services.skill_taxonomy import normalize_skill

# Hybrid fusion weights
SEMANTIC_WEIGHT = 0.45
RECENCY_WEIGHT = 0.25
LIVENESS_WEIGHT = 0.20
PERSONALIZATION_WEIGHT = 0.10

PLATFORM_SOURCES = frozenset({"platform", "internal"})
DIRECT_ATS_SOURCES = frozenset({
    "greenhouse", "lever", "workday", "ashby", "bamboohr", "smartrecruiters", "career_page",
})

DEFAULT_TRUST = 50
VERIFIED_TRUST_THRESHOLD = 85
RECENT_CHECK_BOOST = 0.1
STALE_MULTIPLIER = 0.3

# (days since posted upper bound, score); anything older scores 0.2
RECENCY_STEPS: list[tuple[float, float]] = [
    (1, 1.0),
    (3, 0.9),
    (7, 0.8),
    (14, 0.6),
    (30, 0.4),
]
MISSING_DATE_RECENCY = 0.5

# (days since last liveness check lower bound, multiplier), checked oldest first
CHECK_AGE_DECAY: list[tuple[float, float]] = [
    (14, 0.55),
    (7, 0.70),
    (3, 0.85),
]

EXPERIENCE_SCALE: dict[str, int] = {
    "entry": 1, "junior": 1,
    "mid": 2,
    "senior": 3,
    "lead": 4, "staff": 4,
    "principal": 5, "executive": 5,
}

EARTH_RADIUS_MILES = 3959
UNKNOWN_CITY_MILES = 50.0
CITY_COORDINATES: dict[str, tuple[float, float]] = {
    "san francisco": (37.7749, -122.4194),
    "new york": (40.7128, -74.0060),
    "seattle": (47.6062, -122.3321),
    "austin": (30.2672, -97.7431),
    "denver": (39.7392, -104.9903),
    "chicago": (41.8781, -87.6298),
    "boston": (42.3601, -71.0589),
    "los angeles": (34.0522, -118.2437),
}


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from storage are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _days_between(earlier: datetime, now: datetime) -> float:
    return (_as_utc(now) - _as_utc(earlier)).total_seconds() / 86400


def recency_score(job: JobListing, now: datetime) -> float:
    """Step function of days since the job was posted."""
    posted = job.posted_date or job.created_at
    if posted is None:
        return MISSING_DATE_RECENCY
    days = _days_between(posted, now)
    for bound, score in RECENCY_STEPS:
        if days < bound:
            return score
    return 0.2


def is_platform_job(job: JobListing) -> bool:
    return job.source.lower() in PLATFORM_SOURCES


def liveness_and_trust(job: JobListing, now: datetime) -> tuple[float, int, str]:
    """Return (liveness score, trust score, liveness status) for a job.

    First-party postings are always live and fully trusted. External ones
    start from their stored trust, get a small boost for a fresh "active"
    verification and decay with the age of the last check.
    """
    if is_platform_job(job):
        return 1.0, 100, job.liveness_status or "active"

    trust = job.trust_score if job.trust_score is not None else DEFAULT_TRUST
    status = job.liveness_status or "unknown"
    score = trust / 100

    if job.last_liveness_check is not None:
        check_age = _days_between(job.last_liveness_check, now)
        if status == "active" and check_age <= 1:
            score = min(1.0, score + RECENT_CHECK_BOOST)
        for min_days, multiplier in CHECK_AGE_DECAY:
            if check_age > min_days:
                score *= multiplier
                break

    if status == "stale":
        score *= STALE_MULTIPLIER

    return max(0.0, min(1.0, score)), trust, status


def _salary_midpoint(job: JobListing) -> float | None:
    if job.salary_min is None or job.salary_max is None:
        return None
    return (job.salary_min + job.salary_max) / 2


def salary_closeness(expectation: int | None, job: JobListing) -> float | None:
    """``max(0, 1 - |expectation - midpoint| / expectation)``, None if unknown."""
    midpoint = _salary_midpoint(job)
    if not expectation or midpoint is None:
        return None
    return max(0.0, 1 - abs(expectation - midpoint) / expectation)


def _same_text(a: str | None, b: str | None) -> bool:
    return bool(a and b and a.strip().lower() == b.strip().lower())


def personalization_score(criteria: MatchCriteria, job: JobListing) -> float:
    score = 0.5
    if _same_text(criteria.work_type, job.work_type):
        score += 0.2
    if _same_text(criteria.industry, job.industry):
        score += 0.2
    closeness = salary_closeness(criteria.salary_expectation, job)
    if closeness is not None:
        score += 0.1 * closeness
    return min(1.0, score)


def skill_alignment(candidate_skills: list[str], job_skills: list[str]) -> float:
    """Fraction of the job's declared skills the candidate has."""
    if not job_skills:
        return 0.0
    have = {normalize_skill(s).lower() for s in candidate_skills}
    matched = sum(1 for s in job_skills if normalize_skill(s).lower() in have)
    return matched / len(job_skills)


def experience_match(candidate_level: str | None, job_level: str | None) -> float:
    if not candidate_level or not job_level:
        return 0.0
    candidate_rank = EXPERIENCE_SCALE.get(candidate_level.strip().lower(), 2)
    job_rank = EXPERIENCE_SCALE.get(job_level.strip().lower(), 2)
    return max(0.0, 1 - 0.2 * abs(candidate_rank - job_rank))


def _city_key(location: str) -> str:
    return location.split(",")[0].strip().lower()


def location_distance_miles(loc_a: str, loc_b: str) -> float:
    """Haversine distance between two known cities, 50 miles otherwise."""
    city_a = CITY_COORDINATES.get(_city_key(loc_a))
    city_b = CITY_COORDINATES.get(_city_key(loc_b))
    if city_a is None or city_b is None:
        return UNKNOWN_CITY_MILES

    lat1, lng1 = map(math.radians, city_a)
    lat2, lng2 = map(math.radians, city_b)
    a = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lng2 - lng1) / 2) ** 2
    )
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def location_fit(criteria: MatchCriteria, job: JobListing) -> float:
    if not criteria.location or not job.location:
        return 1.0
    if "remote" in (criteria.work_type, job.work_type) or _city_key(job.location) == "remote":
        return 1.0
    return max(0.0, 1 - location_distance_miles(criteria.location, job.location) / 100)


def industry_relevance(candidate_industry: str | None, job_industry: str | None) -> float:
    if not candidate_industry or not job_industry:
        return 0.5
    return 1.0 if _same_text(candidate_industry, job_industry) else 0.3


def compatibility_factors(criteria: MatchCriteria, job: JobListing) -> CompatibilityFactors:
    closeness = salary_closeness(criteria.salary_expectation, job)
    return CompatibilityFactors(
        skill_alignment=skill_alignment(criteria.skills, job.skills),
        experience_match=experience_match(criteria.experience, job.experience_level),
        location_fit=location_fit(criteria, job),
        salary_match=1.0 if closeness is None else closeness,
        industry_relevance=industry_relevance(criteria.industry, job.industry),
    )


def fuse_scores(semantic: float, recency: float, liveness: float, personalization: float) -> float:
    fused = (
        SEMANTIC_WEIGHT * semantic
        + RECENCY_WEIGHT * recency
        + LIVENESS_WEIGHT * liveness
        + PERSONALIZATION_WEIGHT * personalization
    )
    # Guard against float drift past 1.0 when every input is 1.0
    return min(1.0, fused)


def is_verified_active(trust_score: int, liveness_status: str) -> bool:
    return trust_score >= VERIFIED_TRUST_THRESHOLD and liveness_status == "active"


def is_direct_from_company(job: JobListing) -> bool:
    return job.source.lower() in DIRECT_ATS_SOURCES
