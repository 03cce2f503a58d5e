from datetime import datetime, timedelta, timezone

import pytest

from models.schemas.candidate_profile import MatchCriteria
from models.schemas.job_listing import JobListing
from services.job_scoring import (
    compatibility_factors,
    experience_match,
    fuse_scores,
    is_direct_from_company,
    is_verified_active,
    liveness_and_trust,
    location_distance_miles,
    location_fit,
    personalization_score,
    recency_score,
    salary_closeness,
    skill_alignment,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _job(**overrides) -> JobListing:
    fields = {"id": "j1", "title": "Backend Engineer"}
    fields.update(overrides)
    return JobListing(**fields)


def _criteria(**overrides) -> MatchCriteria:
    fields = {"candidate_id": "c1"}
    fields.update(overrides)
    return MatchCriteria(**fields)


def test_fuse_scores_weighting():
    assert fuse_scores(0.8, 1.0, 0.9, 0.7) == pytest.approx(0.86)


def test_fuse_scores_never_exceeds_one():
    assert fuse_scores(1.0, 1.0, 1.0, 1.0) <= 1.0


class TestRecency:
    @pytest.mark.parametrize("age,expected", [
        (timedelta(hours=12), 1.0),
        (timedelta(days=2), 0.9),
        (timedelta(days=5), 0.8),
        (timedelta(days=10), 0.6),
        (timedelta(days=20), 0.4),
        (timedelta(days=60), 0.2),
    ])
    def test_steps(self, age, expected):
        assert recency_score(_job(posted_date=NOW - age), NOW) == expected

    def test_missing_date_is_neutral(self):
        assert recency_score(_job(), NOW) == 0.5

    def test_falls_back_to_created_at(self):
        assert recency_score(_job(created_at=NOW - timedelta(days=2)), NOW) == 0.9

    def test_naive_timestamps_are_utc(self):
        posted = (NOW - timedelta(hours=6)).replace(tzinfo=None)
        assert recency_score(_job(posted_date=posted), NOW) == 1.0


class TestLivenessAndTrust:
    def test_platform_job_is_fully_trusted(self):
        assert liveness_and_trust(_job(source="platform"), NOW) == (1.0, 100, "active")

    def test_platform_job_ignores_stored_trust(self):
        score, trust, _ = liveness_and_trust(_job(source="internal", trust_score=10), NOW)
        assert (score, trust) == (1.0, 100)

    def test_fresh_active_check_is_boosted(self):
        job = _job(
            source="greenhouse", trust_score=80, liveness_status="active",
            last_liveness_check=NOW - timedelta(hours=12),
        )
        score, trust, status = liveness_and_trust(job, NOW)
        assert score == pytest.approx(0.9)
        assert trust == 80
        assert status == "active"

    @pytest.mark.parametrize("days,expected", [
        (2, 0.8),
        (5, 0.8 * 0.85),
        (10, 0.8 * 0.70),
        (20, 0.8 * 0.55),
    ])
    def test_decays_with_check_age(self, days, expected):
        job = _job(
            source="indeed", trust_score=80, liveness_status="unknown",
            last_liveness_check=NOW - timedelta(days=days),
        )
        assert liveness_and_trust(job, NOW)[0] == pytest.approx(expected)

    def test_stale_is_penalised(self):
        job = _job(source="indeed", trust_score=80, liveness_status="stale")
        score, _, status = liveness_and_trust(job, NOW)
        assert score == pytest.approx(0.24)
        assert status == "stale"

    def test_missing_trust_defaults(self):
        score, trust, status = liveness_and_trust(_job(source="indeed"), NOW)
        assert (score, trust, status) == (0.5, 50, "unknown")


class TestPersonalization:
    def test_baseline(self):
        assert personalization_score(_criteria(), _job()) == 0.5

    def test_all_preferences_met(self):
        criteria = _criteria(work_type="remote", industry="Fintech", salary_expectation=100_000)
        job = _job(work_type="remote", industry="fintech", salary_min=90_000, salary_max=110_000)
        assert personalization_score(criteria, job) == pytest.approx(1.0)

    def test_salary_closeness(self):
        job = _job(salary_min=60_000, salary_max=80_000)
        assert salary_closeness(100_000, job) == pytest.approx(0.7)
        assert salary_closeness(None, job) is None
        assert salary_closeness(100_000, _job(salary_min=60_000)) is None

    def test_salary_closeness_floors_at_zero(self):
        assert salary_closeness(50_000, _job(salary_min=200_000, salary_max=300_000)) == 0.0


class TestCompatibility:
    def test_skill_alignment_uses_aliases(self):
        assert skill_alignment(["python", "js"], ["Python", "JavaScript", "Go", "Rust"]) == 0.5
        assert skill_alignment(["Python"], []) == 0.0

    def test_experience_match(self):
        assert experience_match("senior", "senior") == 1.0
        assert experience_match("senior", "entry") == pytest.approx(0.6)
        assert experience_match("Staff", "junior") == pytest.approx(0.4)
        assert experience_match(None, "mid") == 0.0

    def test_haversine_between_known_cities(self):
        assert location_distance_miles("San Francisco, CA", "New York, NY") == pytest.approx(2566, abs=15)
        assert location_distance_miles("Seattle", "seattle, wa") == pytest.approx(0.0)

    def test_unknown_city_uses_default_distance(self):
        assert location_distance_miles("Portland, OR", "Seattle, WA") == 50.0
        assert location_fit(_criteria(location="Portland"), _job(location="Seattle")) == 0.5

    def test_remote_and_missing_locations_fit(self):
        assert location_fit(_criteria(location="Austin"), _job(location="Boston", work_type="remote")) == 1.0
        assert location_fit(_criteria(location="Austin"), _job(location="Remote")) == 1.0
        assert location_fit(_criteria(), _job(location="Boston")) == 1.0

    def test_far_city_scores_zero(self):
        assert location_fit(_criteria(location="Boston"), _job(location="Los Angeles, CA")) == 0.0

    def test_factors_bundle(self):
        criteria = _criteria(
            skills=["Python"], experience="mid", location="Austin, TX",
            industry="Healthcare", salary_expectation=100_000,
        )
        job = _job(
            skills=["Python", "AWS"], experience_level="mid", location="Austin, TX",
            industry="Retail",
        )
        factors = compatibility_factors(criteria, job)
        assert factors.skill_alignment == 0.5
        assert factors.experience_match == 1.0
        assert factors.location_fit == 1.0
        assert factors.salary_match == 1.0
        assert factors.industry_relevance == 0.3


class TestBadges:
    def test_verified_active(self):
        assert is_verified_active(85, "active")
        assert not is_verified_active(84, "active")
        assert not is_verified_active(100, "stale")

    def test_direct_from_company(self):
        assert is_direct_from_company(_job(source="Greenhouse"))
        assert not is_direct_from_company(_job(source="indeed"))
        assert not is_direct_from_company(_job())
