"""Collaborator interfaces the ranking engine reads jobs and profiles through."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from models.schemas.candidate_profile import CandidateProfile, MatchCriteria
from models.schemas.job_listing import JobListing

logger = logging.getLogger(__name__)


class JobStore(ABC):
    """Storage collaborator: candidate profiles and first-party postings."""

    @abstractmethod
    async def get_candidate_profile(self, candidate_id: str) -> CandidateProfile | None:
        """Return the stored profile, or None for an unknown candidate."""

    @abstractmethod
    async def get_job_postings(self, criteria: MatchCriteria) -> list[JobListing]:
        """Return postings worth ranking for ``criteria``."""

    @abstractmethod
    async def save_candidate_preferences(self, candidate_id: str, preferences: dict[str, Any]) -> None:
        """Persist updated match preferences for a candidate."""


class JobAggregator(ABC):
    """An external job source. Individual sources may fail or time out."""

    name: str = ""

    @abstractmethod
    async def fetch(self, criteria: MatchCriteria) -> list[JobListing]:
        """Fetch postings relevant to ``criteria``."""


class InMemoryJobStore(JobStore):
    """Dict-backed store for tests and the stateless HTTP surface."""

    def __init__(
        self,
        jobs: list[JobListing] | None = None,
        profiles: list[CandidateProfile] | None = None,
    ):
        self.jobs: list[JobListing] = list(jobs or [])
        self.profiles: dict[str, CandidateProfile] = {p.id: p for p in profiles or []}
        self.fetch_count = 0

    async def get_candidate_profile(self, candidate_id: str) -> CandidateProfile | None:
        return self.profiles.get(candidate_id)

    async def get_job_postings(self, criteria: MatchCriteria) -> list[JobListing]:
        self.fetch_count += 1
        return list(self.jobs)

    async def save_candidate_preferences(self, candidate_id: str, preferences: dict[str, Any]) -> None:
        profile = self.profiles.get(candidate_id)
        if profile is None:
            logger.warning("Preferences saved for unknown candidate %s", candidate_id)
            profile = CandidateProfile(id=candidate_id)
        known = {k: v for k, v in preferences.items() if k in CandidateProfile.model_fields and k != "id"}
        self.profiles[candidate_id] = CandidateProfile.model_validate({**profile.model_dump(), **known})
