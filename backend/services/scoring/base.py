"""Abstract base class for semantic match scorers."""

from abc import ABC, abstractmethod
import logging

from models.schemas.job_match import SemanticScore

logger = logging.getLogger(__name__)


class BaseSemanticScorer(ABC):
    """Scores how well a candidate description fits a job description.

    Subclasses must implement:
        - scorer_name: identifier used in the scorer registry
        - load(): prepare clients or resources
        - score(candidate_text, job_text, candidate_skills=, job_skills=):
          async, returns a SemanticScore

    The optional skill lists carry structured skills from the profile and
    the posting; scorers that work on text alone may ignore them.
    ``score`` may raise; the ranking engine treats a failure as a skipped
    job, never as a failed batch.
    """

    scorer_name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        """Prepare the scorer. Called once by the registry."""

    @abstractmethod
    async def score(
        self,
        candidate_text: str,
        job_text: str,
        *,
        candidate_skills: list[str] | None = None,
        job_skills: list[str] | None = None,
    ) -> SemanticScore:
        """Return relevance in [0, 1] with matched skills and an explanation."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load scorer if not already loaded."""
        if not self._loaded:
            logger.info("Loading scorer: %s", self.scorer_name)
            self.load()
            self._loaded = True
            logger.info("Scorer loaded: %s", self.scorer_name)
