"""Domain errors raised by the ranking services."""


class ServiceError(Exception):
    """Base exception for service layer errors."""


class RankingError(ServiceError):
    """Raised when ranking cannot proceed at all, e.g. no job source answered."""


class ScoringError(ServiceError):
    """Raised by a semantic scorer when it cannot produce a usable score."""
