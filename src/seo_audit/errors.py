"""Exceptions raised by audit collaborators."""


class AuditError(Exception):
    """Base class for audit failures."""


class ProbeError(AuditError):
    """Performance measurement failed (browser launch, navigation timeout, bad output)."""


class FetchError(AuditError):
    """The page could not be retrieved for structural analysis."""


class GenerationError(AuditError):
    """Recommendation generation failed or no provider is configured."""
