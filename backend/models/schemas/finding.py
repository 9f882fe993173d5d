"""ATS validator output: a single compatibility finding."""

from enum import Enum

from pydantic import BaseModel


class Severity(str, Enum):
    """Closed set of finding severities, most severe first."""
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"

    @property
    def rank(self) -> int:
        """Display rank: 0 for error, 1 for warning, 2 for suggestion."""
        return _RANK[self]


_RANK = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.SUGGESTION: 2}

SEVERITY_ORDER: tuple[Severity, ...] = tuple(sorted(Severity, key=lambda s: s.rank))


class Finding(BaseModel):
    """One reported compatibility issue.

    `message` is the primary (Arabic) text shown in the UI; `message_alt`
    carries the same message in English.
    """
    severity: Severity
    message: str
    message_alt: str
