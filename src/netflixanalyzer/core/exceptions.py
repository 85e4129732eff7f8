"""Exceptions raised by catalog loading and lookup."""

from typing import Optional

from netflixanalyzer.models.diagnostic import LoadDiagnostic


class NetflixAnalyzerError(Exception):
    """Base class for Netflix Analyzer errors."""


class SourceUnavailable(NetflixAnalyzerError):
    """The catalog source could not be opened or read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Catalog source unavailable: {source} ({reason})")


class CatalogLoadError(NetflixAnalyzerError):
    """A malformed row aborted a strict load."""

    def __init__(self, diagnostic: LoadDiagnostic, source: Optional[str] = None):
        self.diagnostic = diagnostic
        self.source = source
        super().__init__(f"Catalog load aborted: {diagnostic}")


class InvalidIdentifierFormat(NetflixAnalyzerError, ValueError):
    """An identifier does not have the "s<digits>" shape."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Invalid title ID format: {identifier!r}. "
            "Expected format: 's' followed by a number, e.g., 's1'"
        )
