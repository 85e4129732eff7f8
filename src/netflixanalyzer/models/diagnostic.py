"""Catalog load result models."""

from dataclasses import dataclass, field
from typing import Literal

from netflixanalyzer.models.title import Title


@dataclass(frozen=True)
class LoadDiagnostic:
    """A problem found with a single source row."""

    kind: Literal["row_skipped", "field_parse_failure"]
    row_number: int  # 1-based, header excluded
    reason: str
    raw: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Human-readable representation."""
        label = "Skipped" if self.kind == "row_skipped" else "Parse failure"
        return f"{label} (row {self.row_number}): {self.reason}"


@dataclass
class LoadResult:
    """Outcome of loading a catalog source."""

    titles: list[Title] = field(default_factory=list)
    diagnostics: list[LoadDiagnostic] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        """Number of rows that did not make it into the catalog."""
        return sum(1 for d in self.diagnostics if d.kind == "row_skipped")

    @property
    def ok(self) -> bool:
        """True when every row loaded without a diagnostic."""
        return not self.diagnostics

    def __str__(self) -> str:
        """Human-readable representation."""
        text = f"Loaded {len(self.titles)} title(s)"
        if self.diagnostics:
            text += f", {self.skipped_count} row(s) skipped, {len(self.diagnostics)} diagnostic(s)"
        return text
