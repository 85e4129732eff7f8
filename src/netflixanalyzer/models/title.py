"""Catalog title data models."""

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """Kind of catalog entry. Values are display names."""

    MOVIE = "Movie"
    SERIES = "TV Show"

    @classmethod
    def parse(cls, raw: str) -> "Kind":
        """Parse a kind column value.

        Matching is case-insensitive and a single embedded space is joined
        with an underscore, so "TV Show", "tv show" and "TV_SHOW" all map to
        SERIES. Unrecognized values default to MOVIE.

        Args:
            raw: Raw column value

        Returns:
            Parsed Kind
        """
        token = (raw or "").strip().upper().replace(" ", "_", 1)
        if token in ("TV_SHOW", "SERIES"):
            return cls.SERIES
        return cls.MOVIE

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value


@dataclass(frozen=True)
class Title:
    """One catalog entry (a movie or a series)."""

    identifier: str  # "s" followed by digits
    kind: Kind
    title: str
    director: str
    cast: str
    country: str
    date_added: str  # "Month D, YYYY", may be unparseable
    release_year: int  # 0 = unknown
    rating: str
    duration: str  # "N/A" when missing
    genres: str
    description: str

    def __str__(self) -> str:
        """Human-readable representation."""
        year_part = f" ({self.release_year})" if self.release_year else ""
        return f"{self.identifier}: {self.title}{year_part} [{self.kind.display_name}]"
