"""Catalog loader for the Netflix titles CSV export."""

import csv
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from netflixanalyzer.config import CatalogConfig
from netflixanalyzer.core.exceptions import CatalogLoadError, SourceUnavailable
from netflixanalyzer.models.diagnostic import LoadDiagnostic, LoadResult
from netflixanalyzer.models.title import Kind, Title
from netflixanalyzer.utils.logger import get_logger

logger = get_logger(__name__)

CatalogSource = Union[str, Path, IO[str]]

# identifier, kind, title, director, cast, country, date_added,
# release_year, rating, duration, genres, description
REQUIRED_FIELDS = 12

MISSING_DURATION = "N/A"


class CatalogLoader:
    """Parse raw CSV rows into Title records."""

    def __init__(self, settings: Optional[CatalogConfig] = None):
        """Initialize the loader.

        Args:
            settings: Catalog configuration (defaults apply when None)
        """
        self.settings = settings or CatalogConfig()

    def load(self, source: CatalogSource) -> LoadResult:
        """Load a catalog from a file path or an open text stream.

        The first row is a header and is discarded. Rows with fewer than
        REQUIRED_FIELDS columns are skipped. Release year parse failures are
        handled by ``settings.on_parse_error``. In strict mode the first
        diagnostic aborts the load.

        Args:
            source: Path to the CSV file, or a text stream

        Returns:
            LoadResult with titles in input order and any diagnostics

        Raises:
            SourceUnavailable: If the source cannot be opened or read
            CatalogLoadError: If strict mode is on and a row is malformed
        """
        source_name = describe_source(source)
        logger.debug("Loading catalog", source=source_name)

        if isinstance(source, (str, Path)):
            try:
                with open(source, newline="", encoding=self.settings.encoding) as f:
                    result = self._read(f, source_name)
            except OSError as e:
                logger.error("Cannot open catalog source", source=source_name, error=str(e))
                raise SourceUnavailable(source_name, str(e)) from e
        else:
            result = self._read(source, source_name)

        logger.info(
            "Catalog loaded",
            source=source_name,
            titles=len(result.titles),
            skipped=result.skipped_count,
            diagnostics=len(result.diagnostics),
        )
        return result

    def parse_rows(self, rows: Iterable[list[str]], source_name: str = "<rows>") -> LoadResult:
        """Convert data rows (header already removed) into a LoadResult.

        Args:
            rows: Iterable of rows, each a list of string fields
            source_name: Source description used in logs and errors

        Returns:
            LoadResult with titles in input order and any diagnostics

        Raises:
            CatalogLoadError: If strict mode is on and a row is malformed
        """
        result = LoadResult()
        row_number = 0

        for row in rows:
            if not row:
                continue
            row_number += 1

            title = self._parse_row(row, row_number, result, source_name)
            if title is not None:
                result.titles.append(title)

        return result

    def _read(self, stream: IO[str], source_name: str) -> LoadResult:
        reader = csv.reader(stream)
        try:
            header = next(reader, None)
            if header is None:
                logger.warning("Catalog source is empty", source=source_name)
                return LoadResult()
            return self.parse_rows(reader, source_name)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error("Cannot read catalog source", source=source_name, error=str(e))
            raise SourceUnavailable(source_name, str(e)) from e

    def _parse_row(
        self,
        row: list[str],
        row_number: int,
        result: LoadResult,
        source_name: str,
    ) -> Optional[Title]:
        if len(row) < REQUIRED_FIELDS:
            self._report(
                result,
                LoadDiagnostic(
                    kind="row_skipped",
                    row_number=row_number,
                    reason=f"expected {REQUIRED_FIELDS} fields, got {len(row)}",
                    raw=tuple(row),
                ),
                source_name,
            )
            return None

        fields = [value.strip() for value in row[:REQUIRED_FIELDS]]
        (
            identifier,
            kind,
            title,
            director,
            cast,
            country,
            date_added,
            release_year_str,
            rating,
            duration,
            genres,
            description,
        ) = fields

        release_year = self._parse_year(release_year_str)
        if release_year is None:
            skip = self.settings.on_parse_error == "skip_row"
            self._report(
                result,
                LoadDiagnostic(
                    kind="row_skipped" if skip else "field_parse_failure",
                    row_number=row_number,
                    reason=f"invalid release year {release_year_str!r}",
                    raw=tuple(row),
                ),
                source_name,
            )
            if skip:
                return None
            release_year = 0

        return Title(
            identifier=identifier,
            kind=Kind.parse(kind),
            title=title,
            director=director,
            cast=cast,
            country=country,
            date_added=date_added,
            release_year=release_year,
            rating=rating,
            duration=duration or MISSING_DURATION,
            genres=genres,
            description=description,
        )

    @staticmethod
    def _parse_year(value: str) -> Optional[int]:
        """Parse a release year; empty means unknown (0), bad input is None."""
        if not value:
            return 0
        if not value.isascii() or not value.isdigit():
            return None
        return int(value)

    def _report(self, result: LoadResult, diagnostic: LoadDiagnostic, source_name: str) -> None:
        result.diagnostics.append(diagnostic)
        logger.warning(
            "Malformed catalog row",
            source=source_name,
            row=diagnostic.row_number,
            kind=diagnostic.kind,
            reason=diagnostic.reason,
        )
        if self.settings.strict:
            raise CatalogLoadError(diagnostic, source_name)


def describe_source(source: CatalogSource) -> str:
    """Short description of a source for logs and errors."""
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


def load_catalog(source: CatalogSource, settings: Optional[CatalogConfig] = None) -> LoadResult:
    """Load a catalog source with the given settings.

    Args:
        source: Path to the CSV file, or a text stream
        settings: Catalog configuration (defaults apply when None)

    Returns:
        LoadResult with titles and diagnostics
    """
    return CatalogLoader(settings).load(source)
