"""Aggregate queries over a loaded catalog.

All functions are pure reads: they never mutate the catalog or its titles
and may be called concurrently on the same snapshot.
"""

import re
import sys
from collections import Counter
from datetime import date
from typing import Iterable, Optional, Sequence

from netflixanalyzer.models.title import Title
from netflixanalyzer.utils.logger import get_logger

logger = get_logger(__name__)

UNKNOWN_COUNTRY = "Unknown"

# Returned by release_addition_delta when the delta cannot be computed.
# Never a real day count; exclude it from any aggregate.
UNKNOWN_DELTA = sys.maxsize

# English month names, independent of the process locale
MONTHS = {
    name: number
    for number, name in enumerate(
        (
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        start=1,
    )
}

DATE_ADDED_PATTERN = re.compile(r"^([A-Za-z]+) (\d{1,2}), (\d{4})$")


def parse_date_added(text: str) -> Optional[date]:
    """Parse a "Month D, YYYY" date such as "January 1, 2020".

    Args:
        text: Date string (surrounding whitespace is ignored)

    Returns:
        Parsed date, or None if the text does not match the format or is
        not a valid calendar date
    """
    match = DATE_ADDED_PATTERN.match((text or "").strip())
    if not match:
        return None

    month = MONTHS.get(match.group(1))
    if month is None:
        return None

    try:
        return date(int(match.group(3)), month, int(match.group(2)))
    except ValueError:
        return None


def country_counts(catalog: Iterable[Title]) -> Counter:
    """Count titles per country, ignoring empty values and the "Unknown" placeholder.

    Keys are kept in first-encountered order.
    """
    counts: Counter = Counter()
    for item in catalog:
        country = item.country
        if country and country.strip() and country != UNKNOWN_COUNTRY:
            counts[country] += 1
    return counts


def most_common_country(catalog: Iterable[Title]) -> str:
    """Return the country with the most titles.

    Ties go to the country encountered first in catalog order.

    Args:
        catalog: Catalog snapshot

    Returns:
        Country name, or "Unknown" if no title has a usable country
    """
    counts = country_counts(catalog)
    if not counts:
        return UNKNOWN_COUNTRY

    # most_common() keeps first-encountered order among equal counts
    country, count = counts.most_common(1)[0]
    logger.debug("Most common country", country=country, count=count)
    return country


def titles_from_country(catalog: Iterable[Title], country: str) -> list[Title]:
    """Return titles whose country equals ``country``, in catalog order."""
    return [item for item in catalog if item.country == country]


def release_addition_delta(item: Title) -> int:
    """Days from January 1 of the release year to the date the title was added.

    The result is negative when the title was added before its release year.

    Args:
        item: Catalog title

    Returns:
        Day count, or UNKNOWN_DELTA if the release year is unset or the
        date added cannot be parsed
    """
    if item.release_year <= 0:
        logger.debug("Release year unknown", identifier=item.identifier)
        return UNKNOWN_DELTA

    added = parse_date_added(item.date_added)
    if added is None:
        logger.debug(
            "Unparseable date added",
            identifier=item.identifier,
            date_added=item.date_added,
        )
        return UNKNOWN_DELTA

    try:
        released = date(item.release_year, 1, 1)
    except ValueError:
        return UNKNOWN_DELTA

    return (added - released).days


def is_unknown_delta(delta: int) -> bool:
    """Whether a release_addition_delta result means "unknown"."""
    return delta == UNKNOWN_DELTA


def format_delta(delta: int) -> str:
    """Render a day delta, spelling out the unknown sentinel."""
    if is_unknown_delta(delta):
        return "unknown"
    return f"{delta} days"


def release_delta_summary(catalog: Iterable[Title]) -> list[str]:
    """One "<title>: <N> days" line per title, "<title>: unknown" for the sentinel."""
    return [f"{item.title}: {format_delta(release_addition_delta(item))}" for item in catalog]


def sort_by_date_added(catalog: Sequence[Title], ascending: bool = True) -> list[Title]:
    """Return the catalog ordered by date added.

    Titles with an unparseable date always come last, whatever the
    direction. Titles with equal dates keep their relative order, so
    sorting an already sorted list with the same flag changes nothing.

    Args:
        catalog: Catalog snapshot (not modified)
        ascending: Oldest first when True, newest first when False

    Returns:
        New list of the same Title objects
    """
    dated = []
    undated = []
    for item in catalog:
        added = parse_date_added(item.date_added)
        if added is None:
            undated.append(item)
        else:
            dated.append((added, item))

    # sorted() is stable for reverse=True as well
    dated.sort(key=lambda pair: pair[0], reverse=not ascending)

    logger.debug(
        "Sorted catalog by date added",
        ascending=ascending,
        dated=len(dated),
        undated=len(undated),
    )
    return [item for _, item in dated] + undated
