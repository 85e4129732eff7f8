"""Title lookup by identifier."""

import re
from typing import Iterable, Optional

from netflixanalyzer.core.exceptions import InvalidIdentifierFormat
from netflixanalyzer.models.title import Title
from netflixanalyzer.utils.logger import get_logger

logger = get_logger(__name__)

ID_PATTERN = re.compile(r"s[0-9]+")


def validate_identifier(identifier: str) -> str:
    """Check that an identifier is "s" followed by one or more digits.

    Surrounding whitespace is not tolerated.

    Args:
        identifier: Candidate identifier

    Returns:
        The identifier, unchanged

    Raises:
        InvalidIdentifierFormat: If the identifier has the wrong shape
    """
    if not isinstance(identifier, str) or not ID_PATTERN.fullmatch(identifier):
        raise InvalidIdentifierFormat(identifier)
    return identifier


def find_by_id(catalog: Iterable[Title], identifier: str) -> Optional[Title]:
    """Find the first title with the given identifier.

    Args:
        catalog: Catalog snapshot, searched in order
        identifier: Title identifier such as "s1"

    Returns:
        The first matching Title, or None if no title has that identifier

    Raises:
        InvalidIdentifierFormat: If the identifier has the wrong shape
    """
    validate_identifier(identifier)

    for item in catalog:
        if item.identifier == identifier:
            logger.debug("Title found", identifier=identifier, title=item.title)
            return item

    logger.info("Title not found", identifier=identifier)
    return None
