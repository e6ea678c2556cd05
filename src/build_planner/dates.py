"""Snapshot date resolution.

A snapshot date pins a package repository to its historical state so that
images built from the same project are reproducible. The date comes from the
project's metadata when it declares one, and otherwise defaults to yesterday
so that the pinned snapshot is complete.
"""

import logging
import re
from datetime import UTC, date, datetime, timedelta
from typing import Callable, Optional, Union

from dateutil import parser as date_parser

from build_planner.errors import DateParseError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DATE_FORMAT = "%Y-%m-%d"

# Fills the parts a partial date leaves out, so "2018" is 2018-01-01
PARTIAL_DATE_DEFAULT = datetime(2000, 1, 1)

# Matches a DCF "Date:" field and captures its free-text value
DATE_FIELD_PATTERN = re.compile(r"^Date:[ \t]*(.+)$", re.MULTILINE)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def description_date(text: str) -> Optional[str]:
    """Extract the value of the ``Date:`` field from DESCRIPTION text.

    Args:
        text: Contents of a DESCRIPTION file.

    Returns:
        The raw date expression, or None if the field is absent or blank.
    """
    match = DATE_FIELD_PATTERN.search(text)
    if match is None:
        return None
    return match.group(1).strip() or None


def parse_date(text: str, source: str = "DESCRIPTION file") -> date:
    """Parse a free-text date expression into a calendar date.

    Timezone-aware expressions are converted to UTC before the date is taken.
    Missing month or day default to January and the 1st, never to today.

    Args:
        text: Date expression, e.g. "2018-10-05" or "5 October 2018".
        source: Where the text came from, used in the error message.

    Returns:
        The parsed calendar date.

    Raises:
        DateParseError: If the text is not a recognizable date.
    """
    try:
        parsed = date_parser.parse(text, default=PARTIAL_DATE_DEFAULT)
    except (ValueError, OverflowError) as e:
        raise DateParseError(text, source) from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date()


def resolve_date(
    value: Union[str, date, None],
    clock: Clock = utc_now,
    source: str = "DESCRIPTION file",
) -> str:
    """Resolve a snapshot date to a ``YYYY-MM-DD`` string.

    Args:
        value: An explicit date, a date expression, or None.
        clock: Source of the current time, used when no date is given.
        source: Where a textual value came from, used in error messages.

    Returns:
        The normalized date string.

    Raises:
        DateParseError: If ``value`` is text that cannot be parsed.
    """
    if value is None:
        yesterday = clock() - timedelta(hours=24)
        if yesterday.tzinfo is not None:
            yesterday = yesterday.astimezone(UTC)
        logger.debug(f"No snapshot date declared, defaulting to {yesterday.date()}")
        return yesterday.strftime(DATE_FORMAT)

    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)

    return parse_date(value, source).strftime(DATE_FORMAT)
