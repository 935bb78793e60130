"""Free-form date parsing for new posts."""

import datetime
import logging
from typing import Optional

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def parse_post_date(text: str, today: Optional[datetime.date] = None) -> datetime.date:
    """Parse a date such as ``2024/05/10``, ``2024-05-10`` or ``05/10``.

    Fields missing from the input are taken from ``today``, so a
    month/day string lands in the current year.

    Raises:
        ValueError: If the text is blank or cannot be parsed
    """
    normalized = (text or "").strip()
    if not normalized:
        raise ValueError("Empty date string")

    today = today or datetime.date.today()
    default = datetime.datetime(today.year, today.month, today.day)
    try:
        return date_parser.parse(normalized, default=default).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date {text!r}: {e}") from None


def resolve_post_date(text: Optional[str], today: Optional[datetime.date] = None) -> datetime.date:
    """Parse ``text``, falling back to today when it is blank or invalid."""
    today = today or datetime.date.today()
    try:
        return parse_post_date(text or "", today=today)
    except ValueError as e:
        if text:
            logger.warning("%s; using today's date (%s)", e, today.isoformat())
        return today
