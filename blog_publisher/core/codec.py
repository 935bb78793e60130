"""Mapping between post identities and their relative storage paths.

A post for 2024-05-10 lives at ``2024/05/10``; a second post on the same
day (sequence number 1) lives at ``2024/05/10_1``. Decoding a path
produced by ``encode_path`` always yields the original pair.
"""

import datetime
import re
from typing import Tuple

from blog_publisher.errors import MalformedPathError

_SEPARATORS = re.compile(r"[\\/]+")
_DIGITS = re.compile(r"[0-9]+")
_DAY = re.compile(r"([0-9]+)(?:_([0-9]+))?")


def encode_path(date: datetime.date, sequence_number: int = 0) -> str:
    """Build the ``YYYY/MM/DD[_N]`` relative path for a post.

    Args:
        date: Calendar date of the post
        sequence_number: Same-day disambiguator, 0 for none

    Returns:
        Relative path using forward slashes
    """
    day = f"{date.day:02d}"
    if sequence_number > 0:
        day += f"_{sequence_number}"
    return f"{date.year:04d}/{date.month:02d}/{day}"


def decode_path(relative_path: str) -> Tuple[datetime.date, int]:
    """Recover (date, sequence_number) from a relative post path.

    Both ``/`` and ``\\`` are accepted as separators. Only the first three
    components are read; anything deeper is ignored.

    Args:
        relative_path: Path such as ``2024/05/10`` or ``2024/05/10_1``

    Returns:
        Tuple of (date, sequence_number)

    Raises:
        MalformedPathError: If the path has fewer than three components,
            a field is not numeric, or the date is not a valid calendar day
    """
    parts = [p for p in _SEPARATORS.split(str(relative_path).strip()) if p]
    if len(parts) < 3:
        raise MalformedPathError(f"Expected YYYY/MM/DD[_N], got {relative_path!r}")

    year_part, month_part, day_part = parts[:3]
    day_match = _DAY.fullmatch(day_part)
    if not (_DIGITS.fullmatch(year_part) and _DIGITS.fullmatch(month_part) and day_match):
        raise MalformedPathError(f"Non-numeric component in {relative_path!r}")

    year, month, day = int(year_part), int(month_part), int(day_match.group(1))
    number = int(day_match.group(2) or 0)

    try:
        date = datetime.date(year, month, day)
    except ValueError as e:
        raise MalformedPathError(f"Invalid date in {relative_path!r}: {e}") from None

    return date, number
