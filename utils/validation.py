"""Request checks run before imagery is fetched.

These mirror the web backend's validators so callers can reject bad
forest/date/URL parameters before any bytes reach the pipeline.
"""

import re
from datetime import date, datetime
from typing import List, Optional
from urllib.parse import urlparse

from utils.constants import FOREST_BBOXES, SENTINEL2_LAUNCH_DATE

_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def parse_date(value: str) -> Optional[date]:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        return None


def is_valid_date(value: str, today: Optional[date] = None) -> bool:
    """YYYY-MM-DD, not in the future, not before the Sentinel-2 launch."""
    parsed = parse_date(value)
    if parsed is None:
        return False
    today = today or date.today()
    return SENTINEL2_LAUNCH_DATE <= parsed <= today


def is_valid_forest(name: str) -> bool:
    return isinstance(name, str) and name in FOREST_BBOXES


def get_valid_forests() -> List[str]:
    return list(FOREST_BBOXES)


def is_valid_url(value: str) -> bool:
    if not value or not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def validate_compare_request(
    before_url: Optional[str] = None,
    after_url: Optional[str] = None,
    forest: Optional[str] = None,
    before_date: Optional[str] = None,
    after_date: Optional[str] = None,
    today: Optional[date] = None
) -> List[str]:
    """Return validation error messages; an empty list means valid.

    A request names either both image URLs or a forest plus both dates.
    """
    errors = []
    has_urls = bool(before_url and after_url)
    has_forest_dates = bool(forest and before_date and after_date)

    if not has_urls and not has_forest_dates:
        errors.append("Either provide (before_url, after_url) OR (forest, before_date, after_date)")

    if has_urls:
        if not is_valid_url(before_url):
            errors.append("'before_url' must be a valid HTTP/HTTPS URL")
        if not is_valid_url(after_url):
            errors.append("'after_url' must be a valid HTTP/HTTPS URL")

    if has_forest_dates:
        if not is_valid_forest(forest):
            errors.append(f"'forest' must be one of: {', '.join(get_valid_forests())}")
        before_ok = is_valid_date(before_date, today)
        after_ok = is_valid_date(after_date, today)
        if not before_ok:
            errors.append(
                f"'before_date' must be in YYYY-MM-DD format, not in the future, "
                f"and not before {SENTINEL2_LAUNCH_DATE.isoformat()}"
            )
        if not after_ok:
            errors.append(
                f"'after_date' must be in YYYY-MM-DD format, not in the future, "
                f"and not before {SENTINEL2_LAUNCH_DATE.isoformat()}"
            )
        if before_ok and after_ok and parse_date(after_date) <= parse_date(before_date):
            errors.append("'after_date' must be after 'before_date'")

    return errors
