from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from commit_feed.schemas import UNPARSEABLE_TIMESTAMP


def _epoch(dt: datetime) -> int:
    # Feeds without an offset are read as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def parse_rfc822(value: str) -> int:
    """RSS pubDate, e.g. 'Tue, 01 Mar 2016 12:00:00 +0000'."""
    if not value or not value.strip():
        return UNPARSEABLE_TIMESTAMP
    try:
        return _epoch(parsedate_to_datetime(value.strip()))
    except (TypeError, ValueError, IndexError):
        return UNPARSEABLE_TIMESTAMP


def parse_iso8601(value: str) -> int:
    """Atom published, e.g. '2016-03-01T12:00:00Z'."""
    if not value or not value.strip():
        return UNPARSEABLE_TIMESTAMP
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _epoch(datetime.fromisoformat(text))
    except ValueError:
        return UNPARSEABLE_TIMESTAMP
