import re
from datetime import date, datetime, timezone

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def sanitize_string(v: str) -> str:
    if not isinstance(v, str):
        return v
    # 1. Strip HTML tags
    v = re.sub(r'<[^>]*>', '', v)
    # 2. Trim whitespace
    return v.strip()


def coerce_timestamp(v):
    """Accept a bare YYYY-MM-DD as midnight of that day."""
    if isinstance(v, str) and _DATE_ONLY.match(v.strip()):
        return datetime.combine(date.fromisoformat(v.strip()), datetime.min.time())
    return v


def to_naive_utc(v):
    """Timestamps are stored as naive UTC; shift aware values before dropping the offset."""
    if isinstance(v, datetime) and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v
