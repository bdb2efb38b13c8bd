from datetime import date, datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Calendar date used for daily tasks and upcoming meetups"""
    return utc_now().date()


def parse_timestamp(value) -> datetime:
    """Parse a Supabase timestamp (ISO string, 'Z' suffix allowed) into an aware datetime."""
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
