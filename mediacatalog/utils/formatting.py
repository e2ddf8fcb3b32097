"""Display helpers for the interactive shell."""

from datetime import datetime


def format_date(iso: str) -> str:
    """Format an ISO-8601 timestamp as "Month Day, Year".

    Unparseable values are returned unchanged.
    """
    if not iso:
        return ""
    value = iso[:-1] + "+00:00" if iso.endswith("Z") else iso
    try:
        dt = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return iso
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def join_values(values: object) -> str:
    """Comma-join a list for display; anything else shows as empty."""
    if not isinstance(values, list):
        return ""
    return ", ".join(str(v) for v in values)
