"""Server status utilities.

Provides the startup timestamp helpers and `get_status`, which builds the
payload returned by the liveness endpoint.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, Field

STATUS_OK = "ok"
STATUS_MESSAGE = "Gophish debug container is running"


class StatusPayload(BaseModel):
    status: str
    message: str
    started_at: str = Field(alias="startedAt")


def capture_startup_time() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Format `dt` as ISO 8601 UTC with millisecond precision and a `Z` suffix.

    Naive datetimes are assumed to already be in UTC. Sub-millisecond
    digits are truncated, e.g. `2026-10-19T08:15:30.123Z`.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def get_status(started_at: datetime) -> dict:
    """Return a dict representing server status.

    Fields:
    - status: always 'ok'
    - message: fixed service identification string
    - startedAt: ISO 8601 UTC timestamp when the process started
    """
    return {
        "status": STATUS_OK,
        "message": STATUS_MESSAGE,
        "startedAt": format_timestamp(started_at),
    }
