"""
Intervals.icu calendar events SDK functions.
"""

from typing import Any, Dict, List, Optional

from intervals_gateway.errors import ClientInputError
from intervals_gateway.sdk.client import IntervalsClient
from intervals_gateway.sdk.types import BinaryFile, DownloadFormat


def _events_path(athlete_id: str) -> str:
    return f"/athlete/{athlete_id}/events"


async def list_events(
    client: IntervalsClient,
    athlete_id: str,
    oldest: str,
    newest: str,
    calendar_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Calendar events (planned workouts, races, notes) in a date range.

    GET /athlete/{id}/events?oldest=&newest=[&calendar_id=]
    """
    params = {"oldest": oldest, "newest": newest, "calendar_id": calendar_id or None}
    return await client.request("GET", _events_path(athlete_id), params=params)


async def get_event(client: IntervalsClient, athlete_id: str, event_id: str) -> Dict[str, Any]:
    """
    GET /athlete/{id}/events/{event_id}

    Returns:
        {id, start_date_local, category, type, name, paired_activity_id, ...}
    """
    return await client.request("GET", f"{_events_path(athlete_id)}/{event_id}")


async def create_event(
    client: IntervalsClient,
    athlete_id: str,
    payload: Dict[str, Any],
) -> Dict[str, Any]:
    """
    POST /athlete/{id}/events

    payload must already carry a start_date_local with a time part.
    """
    return await client.request("POST", _events_path(athlete_id), json_data=payload)


async def update_event(
    client: IntervalsClient,
    athlete_id: str,
    event_id: str,
    body: Dict[str, Any],
) -> Dict[str, Any]:
    """PUT /athlete/{id}/events/{event_id} (partial update)."""
    return await client.request("PUT", f"{_events_path(athlete_id)}/{event_id}", json_data=body)


async def delete_event(client: IntervalsClient, athlete_id: str, event_id: str) -> Any:
    """DELETE /athlete/{id}/events/{event_id}"""
    return await client.request("DELETE", f"{_events_path(athlete_id)}/{event_id}")


async def download_event(
    client: IntervalsClient,
    athlete_id: str,
    event_id: str,
    ext: str,
) -> BinaryFile:
    """
    Download a planned workout as a trainer file.

    GET /athlete/{id}/events/{event_id}/download.{ext}
    """
    try:
        file_format = DownloadFormat(ext.lower())
    except ValueError:
        allowed = ", ".join(f.value for f in DownloadFormat)
        raise ClientInputError(f"Unsupported download format {ext!r} (use one of: {allowed})")

    return await client.download(
        f"{_events_path(athlete_id)}/{event_id}/download.{file_format.value}"
    )
