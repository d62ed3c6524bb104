"""
Intervals.icu activities SDK functions.
"""

from typing import Any, Dict, List

from intervals_gateway.sdk.client import IntervalsClient


async def export_activities_csv(client: IntervalsClient, athlete_id: str) -> str:
    """
    All activities as CSV.

    GET /athlete/{id}/activities.csv
    """
    return await client.request("GET", f"/athlete/{athlete_id}/activities.csv")


async def list_activities(
    client: IntervalsClient,
    athlete_id: str,
    oldest: str,
    newest: str,
) -> List[Dict[str, Any]]:
    """
    Activity summaries for a date range.

    GET /athlete/{id}/activities?oldest=&newest=

    Returns:
        [{id, start_date_local, type, name, moving_time, distance, ...}]
    """
    return await client.request(
        "GET",
        f"/athlete/{athlete_id}/activities",
        params={"oldest": oldest, "newest": newest},
    )


async def get_activity(
    client: IntervalsClient,
    activity_id: str,
    include_intervals: bool = True,
) -> Dict[str, Any]:
    """
    Full activity detail.

    GET /activity/{id}?intervals=true
    """
    params = {"intervals": "true"} if include_intervals else {}
    return await client.request("GET", f"/activity/{activity_id}", params=params)


async def update_activity(
    client: IntervalsClient,
    activity_id: str,
    body: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Update activity fields.

    PUT /activity/{id}
    """
    return await client.request("PUT", f"/activity/{activity_id}", json_data=body)
