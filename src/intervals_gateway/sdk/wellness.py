"""
Intervals.icu wellness SDK functions.
"""

from typing import Any, Dict, List

from intervals_gateway.sdk.client import IntervalsClient


async def list_wellness(
    client: IntervalsClient,
    athlete_id: str,
    oldest: str,
    newest: str,
) -> List[Dict[str, Any]]:
    """
    Wellness records for a date range.

    GET /athlete/{id}/wellness?oldest=&newest=

    Returns:
        [{id (date), ctl, atl, restingHR, hrv, sleepSecs, weight, ...}]
    """
    return await client.request(
        "GET",
        f"/athlete/{athlete_id}/wellness",
        params={"oldest": oldest, "newest": newest},
    )


async def get_wellness(client: IntervalsClient, athlete_id: str, date: str) -> Dict[str, Any]:
    """GET /athlete/{id}/wellness/{date}"""
    return await client.request("GET", f"/athlete/{athlete_id}/wellness/{date}")


async def update_wellness(
    client: IntervalsClient,
    athlete_id: str,
    date: str,
    body: Dict[str, Any],
) -> Dict[str, Any]:
    """
    PUT /athlete/{id}/wellness/{date}

    The record id is the date itself, so it is merged into the body.
    """
    payload = {"id": date, **body}
    return await client.request("PUT", f"/athlete/{athlete_id}/wellness/{date}", json_data=payload)
