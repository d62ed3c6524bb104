"""
Intervals.icu athlete-level SDK functions: calendars and power curves.
"""

from typing import Any, Dict, List, Optional

from intervals_gateway.sdk.client import IntervalsClient


async def list_calendars(client: IntervalsClient, athlete_id: str) -> List[Dict[str, Any]]:
    """
    List the athlete's calendars.

    GET /athlete/{id}/calendars
    """
    return await client.request("GET", f"/athlete/{athlete_id}/calendars")


async def get_power_curves(
    client: IntervalsClient,
    athlete_id: str,
    curves: Optional[str] = None,
    sport_type: Optional[str] = None,
    newest: Optional[str] = None,
    include_ranks: Optional[bool] = None,
    sub_max_efforts: Optional[int] = None,
    filters: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get power curves.

    GET /athlete/{id}/power-curves

    Args:
        curves: Curve spec, e.g. "90d"
        sport_type: Activity type, e.g. "Ride"
        newest: Newest local date-time of activities to include
        include_ranks: Include ranks
        sub_max_efforts: Number of sub-max efforts
        filters: JSON filter array as a string
    """
    params = {
        "curves": curves,
        "type": sport_type,
        "newest": newest,
        "includeRanks": include_ranks,
        "subMaxEfforts": sub_max_efforts,
        "filters": filters,
    }
    return await client.request("GET", f"/athlete/{athlete_id}/power-curves", params=params)
