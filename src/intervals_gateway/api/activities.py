"""
Activities with details: summaries for a range, then full detail per activity.
"""

import logging
from typing import Optional

from intervals_gateway.api.fanout import FanOut
from intervals_gateway.api.training import filter_by_type
from intervals_gateway.sdk.client import IntervalsClient
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.sdk import activities as sdk_activities
from intervals_gateway.utils import parse_date_range

logger = logging.getLogger(__name__)

# Upper bound on detail calls per invocation, keeps one request inside the
# 60s request timeout. Activities past the cap are dropped, not paged.
MAX_DETAIL_CALLS = 20
DETAIL_CONCURRENCY = 4


async def get_activities_with_details(
    client: IntervalsClient,
    oldest: str,
    newest: str,
    activity_type: Optional[str] = None,
    athlete_id: str = DEFAULT_ATHLETE_ID,
) -> dict:
    """Activity detail (with intervals) for up to MAX_DETAIL_CALLS activities in a range."""
    parse_date_range(oldest, newest)

    summaries = await sdk_activities.list_activities(client, athlete_id, oldest, newest)
    summaries = [s for s in filter_by_type(summaries or [], activity_type) if s.get("id")]

    selected = summaries[:MAX_DETAIL_CALLS]
    if len(summaries) > MAX_DETAIL_CALLS:
        logger.info(
            f"{len(summaries)} activities between {oldest} and {newest}, "
            f"fetching details for the first {MAX_DETAIL_CALLS}"
        )

    details = await FanOut(limit=DETAIL_CONCURRENCY).gather([
        lambda activity_id=s["id"]: sdk_activities.get_activity(client, activity_id, include_intervals=True)
        for s in selected
    ])

    return {
        "period": {"oldest": oldest, "newest": newest},
        "total_activities": len(summaries),
        "detailed_count": len(details),
        "truncated": len(summaries) > MAX_DETAIL_CALLS,
        "activities": details,
    }
