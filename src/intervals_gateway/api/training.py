"""
Training overview and planning context.

Both compose independent reads for the same athlete and date window into
one document. The caller correlates entries by date itself.
"""

from datetime import datetime
from typing import Optional

from intervals_gateway.api.fanout import FanOut
from intervals_gateway.errors import ClientInputError
from intervals_gateway.sdk.client import IntervalsClient
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.sdk import activities as sdk_activities
from intervals_gateway.sdk import events as sdk_events
from intervals_gateway.sdk import wellness as sdk_wellness
from intervals_gateway.sdk import workouts as sdk_workouts
from intervals_gateway.utils import parse_date, parse_date_range, shift_date


DEFAULT_SPAN_DAYS = 14
DEFAULT_WELLNESS_DAYS_BACK = 7

_FANOUT = FanOut(limit=3)


def filter_by_type(activities: list, activity_type: Optional[str]) -> list:
    """Keep activities whose type matches (case-insensitive). No type keeps all."""
    if not activity_type:
        return activities
    wanted = activity_type.lower()
    return [a for a in activities if str(a.get("type") or "").lower() == wanted]


async def get_training_overview(
    client: IntervalsClient,
    oldest: str,
    newest: str,
    activity_type: Optional[str] = None,
    athlete_id: str = DEFAULT_ATHLETE_ID,
) -> dict:
    """Wellness, completed activities and planned events for one date range.

    The three reads run concurrently; if any fails the whole overview fails.
    """
    parse_date_range(oldest, newest)

    results = await _FANOUT.join({
        "wellness": lambda: sdk_wellness.list_wellness(client, athlete_id, oldest, newest),
        "completed_activities": lambda: sdk_activities.list_activities(client, athlete_id, oldest, newest),
        "planned_events": lambda: sdk_events.list_events(client, athlete_id, oldest, newest),
    })

    return {
        "period": {"oldest": oldest, "newest": newest},
        "wellness": results["wellness"],
        "completed_activities": filter_by_type(results["completed_activities"] or [], activity_type),
        "planned_events": results["planned_events"],
    }


async def get_planning_context(
    client: IntervalsClient,
    from_date: Optional[str] = None,
    span_days: int = DEFAULT_SPAN_DAYS,
    wellness_days_back: int = DEFAULT_WELLNESS_DAYS_BACK,
    athlete_id: str = DEFAULT_ATHLETE_ID,
) -> dict:
    """Upcoming events, the workout library and recent wellness.

    Events cover from_date .. from_date + span_days, wellness covers
    from_date - wellness_days_back .. from_date.
    """
    if span_days < 0 or wellness_days_back < 0:
        raise ClientInputError("span_days and wellness_days_back must not be negative")

    start = parse_date(from_date, "from_date") if from_date else datetime.now().date()
    start_str = start.isoformat()
    until = shift_date(start, span_days)
    since = shift_date(start, -wellness_days_back)

    results = await _FANOUT.join({
        "planned_events": lambda: sdk_events.list_events(client, athlete_id, start_str, until),
        "workout_library": lambda: sdk_workouts.list_workouts(client, athlete_id),
        "recent_wellness": lambda: sdk_wellness.list_wellness(client, athlete_id, since, start_str),
    })

    return {
        "period": {"from_date": start_str, "to_date": until},
        "wellness_period": {"oldest": since, "newest": start_str},
        "planned_events": results["planned_events"],
        "workout_library": results["workout_library"],
        "recent_wellness": results["recent_wellness"],
    }
