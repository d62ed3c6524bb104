"""
Event plus completed activity: a planned event joined with the activity
that fulfilled it.
"""

from intervals_gateway.sdk.client import IntervalsClient
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.sdk import activities as sdk_activities
from intervals_gateway.sdk import events as sdk_events


LINKED_ACTIVITY_FIELD = "paired_activity_id"


async def get_event_with_completed_activity(
    client: IntervalsClient,
    event_id: str,
    athlete_id: str = DEFAULT_ATHLETE_ID,
) -> dict:
    """Fetch an event and, when it is paired, its activity detail with intervals.

    An unpaired event is not an error: completed_activity is None and
    has_completed_activity is False, and no second call is made.
    """
    event = await sdk_events.get_event(client, athlete_id, event_id)

    activity_id = event.get(LINKED_ACTIVITY_FIELD) if isinstance(event, dict) else None
    if not activity_id:
        return {
            "event": event,
            "completed_activity": None,
            "has_completed_activity": False,
        }

    activity = await sdk_activities.get_activity(client, str(activity_id), include_intervals=True)
    return {
        "event": event,
        "completed_activity": activity,
        "has_completed_activity": True,
    }
