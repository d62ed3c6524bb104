"""
High-Level API — aggregation pipelines over the SDK.

Every function takes an IntervalsClient and returns one composite dict.

Modules:
    fanout     — concurrent calls joined at one point, with a failure policy
    training   — training overview, planning context
    activities — activities with per-activity detail
    events     — event plus completed activity
"""

from intervals_gateway.api.fanout import FanOut, FailurePolicy

from intervals_gateway.api.training import get_training_overview, get_planning_context

from intervals_gateway.api.activities import get_activities_with_details, MAX_DETAIL_CALLS

from intervals_gateway.api.events import get_event_with_completed_activity

__all__ = [
    "FanOut", "FailurePolicy",
    "get_training_overview", "get_planning_context",
    "get_activities_with_details", "MAX_DETAIL_CALLS",
    "get_event_with_completed_activity",
]
