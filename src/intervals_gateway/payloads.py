"""
Webhook payload normalization.

Turns an arbitrary JSON object into a typed WebhookRequest before any
dispatch happens. Several fields accept more than one spelling; the aliases
are listed here and nowhere else.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from intervals_gateway.errors import ClientInputError
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import normalize_local_datetime


class WebhookAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# ── Field aliases ───────────────────────────────────────────────────────

ACTION_FIELDS = ("action", "_action")
EVENT_ID_FIELDS = ("event_id", "eventId")
ATHLETE_ID_FIELDS = ("athlete_id", "athleteId")
START_DATE_FIELDS = ("start_date_local", "startDate")
MOVING_TIME_FIELDS = ("moving_time", "movingTime", "duration")

# Stripped from an update body before it is forwarded
ROUTING_FIELDS = ACTION_FIELDS + EVENT_ID_FIELDS + ATHLETE_ID_FIELDS

# Optional create fields Intervals.icu accepts, with their coercion
_STRING = "string"
_NUMBER = "number"
_BOOLEAN = "boolean"

EVENT_FIELD_TYPES = {
    "name": _STRING,
    "description": _STRING,
    "type": _STRING,
    "category": _STRING,
    "indoor": _BOOLEAN,
    "calendar_id": _NUMBER,
    "distance": _NUMBER,
    "color": _STRING,
}


@dataclass(frozen=True)
class WebhookRequest:
    """One normalized webhook call."""
    action: WebhookAction
    athlete_id: str = DEFAULT_ATHLETE_ID
    event_id: Optional[str] = None
    fields: Dict[str, Any] = field(default_factory=dict)

    def require_event_id(self) -> str:
        if not self.event_id:
            raise ClientInputError(f'Missing event_id for action "{self.action.value}"')
        return self.event_id


def _first_present(raw: Dict[str, Any], names: tuple) -> Any:
    for name in names:
        if raw.get(name) is not None:
            return raw[name]
    return None


def parse_webhook_request(raw: Dict[str, Any]) -> WebhookRequest:
    """Classify a webhook body and pull out its routing fields.

    Raises:
        ClientInputError: If the body is not an object or the action is unknown
    """
    if not isinstance(raw, dict):
        raise ClientInputError("Body must be a JSON object")

    action_value = _first_present(raw, ACTION_FIELDS)
    action_name = str(action_value).strip().lower() if action_value is not None else "create"
    try:
        action = WebhookAction(action_name)
    except ValueError:
        raise ClientInputError(
            f"Unknown action {action_value!r} (use create, update or delete)"
        )

    athlete_id = _first_present(raw, ATHLETE_ID_FIELDS)
    event_id = _first_present(raw, EVENT_ID_FIELDS)

    return WebhookRequest(
        action=action,
        athlete_id=str(athlete_id) if athlete_id not in (None, "") else DEFAULT_ATHLETE_ID,
        event_id=str(event_id) if event_id not in (None, "") else None,
        fields=dict(raw),
    )


def strip_routing_fields(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Update body: everything except the routing fields, possibly {}."""
    return {k: v for k, v in raw.items() if k not in ROUTING_FIELDS}


def build_event_payload(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Create body: only the fields Intervals.icu accepts, coerced.

    Raises:
        ClientInputError: On a missing/invalid start date, an uncoercible
            value, or a workout_doc that is not a plain object
    """
    payload = {"start_date_local": normalize_local_datetime(_first_present(raw, START_DATE_FIELDS))}

    for name, kind in EVENT_FIELD_TYPES.items():
        if raw.get(name) is not None:
            payload[name] = _coerce(name, raw[name], kind)

    moving_time = _first_present(raw, MOVING_TIME_FIELDS)
    if moving_time is not None:
        payload["moving_time"] = _coerce("moving_time", moving_time, _NUMBER)

    workout_doc = raw.get("workout_doc")
    if workout_doc is not None:
        if not isinstance(workout_doc, dict):
            raise ClientInputError("workout_doc must be a JSON object")
        payload["workout_doc"] = workout_doc

    return payload


def _coerce(name: str, value: Any, kind: str) -> Any:
    if kind == _STRING:
        return value if isinstance(value, str) else str(value)
    if kind == _BOOLEAN:
        return _to_bool(name, value)
    return _to_number(name, value)


def _to_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no", ""):
            return False
    raise ClientInputError(f"{name} must be a boolean, got {value!r}")


def _to_number(name: str, value: Any) -> Any:
    if isinstance(value, bool):
        raise ClientInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise ClientInputError(f"{name} must be a finite number, got {value!r}")
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            number = None
        if number is not None and math.isfinite(number):
            return number
    raise ClientInputError(f"{name} must be a number, got {value!r}")
