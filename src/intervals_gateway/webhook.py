"""
Webhook routes for the Intervals.icu gateway.

POST /api/webhook creates, updates or deletes a calendar event from a JSON
payload (or a form field holding one). GET /api/webhook describes the
accepted payloads.

Actions:
- create (default): start_date_local, name, type, category, moving_time, workout_doc, ...
- update: action="update", event_id, plus the fields to change
- delete: action="delete", event_id
"""

import json
import logging
from typing import Any, Dict, List

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from intervals_gateway.access import WEBHOOK_HINT, WEBHOOK_SECRET_HEADER, require_access
from intervals_gateway.client_factory import get_client
from intervals_gateway.config import get_settings
from intervals_gateway.errors import ClientInputError, GatewayError
from intervals_gateway.payloads import (
    ATHLETE_ID_FIELDS,
    EVENT_FIELD_TYPES,
    EVENT_ID_FIELDS,
    MOVING_TIME_FIELDS,
    START_DATE_FIELDS,
    WebhookAction,
    WebhookRequest,
    build_event_payload,
    parse_webhook_request,
    strip_routing_fields,
)
from intervals_gateway.sdk.client import IntervalsClient
from intervals_gateway.sdk import events as sdk_events

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/api/webhook"

# Form fields that may carry the JSON payload, in lookup order
FORM_PAYLOAD_FIELDS = ("payload", "json", "body")


def _reject_constant(token: str):
    # json.loads accepts NaN and Infinity, which are not JSON
    raise ValueError(f"{token} is not a valid JSON value")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


async def read_webhook_body(request: Request) -> Dict[str, Any]:
    """
    Parse the request body into a JSON object.

    Raises:
        ClientInputError: If the body is missing, unparsable, or not an object
    """
    content_type = request.headers.get("content-type", "")

    if "application/x-www-form-urlencoded" in content_type:
        form = await request.form()
        raw_str = None
        for name in FORM_PAYLOAD_FIELDS:
            value = form.get(name)
            if value is not None:
                raw_str = value if isinstance(value, str) else None
                break
        if not raw_str:
            raise ClientInputError(
                "Missing form field: " + ", ".join(FORM_PAYLOAD_FIELDS) + " (JSON string)"
            )
        try:
            raw = _loads(raw_str)
        except ValueError:
            raise ClientInputError("Invalid JSON in payload field")
    else:
        body = await request.body()
        try:
            text = body.decode("utf-8")
            raw = _loads(text) if text.strip() else {}
        except ValueError:
            if "application/json" in content_type:
                raise ClientInputError("Invalid JSON body")
            raise ClientInputError("Expected JSON body or Content-Type: application/json")

    if not isinstance(raw, dict):
        raise ClientInputError("Body must be a JSON object")
    return raw


async def dispatch(client: IntervalsClient, webhook_request: WebhookRequest) -> Dict[str, Any]:
    """Run one normalized webhook action against Intervals.icu."""
    athlete_id = webhook_request.athlete_id

    if webhook_request.action is WebhookAction.DELETE:
        event_id = webhook_request.require_event_id()
        await sdk_events.delete_event(client, athlete_id, event_id)
        return {"ok": True, "action": "delete", "event_id": event_id}

    if webhook_request.action is WebhookAction.UPDATE:
        event_id = webhook_request.require_event_id()
        body = strip_routing_fields(webhook_request.fields)
        event = await sdk_events.update_event(client, athlete_id, event_id, body)
        return {"ok": True, "action": "update", "event": event}

    payload = build_event_payload(webhook_request.fields)
    event = await sdk_events.create_event(client, athlete_id, payload)
    return {"ok": True, "action": "create", "event": event}


def _prepare(webhook_request: WebhookRequest) -> None:
    """Validate everything that doesn't need the upstream, before a client exists."""
    if webhook_request.action is WebhookAction.CREATE:
        build_event_payload(webhook_request.fields)
    else:
        webhook_request.require_event_id()


async def handle_webhook(request: Request) -> JSONResponse:
    """POST /api/webhook"""
    try:
        settings = get_settings()
        require_access(
            request.headers,
            settings.effective_webhook_secret,
            WEBHOOK_SECRET_HEADER,
            hint=WEBHOOK_HINT,
        )

        raw = await read_webhook_body(request)
        webhook_request = parse_webhook_request(raw)
        _prepare(webhook_request)

        logger.info(
            f"Webhook {webhook_request.action.value} for athlete {webhook_request.athlete_id}"
            + (f", event {webhook_request.event_id}" if webhook_request.event_id else "")
        )
        result = await dispatch(get_client(), webhook_request)
        return JSONResponse(result)

    except GatewayError as e:
        if e.status_code >= 500:
            logger.error(f"Webhook failed: {e}")
        else:
            logger.warning(f"Webhook rejected ({e.status_code}): {e}")
        return JSONResponse(e.to_dict(), status_code=e.status_code)

    except Exception as e:
        logger.exception("Webhook failed with an unexpected error")
        return JSONResponse({"error": "Webhook failed", "detail": str(e)}, status_code=500)


def describe_webhook() -> Dict[str, Any]:
    """Static capability descriptor."""
    return {
        "ok": True,
        "webhook": "intervals-event",
        "actions": [a.value for a in WebhookAction],
        "fields": {
            "routing": {
                "action": ["action", "_action"],
                "event_id": list(EVENT_ID_FIELDS),
                "athlete_id": list(ATHLETE_ID_FIELDS),
            },
            "start_date_local": list(START_DATE_FIELDS),
            "moving_time": list(MOVING_TIME_FIELDS),
            "optional": sorted(EVENT_FIELD_TYPES) + ["workout_doc"],
        },
        "hint": (
            "POST JSON. create (default): start_date_local, name, type, category, "
            "moving_time, workout_doc, athlete_id. update: action=\"update\", event_id, "
            "plus fields to change. delete: action=\"delete\", event_id."
        ),
    }


async def webhook_info(request: Request) -> JSONResponse:
    """GET /api/webhook"""
    return JSONResponse(describe_webhook())


def routes() -> List[Route]:
    """Starlette routes for the webhook."""
    return [
        Route(WEBHOOK_PATH, handle_webhook, methods=["POST"]),
        Route(WEBHOOK_PATH, webhook_info, methods=["GET"]),
    ]


def register_routes(app):
    """Register the webhook routes with the MCP app."""
    for route in routes():
        app.custom_route(route.path, methods=list(route.methods - {"HEAD"}))(route.endpoint)
    return app
