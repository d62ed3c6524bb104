"""
Shared-secret access gate.

With no secret configured every request is allowed (local/dev use). With a
secret configured the caller must send it either as
``Authorization: Bearer <secret>`` or in a dedicated header, compared
exactly: no trimming, no case folding.
"""

import hmac
import logging
from typing import Iterable, Mapping, Optional

from starlette.datastructures import Headers
from starlette.responses import JSONResponse

from intervals_gateway.errors import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
MCP_KEY_HEADER = "X-MCP-API-Key"
WEBHOOK_SECRET_HEADER = "X-Webhook-Secret"

MCP_HINT = (
    'Set MCP_API_KEY and send it as "Authorization: Bearer <key>" '
    'or "X-MCP-API-Key: <key>"'
)
WEBHOOK_HINT = (
    "Set WEBHOOK_SECRET or MCP_API_KEY and send it in "
    "Authorization: Bearer <secret> or X-Webhook-Secret"
)


def presented_secret(headers: Mapping[str, str], header_name: str) -> Optional[str]:
    """The secret a request carries, bearer token first."""
    auth = headers.get("authorization")
    if auth and auth.startswith(BEARER_PREFIX):
        return auth[len(BEARER_PREFIX):]
    return headers.get(header_name)


def is_authorized(headers: Mapping[str, str], secret: Optional[str], header_name: str) -> bool:
    """Check a request's headers against the configured secret."""
    if not secret:
        return True
    sent = presented_secret(headers, header_name)
    if sent is None:
        return False
    return hmac.compare_digest(sent.encode("utf-8"), secret.encode("utf-8"))


def require_access(
    headers: Mapping[str, str],
    secret: Optional[str],
    header_name: str,
    hint: Optional[str] = None,
) -> None:
    """
    Raise unless the request carries the configured secret.

    Raises:
        AuthenticationError: If a secret is configured and not presented exactly
    """
    if not is_authorized(headers, secret, header_name):
        raise AuthenticationError("Missing or invalid access key", hint=hint)


def _normalize_path(path: str) -> str:
    """/api/webhook/ and /api/webhook are the same route."""
    return path.rstrip("/") or "/"


class AccessGateMiddleware:
    """
    ASGI middleware guarding the MCP HTTP endpoint.

    Rejects with 401 before the request reaches the MCP handler. Paths in
    ``exempt_paths`` (the webhook, which checks its own secret) pass through.
    """

    def __init__(
        self,
        app,
        secret: Optional[str],
        header_name: str = MCP_KEY_HEADER,
        exempt_paths: Iterable[str] = (),
    ):
        self.app = app
        self.secret = secret
        self.header_name = header_name
        self.exempt_paths = tuple(_normalize_path(p) for p in exempt_paths)

    async def __call__(self, scope, receive, send):
        exempt = _normalize_path(scope.get("path", "")) in self.exempt_paths
        if scope["type"] != "http" or not self.secret or exempt:
            await self.app(scope, receive, send)
            return

        try:
            require_access(Headers(scope=scope), self.secret, self.header_name, hint=MCP_HINT)
        except AuthenticationError as e:
            logger.warning(f"Rejected unauthenticated request to {scope.get('path')}")
            response = JSONResponse(e.to_dict(), status_code=e.status_code)
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
