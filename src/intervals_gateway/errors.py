"""
Error taxonomy for the Intervals.icu gateway.

Every failure a component can raise maps to one HTTP status and a
machine-readable ``{error, detail}`` body. The outermost handlers (webhook
route, MCP tool layer) are the only places these are converted.
"""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base class for all gateway failures."""

    status_code = 500
    error = "Gateway error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "detail": self.detail}


class ConfigurationError(GatewayError):
    """Required process configuration (the upstream API key) is missing."""

    error = "Configuration error"


class AuthenticationError(GatewayError):
    """Shared secret missing or wrong."""

    status_code = 401
    error = "Unauthorized"

    def __init__(self, detail: str, hint: Optional[str] = None):
        super().__init__(detail)
        self.hint = hint

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.hint:
            result["hint"] = self.hint
        return result


class ClientInputError(GatewayError):
    """Malformed body or missing/invalid field supplied by the caller."""

    status_code = 400
    error = "Invalid request"


class UpstreamError(GatewayError):
    """Intervals.icu answered with a non-2xx status."""

    error = "Intervals.icu API error"

    def __init__(self, status: int, body: str, path: Optional[str] = None):
        super().__init__(body)
        self.status = status
        self.body = body
        self.path = path

    @property
    def status_code(self) -> int:
        return 502 if self.status >= 500 else 400

    def __str__(self) -> str:
        return f"Intervals.icu API {self.status}: {self.body}"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "status": self.status, "detail": self.body}


class RateLimited(UpstreamError):
    """HTTP 429 from Intervals.icu. Retried by the client, never surfaced alone."""

    def __init__(self, body: str, path: Optional[str] = None):
        super().__init__(429, body, path)


class RetryExhausted(GatewayError):
    """Every attempt was rate limited."""

    error = "Upstream retries exhausted"

    def __init__(self, path: str, attempts: int):
        super().__init__(f"Failed after {attempts} attempts: {path}")
        self.path = path
        self.attempts = attempts


class UnexpectedResponseError(GatewayError):
    """A success response whose body is neither JSON nor CSV."""

    error = "Unexpected upstream response"
