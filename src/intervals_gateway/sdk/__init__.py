"""
Intervals.icu Low-Level SDK.

Thin async wrapper over the Intervals.icu REST API.
Each function maps 1:1 to an upstream endpoint.
"""

from intervals_gateway.sdk.client import IntervalsClient, API_KEY_USERNAME, MAX_ATTEMPTS
from intervals_gateway.sdk.types import (
    BinaryFile,
    DownloadFormat,
    HttpMethod,
    RequestSpec,
    ResponseEnvelope,
    ResponseKind,
    DEFAULT_ATHLETE_ID,
)

__all__ = [
    "IntervalsClient",
    "API_KEY_USERNAME",
    "MAX_ATTEMPTS",
    "BinaryFile",
    "DownloadFormat",
    "HttpMethod",
    "RequestSpec",
    "ResponseEnvelope",
    "ResponseKind",
    "DEFAULT_ATHLETE_ID",
]
