"""
Intervals.icu SDK types.

Request and response shapes shared by the HTTP client and the endpoint
functions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


# Athlete id meaning "the authenticated caller"
DEFAULT_ATHLETE_ID = "0"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class ResponseKind(str, Enum):
    JSON = "json"
    CSV = "csv"
    BINARY = "binary"
    EMPTY = "empty"


class DownloadFormat(str, Enum):
    """Planned workout export formats."""
    ZWO = "zwo"  # Zwift
    MRC = "mrc"
    ERG = "erg"


@dataclass(frozen=True)
class RequestSpec:
    """One upstream request. Built per call, never reused."""
    path: str
    method: HttpMethod = HttpMethod.GET
    query: Dict[str, Any] = field(default_factory=dict)
    body: Optional[str] = None

    def query_params(self) -> Dict[str, str]:
        """Query string values; None is dropped rather than sent as text."""
        return {
            key: _query_value(value)
            for key, value in self.query.items()
            if value is not None
        }


@dataclass(frozen=True)
class BinaryFile:
    """A downloaded file, base64 encoded."""
    encoded_bytes: str
    content_type: str

    def to_dict(self) -> Dict[str, str]:
        return {"base64": self.encoded_bytes, "contentType": self.content_type}


@dataclass(frozen=True)
class ResponseEnvelope:
    """Decoded upstream response, tagged by kind."""
    kind: ResponseKind
    payload: Any = None

    @property
    def data(self) -> Any:
        """Payload for callers that don't care about the tag. Empty is {}."""
        if self.kind is ResponseKind.EMPTY:
            return {}
        return self.payload


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
