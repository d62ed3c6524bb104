"""
Intervals.icu HTTP Client.

Handles HTTP transport, Basic authentication, rate-limit retry and response
decoding. Endpoint-specific calls live in the sibling modules (activities,
events, workouts, ...).
"""

import asyncio
import base64
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from intervals_gateway.config import Credentials, DEFAULT_TIMEOUT_SECONDS
from intervals_gateway.errors import (
    RateLimited,
    RetryExhausted,
    UnexpectedResponseError,
    UpstreamError,
)
from intervals_gateway.sdk.types import (
    BinaryFile,
    HttpMethod,
    RequestSpec,
    ResponseEnvelope,
    ResponseKind,
)

logger = logging.getLogger(__name__)

# Intervals.icu Basic auth: fixed username, API key as password
API_KEY_USERNAME = "API_KEY"

MAX_ATTEMPTS = 3
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class IntervalsClient:
    """
    Intervals.icu HTTP transport.

    Opens a fresh httpx.AsyncClient per call; no connections or responses are
    kept between requests.
    """

    def __init__(
        self,
        credentials: Credentials,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._credentials = credentials
        self._timeout = timeout
        self._transport = transport
        self._sleep = sleep

    @property
    def base_url(self) -> str:
        return self._credentials.base_url

    def _auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(API_KEY_USERNAME, self._credentials.api_key)

    def _url(self, path: str) -> str:
        return f"{self._credentials.base_url}{path}"

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def execute(self, req: RequestSpec) -> ResponseEnvelope:
        """
        Send one request, retrying on HTTP 429.

        Args:
            req: The request to send

        Returns:
            Decoded response (json, csv or empty)

        Raises:
            UpstreamError: On any non-2xx status other than 429
            RetryExhausted: If all attempts were rate limited
            UnexpectedResponseError: If a success body is not JSON or CSV
        """
        headers = {"Content-Type": "application/json"}
        url = self._url(req.path)
        last_error = None

        async with self._http() as http:
            for attempt in range(MAX_ATTEMPTS):
                response = await http.request(
                    req.method.value,
                    url,
                    params=req.query_params(),
                    content=req.body,
                    headers=headers,
                    auth=self._auth(),
                )

                if response.status_code == 429:
                    last_error = RateLimited(response.text, req.path)
                    if attempt + 1 < MAX_ATTEMPTS:
                        delay = 2 ** attempt
                        logger.warning(
                            f"Rate limited on {req.method.value} {req.path}, "
                            f"retrying in {delay}s (attempt {attempt + 1}/{MAX_ATTEMPTS})"
                        )
                        await self._sleep(delay)
                    continue

                if not response.is_success:
                    logger.warning(
                        f"Intervals.icu {req.method.value} {req.path} failed with {response.status_code}"
                    )
                    raise UpstreamError(response.status_code, response.text, req.path)

                return self._decode(response, req.path)

        raise RetryExhausted(req.path, MAX_ATTEMPTS) from last_error

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> ResponseEnvelope:
        if response.status_code == 204:
            return ResponseEnvelope(ResponseKind.EMPTY)

        content_type = response.headers.get("content-type", "")
        if "text/csv" in content_type:
            return ResponseEnvelope(ResponseKind.CSV, response.text)

        try:
            return ResponseEnvelope(ResponseKind.JSON, response.json())
        except ValueError as e:
            raise UnexpectedResponseError(
                f"Expected JSON or CSV from {path}, got {content_type or 'no content type'}"
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an authenticated API request and return the decoded payload.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE/PATCH)
            path: API path below the base URL (e.g. "/athlete/0/events")
            params: Query parameters; None values are omitted
            json_data: Body, serialized as JSON when not None

        Returns:
            Parsed JSON, CSV text, or {} for 204
        """
        req = RequestSpec(
            path=path,
            method=HttpMethod(method.upper()),
            query=dict(params or {}),
            body=json.dumps(json_data) if json_data is not None else None,
        )
        envelope = await self.execute(req)
        return envelope.data

    async def download(self, path: str) -> BinaryFile:
        """
        Download a file (no 429 retry, unlike execute()).

        Args:
            path: API path of the file

        Returns:
            BinaryFile with base64 content and the upstream content type

        Raises:
            UpstreamError: On any non-2xx status, 429 included
        """
        async with self._http() as http:
            response = await http.get(self._url(path), auth=self._auth())

        if not response.is_success:
            logger.warning(f"Intervals.icu download {path} failed with {response.status_code}")
            raise UpstreamError(response.status_code, response.text, path)

        return BinaryFile(
            encoded_bytes=base64.b64encode(response.content).decode("ascii"),
            content_type=response.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
        )
