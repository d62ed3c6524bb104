"""
Client factory for the Intervals.icu gateway.

The gateway holds no per-user session: one API key, resolved once per
process, authenticates every upstream call. Tools and routes ask for a
client here instead of reading the environment themselves.
"""

from intervals_gateway.config import Settings, get_settings
from intervals_gateway.sdk.client import IntervalsClient


def create_client(settings: Settings) -> IntervalsClient:
    """
    Build a client from explicit settings.

    Raises:
        ConfigurationError: If the settings carry no API key
    """
    return IntervalsClient(settings.credentials, timeout=settings.timeout)


def get_client() -> IntervalsClient:
    """
    Client for the process-wide settings.

    Usage in tools:
        @app.tool()
        async def fetch_calendars(athlete_id: str = "0") -> str:
            client = get_client()
            return to_json(await sdk_athlete.list_calendars(client, athlete_id))

    Raises:
        ConfigurationError: If INTERVALS_ICU_API_KEY is not set
    """
    return create_client(get_settings())
