"""
MCP Gateway for the Intervals.icu Training Data API

Exposes calendars, activities, planned events, workouts, wellness and power
curves as MCP tools, plus a webhook endpoint that creates, updates and
deletes calendar events.

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: Streamable HTTP server with the webhook at /api/webhook
"""

import logging
import os
import sys

from fastmcp import FastMCP
from starlette.middleware import Middleware

from intervals_gateway import activities
from intervals_gateway import athlete
from intervals_gateway import events
from intervals_gateway import overview
from intervals_gateway import webhook
from intervals_gateway import wellness
from intervals_gateway import workouts
from intervals_gateway.access import AccessGateMiddleware, MCP_KEY_HEADER
from intervals_gateway.config import Settings, get_settings
from intervals_gateway.errors import ConfigurationError

logger = logging.getLogger(__name__)

MCP_PATH = "/api/mcp"


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools and routes registered."""
    app = FastMCP("Intervals.icu Gateway v1.0")

    app = athlete.register_tools(app)
    app = activities.register_tools(app)
    app = events.register_tools(app)
    app = workouts.register_tools(app)
    app = wellness.register_tools(app)
    app = overview.register_tools(app)

    # Webhook (served with the http transport only)
    app = webhook.register_routes(app)

    return app


def http_middleware(settings: Settings) -> list:
    """Access gate for the MCP endpoint; the webhook checks its own secret."""
    return [
        Middleware(
            AccessGateMiddleware,
            secret=settings.mcp_api_key,
            header_name=MCP_KEY_HEADER,
            exempt_paths=(webhook.WEBHOOK_PATH,),
        )
    ]


def load_settings_or_exit() -> Settings:
    """Resolve settings once at startup; a missing API key is fatal."""
    settings = get_settings()
    try:
        settings.credentials
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)
    if not settings.mcp_api_key:
        logger.warning("MCP_API_KEY not set, the MCP endpoint accepts unauthenticated requests")
    return settings


def run(app: FastMCP, transport: str, host: str, port: int, settings: Settings) -> None:
    if transport == "http":
        app.run(
            transport="http",
            host=host,
            port=port,
            path=MCP_PATH,
            middleware=http_middleware(settings),
            stateless_http=True,
        )
    else:
        app.run()


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    logging.basicConfig(level=logging.INFO)
    settings = load_settings_or_exit()
    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    host = os.environ.get("MCP_HOST", "0.0.0.0")
    port = int(os.environ.get("MCP_PORT", "8081"))
    run(app, transport, host, port, settings)


if __name__ == "__main__":
    main()
