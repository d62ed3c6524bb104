"""
Entry point for running intervals_gateway as a module.

Usage:
    python -m intervals_gateway                    # Run with stdio transport
    python -m intervals_gateway --http             # Run with HTTP transport
    python -m intervals_gateway --http --port 9000 # Run HTTP on custom port
"""

import argparse
import logging

from intervals_gateway import create_app, load_settings_or_exit, run, MCP_PATH
from intervals_gateway.webhook import WEBHOOK_PATH


def main():
    parser = argparse.ArgumentParser(
        description="Intervals.icu MCP Gateway - tools and webhook for the Intervals.icu API"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8081,
        help="Port for HTTP transport (default: 8081)"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    settings = load_settings_or_exit()
    app = create_app()

    if args.http:
        print(f"Starting Intervals.icu gateway on http://{args.host}:{args.port}{MCP_PATH}")
        print(f"Webhook: http://{args.host}:{args.port}{WEBHOOK_PATH}")
        run(app, "http", args.host, args.port, settings)
    else:
        run(app, "stdio", args.host, args.port, settings)


if __name__ == "__main__":
    main()
