#!/usr/bin/env python3

import uvicorn
from api.app import create_app
from logger import get_logger

logger = get_logger()


def cmd_serve(args, services):
    """Run the accounts endpoint under uvicorn."""
    config = services.config
    host = args.host or config.host
    port = args.port or config.port

    app = create_app(services)
    logger.info(f"Serving {config.api_prefix} on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=config.log_level.lower())


def setup_parser(subparsers):
    """Setup serve command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP endpoint",
        description="Serve GET/POST for the account list",
    )
    parser.add_argument("--host", help="Interface to bind (default from config)")
    parser.add_argument("--port", type=int, help="Port to bind (default from config)")
    parser.set_defaults(func=cmd_serve)
