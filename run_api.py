"""
Start the Media Transcript Assistant API with uvicorn.
"""

import os
import argparse
import uvicorn

from transcript_assistant.config import config
from transcript_assistant.utils.logger import logging


UVICORN_LOG_LEVELS = ["critical", "error", "warning", "info", "debug", "trace"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{config.APP_NAME} API")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"),
                        help="Interface to listen on (env HOST)")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")),
                        help="Port to listen on (env PORT)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--log-level", choices=UVICORN_LOG_LEVELS, default=config.LOG_LEVEL.lower(),
                        help="uvicorn log level (defaults to LOG_LEVEL)")
    return parser


def main(argv=None):
    """Run the FastAPI server."""
    args = build_parser().parse_args(argv)

    # Temp directory must exist before the first upload
    config.initialize()

    logging.info(f"{config.APP_NAME} v{config.APP_VERSION} listening on {args.host}:{args.port} "
                 f"(environment: {os.getenv('ENVIRONMENT', 'development')})")

    uvicorn.run(
        "transcript_assistant.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
