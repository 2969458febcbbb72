#!/usr/bin/env python3
# content_api/cli/serve_cli.py - Command-line entry point for the API server
import argparse
import os

import uvicorn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Content Discovery API server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8080, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides LOG_LEVEL)",
    )
    parser.add_argument("--config", help="Path to config.yml (overrides CONTENT_API_CONFIG)")
    parser.add_argument(
        "--data-file", help="Resource JSON file (overrides CONTENT_API_DATA_FILE)"
    )
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    # Settings are read when the app module is imported, so pass them via env
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level
    if args.config:
        os.environ["CONTENT_API_CONFIG"] = args.config
    if args.data_file:
        os.environ["CONTENT_API_DATA_FILE"] = args.data_file

    uvicorn.run(
        "content_api.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=(args.log_level or os.getenv("LOG_LEVEL", "INFO")).lower(),
    )


if __name__ == "__main__":
    main()
