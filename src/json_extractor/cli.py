"""Command-line interface for the JSON extractor.

This module provides the CLI entry point for extracting JSON objects from
text and for starting the HTTP server.

The CLI supports an 'extract' command that reads text from an argument, a
file or stdin and prints the extracted object, and a 'server' command that
runs the FastAPI application under uvicorn.
"""
import argparse
import json
import logging
import os
import sys
from pathlib import Path

from json_extractor.core.domain import FencedJsonError
from json_extractor.helpers.json import extract_json

logger = logging.getLogger("json_extractor.cli")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(level: str) -> None:
    """Send log records at or above level to stderr in the standard format.

    Args:
        level: Logging level name, e.g. "INFO" or "DEBUG".
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def read_input(text: str | None, path: str | None) -> str:
    """Pick the input text for the extract command.

    Args:
        text: Literal text given with --text, if any.
        path: File to read, if any. "-" or None means stdin.

    Returns:
        str: The input text.

    Raises:
        FileNotFoundError: If path names a missing file.
    """
    if text is not None:
        return text
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def default_port() -> int:
    """Return the server port from the PORT env var, defaulting to 3000."""
    return int(os.environ.get("PORT", "3000"))


def main() -> None:
    """Main entry point for the JSON extractor CLI.

    Commands:
        extract: Extract a JSON object with the following options:
            file: File to read text from (positional, optional;
                stdin when omitted or "-")
            --text: Literal text to extract from (overrides file)
            --indent: Indentation for the printed JSON (default: 2)
            --log-level: Logging level (default: WARNING)

        server: Start the FastAPI server with the following options:
            --host: Host address to bind (default: 127.0.0.1)
            --port: Port number to bind (default: PORT env var or 3000)
            --reload: Enable auto-reload on code changes
            --log-level: Logging level (default: INFO)

    Raises:
        SystemExit: Exit code 0 for success, 1 for errors (file not found,
            empty input, no JSON found, malformed fenced JSON).

    Examples:
        json-extractor extract response.txt
        echo 'Result: {"a": 1}' | json-extractor extract
        json-extractor extract --text '```json {"a": 1} ```'
        json-extractor server --host 0.0.0.0 --port 3000
    """
    parser = argparse.ArgumentParser(prog="json-extractor")
    subparsers = parser.add_subparsers(dest="command")

    extract_parser = subparsers.add_parser("extract")
    extract_parser.add_argument("file", nargs="?", default=None)
    extract_parser.add_argument("--text", default=None)
    extract_parser.add_argument("--indent", type=int, default=2)
    extract_parser.add_argument("--log-level", default="WARNING")

    server_parser = subparsers.add_parser("server")
    server_parser.add_argument("--host", default="127.0.0.1")
    server_parser.add_argument("--port", type=int, default=default_port())
    server_parser.add_argument("--reload", action="store_true")
    server_parser.add_argument("--log-level", default="INFO")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(args.log_level)
    logger.debug(f"CLI args parsed: command={args.command}")

    if args.command == "extract":
        try:
            text = read_input(args.text, args.file)
        except FileNotFoundError:
            logger.error(f"Input file not found: {args.file}")
            print(f"Error: input file not found: {args.file}", file=sys.stderr)
            sys.exit(1)

        if not text:
            print("Error: no input text provided", file=sys.stderr)
            sys.exit(1)

        try:
            result = extract_json(text)
        except FencedJsonError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if result is None:
            print("Error: no valid JSON found in the input text", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(result, indent=args.indent, ensure_ascii=False))

    elif args.command == "server":
        import uvicorn

        logger.info(f"JSON extractor service running on {args.host}:{args.port}")
        uvicorn.run(
            "json_extractor.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level.lower(),
        )


if __name__ == "__main__":
    main()
