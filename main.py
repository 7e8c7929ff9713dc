#!/usr/bin/env python3
"""
api-builder - command line front end

Builds a request from a named profile and/or explicit flags, executes it and
prints the decoded JSON response.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from api_builder import ApiBuilder, HttpMethod, HttpScheme, build_from_profile, list_profiles
from api_builder.config import Config, config
from api_builder.exceptions import (
    ApiRequestError,
    ConfigurationError,
    RequestFailedError,
    UriConstructionError,
)
from api_builder.logging_config import get_module_logger, setup_cli_logging

logger = get_module_logger("main")


def _print_error_box(title: str, details: str, suggestions: str | None = None) -> None:
    """
    Print a formatted error box with title, details, and optional suggestions.

    Args:
        title: Error title/header
        details: Error details/description
        suggestions: Optional suggestions for resolving the error
    """
    logger.error("=" * 80)
    logger.error(title)
    logger.error("=" * 80)
    logger.error("")
    logger.error(details)
    logger.error("")
    if suggestions:
        logger.error(suggestions)
        logger.error("")
    logger.error("=" * 80)


def handle_request_error(error: Exception) -> None:
    """
    Centralized error handling for request exceptions.

    Args:
        error: The exception to handle

    Exits the program with status code 1 after displaying the error.
    """
    if isinstance(error, RequestFailedError):
        details = f"Status Code: {error.status_code}\nError: {error!s}"
        if error.response_text:
            details += f"\nResponse: {error.response_text[:500]}"
        _print_error_box("REQUEST FAILED", details, error.get_user_guidance())

    elif isinstance(error, UriConstructionError):
        details = f"Error: {error!s}"
        suggestions = "Provide --profile, or both --scheme and --host."
        _print_error_box("URI CONSTRUCTION ERROR", details, suggestions)

    elif isinstance(error, ConfigurationError):
        details = f"Key: {error.config_key or 'unknown'}\nError: {error!s}"
        suggestions = "Check api_config.yaml or pass --config-dir."
        _print_error_box("CONFIGURATION ERROR", details, suggestions)

    elif isinstance(error, ApiRequestError):
        details = f"Error: {error!s}"
        suggestions = (
            "The request did not complete or the response was not JSON.\n"
            "Check network connectivity and the target URL (--print-url)."
        )
        _print_error_box("REQUEST ERROR", details, suggestions)

    else:
        # Re-raise if it's not one of our known exception types
        raise error

    sys.exit(1)


def parse_key_value(pairs: list[str] | None, separator: str) -> dict[str, str]:
    """
    Parse "key<sep>value" strings into a dictionary.

    Raises:
        ValueError: If a pair has no separator or an empty key
    """
    result: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition(separator)
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"expected 'key{separator}value', got '{pair}'")
        result[key] = value.strip()
    return result


def build_request(args: argparse.Namespace, config_obj: Config) -> ApiBuilder:
    """
    Create the builder described by the parsed arguments.

    Profile settings come first; explicit flags are applied on top. The port is
    set after the scheme so it survives the scheme's port reset.
    """
    if args.profile:
        api = build_from_profile(args.profile, config_obj=config_obj)
    else:
        api = ApiBuilder()

    if args.scheme:
        api.with_scheme(HttpScheme(args.scheme))
    if args.port:
        api.with_port(args.port)
    if args.host:
        api.with_host(args.host)

    api.with_method(HttpMethod(args.method))
    if args.path:
        api.with_path(args.path)

    api.with_headers(args.headers)
    api.with_query_parameters(args.query)
    if args.body is not None:
        api.with_body_parameters(args.body)
    api.with_auth(args.auth)

    return api


def main():
    parser = argparse.ArgumentParser(
        description="Build and execute an HTTP request, printing the JSON response",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration:
  Profiles and default headers come from api_config.yaml, output and logging
  defaults from cli_config.yaml. Command-line arguments override everything.

Examples:
  # List posts from a configured profile
  python main.py --profile jsonplaceholder --path /posts

  # Filter with query parameters
  python main.py --profile jsonplaceholder --path /posts --query userId=1

  # Create a resource
  python main.py --profile jsonplaceholder --method POST --path /posts \\
      --body '{"title": "foo", "body": "bar", "userId": 1}'

  # Explicit target with a bearer token on a custom port
  python main.py --scheme https --host api.example.com --port 8443 \\
      --path /users --auth "$TOKEN"

  # Only show the URL that would be requested
  python main.py --profile rickandmorty --path /character --query page=2 --print-url
        """,
    )

    target = parser.add_argument_group("target")
    target.add_argument("--profile", help="Named profile from api_config.yaml")
    target.add_argument(
        "--scheme", choices=[s.value for s in HttpScheme], help="URL scheme (resets the port)"
    )
    target.add_argument("--host", help="Host name, optionally with a base path")
    target.add_argument("--port", type=int, help="Port (applied after --scheme)")

    request = parser.add_argument_group("request")
    request.add_argument(
        "--method",
        type=str.upper,
        choices=[m.value for m in HttpMethod],
        default=HttpMethod.GET.value,
        help="HTTP method (default: GET)",
    )
    request.add_argument("--path", help="Request path, e.g. /posts/1")
    request.add_argument(
        "--query",
        action="append",
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    request.add_argument(
        "--header",
        action="append",
        metavar="'NAME: VALUE'",
        help="Request header (repeatable)",
    )
    request.add_argument("--body", help="JSON body (object, array or string)")
    request.add_argument("--auth", help="Bearer token for the Authorization header")

    parser.add_argument(
        "--print-url", action="store_true", help="Print the URL and exit without a request"
    )
    parser.add_argument(
        "--list-profiles", action="store_true", help="List configured profiles and exit"
    )
    parser.add_argument("--config-dir", type=Path, help="Directory with the YAML config files")
    parser.add_argument("--indent", type=int, help="JSON output indentation")
    parser.add_argument("--log-file", type=Path, help="Write DEBUG log output to this file")
    parser.add_argument("--verbose", action="store_true", help="Show debug output")
    parser.add_argument("--quiet", action="store_true", help="Only show errors")

    args = parser.parse_args()

    try:
        args.query = parse_key_value(args.query, "=")
        args.headers = parse_key_value(args.header, ":")
    except ValueError as e:
        parser.error(str(e))

    if args.body is not None:
        try:
            args.body = json.loads(args.body)
        except json.JSONDecodeError as e:
            parser.error(f"--body is not valid JSON: {e}")

    if not args.profile and not args.list_profiles and not (args.scheme and args.host):
        parser.error("either --profile or both --scheme and --host are required")

    try:
        config_obj = Config(config_dir=args.config_dir) if args.config_dir else config
    except ConfigurationError as e:
        handle_request_error(e)

    log_file = args.log_file or config_obj.get("cli.logging.log_file")
    setup_cli_logging(
        log_file=Path(log_file) if log_file else None, verbose=args.verbose, quiet=args.quiet
    )

    if args.list_profiles:
        for name in list_profiles(config_obj):
            print(name)
        return

    try:
        api = build_request(args, config_obj)

        if args.print_url:
            print(api.get_url())
            return

        logger.info(f"{api.get_method()} {api.get_url()}")
        result: Any = api.execute()

    except (ApiRequestError, ConfigurationError, UriConstructionError) as e:
        handle_request_error(e)
        return

    indent = args.indent if args.indent is not None else config_obj.get("cli.output.indent", 2)
    print(json.dumps(result, indent=indent, ensure_ascii=False))


if __name__ == "__main__":
    main()
