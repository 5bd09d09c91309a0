"""CLI for looking up the published versions of a CircleCI orb.

Usage::

    # Human-readable release list
    python -m src.cli lookup circleci/node

    # Normalized ReleaseResult as JSON (camelCase keys)
    python -m src.cli lookup circleci/node --json

    # Use a YAML config file (environment variables still win)
    python -m src.cli --config config/config.yaml lookup circleci/node

Exit status is 0 when releases were found, 1 when the orb is unknown or
the registry lookup failed.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from src.config.loader import load_config, settings_from_config
from src.config.settings import Settings
from src.models.release import GetReleasesConfig, ReleaseResult
from src.utils.errors import ConfigurationError
from src.utils.logging import configure_logging


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _print_result(result: ReleaseResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.model_dump(by_alias=True), indent=2))
        return

    releases = result.releases or []
    print(f"{result.name}  ({len(releases)} release(s))")
    print(f"homepage: {result.homepage}")
    for release in releases:
        print(f"  {release.version:<16} {release.release_timestamp or '-'}")


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


async def _handle_lookup(args: argparse.Namespace, app_settings: Settings) -> int:
    """Look up one orb and print its releases."""
    from src.main import build_components, close_components

    components = build_components(app_settings)
    try:
        result = await components["orb_datasource"].get_releases(
            GetReleasesConfig(lookup_name=args.name)
        )
    finally:
        await close_components(components)

    if result is None:
        print(f"Error: no releases found for orb '{args.name}'.", file=sys.stderr)
        return 1

    _print_result(result, as_json=args.json)
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.cli",
        description="Query the CircleCI orb registry for published versions.",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="YAML config file (optional; environment variables win)",
    )
    subparsers = parser.add_subparsers(dest="command")

    lookup_parser = subparsers.add_parser("lookup", help="List the releases of an orb")
    lookup_parser.add_argument("name", help="Orb name, e.g. circleci/node")
    lookup_parser.add_argument(
        "--json", action="store_true", help="Print the normalized result as JSON"
    )

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the orb lookup tool."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config, settings=Settings())
        app_settings = settings_from_config(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    configure_logging(
        log_level=config["logging"]["level"],
        json_output=(config["app"]["env"] == "production"),
    )

    exit_code = asyncio.run(_handle_lookup(args, app_settings))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
