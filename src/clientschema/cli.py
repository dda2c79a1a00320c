"""CLI entry point for clientschema."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from clientschema import __version__, logger
from clientschema.definition_loader import load_definition
from clientschema.definition_schema import definition_to_schema
from clientschema.dependencies import ensure_package_dependencies
from clientschema.exceptions import PackageError
from clientschema.extraction import to_schema
from clientschema.logging import configure_logging
from clientschema.providers import PROVIDER_SETTINGS, get_provider_settings
from clientschema.settings import get_settings

if TYPE_CHECKING:
    from clientschema.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="clientschema")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    schema_parser = subparsers.add_parser("schema", help="Print the field list of a provider's default settings")
    schema_parser.add_argument("--provider", required=True, choices=sorted(PROVIDER_SETTINGS))
    schema_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    definition_parser = subparsers.add_parser(
        "definition-schema",
        help="Print the field list derived from a declarative indexer definition",
    )
    definition_parser.add_argument("--location", required=True)
    definition_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    normalize_parser = subparsers.add_parser("normalize", help="Print a declarative definition after normalization")
    normalize_parser.add_argument("--location", required=True)
    normalize_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    return parser


def _run_command(args: argparse.Namespace, settings: Settings) -> Any:
    """Execute one sub-command and return its JSON payload.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.

    Returns:
        Any: JSON-compatible payload.
    """
    if args.command == "schema":
        settings_type = get_provider_settings(args.provider)
        return [field.to_payload() for field in to_schema(settings_type())]

    definition = load_definition(args.location, settings=settings)
    if args.command == "definition-schema":
        return [field.to_payload() for field in definition_to_schema(definition)]
    return definition.model_dump(mode="json", by_alias=True, exclude_none=True)


def write_payload(payload: Any, output_path: Path | None) -> None:
    """Write a JSON payload to a file, or to stdout when no path is given.

    Args:
        payload (Any): JSON-compatible payload.
        output_path (Path | None): Destination file.
    """
    text = json.dumps(payload, indent=2)
    if output_path is None:
        sys.stdout.write(text + "\n")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info("Payload written", extra={"output_path": str(output_path)})


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments, defaults to `sys.argv[1:]`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        ensure_package_dependencies()
        payload = _run_command(args, settings)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Command aborted by user")
        return 130

    write_payload(payload, args.output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
