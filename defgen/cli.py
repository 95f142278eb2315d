"""CLI entrypoints for defgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILE_NAME, ConfigError, EmitterConfig, load_config
from .errors import DefinitionError
from .generator import DefinitionGenerator
from .logging import configure_logging
from .models import DescriptorError, load_descriptors


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="defgen",
        description="Generate TypeScript definition files from extracted type descriptors.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Render a definition file and print it to stdout.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "descriptors",
        help="JSON file holding the extracted type descriptors.",
    )
    generate_parser.add_argument(
        "--source",
        help="Path of the originating source file (defaults to `sourcePath` in the JSON).",
    )
    generate_parser.add_argument(
        "--config",
        help=f"Path to {CONFIG_FILE_NAME} or its directory (defaults to the source directory).",
    )
    generate_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on missing imports or base classes instead of writing warning comments.",
    )
    generate_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors.",
    )
    eol_group = generate_parser.add_mutually_exclusive_group()
    eol_group.add_argument("--lf", dest="eol", action="store_const", const="lf", help="Use LF line endings.")
    eol_group.add_argument("--crlf", dest="eol", action="store_const", const="crlf", help="Use CRLF line endings.")
    module_group = generate_parser.add_mutually_exclusive_group()
    module_group.add_argument(
        "--module",
        dest="declare_module",
        action="store_const",
        const=True,
        help="Wrap declarations in `declare module` blocks.",
    )
    module_group.add_argument(
        "--no-module",
        dest="declare_module",
        action="store_const",
        const=False,
        help="Emit exported declarations with cross-file imports.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for defgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(getattr(args, "quiet", False)))

    if args.command == "generate":
        try:
            descriptors, recorded_source = load_descriptors(Path(args.descriptors))
        except DescriptorError as exc:
            parser.exit(1, f"{exc}\n")
        source_path = args.source or recorded_source
        if not source_path:
            parser.exit(1, "No source path given. Pass --source or set `sourcePath` in the descriptor file.\n")

        try:
            config = _resolve_config(args, source_path)
        except ConfigError as exc:
            parser.exit(1, f"Invalid configuration: {exc}\n")

        try:
            content = DefinitionGenerator(config).generate(descriptors, source_path)
        except DefinitionError as exc:
            parser.exit(1, f"defgen generate failed: {exc}\n")
        sys.stdout.write(content)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _resolve_config(args: argparse.Namespace, source_path: str) -> EmitterConfig:
    config_path = Path(args.config) if args.config else Path(source_path).parent
    config = load_config(config_path)
    return config.with_overrides(
        strict=args.strict,
        eol=args.eol,
        declare_module=args.declare_module,
    )


if __name__ == "__main__":
    main(sys.argv[1:])
