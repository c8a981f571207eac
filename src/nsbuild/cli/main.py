"""CLI entrypoint for nsbuild."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nsbuild import __version__
from nsbuild.analysis import BuildLog, sort_by_compile_order
from nsbuild.config import NsbuildConfig, load_config
from nsbuild.constants.branding import CLI_DESCRIPTION
from nsbuild.constants.config import VALID_UNCOMPILED_PLACEMENTS
from nsbuild.exceptions import ConfigError, NsbuildError
from nsbuild.metadata import NamespaceTree


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="nsbuild",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate-config", help="Validate nsbuild.yaml without building")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Build root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    namespaces = subparsers.add_parser("namespaces", help="List discovered namespaces and their virtual files")
    namespaces.add_argument("-r", "--root", type=Path, required=True, help="Build root path")
    namespaces.add_argument("-c", "--config", type=Path, help="Explicit config file")

    order = subparsers.add_parser("library-order", help="Order library members by a build log")
    order.add_argument("-r", "--root", type=Path, required=True, help="Build root path")
    order.add_argument("-c", "--config", type=Path, help="Explicit config file")
    order.add_argument("-l", "--log", type=Path, default=None, help="Build log (default: build_log from config)")
    order.add_argument(
        "--uncompiled",
        choices=sorted(VALID_UNCOMPILED_PLACEMENTS),
        default=None,
        help="Placement of members absent from the log (default: library.uncompiled from config)",
    )
    order.add_argument("members", nargs="+", help="Library member paths or module names")

    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.command == "validate-config":
            NamespaceTree.scan(args.root.resolve(), config)
            print("Configuration is valid.")
            return 0
        if args.command == "namespaces":
            return _handle_namespaces(args.root.resolve(), config)
        if args.command == "library-order":
            return _handle_library_order(args, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except NsbuildError as exc:
        print(f"Build error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_namespaces(root: Path, config: NsbuildConfig) -> int:
    tree = NamespaceTree.scan(root, config)
    for namespace in tree.namespaces:
        library = " (library)" if namespace.stem in tree.libraries else ""
        print(f"{namespace.module_name}: {namespace.stem}{library}")
        for member in namespace.members:
            print(f"  {member.name} = {member.module_name}")
    for file in tree.files:
        print(f"{file.virtual_path} -> {file.original_path}")
    return 0


def _handle_library_order(args: argparse.Namespace, config: NsbuildConfig) -> int:
    log_path = args.log if args.log is not None else args.root / config.build_log
    trace = BuildLog(log_path, config.library.compiler_pattern).compile_order()
    uncompiled = args.uncompiled if args.uncompiled is not None else config.library.uncompiled
    for name in sort_by_compile_order(args.members, trace, uncompiled=uncompiled):
        print(name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
