#!/usr/bin/env python3
"""
Command line entry point for specfix.
"""

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from .codegen import LoggingReport, patch_codegen_android_package
from .config import setup_logging, get_config
from .config_loader import ConfigLoader, RewriterOptions
from .exceptions import ConfigurationError, RewriterError
from .models import AliasTable, ExtensionChoice
from .transformer import SpecifierRewriter


def parse_alias(value: str) -> tuple:
    """Parse a KEY=VALUE alias argument."""
    key, sep, target = value.partition('=')
    if not sep or not key or not target:
        raise argparse.ArgumentTypeError(f"alias must look like KEY=VALUE, got '{value}'")
    return key, target


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='specfix', description="Rewrite module specifiers for packaging")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rewrite = subparsers.add_parser("rewrite", help="Rewrite import/export specifiers in place")
    rewrite.add_argument("paths", nargs="+", help="Source files or directories")
    rewrite.add_argument("--config", help="Config file (default: .specfix.config.* in --root)")
    rewrite.add_argument("--alias", action="append", type=parse_alias, default=[], metavar="KEY=VALUE",
                         help="Alias entry, may be repeated; earlier entries win")
    rewrite.add_argument("--extension", choices=[choice.value for choice in ExtensionChoice],
                         help="Extension appended to relative specifiers")
    rewrite.add_argument("--root", default=".", help="Directory relative alias targets resolve against")
    rewrite.add_argument("--check", action="store_true", help="Only report files that would change")

    patch = subparsers.add_parser("patch-codegen", help="Move generated Android module specs to the library package")
    patch.add_argument("project", help="Library project directory containing package.json")

    return parser


def load_options(args) -> RewriterOptions:
    """Combine the config file with command line overrides."""
    if args.config:
        options = ConfigLoader.load_file(args.config)
    else:
        options = ConfigLoader.load(args.root)

    if args.alias:
        options.alias = AliasTable(tuple(args.alias))
    if args.extension:
        options.extension = ExtensionChoice.from_value(args.extension)
    return options


def run_rewrite(args) -> int:
    options = load_options(args)
    rewriter = SpecifierRewriter(options)
    root = str(Path(args.root).resolve())

    results = []
    for raw_path in args.paths:
        path = Path(raw_path)
        if path.is_dir():
            results.extend(rewriter.transform_directory(path, root, write=not args.check))
        else:
            results.append(rewriter.transform_file(path, root, write=not args.check))

    changed = [result for result in results if result.changed]
    for result in changed:
        verb = "would rewrite" if args.check else "rewrote"
        print(f"{verb} {result.filename} ({len(result.rewritten)} specifier(s))")

    if args.check and changed:
        return 1
    return 0


def run_patch_codegen(args) -> int:
    project = Path(args.project)
    package_json_path = project / 'package.json'
    try:
        with open(package_json_path, 'r', encoding='utf-8') as f:
            package_json = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read {package_json_path}: {e}", str(package_json_path))

    patch_codegen_android_package(project, package_json, LoggingReport())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    setup_logging(args.log_level or config['LOG_LEVEL'], args.log_file or config['LOG_FILE'])

    try:
        if args.command == "rewrite":
            return run_rewrite(args)
        return run_patch_codegen(args)
    except RewriterError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
