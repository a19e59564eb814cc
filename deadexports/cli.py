"""CLI entrypoint for dead export scans."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, DEFAULT_EXTENSIONS, DEFAULT_IGNORE, split_csv
from .logging import configure_logging
from .reporting import FORMATTERS, render
from .scanner import DeadExportScanner


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deadexports",
        description="Report exported symbols that no other file in the tree imports.",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Root directory to scan (required).",
    )
    parser.add_argument(
        "--ext",
        default=None,
        help=(
            "Comma separated file extensions to include "
            f"(default: {','.join(DEFAULT_EXTENSIONS)})."
        ),
    )
    parser.add_argument(
        "--ignore",
        default=None,
        help=(
            "Comma separated directory names to skip anywhere in the tree "
            f"(default: {','.join(DEFAULT_IGNORE)})."
        ),
    )
    parser.add_argument(
        "--import-mode",
        default=None,
        help=(
            "Import detection strategy: 'lexical' (whole-text greedy match, default) "
            "or 'statement' (one import statement at a time, whole words only)."
        ),
    )
    parser.add_argument(
        "--format",
        choices=sorted(FORMATTERS),
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--fail-on-dead",
        action="store_true",
        help="Exit with status 1 when any dead export is found.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for dead export scans."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.path:
        parser.print_usage(sys.stderr)
        parser.exit(1, f"{parser.prog}: error: --path is required\n")

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    scanner = DeadExportScanner()
    try:
        report = scanner.scan(
            args.path,
            extensions=split_csv(args.ext) if args.ext is not None else None,
            ignore=split_csv(args.ignore) if args.ignore is not None else None,
            import_mode=args.import_mode,
        )
    except (FileNotFoundError, NotADirectoryError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"deadexports failed: {exc}\nRun with --verbose for more details.\n")

    print(render(report, args.format))

    if args.fail_on_dead and report.total_files:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
