"""
Command line entry point for hookorder.
"""

from __future__ import annotations

import argparse
import json
import sys
from importlib.metadata import PackageNotFoundError, version

from pydantic import ValidationError

from hookorder.checker import check, expected_order_text, load_tree
from hookorder.logging import configure_logging
from hookorder.models import OrderReport

EXIT_OK = 0
EXIT_VIOLATIONS = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hookorder",
        description="hookorder CLI: statement-order checker for React function components.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed hookorder version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Emit diagnostics on stderr (-v for INFO, -vv for DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        help="Explicit log level (DEBUG, INFO, WARNING, ERROR). Overrides -v.",
    )
    subparsers = parser.add_subparsers(dest="command")
    check_parser = subparsers.add_parser(
        "check",
        help="Check component statement order in ESTree JSON files.",
    )
    check_parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="ESTree JSON file produced by a JavaScript parser ('-' reads stdin).",
    )
    check_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text).",
    )
    subparsers.add_parser(
        "order",
        help="Print the expected statement order and exit.",
    )
    return parser


def _resolve_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return None


def _render_text(report: OrderReport) -> list[str]:
    lines = []
    source = report.source or "<stdin>"
    for violation in report.violations:
        position = ""
        if violation.location is not None:
            position = f":{violation.location.line}:{violation.location.column}"
        message = violation.message.replace("\n", " ")
        lines.append(f"{source}{position}  {violation.component}: {message}")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(_resolve_log_level(args))

    if args.version:
        try:
            print(version("hookorder"))
        except PackageNotFoundError:
            print("hookorder (not installed)")
        return EXIT_OK

    if args.command == "order":
        print(expected_order_text())
        return EXIT_OK

    if args.command == "check":
        reports = []
        for path in args.paths:
            try:
                if path == "-":
                    tree = json.loads(sys.stdin.read())
                    source = None
                else:
                    tree = load_tree(path)
                    source = path
            except json.JSONDecodeError as exc:
                parser.error(f"Failed to parse syntax tree JSON from stdin: {exc}")
            except (OSError, ValueError) as exc:
                parser.error(str(exc))

            try:
                reports.append(check(tree, source=source))
            except ValidationError as exc:
                parser.error(f"{path} is not an ESTree node: {exc}")

        if args.format == "json":
            payload = [report.model_dump(mode="json") for report in reports]
            print(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            for report in reports:
                for line in _render_text(report):
                    print(line)

        if any(not report.ok for report in reports):
            return EXIT_VIOLATIONS
        return EXIT_OK

    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
