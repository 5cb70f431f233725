"""
Command-line interface for hive-lineage.

This module provides a command-line interface for the extractor, reading SQL
from a file, a literal string or a Base64-encoded file, and printing the
source tables as plain lines, a table, or JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from colorama import Fore, Style, init
from tabulate import tabulate

from hive_lineage.analyzer.lineage_parser import HiveLineageParser
from hive_lineage.exceptions import InputDecodingError, LineageError
from hive_lineage.models.config import ErrorMode, LineageConfig
from hive_lineage.service import NO_INPUT_MESSAGE, decode_file_content

init(autoreset=True)
HAS_COLOR = True


def print_success(msg: str) -> None:
    """Print success message."""
    if HAS_COLOR:
        print(f"{Fore.GREEN}[OK] {msg}{Style.RESET_ALL}")
    else:
        print(f"[OK] {msg}")


def print_error(msg: str) -> None:
    """Print error message."""
    if HAS_COLOR:
        print(f"{Fore.RED}[ERROR] {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[ERROR] {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    if HAS_COLOR:
        print(f"{Fore.YELLOW}[WARN] {msg}{Style.RESET_ALL}")
    else:
        print(f"[WARN] {msg}")


def print_info(msg: str) -> None:
    """Print info message."""
    if HAS_COLOR:
        print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}")
    else:
        print(msg)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hive-lineage",
        description="Hive SQL source-table extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Source tables of a script
  %(prog)s etl.sql

  # Literal SQL
  %(prog)s --sql "use dw; select * from orders"

  # Base64-encoded script
  %(prog)s --base64 etl.sql.b64

  # Table output, duplicates collapsed
  %(prog)s etl.sql --format table --unique

  # Export statement-level lineage graph
  %(prog)s etl.sql --export lineage.json
        """,
    )

    # === Input parameters ===
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument(
        "sql_file", nargs="?", help="SQL script file to analyze"
    )
    input_group.add_argument("--sql", metavar="TEXT", help="Literal SQL text")
    input_group.add_argument(
        "--base64",
        metavar="FILE",
        help="File holding the Base64-encoded SQL script",
    )
    input_group.add_argument(
        "--database",
        "-d",
        default="default",
        help="Database used for unqualified tables (default: default)",
    )

    # === Output parameters ===
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["plain", "table", "json"],
        default="plain",
        help="Output format (default: plain)",
    )
    output_group.add_argument(
        "--unique",
        "-u",
        action="store_true",
        help="Show each source table once, in first-seen order",
    )
    output_group.add_argument(
        "--export",
        "-o",
        metavar="FILE",
        help="Export statement-level lineage graph to a JSON file",
    )
    output_group.add_argument(
        "--show-skipped",
        action="store_true",
        help="List SQL constructs that were skipped during extraction",
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )

    # === Configuration parameters ===
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail on SQL constructs the extractor cannot traverse",
    )
    return parser


def read_input(args: argparse.Namespace) -> str:
    """Read the SQL text selected by the command-line arguments.

    Raises:
        InputDecodingError: If no input was given or it cannot be decoded.
        FileNotFoundError: If an input file does not exist.
    """
    if args.sql:
        return args.sql

    if args.base64:
        path = Path(args.base64)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {args.base64}")
        content = path.read_text(encoding="ascii", errors="replace")
        return decode_file_content(content.strip())

    if args.sql_file:
        path = Path(args.sql_file)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {args.sql_file}")
        try:
            return path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputDecodingError(f"Failed to convert: {e}") from e

    raise InputDecodingError(NO_INPUT_MESSAGE)


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        hive-lineage script.sql
        hive-lineage --sql "select * from db.t"
        hive-lineage --base64 script.b64
        hive-lineage script.sql --format table --unique
        hive-lineage script.sql --export lineage.json
    """
    args = build_parser().parse_args(argv)

    if args.no_color:
        global HAS_COLOR
        HAS_COLOR = False

    try:
        sql = read_input(args)
    except (FileNotFoundError, InputDecodingError) as e:
        print_error(str(e))
        sys.exit(1)

    config = LineageConfig(
        default_database=args.database,
        on_unsupported=ErrorMode.FAIL if args.strict else ErrorMode.WARN,
    )
    parser = HiveLineageParser(config)

    try:
        parser.parse(sql)
    except LineageError as e:
        print_error(f"Lineage extraction failed: {e}")
        sys.exit(1)

    table_names = parser.get_table_names()
    if args.unique:
        table_names = list(dict.fromkeys(table_names))

    handle_output(parser, table_names, args.format)

    if args.export:
        handle_export(parser, args.export)

    if args.show_skipped:
        show_skipped(parser)


def handle_output(
    parser: HiveLineageParser, table_names: list[str], format: str
) -> None:
    """Print the source tables in the requested format."""
    if format == "json":
        data = {
            "tables": table_names,
            "statements": [record.to_dict() for record in parser.statements],
        }
        print(json.dumps(data, indent=2, ensure_ascii=False))
    elif format == "table":
        rows = [
            [
                record.statement_index,
                record.statement_type.value,
                record.target_table or "",
                "\n".join(record.source_tables),
            ]
            for record in parser.statements
        ]
        print(
            tabulate(
                rows,
                headers=["#", "Type", "Target", "Sources"],
                tablefmt="simple",
            )
        )
        print()
        print_success(f"Found {len(table_names)} source table reference(s).")
    else:
        for name in table_names:
            print(name)


def handle_export(parser: HiveLineageParser, output_file: str) -> None:
    """Export the table lineage graph to JSON."""
    output_path = Path(output_file)
    data = parser.build_graph().to_dict()
    data["statements"] = [record.to_dict() for record in parser.statements]

    output_path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    print_success(f"Exported to {output_path}")


def show_skipped(parser: HiveLineageParser) -> None:
    """Show constructs skipped during extraction."""
    warnings = parser.warnings
    if not warnings:
        print_info("No skipped constructs.")
        return

    print_warning(f"{len(warnings)} skipped construct(s):")
    for i, warning in enumerate(warnings, 1):
        print(f"  {i}. {warning.message}")
        if warning.context:
            print(f"     {warning.context}")

    summary = parser.session.warnings.get_summary()
    counts = ", ".join(
        f"{level}: {count}" for level, count in summary.items() if count
    )
    print_info(f"By level: {counts}")


if __name__ == "__main__":
    main()
