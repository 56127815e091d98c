"""
CLI for size comparisons.

Loads the unit, label and object resources and prints the comparison table
for two objects, the list of object names, or the unit catalog.

Usage:
    python -m src.utils.compare_cli compare "Ant" "Mount Everest"
    python -m src.utils.compare_cli --lang FR compare "Fourmi" "Terre"
    python -m src.utils.compare_cli --lang FR names
    python -m src.utils.compare_cli units
    python -m src.utils.compare_cli --data-dir ./data --verbose compare "Ant" "Earth"

Exit Codes:
    0 - Success
    1 - Unknown object name
    2 - Resources could not be loaded
    3 - Invalid arguments
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.services.exceptions import ResourceLoadError
from src.services.resource_loader import CatalogBundle, load_catalogs_from_directory
from src.services.dto import RatioTable
from src.utils.config import get_config
from src.utils.constants import (
    BUCKET_LABELS,
    LABEL_RATIO,
    TABLE_COLUMN_LABELS,
)
from src.utils.number_format import format_number


# Exit code constants
EXIT_SUCCESS = 0
EXIT_UNKNOWN_OBJECT = 1
EXIT_LOAD_FAILURE = 2
EXIT_INVALID_ARGS = 3


def render_table(table: RatioTable, bundle: CatalogBundle) -> str:
    """
    Render a comparison table as aligned plain text, one block per bucket section.

    Args:
        table: Comparison table to render
        bundle: Catalogs (used for localized headings)

    Returns:
        Multi-line string
    """
    labels = bundle.labels
    headers = [labels.resolve(label_id) for label_id in TABLE_COLUMN_LABELS]
    cells = [
        [row.name, row.size_in_meter_text, row.size_in_unit_text, row.scaled_size_text, row.nearest_name]
        for row in table.rows
    ]
    widths = [len(header) for header in headers]
    for row_cells in cells:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row_cells)]

    def fmt(values: List[str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths)).rstrip()

    lines = [f"{labels.resolve(LABEL_RATIO)}: {table.ratio_text}", "", fmt(headers)]
    lines.append("  ".join("-" * width for width in widths))

    row_index = 0
    for section in table.sections:
        lines.append(f"[{labels.resolve(BUCKET_LABELS[section.bucket])}]")
        for _ in section.rows:
            lines.append(fmt(cells[row_index]))
            row_index += 1
    return "\n".join(lines)


def compare_cmd(bundle: CatalogBundle, first: str, second: str, digits: int) -> int:
    """Print the comparison table for two object names."""
    lang = bundle.labels.current_language
    table = bundle.presenter(digits).build_by_name(first, second, lang)
    if table is None:
        for name in (first, second):
            if bundle.objects.find_by_name(name, lang) is None:
                print(f"ERROR: Unknown object '{name}' (language {lang})")
        return EXIT_UNKNOWN_OBJECT

    print(render_table(table, bundle))
    return EXIT_SUCCESS


def names_cmd(bundle: CatalogBundle) -> int:
    """Print the object names ordered by name."""
    for name in bundle.object_names():
        print(name)
    return EXIT_SUCCESS


def units_cmd(bundle: CatalogBundle, digits: int) -> int:
    """Print the unit catalog in ascending size order."""
    labels = bundle.labels
    for unit in bundle.units:
        symbol = labels.resolve_label(unit.symbol) or ""
        name = labels.resolve_label(unit.name) or ""
        print(f"{symbol:>6}  {format_number(unit.size_in_meter, digits):>16} m  {name}")
    return EXIT_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Compare the sizes of two real-world objects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s compare "Ant" "Mount Everest"
  %(prog)s --lang FR compare "Fourmi" "Terre"
  %(prog)s --lang FR names
  %(prog)s units

Exit Codes:
  0 - Success
  1 - Unknown object name
  2 - Resources could not be loaded
  3 - Invalid arguments
        """,
    )
    parser.add_argument(
        "--data-dir",
        help="Directory with units.json, labels.json and objects.json (default: from config)",
    )
    parser.add_argument(
        "--lang",
        help="Display language (e.g. EN, FR; default: user locale)",
    )
    parser.add_argument(
        "--digits",
        type=int,
        help="Significant digits of formatted sizes (default: 4)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    compare_parser = subparsers.add_parser("compare", help="Compare two objects")
    compare_parser.add_argument("first", help="Reference object name")
    compare_parser.add_argument("second", help="Compared object name")

    subparsers.add_parser("names", help="List object names")
    subparsers.add_parser("units", help="List units")
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits with 0 for --help and 2 for usage errors
        return EXIT_SUCCESS if e.code == 0 else EXIT_INVALID_ARGS

    if parsed.command is None:
        parser.print_help()
        return EXIT_INVALID_ARGS

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = get_config()
    digits = parsed.digits if parsed.digits is not None else config.significant_digits
    if digits < 1:
        print("ERROR: --digits must be at least 1")
        return EXIT_INVALID_ARGS

    try:
        bundle = load_catalogs_from_directory(
            parsed.data_dir or config.data_dir,
            languages=config.languages,
            user_locale=config.user_locale,
        )
    except ResourceLoadError as e:
        print(f"ERROR: {e}")
        return EXIT_LOAD_FAILURE

    if parsed.lang:
        lang = parsed.lang.upper()
        if lang not in bundle.labels.supported_languages:
            supported = ", ".join(bundle.labels.supported_languages)
            print(f"ERROR: Unsupported language '{parsed.lang}'. Supported: {supported}")
            return EXIT_INVALID_ARGS
        bundle.labels.current_language = lang

    if parsed.command == "compare":
        return compare_cmd(bundle, parsed.first, parsed.second, digits)
    elif parsed.command == "names":
        return names_cmd(bundle)
    elif parsed.command == "units":
        return units_cmd(bundle, digits)
    else:
        print(f"Unknown command: {parsed.command}")
        return EXIT_INVALID_ARGS


if __name__ == "__main__":
    sys.exit(main())
