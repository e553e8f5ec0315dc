"""Command-line interface for size-converter."""

import argparse
import logging
import sys

from size_converter import __version__, conversion_info, convert_with_details
from size_converter.types import Gender, SizeSystem, SizeType


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="size-converter",
        description="Convert clothing and accessory sizes between sizing systems",
    )
    parser.add_argument("size", nargs="?", help='Size to convert, e.g. "9.5" or "34B"')
    parser.add_argument(
        "--from",
        dest="from_system",
        type=str.upper,
        choices=[system.value for system in SizeSystem],
        help="Sizing system of SIZE",
    )
    parser.add_argument(
        "--to",
        dest="to_system",
        type=str.upper,
        choices=[system.value for system in SizeSystem],
        help="Sizing system to convert to",
    )
    parser.add_argument(
        "--type",
        dest="size_type",
        type=str.lower,
        choices=[size_type.value for size_type in SizeType],
        default=SizeType.CLOTHING.value,
        help="Size type (default: clothing)",
    )
    parser.add_argument(
        "--gender",
        type=str.lower,
        choices=[gender.value for gender in Gender],
        default=Gender.UNISEX.value,
        help="Audience (default: unisex)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Show supported size types and systems",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"size-converter {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.info:
        _print_info(args.json)
        return 0

    if not args.size or not args.from_system or not args.to_system:
        parser.error("SIZE, --from and --to are required unless --info is given")

    result = convert_with_details(args.size, args.from_system, args.to_system, args.size_type, args.gender)

    if args.json:
        print(result.model_dump_json(indent=2, exclude_none=True))
    elif result.is_success:
        _print_formatted(result)

    if not result.is_success:
        if not args.json:
            print(f"Error: {result.error.user_message}", file=sys.stderr)
        return 1
    return 0


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    print(result.converted_size)
    details = [
        ("Confidence", f"{result.confidence:.2f}"),
        ("Range", result.suggested_range),
        ("Notes", result.notes),
    ]
    for label, value in details:
        if value:
            print(f"  {label + ':':<12} {value}")


def _print_info(as_json: bool) -> None:
    info = conversion_info()
    if as_json:
        print(info.model_dump_json(indent=2))
        return

    print(info.description)
    print()
    for size_type, systems in info.systems_by_type.items():
        print(f"  {size_type.value + ':':<10} {', '.join(system.value for system in systems)}")
    print()
    print(f"  {info.total_conversions} conversions")


if __name__ == "__main__":
    sys.exit(main())
