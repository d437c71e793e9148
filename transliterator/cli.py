#!/usr/bin/env python3
"""
Transliterator CLI

Command-line interface for ITRANS ↔ Devanagari conversion.

Usage:
    python -m transliterator <source> [options]
    python -m transliterator --text "rAma"                 # rAma (राम)
    python -m transliterator --text "राम" -d dev-to-itrans --replace
    python -m transliterator notes.md                       # convert a file
    python -m transliterator ./notes/                       # convert all files in directory
    python -m transliterator a.md b.docx --stdout           # print instead of saving

Options:
    -d, --direction DIR  itrans-to-dev (default) or dev-to-itrans
    --replace            Replace the original instead of appending the conversion
    --preview            Show the conversion and ask before applying it
    -o, --output DIR     Output directory (default: ./transliterator_output)
    --stdout             Print to stdout instead of saving files
    --formats            Show all supported formats
    --schemes            Show all supported schemes
"""

import argparse
import logging
import sys
import os

# Allow running from the project root
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_ROOT, "src"))
sys.path.insert(0, _ROOT)

from transliteration_engine import Direction, UnknownSchemeError

from transliterator.core import NoTextError, Transliterator
from transliterator.settings import ApplyMode, ConversionSettings


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="transliterator",
        description=(
            "ITRANS ↔ Devanagari Transliterator\n\n"
            "Converts text, notes and Word documents between the ITRANS\n"
            "romanization and Devanagari script. Characters outside both\n"
            "schemes pass through unchanged."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m transliterator --text \"namaste\"\n"
            "  python -m transliterator --text \"नमस्ते\" -d dev-to-itrans --replace\n"
            "  python -m transliterator notes.md --replace --stdout\n"
            "  python -m transliterator ./notes/ -o ./converted\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files or directories to convert",
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Convert this text and print the result",
    )
    parser.add_argument(
        "-d", "--direction",
        default=Direction.ITRANS_TO_DEV.value,
        help="Conversion direction: itrans-to-dev (default) or dev-to-itrans",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--replace",
        dest="apply_mode",
        action="store_const",
        const=ApplyMode.REPLACE,
        help="Replace the original with the conversion",
    )
    mode.add_argument(
        "--append",
        dest="apply_mode",
        action="store_const",
        const=ApplyMode.APPEND,
        help="Append the conversion beside the original (default)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the conversion and ask for confirmation before applying",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./transliterator_output)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print converted text to stdout instead of saving to files",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )
    parser.add_argument(
        "--schemes",
        action="store_true",
        help="Show all supported schemes and directions and exit",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show the selected direction indicator and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.formats:
        _show_formats()
        return

    if args.schemes:
        _show_schemes()
        return

    try:
        direction = Direction.parse(args.direction)
    except UnknownSchemeError as e:
        parser.error(str(e))

    settings = ConversionSettings(
        direction=direction,
        apply_mode=args.apply_mode or ApplyMode.APPEND,
        preview_before_apply=args.preview,
    )

    if args.status:
        print(direction.label)
        return

    engine = Transliterator(settings=settings, output_dir=args.output, confirm=_ask_confirm)

    if args.text is not None:
        try:
            print(engine.convert_selection(args.text, 0, len(args.text)))
        except NoTextError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            sys.exit(1)
        return

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify --text, files or directories to convert.")
        sys.exit(1)

    save = not args.stdout

    print("=" * 60)
    print(f"  TRANSLITERATOR - {direction.label}")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            result = engine.convert(source, save=save)
            if args.stdout:
                print(result)
                print("\n" + "=" * 60 + "\n")
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    if save:
        print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    if error_count:
        sys.exit(1)


def _ask_confirm(preview: str) -> bool:
    """Print a preview and ask whether to apply it."""
    print("\nPreview:")
    print(preview)
    answer = input("Apply conversion? [y/N] ").strip().lower()
    return answer in ("y", "yes")


def _show_formats():
    """Display all supported formats."""
    formats = Transliterator.supported_formats()
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


def _show_schemes():
    """Display all supported schemes and directions."""
    print("\nSupported Schemes:")
    print("-" * 40)
    for name in Transliterator.supported_schemes():
        print(f"    {name}")
    print("\nDirections:")
    for direction in Direction:
        print(f"    {direction.value:<16} {direction.label}")
    print()


if __name__ == "__main__":
    main()
