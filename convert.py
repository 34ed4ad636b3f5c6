#!/usr/bin/env python3
"""Convert between kana text and pager two-touch digit strings.

    python convert.py encode ごくろうさん --abbreviations
    python convert.py decode 25042395133103
"""
import argparse
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from twotouch import ABBREVIATIONS_ENV, LOG_LEVEL_ENV
from twotouch.abbreviations import lookup_abbreviations
from twotouch.codec import TwoTouchError
from twotouch.interface import convert_from_two_touch_string, convert_to_two_touch_string
from twotouch.logger import logger, set_level
from twotouch.schema import DecodeReport, EncodeReport, ErrorReport


def env_flag(name: str) -> bool:
    """Read a yes/no switch from the environment."""
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def error_report(error: TwoTouchError) -> ErrorReport:
    """Describe a codec error for the JSON output."""
    position = getattr(error, "position", None)
    if position is None:
        position = getattr(error, "offset", None)
    return ErrorReport(type=type(error).__name__, message=str(error), position=position)


def run_encode(text: str, use_reading: bool = False, include_abbreviations: bool = False) -> EncodeReport:
    """Encode *text*, optionally through its kana reading, into a report."""
    reading = None
    source = text
    if use_reading:
        from twotouch.reading import KanaReader
        reading = KanaReader().to_hiragana(text)
        source = reading
        logger.debug(f"Reading of {text!r}: {reading!r}")

    abbreviations = lookup_abbreviations(text) if include_abbreviations else []

    with convert_to_two_touch_string(source) as result:
        if not result.ok:
            return EncodeReport(text=text, reading=reading, abbreviations=abbreviations,
                                error=error_report(result.error))
        return EncodeReport(text=text, reading=reading, encodings=list(result.data),
                            abbreviations=abbreviations)


def run_decode(digits: str) -> DecodeReport:
    """Decode *digits* into a report."""
    with convert_from_two_touch_string(digits) as result:
        if not result.ok:
            return DecodeReport(digits=digits, error=error_report(result.error))
        return DecodeReport(digits=digits, text=result.value)


def print_encode(report: EncodeReport) -> None:
    for digits in report.encodings:
        print(f"{report.text}: {digits}")
    for code in report.abbreviations:
        print(f"{report.text}: {code} (abbreviation)")


def print_decode(report: DecodeReport) -> None:
    if report.text is not None:
        print(f"{report.digits}: {report.text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert between kana and pager two-touch digit strings")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode kana text into digit strings")
    encode_parser.add_argument("text", help="Kana text to encode")
    encode_parser.add_argument("--reading", action="store_true",
                               help="Reduce kanji to a kana reading before encoding")
    encode_parser.add_argument("--abbreviations", action="store_true", default=None,
                               help=f"Also list pager shorthand codes (default from {ABBREVIATIONS_ENV})")
    encode_parser.add_argument("--json", action="store_true", help="Print a JSON report")

    decode_parser = subparsers.add_parser("decode", help="Decode a digit string into kana")
    decode_parser.add_argument("digits", help="Two-touch digit string")
    decode_parser.add_argument("--json", action="store_true", help="Print a JSON report")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    set_level(os.environ.get(LOG_LEVEL_ENV, "INFO"))
    args = build_parser().parse_args(argv)

    if args.command == "encode":
        include_abbreviations = args.abbreviations if args.abbreviations is not None else env_flag(ABBREVIATIONS_ENV)
        report = run_encode(args.text, use_reading=args.reading, include_abbreviations=include_abbreviations)
        if args.json:
            print(report.model_dump_json(indent=2))
        else:
            print_encode(report)
        failed = report.error is not None and not report.abbreviations
    else:
        report = run_decode(args.digits)
        if args.json:
            print(report.model_dump_json(indent=2))
        else:
            print_decode(report)
        failed = report.error is not None

    if failed:
        logger.error(f"❌ {report.error.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
