#!/usr/bin/env python3
import argparse
import sys
from typing import Optional

import lazyrange
from lazyrange.range import Range
from lazyrange.settings import Settings, anchor_settings
from lazyrange.warnings import warnings_filter


def _parse_cli_args():
    return _parse_args(sys.argv[1:])


def _parse_slice(value: str) -> tuple[Optional[int], Optional[int]]:
    # "A:B", either side may be empty
    lo, sep, hi = value.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected START:STOP, got {value!r}")
    try:
        return (int(lo) if lo else None, int(hi) if hi else None)
    except ValueError:
        raise argparse.ArgumentTypeError(f"slice bounds must be integers, got {value!r}")


def _cli_helper(f, r: Range, separator: Optional[str], info: bool) -> None:
    if info:
        print(f"{r}", file=f)
        print(f"length: {r.length}", file=f)
        print(f"first: {r.at(0)}", file=f)
        print(f"last: {r.at(-1)}", file=f)
        return

    if separator is not None:
        print(r.join(separator), file=f)
        return

    for value in r:
        print(value, file=f)


def _parse_args(argv, f=None):
    parser = argparse.ArgumentParser(
        description="Print the values of an arithmetic progression",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "bounds",
        help="[start] stop [step], as for python's range()",
        type=int,
        nargs="+",
    )
    parser.add_argument("--version", action="version", version=lazyrange.__long_version__)
    parser.add_argument("--reverse", help="Print the values in reverse order", action="store_true")
    parser.add_argument(
        "--slice",
        help="Only print the values between two indices, e.g. 2:-1\n"
        "(a negative start needs the = form: --slice=-3:)",
        type=_parse_slice,
        dest="slice_bounds",
    )
    parser.add_argument(
        "-s", "--separator", help="Join the values on one line with SEPARATOR", default=None
    )
    parser.add_argument(
        "--info", help="Print the range, its length, first and last value", action="store_true"
    )
    parser.add_argument(
        "--materialize-limit",
        help="Warn when more than this many values are materialized (0 disables)",
        type=int,
    )
    parser.add_argument(
        "-W",
        help="Control warnings: 'error' turns them into errors, 'none' hides them",
        choices=["error", "none"],
        dest="warnings_control",
    )

    args = parser.parse_args(argv)

    if len(args.bounds) > 3:
        parser.error(f"expected at most 3 bounds, got {len(args.bounds)}")

    settings = Settings()
    if args.materialize_limit is not None:
        if args.materialize_limit < 0:
            parser.error("--materialize-limit must not be negative")
        settings.materialize_limit = args.materialize_limit

    if f is None:
        f = sys.stdout

    with warnings_filter(args.warnings_control), anchor_settings(settings):
        r = Range(*args.bounds)
        if args.slice_bounds is not None:
            r = r.slice(*args.slice_bounds)
        if args.reverse:
            r = r.to_reversed()
        _cli_helper(f, r, args.separator, args.info)
