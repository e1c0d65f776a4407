import argparse
import logging
import sys

from stackage_freeze.api import (
    freeze_by_resolver,
    freeze_by_ghc_version,
    freeze_by_system_ghc,
    freeze_project,
)
from stackage_freeze.core import MAX_PAGES, setup_logger
from stackage_freeze.errors import FreezeError
from stackage_freeze.resolver import find_resolver

def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number

def _add_search_options(parser):
    parser.add_argument("--max-pages", type=_positive_int, default=MAX_PAGES,
                        help=f"Listing pages to scan (default: {MAX_PAGES})")
    parser.add_argument("--nightly", action="store_true",
                        help="Search Stackage Nightly instead of LTS snapshots")

def build_parser():
    parser = argparse.ArgumentParser(
        prog="stackage-freeze",
        description="Write a cabal.project.freeze from a Stackage snapshot",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("resolver", help="Freeze a named resolver, e.g. lts-16.22")
    p.add_argument("name")
    p.add_argument("-o", "--output-dir", default=".")

    p = sub.add_parser("ghc", help="Freeze the newest snapshot for a ghc version")
    p.add_argument("version")
    p.add_argument("-o", "--output-dir", default=".")
    _add_search_options(p)

    p = sub.add_parser("system", help="Freeze the newest snapshot for the installed ghc")
    p.add_argument("-o", "--output-dir", default=".")
    _add_search_options(p)

    p = sub.add_parser("project", help="Like 'system', writing into the enclosing project root")
    p.add_argument("--start", default=None, help="Directory to search upwards from")
    _add_search_options(p)

    p = sub.add_parser("locate", help="Print the snapshot URL for a ghc version")
    p.add_argument("version")
    _add_search_options(p)

    return parser

def run(args):
    if args.command == "resolver":
        return freeze_by_resolver(args.name, args.output_dir)
    if args.command == "ghc":
        return freeze_by_ghc_version(args.version, args.output_dir,
                                     max_pages=args.max_pages, use_unstable=args.nightly)
    if args.command == "system":
        return freeze_by_system_ghc(args.output_dir, max_pages=args.max_pages,
                                    use_unstable=args.nightly)
    if args.command == "project":
        return freeze_project(args.start, max_pages=args.max_pages, use_unstable=args.nightly)
    if args.command == "locate":
        return find_resolver(args.version, max_pages=args.max_pages, use_unstable=args.nightly)
    raise ValueError(f"Unknown command: {args.command}")

def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = setup_logger(log_file=args.log_file,
                          level=logging.DEBUG if args.verbose else None)

    try:
        result = run(args)
    except FreezeError as e:
        logger.error(str(e))
        return 1

    if result is None:
        logger.error(f"No snapshot found for ghc {args.version}")
        return 1
    print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
