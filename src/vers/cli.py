"""Command line interface for checking and normalizing version ranges."""

import argparse
import logging
import sys

from .constants import Constants, ExitCodes
from .exceptions import VersError
from .models import Scheme
from .parser import parse, parse_native, to_vers_string
from .versioning import compare_with_scheme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="vers",
        description="Check versions against ecosystem ranges and vers URIs",
        add_help=True,
    )
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS,
                        default="WARNING")
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    subparsers = parser.add_subparsers(dest="COMMAND", required=True)

    contains_parser = subparsers.add_parser(
        "contains", help="Check whether a version falls inside a range")
    contains_parser.add_argument("RANGE",
                                 help="vers URI, or a native constraint when --scheme is given")
    contains_parser.add_argument("VERSION", help="Version to check")
    contains_parser.add_argument("-s", "--scheme",
                                 dest="SCHEME",
                                 help="Native grammar of RANGE, i.e: npm, pypi, maven",
                                 action="store",
                                 type=str)

    compare_parser = subparsers.add_parser("compare", help="Compare two versions")
    compare_parser.add_argument("LEFT", help="First version")
    compare_parser.add_argument("RIGHT", help="Second version")
    compare_parser.add_argument("-s", "--scheme",
                                dest="SCHEME",
                                help="Ordering to compare with (default: generic)",
                                action="store",
                                type=str)

    normalize_parser = subparsers.add_parser(
        "normalize", help="Rewrite a native constraint as a vers URI")
    normalize_parser.add_argument("CONSTRAINT", help="Native constraint")
    normalize_parser.add_argument("-s", "--scheme",
                                  dest="SCHEME",
                                  help="Native grammar of CONSTRAINT",
                                  action="store",
                                  type=str,
                                  required=True)
    return parser


def _setup_logging(level: str, log_file=None) -> None:
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=Constants.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def _run(args) -> ExitCodes:
    if args.COMMAND == "contains":
        if args.SCHEME:
            range_ = parse_native(args.RANGE, args.SCHEME)
        else:
            range_ = parse(args.RANGE)
        found = range_.contains(args.VERSION)
        logger.info("%s in %s: %s", args.VERSION, range_, found)
        print("true" if found else "false")
        return ExitCodes.SUCCESS if found else ExitCodes.NOT_CONTAINED

    if args.COMMAND == "compare":
        print(compare_with_scheme(args.LEFT, args.RIGHT, args.SCHEME))
        return ExitCodes.SUCCESS

    range_ = parse_native(args.CONSTRAINT, args.SCHEME)
    print(to_vers_string(range_, Scheme.from_tag(args.SCHEME)))
    return ExitCodes.SUCCESS


def main(argv=None) -> int:
    """Entry point for the ``vers`` command."""
    args = build_parser().parse_args(argv)
    _setup_logging(args.LOG_LEVEL, args.LOG_FILE)
    logger.debug("Arguments parsed: %s", vars(args))

    try:
        code = _run(args)
    except VersError as exc:
        logger.error("%s", exc)
        code = ExitCodes.INVALID_INPUT
    return code.value


if __name__ == "__main__":
    sys.exit(main())
