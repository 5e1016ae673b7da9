import argparse
import logging

from .credentials import CredentialResolver
from .exceptions import AocHelperError
from .models import Day
from .utils import aoc_now
from .utils import FIRST_YEAR
from .utils import LAST_DAY
from .version import __version__


def most_recent_year():
    """
    This year, if it's December.
    The most recent year, otherwise.
    """
    now = aoc_now()
    year = now.year
    if now.month < 12:
        year -= 1
    if year < FIRST_YEAR:
        raise AocHelperError("Time travel not supported yet")
    return year


def current_day():
    """
    Most recent day, if it's during the Advent of Code. Day 1 is assumed, otherwise.
    """
    now = aoc_now()
    if now.month != 12:
        return 1
    return min(now.day, LAST_DAY)


def main(argv=None):
    """Get your puzzle input data, caching it if necessary, and print it on stdout."""
    days = range(1, LAST_DAY + 1)
    years = range(FIRST_YEAR, most_recent_year() + 1)
    parser = argparse.ArgumentParser(
        description=f"AoC helper v{__version__}",
        usage=f"aoc-helper [day 1-25] [year {FIRST_YEAR}-{years[-1]}]",
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        default=current_day(),
        help="1-25 (default: %(default)s)",
    )
    parser.add_argument(
        "year",
        nargs="?",
        type=int,
        default=years[-1],
        help=f"{FIRST_YEAR}-{years[-1]} (default: %(default)s)",
    )
    parser.add_argument(
        "-s",
        "--session",
        help="session token to use, instead of the environment or the config file",
    )
    parser.add_argument(
        "-c",
        "--no-config",
        action="store_false",
        dest="use_config_file",
        help="never read the session token from the aoc_helper.toml config file",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s v{__version__}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    if args.day in years and args.year in days:
        # be forgiving
        args.day, args.year = args.year, args.day
    if args.day not in days or args.year not in years:
        parser.print_usage()
        parser.exit(1)
    resolver = CredentialResolver.from_environment(
        override=args.session,
        use_config_file=args.use_config_file,
    )
    day = Day(args.year, args.day, resolver=resolver)
    try:
        data = day.input_data
    except AocHelperError as err:
        parser.exit(1, f"{type(err).__name__}: {err}\n")
    print(data)
