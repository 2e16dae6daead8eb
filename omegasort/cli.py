"""CLI entry point: argparse, flag validation, sort/check orchestration."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path
from typing import Any

from omegasort.config import apply_env_overrides, default_config, load_config
from omegasort.enums import ExitStatus
from omegasort.errors import OmegasortError, UnexpectedEmptyLinesError, UsageError
from omegasort.lines import format_lines, read_lines
from omegasort.params import make_params
from omegasort.registry import APPROACHES, get_approach
from omegasort.sorter import Sorter
from omegasort.utils import print_error, safe_write_text

logger = logging.getLogger(__name__)

LONG_HELP = """
sort approaches:
  text            Each line is sorted as text. Ordering follows --locale,
                  --case-insensitive and --reverse.
  numbered-text   Each line starts with an integer or simple decimal (no
                  leading space, no exponent), optionally followed by text.
                  Lines sort by number, then by the text after it. Lines
                  without a number sort after lines with one.
  datetime-text   Each line starts with a date or datetime containing no
                  spaces, e.g. 2019-08-27T19:13:16. Lines sort by instant,
                  then as whole lines of text. Undated lines come last.
  path            Each line is a path. Absolute paths come before relative
                  ones and shallower paths before deeper ones, so /z comes
                  before /a/a. With --windows, paths with drive letters sort
                  first, by drive letter.
  ip              Each line is an IPv4 or IPv6 address. IPv4 addresses always
                  sort before IPv6 addresses. Accepts --reverse only.
  network         Each line is an IPv4 or IPv6 network in CIDR notation.
                  Networks with the same base address sort larger network
                  first (1.1.1.0/24 before 1.1.1.0/28). Accepts --reverse only.

output:
  By default FILE is copied to FILE.bak and then replaced by the sorted
  content. A file that is already sorted is left untouched.

exit status:
  0 success, 1 --check found a problem, 2 the file could not be sorted,
  101 incompatible flags.

examples:
  omegasort --sort text --locale de-DE words.txt
  omegasort --sort numbered-text --stdout steps.txt
  omegasort --sort path --windows --in-place paths.txt
  omegasort --sort ip --unique --check allowlist.txt
  omegasort --sort text --comment-prefix '#' --in-place .gitignore
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="omegasort",
        description="Sort a file of lines as text, numbers, datetimes, paths, IPs or networks",
        epilog=LONG_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-s", "--sort", required=True, choices=list(APPROACHES),
                        help="The type of sorting to use")
    parser.add_argument("-l", "--locale", type=str, default=None, metavar="CODE",
                        help="Locale to sort with. Without one, lines sort in code point order")
    parser.add_argument("-u", "--unique", action="store_true",
                        help="Make the file contents unique, or check that they are with --check")
    parser.add_argument("--comment-prefix", type=str, default=None, metavar="PREFIX",
                        help="Keep comment lines starting with PREFIX attached to the line after them")
    parser.add_argument("-c", "--case-insensitive", action="store_true",
                        help="Sort case-insensitively (many locales already do)")
    parser.add_argument("-r", "--reverse", action="store_true", help="Sort in reverse order")
    parser.add_argument("--windows", action="store_true",
                        help="Parse paths as Windows paths for path sort")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("-i", "--in-place", action="store_true",
                        help="Modify the file in place instead of making a backup")
    output.add_argument("--stdout", action="store_true",
                        help="Print the sorted output to stdout instead of rewriting the file")
    output.add_argument("--check", action="store_true",
                        help="Check that the file is sorted (exit status 1 if not)")

    parser.add_argument("--debug", action="store_true", help="Print debugging info while running")
    parser.add_argument("file", type=Path, help="The file to sort")
    return parser


def setup_logging(debug: bool) -> None:
    """Route omegasort's log records to stderr."""
    pkg_logger = logging.getLogger("omegasort")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(name)s][%(levelname)s] %(message)s"))
    pkg_logger.handlers[:] = [handler]
    pkg_logger.setLevel(logging.DEBUG if debug else logging.INFO)


def validate_args(args: argparse.Namespace) -> None:
    approach = get_approach(args.sort)
    if args.locale and not approach.supports_locale:
        raise UsageError(f"you cannot set a locale when sorting by {approach.name}")
    if args.windows and not approach.supports_path_flavor:
        raise UsageError(f"you cannot pass the --windows flag when sorting by {approach.name}")


def backup_path(path: Path, suffix: str = ".bak") -> Path:
    """``input.txt`` -> ``input.txt.bak``; ``Makefile`` -> ``Makefile.bak``."""
    return path.with_name(path.name + suffix)


def execute(args: argparse.Namespace, config: dict[str, Any]) -> None:
    """Sort or check ``args.file``. Raises ``OmegasortError`` on failure.

    Config values fill in flags that were not given, and only for approaches
    that accept them.
    """
    validate_args(args)
    approach = get_approach(args.sort)

    locale = args.locale or (config["locale"] if approach.supports_locale else None)
    windows = args.windows or (config["windows"] and approach.supports_path_flavor)
    params = make_params(
        locale,
        case_insensitive=args.case_insensitive or config["case_insensitive"],
        reverse=args.reverse,
        windows=windows,
    )
    logger.debug("sorting %s by %s with %s", args.file, approach.name, params)
    sorter = Sorter(approach, params, unique=args.unique)

    comment_prefix = args.comment_prefix or config["comment_prefix"] or None
    lines, has_empty_lines, line_ending = read_lines(args.file, comment_prefix)

    if args.check:
        if has_empty_lines:
            raise UnexpectedEmptyLinesError()
        sorter.check(lines)
        logger.debug("%s is sorted", args.file)
        return

    sorted_lines = sorter.sort_lines(lines)
    content = format_lines(sorted_lines, line_ending)

    if args.stdout:
        sys.stdout.write(content)
        return

    # Blank lines are dropped by sorting, so a file that had any always changes.
    if not has_empty_lines and sorted_lines == lines:
        logger.debug("file is already sorted")
        return

    if not args.in_place:
        backup = backup_path(args.file, config["backup_suffix"])
        shutil.copyfile(args.file, backup)
        logger.debug("backed up %s to %s", args.file, backup)

    safe_write_text(args.file, content)


def run(args: argparse.Namespace, config: dict[str, Any] | None = None) -> int:
    """Execute and map failures to an exit status, printing a one-line error."""
    if config is None:
        config = default_config()
    try:
        execute(args, config)
    except OmegasortError as exc:
        print_error(str(exc))
        return exc.exit_status
    except (OSError, UnicodeDecodeError) as exc:
        print_error(str(exc))
        return ExitStatus.ERROR
    return ExitStatus.OK


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)
    config = apply_env_overrides(load_config())

    try:
        status = run(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        status = ExitStatus.INTERRUPTED
    sys.exit(int(status))


if __name__ == "__main__":
    main()
