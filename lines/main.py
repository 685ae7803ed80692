"""
Command line entry point for the lines tool.

Takes text and breaks it into lines of a desired length, optionally framing
each line between a prefix and a suffix. The final line length, prefix and
suffix included, stays within --length.

Example usage:
    lines --length 40 --prefix "# " "Some long text ..."
    cat large-text.txt | lines -l 60

Input piped through stdin is read before the positional argument is looked at.
"""

import argparse
import logging
import os
import select
import stat
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from lines.config import Settings, load_config
from lines.drivers.printer_stream import PrinterDriver
from lines.utils import OVERFLOW_POLICIES, wrap_essay

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_USAGE = 2

EPILOG = """\
The text can be of any length. For large amounts of text it can be
convenient to pass it in via stdin, e.g. piping in from a file:

    $ cat large-text.txt | lines

Defaults can also be set with the LINES_LENGTH, LINES_PREFIX, LINES_SUFFIX
and LINES_OVERFLOW environment variables (or a .env file).
"""


class LinesError(Exception):
    """A user-facing error, reported as "lines: <message>"."""

    def __init__(self, message: str, exit_code: int = EXIT_USAGE):
        super().__init__(message)
        self.exit_code = exit_code

    def __str__(self):
        return f"lines: {super().__str__()}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lines",
        usage="lines [options] <string>",
        description="Break text into multiple lines of a desired length.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("strings", nargs="*", metavar="<string>", help=argparse.SUPPRESS)
    parser.add_argument(
        "--length", "-l",
        type=int,
        default=None,
        metavar="<length>",
        help="Threshold at which to insert a new line. Default is 72 characters.",
    )
    parser.add_argument(
        "--prefix", "-p",
        default=None,
        metavar="<prefix>",
        help="Optional prefix prepended to the start of each line. "
        "The final line length will remain consistent with existing preferences.",
    )
    parser.add_argument(
        "--suffix", "-s",
        default=None,
        metavar="<suffix>",
        help="Optional suffix appended to the end of each line. "
        "The final line length will remain consistent with existing preferences.",
    )
    parser.add_argument(
        "--overflow",
        choices=OVERFLOW_POLICIES,
        default=None,
        help="What to do with words longer than a line: drop them (default), "
        "break them into pieces or print them on an over-length line.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug information to stderr.",
    )
    return parser


def stdin_has_input(stdin: Optional[TextIO], wait: bool) -> bool:
    """
    Whether stdin should be read as input text.

    A regular file counts when it is not empty. A pipe or socket counts when
    data is already waiting, or always when wait is set (no positional string
    was given, so piped input is the only possible source).
    In-memory streams without a file descriptor always count.
    """
    if stdin is None or stdin.isatty():
        return False

    try:
        fd = stdin.fileno()
    except (AttributeError, OSError, ValueError):
        return True

    info = os.fstat(fd)
    if stat.S_ISREG(info.st_mode):
        return info.st_size > 0
    if wait:
        return True

    try:
        readable, _, _ = select.select([stdin], [], [], 0)
    except (OSError, ValueError):
        # select() only accepts sockets on Windows
        logger.debug("Cannot poll stdin, ignoring it")
        return False
    return bool(readable)


def read_args(strings: List[str], stdin: Optional[TextIO]) -> List[str]:
    """Collect the input strings, appending piped stdin content if there is any."""
    args = list(strings)
    if not stdin_has_input(stdin, wait=not args):
        return args

    try:
        piped = stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LinesError(f"failed to read stdin: {e}", EXIT_INPUT_ERROR) from e

    if piped:
        logger.debug(f"Read {len(piped)} characters from stdin")
        args.append(piped)
    return args


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Apply command line overrides on top of the loaded settings."""
    overrides = {
        "width": args.length,
        "prefix": args.prefix,
        "suffix": args.suffix,
        "overflow": args.overflow,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**{**base.model_dump(), **updates})


def run(text: str, settings: Settings, printer: PrinterDriver) -> int:
    """Wraps text with the given settings and prints it. Returns the number of lines printed."""
    width = settings.effective_width
    if width < 1:
        logger.warning(
            f"Prefix and suffix leave no room for text at length {settings.width}"
        )

    printer.reset_buffer()
    printer.print_lines(wrap_essay(text, width, settings.overflow))
    return printer.lines_printed


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("lines").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        try:
            settings = resolve_settings(args, load_config())
        except ValidationError as e:
            raise LinesError(f"invalid configuration: {e}") from e

        strings = read_args(args.strings, stdin if stdin is not None else sys.stdin)
        if not strings:
            raise LinesError("no string provided")
        if len(strings) > 1:
            raise LinesError("too many arguments")

        printer = PrinterDriver(settings.prefix, settings.suffix, stdout)
        try:
            count = run(strings[0], settings, printer)
        finally:
            printer.close()
        logger.debug(f"Printed {count} lines at width {settings.width}")
    except LinesError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
