import os
import sys
import logging

from typing import Optional, Sequence

from . import const, help, vt100
from .errors import ArgumentError
from .parser import ArgParser

_logger = logging.getLogger(__name__)


def argv() -> list[str]:
    """
    Returns the argument vector of the process, with the tokens from
    `FLAGKIT_EXTRA_ARGS` spliced in after the program name.
    """
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    args = sys.argv[:1] or [const.ARGV0]
    return args + (extra.split() if extra else []) + sys.argv[1:]


def helpRequested(parser: ArgParser, args: Sequence[str]) -> bool:
    """Checks for a help key that the parser does not declare itself."""
    for key in const.HELP_KEYS:
        if key in args[1:] and parser.registry.lookup(key) is None:
            return True
    return False


def exec(parser: ArgParser, args: Optional[Sequence[str]] = None) -> bool:
    """
    Parses the command line, printing the help or the error on failure.

    Returns:
        True if the arguments were parsed successfully.
    """
    if args is None:
        args = argv()

    argv0 = os.path.basename(args[0]) if len(args) > 0 else const.ARGV0

    if helpRequested(parser, args):
        help.help(parser, argv0)
        return False

    try:
        parser.parse(args)
        return True

    except ArgumentError as e:
        _logger.info(f"Invalid command line: {e}")
        vt100.error(str(e))
        print("Usage: " + help.usage(parser, argv0), end="\n\n")
        return False
