import os
import sys
import logging

from . import cli, const, vt100
from .errors import (
    ArgumentError,
    DuplicateKey,
    MissingRequired,
    MissingValue,
    TypeMismatch,
    UnknownKey,
    UnsupportedKind,
)
from .model import Argument, Kind, Registry
from .parser import ArgParser

__all__ = [
    "ArgParser",
    "Argument",
    "ArgumentError",
    "DuplicateKey",
    "Kind",
    "MissingRequired",
    "MissingValue",
    "Registry",
    "TypeMismatch",
    "UnknownKey",
    "UnsupportedKind",
    "main",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            asctime = vt100.paint("%(asctime)s", vt100.CYAN, stream=sys.stderr)
            levelname = vt100.paint("%(levelname)s", vt100.YELLOW, stream=sys.stderr)
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{asctime} {levelname} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            os.makedirs(const.GLOBAL_DIR, exist_ok=True)
            logging.basicConfig(
                level=logging.INFO,
                filename=const.GLOBAL_LOG_FILE,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def _demo() -> ArgParser:
    parser = ArgParser(const.DESCRIPTION)
    parser.addArgument(str, ["-v", "--version"], "Version to report", False, const.VERSION_STR)
    parser.addArgument(int, ["-c", "--col"], "Number of columns")
    parser.addArgument(float, ["-r", "--radius"], "Radius of the shape", False, 1.0)
    parser.addArgument(bool, ["--use-color"], "Colorize the output")
    parser.addArgument(bool, ["--verbose"], "Enable verbose logging")
    return parser


def main() -> int:
    parser = _demo()
    args = cli.argv()
    try:
        logger.setup("--verbose" in args)
        if not cli.exec(parser, args):
            return 1

        for argument in parser.registry.iter():
            value = parser.getArgument(argument.triggerKeys[0], argument.kind.pytype())
            state = "provided" if argument.provided else "default"
            print(f"{', '.join(argument.triggerKeys)}: {value!r} ({state})")
        return 0

    except KeyboardInterrupt:
        print()
        return 1
