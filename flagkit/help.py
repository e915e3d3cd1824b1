from typing import TYPE_CHECKING

from . import const, vt100
from .model import Argument

if TYPE_CHECKING:
    from .parser import ArgParser


def _flag(argument: Argument) -> str:
    return ", ".join(argument.triggerKeys)


def _fmtValue(argument: Argument) -> str:
    if argument.kind.pytype() is str:
        return f"'{argument.default}'"
    if argument.kind.pytype() is bool:
        return const.TRUE_LITERAL if argument.default else const.FALSE_LITERAL
    return str(argument.default)


def usage(parser: "ArgParser", argv0: str = const.ARGV0) -> str:
    """Returns a one line usage string for the parser."""
    res = argv0
    for argument in parser.registry.iter():
        flag = _flag(argument)
        if argument.kind.pytype() is not bool:
            flag += f" <{argument.kind.value}>"

        if argument.isRequired:
            res += f" {flag}"
        else:
            res += f" [{flag}]"
    return res


def help(parser: "ArgParser", argv0: str = const.ARGV0):
    """Prints the help message for the parser."""
    vt100.title(argv0)
    print()

    vt100.subtitle("Usage")
    print(vt100.indent(usage(parser, argv0)))
    print()

    if parser.description:
        vt100.subtitle("Description")
        print(vt100.paragraph(parser.description))
        print()

    if any(parser.registry.iter()):
        vt100.subtitle("Options")
        for argument in parser.registry.iter():
            line = f"{vt100.paint(_flag(argument), vt100.GREEN)} <{argument.kind.value}>"
            if argument.description:
                line += f" {argument.description}"

            if argument.isRequired:
                line += " " + vt100.paint("(required)", vt100.YELLOW)
            else:
                line += " " + vt100.paint(
                    f"(default: {_fmtValue(argument)})", vt100.BRIGHT_BLACK
                )

            print(vt100.indent(line))
        print()
