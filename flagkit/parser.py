import logging
import math
import re

from typing import Any, Optional, Sequence

from . import const
from .errors import ArgumentError, MissingRequired, MissingValue, TypeMismatch, UnsupportedKind
from .model import Argument, Kind, Registry, Value

_logger = logging.getLogger(__name__)

# --- Coercion --------------------------------------------------------------- #

# Leading numbers, the rest of the token is ignored
_I32_PREFIX = re.compile(r"\s*[+-]?\d+")
_F32_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE,
)


def _tryParseI32(s: str) -> Optional[int]:
    """Tries to parse a signed 32-bit integer, returning None if unsuccessful."""
    m = _I32_PREFIX.match(s)
    if m is None:
        return None

    n = int(m.group())
    if n < const.I32_MIN or n > const.I32_MAX:
        return None
    return n


def _tryParseF32(s: str) -> Optional[float]:
    """
    Tries to parse a single precision float, returning None if unsuccessful
    or if the value overflows or underflows a float32.
    """
    m = _F32_PREFIX.match(s)
    if m is None:
        return None

    text = m.group()
    f = float(text)
    if math.isnan(f):
        return f

    if math.isinf(f):
        # Only a spelled out infinity, not an overflowing literal
        return f if "inf" in text.lower() else None

    if abs(f) > const.F32_MAX:
        return None
    if f != 0.0 and abs(f) < const.F32_MIN_NORMAL:
        return None
    return f


def _tryParseBool(s: str) -> Optional[bool]:
    if s == const.TRUE_LITERAL:
        return True
    elif s == const.FALSE_LITERAL:
        return False
    return None


# --- Engine ----------------------------------------------------------------- #


def _expectValue(argument: Argument, tokens: Sequence[str], i: int) -> str:
    if i + 1 >= len(tokens):
        raise MissingValue(argument.triggerKeys, argument.kind.value)
    return tokens[i + 1]


def _consume(argument: Argument, tokens: Sequence[str], i: int) -> int:
    """
    Assign `argument` from the tokens following the key at `i`.

    Returns:
        The number of tokens consumed, key included.
    """
    if argument.kind == Kind.STRING:
        argument.assign(str(_expectValue(argument, tokens, i)))
        return 2

    elif argument.kind == Kind.I32:
        n = _tryParseI32(_expectValue(argument, tokens, i))
        argument.assign(argument.default if n is None else n)
        return 2

    elif argument.kind == Kind.F32:
        f = _tryParseF32(_expectValue(argument, tokens, i))
        argument.assign(argument.default if f is None else f)
        return 2

    elif argument.kind == Kind.BOOL:
        if i + 1 >= len(tokens):
            argument.assign(True)
            return 1

        b = _tryParseBool(tokens[i + 1])
        if b is None:
            # Not a value, the next token is read as a key
            return 1

        argument.assign(b)
        return 2

    raise UnsupportedKind(argument.kind)


def parse(registry: Registry, tokens: Sequence[str]):
    """
    Populate the registry from a raw argument vector.

    The first token is the program name and is skipped. Every argument is
    reset to its default before the tokens are applied. On failure the
    arguments assigned so far keep their new value.

    Args:
        registry: The declared arguments.
        tokens: The argument vector, e.g. `sys.argv`.

    Raises:
        UnknownKey: If a token does not match any declared key.
        MissingValue: If a string or numeric key is the last token.
        MissingRequired: If a required argument was not provided.
    """
    registry.reset()

    i = 1
    while i < len(tokens):
        argument = registry.ensure(tokens[i])
        i += _consume(argument, tokens, i)

    for argument in registry.iterRequired():
        if not argument.provided:
            raise MissingRequired(argument.triggerKeys)


# --- Facade ----------------------------------------------------------------- #


class ArgParser:
    """
    Declares arguments and reads their values from the command line.

    ```python
    parser = ArgParser("My program")
    parser.addArgument(str, ["-v", "--version"], "Show the version", False, "1.0.0")
    parser.parse(sys.argv)
    parser.getArgument("--version", str)
    ```
    """

    description: str
    registry: Registry
    _parsed: bool

    def __init__(self, description: str = ""):
        self.description = description
        self.registry = Registry()
        self._parsed = False

    def addArgument(
        self,
        typ: type,
        triggerKeys: list[str] | str,
        description: str = "",
        isRequired: bool = False,
        default: Any = None,
    ) -> Argument:
        """
        Declare an argument.

        Args:
            typ: One of str, int, float or bool.
            triggerKeys: The keys triggering the argument, e.g. ["-v", "--version"].
            description: A description shown in the help.
            isRequired: If True, parsing fails when the argument is not given.
            default: The value used when the argument is not given, the
                type's zero value when omitted.

        Raises:
            UnsupportedKind: If `typ` is not a supported type.
            DuplicateKey: If a key is already declared.
            TypeMismatch: If `default` is not of type `typ`.
        """
        kind = Kind.fromType(typ)
        if default is None:
            default = kind.zero()
        return self.registry.declare(
            triggerKeys, description, kind, isRequired, default
        )

    def parse(self, tokens: Sequence[str]):
        """
        Parse the argument vector, the first token being the program name.

        Raises:
            ArgumentError: If the tokens do not match the declarations.
        """
        self._parsed = False
        try:
            parse(self.registry, tokens)
        except ArgumentError as e:
            _logger.debug(f"Parsing {list(tokens)} failed: {e}")
            raise

        self._parsed = True
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(f"Parsed arguments: {self.registry.to_json()}")

    def getArgument(self, key: str, typ: type) -> Value:
        """
        Returns the current value of the argument triggered by `key`.

        Raises:
            UnknownKey: If no argument matches `key`.
            TypeMismatch: If the argument is not declared with `typ`.
        """
        argument = self.registry.ensure(key)
        if typ is not argument.kind.pytype():
            raise TypeMismatch(
                argument.triggerKeys,
                argument.kind.value,
                getattr(typ, "__name__", str(typ)),
            )
        return argument.value

    def reset(self):
        """Restore every argument to its default, declarations are kept."""
        self.registry.reset()
        self._parsed = False

    def isParsed(self) -> bool:
        return self._parsed
