import logging
import dataclasses as dt

from enum import Enum
from typing import Any, Generator, Optional
from dataclasses_json import DataClassJsonMixin

from .errors import ArgumentError, DuplicateKey, TypeMismatch, UnknownKey, UnsupportedKind

_logger = logging.getLogger(__name__)

Value = str | int | float | bool


class Kind(Enum):
    """
    Enum representing the closed set of argument kinds.
    """

    STRING = "string"
    I32 = "i32"
    F32 = "f32"
    BOOL = "bool"

    @staticmethod
    def fromType(typ: Any) -> "Kind":
        """
        Map a Python type to its argument kind.

        Raises:
            UnsupportedKind: If the type is not one of str, int, float or bool.
        """
        if isinstance(typ, Kind):
            return typ
        for kind, t in _TYPES.items():
            if typ is t:
                return kind
        raise UnsupportedKind(getattr(typ, "__name__", typ))

    def pytype(self) -> type:
        return _TYPES[self]

    def zero(self) -> Value:
        """Returns the value used when no default is declared."""
        return self.pytype()()

    def accepts(self, value: Any) -> bool:
        # bool is a subclass of int, so compare exact types
        if self is Kind.F32:
            return type(value) in (float, int)
        return type(value) is self.pytype()

    def normalize(self, value: Any) -> Value:
        if self is Kind.F32:
            return float(value)
        return value


_TYPES: dict[Kind, type] = {
    Kind.STRING: str,
    Kind.I32: int,
    Kind.F32: float,
    Kind.BOOL: bool,
}


# --- Argument --------------------------------------------------------------- #


@dt.dataclass
class Argument(DataClassJsonMixin):
    """
    A declared argument and the state of its last parse.
    """

    triggerKeys: list[str]
    """Keys matching this argument on the command line, e.g. ["-v", "--version"]."""
    kind: Kind
    default: Value
    """Declared default, never mutated after declaration."""
    description: str = ""
    isRequired: bool = False
    value: Value = dt.field(init=False)
    """Current value, always of the type of `kind`."""
    provided: bool = dt.field(init=False, default=False)
    """Whether the most recent parse matched and assigned this argument."""

    def __post_init__(self):
        if not self.kind.accepts(self.default):
            raise TypeMismatch(
                self.triggerKeys, self.kind.value, type(self.default).__name__
            )
        self.default = self.kind.normalize(self.default)
        self.value = self.default

    def matches(self, key: str) -> bool:
        return key in self.triggerKeys

    def assign(self, value: Value):
        """Set the current value and mark the argument as provided."""
        assert self.kind.accepts(value)
        self.value = self.kind.normalize(value)
        self.provided = True

    def reset(self):
        self.value = self.default
        self.provided = False

    def describe(self) -> dict[str, Any]:
        """Returns a JSON-serialisable view of the argument."""
        return self.to_dict(encode_json=True)


# --- Registry --------------------------------------------------------------- #


@dt.dataclass
class Registry(DataClassJsonMixin):
    """
    Insertion ordered set of declared arguments.
    """

    arguments: list[Argument] = dt.field(default_factory=list)
    required: list[int] = dt.field(default_factory=list)
    """Indexes of required arguments, checked once the whole input is consumed."""

    def declare(
        self,
        triggerKeys: list[str] | str,
        description: str,
        kind: Kind,
        isRequired: bool,
        default: Value,
    ) -> Argument:
        """
        Declare a new argument.

        Args:
            triggerKeys: The keys triggering the argument, a single key may be given as a string.
            description: A description of the argument.
            kind: The kind of the argument.
            isRequired: Whether parsing fails when the argument is missing.
            default: The value used until the argument is provided.

        Returns:
            The declared argument.

        Raises:
            ArgumentError: If no trigger key is given.
            DuplicateKey: If a key is already used by this or another argument.
            TypeMismatch: If the default does not match the kind.
        """
        if isinstance(triggerKeys, str):
            triggerKeys = [triggerKeys]

        keys = list(triggerKeys)
        if len(keys) == 0:
            raise ArgumentError("Expected at least one trigger key")

        for i, key in enumerate(keys):
            if key in keys[:i]:
                raise DuplicateKey(key, keys)
            index = self.lookup(key)
            if index is not None:
                raise DuplicateKey(key, self.arguments[index].triggerKeys)

        argument = Argument(keys, kind, default, description, isRequired)

        if isRequired:
            self.required.append(len(self.arguments))

        self.arguments.append(argument)
        _logger.debug(f"Declared argument {keys} of kind {kind.value}")
        return argument

    def lookup(self, key: str) -> Optional[int]:
        """
        Lookup the index of the first argument triggered by `key`.

        Returns:
            The index, or None if no argument matches.
        """
        for i, argument in enumerate(self.arguments):
            if argument.matches(key):
                return i
        return None

    def ensure(self, key: str) -> Argument:
        """
        Lookup the argument triggered by `key`.

        Raises:
            UnknownKey: If no argument matches.
        """
        index = self.lookup(key)
        if index is None:
            raise UnknownKey(key)
        return self.arguments[index]

    def iter(self) -> Generator[Argument, None, None]:
        yield from self.arguments

    def iterRequired(self) -> Generator[Argument, None, None]:
        for index in self.required:
            yield self.arguments[index]

    def reset(self):
        for argument in self.arguments:
            argument.reset()

    def dump(self) -> list[dict[str, Any]]:
        return [a.describe() for a in self.arguments]
