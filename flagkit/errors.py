class ArgumentError(ValueError):
    """
    Base class for every error raised while declaring, parsing or
    querying arguments.
    """

    pass


class UnknownKey(ArgumentError):
    def __init__(self, key: str):
        super().__init__(f"Unknown argument '{key}'")
        self.key = key


class MissingValue(ArgumentError):
    def __init__(self, keys: list[str], kind: str):
        super().__init__(
            f"Expected {kind} value after argument {_fmtKeys(keys)}"
        )
        self.keys = keys


class TypeMismatch(ArgumentError):
    def __init__(self, keys: list[str], expected: str, got: str):
        super().__init__(
            f"Argument {_fmtKeys(keys)} is declared as {expected}, not {got}"
        )
        self.keys = keys


class MissingRequired(ArgumentError):
    def __init__(self, keys: list[str]):
        super().__init__(f"Required argument {_fmtKeys(keys)} is not provided")
        self.keys = keys


class UnsupportedKind(ArgumentError):
    def __init__(self, what: object):
        super().__init__(f"Unsupported argument type '{what}'")


class DuplicateKey(ArgumentError):
    def __init__(self, key: str, owner: list[str]):
        super().__init__(
            f"Duplicated argument key '{key}' already declared by {_fmtKeys(owner)}"
        )
        self.key = key


def _fmtKeys(keys: list[str]) -> str:
    return "'" + ", ".join(keys) + "'"
