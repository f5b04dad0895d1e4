"""Numeric error codes and errors that carry them."""

from __future__ import annotations

from collections.abc import Mapping

_CODE_NAMES: dict[int, str] = {}


def register_code_names(names: Mapping[int, str]) -> None:
    """Register symbolic names for numeric codes."""
    _CODE_NAMES.update({int(number): name for number, name in names.items()})


class Code(int):
    """An error code; prints as its registered name, or its number."""

    def number(self) -> int:
        return int(self)

    def __str__(self) -> str:
        return _CODE_NAMES.get(int(self), str(int(self)))

    def __repr__(self) -> str:
        return f"Code({int(self)})"


def new_code(code: int) -> Code:
    return Code(code)


class CodedError(Exception):
    """An exception carrying a :class:`Code`, a message and an optional inner error."""

    def __init__(self, code: Code, message: str = "", inner: BaseException | None = None):
        super().__init__(message)
        self.code = Code(code)
        self.message = message
        self.inner = inner
        if inner is not None:
            self.__cause__ = inner

    def __str__(self) -> str:
        text = f"[{self.code.number()}]{self.message}"
        if self.inner is not None:
            return f"{text} {self.inner}"
        return text

    def is_code(self, code: int) -> bool:
        return self.code.number() == int(code)

    def matches(self, other: object) -> bool:
        """True if ``other`` or an error in its cause chain has the same code."""
        seen = set()
        current = other
        while isinstance(current, BaseException) and id(current) not in seen:
            if isinstance(current, CodedError):
                return current.code.number() == self.code.number()
            seen.add(id(current))
            current = current.__cause__
        return False


def new_error(code: int, message: str = "") -> CodedError:
    return CodedError(Code(code), message)


def with_error(err: BaseException, code: int, message: str = "") -> CodedError:
    return CodedError(Code(code), message, err)