from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from fcore.errors import require_function

L = TypeVar('L')
R = TypeVar('R')
U = TypeVar('U')


@dataclass(frozen=True, repr=False)
class Either(Generic[L, R]):
    """
    Either[L, R]: значение слева (ошибка) или справа (успех).
    map / flat_map работают только с правым значением, левое проходит как есть.
    Извлечение значения только через fold.
    """
    _is_right: bool
    _value: Any

    @staticmethod
    def left(value: L) -> "Either[L, R]":
        return Either(False, value)

    @staticmethod
    def right(value: R) -> "Either[L, R]":
        return Either(True, value)

    def is_left(self) -> bool:
        return not self._is_right

    def is_right(self) -> bool:
        return self._is_right

    def fold(self, left_mapper: Callable[[L], U], right_mapper: Callable[[R], U]) -> U:
        if self._is_right:
            return require_function(right_mapper, "right mapper")(self._value)
        return require_function(left_mapper, "left mapper")(self._value)

    def map(self, mapper: Callable[[R], U]) -> "Either[L, U]":
        # на левой ветке mapper не вызывается, поэтому и не проверяется
        if self._is_right:
            return Either.right(require_function(mapper, "mapper")(self._value))
        return self  # type: ignore

    def map_left(self, mapper: Callable[[L], U]) -> "Either[U, R]":
        if self._is_right:
            return self  # type: ignore
        return Either.left(require_function(mapper, "mapper")(self._value))

    def flat_map(self, mapper: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        if self._is_right:
            return require_function(mapper, "mapper")(self._value)
        return self  # type: ignore

    bind = flat_map

    def __repr__(self) -> str:
        side = "Right" if self._is_right else "Left"
        return f"{side}({self._value!r})"


def left(value: L) -> Either[L, Any]:
    return Either.left(value)


def right(value: R) -> Either[Any, R]:
    return Either.right(value)
