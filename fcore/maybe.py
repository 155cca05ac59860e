import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from fcore.either import Either
from fcore.errors import EmptyValueAccessed, require_function

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')
L = TypeVar('L')


@dataclass(frozen=True, repr=False)
class Maybe(Generic[T]):
    """
    Maybe[T]: значение типа T или его отсутствие (Nothing).

    Отсутствие здесь не ошибка, а обычные данные: map / flat_map просто
    пропускают пустой Maybe дальше, а значение достаётся через fold.
    Вместо конструктора используйте Maybe.some / Maybe.none.
    """
    _present: bool
    _value: Optional[T] = None

    def __post_init__(self):
        if self._present and self._value is None:
            raise ValueError("Some cannot hold None, use Maybe.some")

    @staticmethod
    def none() -> "Maybe[Any]":
        return _NOTHING

    @staticmethod
    def some(value: Optional[T]) -> "Maybe[T]":
        """Оборачивает значение; None превращается в пустой Maybe."""
        if value is None:
            return _NOTHING
        return Maybe(True, value)

    def is_empty(self) -> bool:
        return not self._present

    def is_some(self) -> bool:
        return self._present

    def _get(self) -> T:
        """
        Прямой доступ к значению. На пустом Maybe бросает EmptyValueAccessed,
        поэтому снаружи пользуйтесь fold.
        """
        if not self._present:
            logger.debug("value accessed on an empty Maybe")
            raise EmptyValueAccessed()
        return self._value  # type: ignore

    def map(self, mapper: Callable[[T], Optional[U]]) -> "Maybe[U]":
        require_function(mapper, "mapper")
        if self._present:
            return Maybe.some(mapper(self._get()))
        return Maybe.none()

    def flat_map(self, mapper: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        require_function(mapper, "mapper")
        if self._present:
            return mapper(self._get())
        return Maybe.none()

    bind = flat_map

    def fold(self, if_none: Callable[[], U], mapper: Callable[[T], U]) -> U:
        require_function(if_none, "supplier")
        require_function(mapper, "mapper")
        return mapper(self._get()) if self._present else if_none()

    def to_either(self, left_supplier: Callable[[], L]) -> Either[L, T]:
        if self._present:
            return Either.right(self._value)
        return Either.left(require_function(left_supplier, "left supplier")())

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._present else "Nothing"

    def __reduce__(self):
        # после pickle пустой Maybe снова становится общим экземпляром
        return (some, (self._value,))


_NOTHING: Maybe[Any] = Maybe(False)


def none() -> Maybe[Any]:
    return _NOTHING


def some(value: Optional[T]) -> Maybe[T]:
    return Maybe.some(value)
