import logging
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable)


class FunctionalCoreError(Exception):
    """Базовая ошибка функционального ядра."""


class EmptyValueAccessed(FunctionalCoreError, LookupError):
    """Прямой доступ к значению пустого Maybe."""

    def __init__(self, message: str = "No value present"):
        super().__init__(message)


class NullArgument(FunctionalCoreError, TypeError):
    """Вместо функции-аргумента передан None."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is null")


def require_function(fn: Optional[F], name: str) -> F:
    """
    Проверяет аргумент-функцию до вызова.
    Возвращает fn без изменений или бросает NullArgument.
    """
    if fn is None:
        logger.debug("rejected null argument %r", name)
        raise NullArgument(name)
    return fn
