from typing import Callable, Any, TypeVar

T = TypeVar('T')


def identity(x: T) -> T:
    return x


def compose(*funcs: Callable) -> Callable:
    """
    Композиция функций: f(g(h(x))).
    Применяет функции справа налево; без аргументов это identity.
    """
    def inner(x: Any) -> Any:
        result = x
        for func in reversed(funcs):
            result = func(result)
        return result
    return inner
