from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from fcore.compose import compose, identity
from fcore.errors import require_function

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
E = TypeVar('E')


@dataclass(frozen=True)
class Reader(Generic[A, B]):
    """
    Reader[A, B]: отложенное вычисление A -> B.

    Окружение A передаётся только в apply, а до этого вычисления
    собираются через map и flat_map. flat_map отдаёт одно и то же
    окружение обеим стадиям.
    """
    function: Callable[[A], B]

    @staticmethod
    def unit(f: Callable[[A], B]) -> "Reader[A, B]":
        return Reader(require_function(f, "function"))

    @staticmethod
    def constant(b: B) -> "Reader[A, B]":
        return Reader(lambda _: b)

    @staticmethod
    def ask() -> "Reader[A, A]":
        """Reader, который возвращает само окружение."""
        return Reader(identity)

    def apply(self, a: A) -> B:
        return self.function(a)

    def __call__(self, a: A) -> B:
        return self.apply(a)

    def map(self, f: Callable[[B], C]) -> "Reader[A, C]":
        return Reader(compose(require_function(f, "mapper"), self.function))

    def flat_map(self, f: Callable[[B], "Reader[A, C]"]) -> "Reader[A, C]":
        require_function(f, "mapper")
        function = self.function

        def run(a: A) -> C:
            return f(function(a)).apply(a)
        return Reader(run)

    bind = flat_map

    def local(self, f: Callable[[E], A]) -> "Reader[E, B]":
        """Запускает этот Reader на окружении, преобразованном через f."""
        return Reader(compose(self.function, require_function(f, "function")))
