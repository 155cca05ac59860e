"""
Законы Maybe / Either / Reader в виде данных.

Каждая проверка возвращает LawCheck, поэтому законы можно и показать
в таблице, и проверить в тестах.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from fcore.compose import identity
from fcore.either import Either
from fcore.maybe import Maybe
from fcore.reader import Reader
from fcore.settings import LawSettings

logger = logging.getLogger(__name__)

NO_VALUE = "No Value"


@dataclass(frozen=True)
class LawCheck:
    subject: str
    law: str
    holds: bool
    detail: str


class _Counted:
    """Обёртка над функцией, считающая вызовы."""

    def __init__(self, f: Callable):
        self.f = f
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.f(*args)


def _check(subject: str, law: str, actual: Any, expected: Any) -> LawCheck:
    return LawCheck(subject, law, actual == expected, f"{actual!r} == {expected!r}")


def maybe_laws(x: Any, f: Callable) -> Tuple[LawCheck, ...]:
    mapped, flat_mapped = _Counted(f), _Counted(lambda v: Maybe.some(f(v)))
    empty_map = Maybe.none().map(mapped)
    empty_flat_map = Maybe.none().flat_map(flat_mapped)
    marker = object()
    return (
        _check("Maybe", "map identity (Some)", Maybe.some(x).map(identity), Maybe.some(x)),
        _check("Maybe", "map identity (Nothing)", Maybe.none().map(identity), Maybe.none()),
        _check("Maybe", "Nothing.map skips mapper", (empty_map, mapped.calls), (Maybe.none(), 0)),
        _check("Maybe", "Nothing.flat_map skips mapper",
               (empty_flat_map, flat_mapped.calls), (Maybe.none(), 0)),
        _check("Maybe", "some(None) is Nothing", Maybe.some(None), Maybe.none()),
        _check("Maybe", "fold on Some", Maybe.some(x).fold(lambda: marker, f), f(x)),
        _check("Maybe", "fold on Nothing", Maybe.none().fold(lambda: marker, f) is marker, True),
        _check("Maybe", "Some.to_either is Right",
               Maybe.some(x).to_either(lambda: NO_VALUE), Either.right(x)),
        _check("Maybe", "Nothing.to_either is Left",
               Maybe.none().to_either(lambda: NO_VALUE), Either.left(NO_VALUE)),
    )


def either_laws(x: Any, f: Callable) -> Tuple[LawCheck, ...]:
    on_left, on_right, bound = _Counted(f), _Counted(f), _Counted(lambda v: Either.right(f(v)))
    skipped_map = Either.left(x).map(on_left)
    skipped_map_left = Either.right(x).map_left(on_right)
    skipped_flat_map = Either.left(x).flat_map(bound)
    return (
        _check("Either", "map identity (Right)", Either.right(x).map(identity), Either.right(x)),
        _check("Either", "map identity (Left)", Either.left(x).map(identity), Either.left(x)),
        _check("Either", "map_left identity (Left)",
               Either.left(x).map_left(identity), Either.left(x)),
        _check("Either", "map_left identity (Right)",
               Either.right(x).map_left(identity), Either.right(x)),
        _check("Either", "Right.map applies mapper", Either.right(x).map(f), Either.right(f(x))),
        _check("Either", "Left.map skips mapper", (skipped_map, on_left.calls), (Either.left(x), 0)),
        _check("Either", "Left.map_left applies mapper",
               Either.left(x).map_left(f), Either.left(f(x))),
        _check("Either", "Right.map_left skips mapper",
               (skipped_map_left, on_right.calls), (Either.right(x), 0)),
        _check("Either", "Left.flat_map short-circuits",
               (skipped_flat_map, bound.calls), (Either.left(x), 0)),
        _check("Either", "Right.flat_map returns mapper result",
               Either.right(x).flat_map(lambda v: Either.right(f(v))), Either.right(f(x))),
    )


def reader_laws(a: Any, f: Callable, g: Callable, h: Callable[[Any], Reader]) -> Tuple[LawCheck, ...]:
    return (
        _check("Reader", "unit(f).apply(a) == f(a)", Reader.unit(f).apply(a), f(a)),
        _check("Reader", "constant ignores input", Reader.constant(g).apply(a), g),
        _check("Reader", "map composes", Reader.unit(f).map(g).apply(a), g(f(a))),
        _check("Reader", "flat_map shares the input",
               Reader.unit(f).flat_map(h).apply(a), h(f(a)).apply(a)),
        _check("Reader", "ask returns the input", Reader.ask().apply(a), a),
    )


def scenarios() -> Tuple[LawCheck, ...]:
    return (
        _check("scenario", "some(42).map(v * 42)",
               Maybe.some(42).map(lambda v: v * 42)._get(), 1764),
        _check("scenario", "some(None) == none()", Maybe.some(None) == Maybe.none(), True),
        _check("scenario", "left short-circuits flat_map",
               Either.left("error").flat_map(lambda v: Either.right("ok")).fold(identity, identity),
               "error"),
        _check("scenario", "none().to_either",
               Maybe.none().to_either(lambda: NO_VALUE).fold(identity, lambda r: "unexpected"),
               NO_VALUE),
        _check("scenario", "reader flat_map reuses input",
               Reader.unit(str).flat_map(lambda s: Reader.unit(lambda q: "AA" + str(q))).apply(42),
               "AA42"),
    )


def _all_laws(settings: LawSettings) -> Tuple[LawCheck, ...]:
    times = lambda v: v * settings.factor  # noqa: E731
    return (
        maybe_laws(settings.sample, times)
        + either_laws(settings.sample, times)
        + reader_laws(settings.environment, str, len,
                      lambda s: Reader.unit(lambda env: f"{s}:{env}"))
        + scenarios()
    )


def failed(checks: Tuple[LawCheck, ...]) -> Tuple[LawCheck, ...]:
    return tuple(c for c in checks if not c.holds)


def _log_failures(checks: Tuple[LawCheck, ...]) -> Tuple[LawCheck, ...]:
    for check in failed(checks):
        logger.warning("%s law broken: %s (%s)", check.subject, check.law, check.detail)
    return checks


law_report: Reader[LawSettings, Tuple[LawCheck, ...]] = Reader.ask().map(_all_laws).map(_log_failures)
