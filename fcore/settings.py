"""
Настройки отчёта по законам и демо-приложения.

Само ядро (Maybe / Either / Reader) ничего не настраивает; эти значения
нужны только отчёту в fcore.laws и странице app/main.py.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from fcore.compose import identity
from fcore.maybe import Maybe

logger = logging.getLogger(__name__)

SAMPLE_ENV = "FCORE_SAMPLE"
LOG_LEVEL_ENV = "FCORE_LOG_LEVEL"


@dataclass(frozen=True)
class LawSettings:
    """
    Attributes:
        sample: значение, на котором проверяются законы Maybe и Either.
        factor: множитель в функции-примере x -> x * factor.
        environment: окружение, передаваемое в Reader при проверке.
        log_level: уровень логирования для демо-приложения.
    """
    sample: int = 42
    factor: int = 42
    environment: int = 42
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "LawSettings":
        env = os.environ if environ is None else environ
        default = LawSettings()
        sample = (Maybe.some(env.get(SAMPLE_ENV))
                  .flat_map(_parse_int)
                  .fold(lambda: default.sample, identity))
        log_level = (Maybe.some(env.get(LOG_LEVEL_ENV))
                     .map(lambda v: v.strip().upper() or None)
                     .map(_known_level)
                     .fold(lambda: default.log_level, identity))
        return LawSettings(sample=sample, environment=sample, log_level=log_level)


def _known_level(name: str) -> Optional[str]:
    # getLevelName возвращает число только для зарегистрированных уровней
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("ignoring unknown %s=%r", LOG_LEVEL_ENV, name)
    return None


def _parse_int(raw: str) -> Maybe[int]:
    try:
        return Maybe.some(int(raw))
    except ValueError:
        logger.warning("ignoring non-integer %s=%r", SAMPLE_ENV, raw)
        return Maybe.none()
