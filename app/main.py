import logging
import os
import sys
from dataclasses import asdict

import pandas as pd
import streamlit as st

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from fcore.either import Either
from fcore.errors import FunctionalCoreError
from fcore.laws import failed, law_report
from fcore.maybe import Maybe
from fcore.reader import Reader
from fcore.settings import LawSettings

settings = LawSettings.from_env()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("fcore.app")

st.title("Функциональное ядро: Maybe, Either, Reader")

section = st.sidebar.radio("Разделы", ["Maybe", "Either", "Reader", "Законы"])


def parse_int(raw: str) -> Either[str, int]:
    try:
        return Either.right(int(raw))
    except ValueError:
        return Either.left(f"'{raw}' не целое число")


# --- Maybe ---
if section == "Maybe":
    st.subheader("Maybe — значение или его отсутствие")
    raw = st.text_input("Значение (пусто = None)", str(settings.sample))
    factor = st.number_input("Множитель", value=settings.factor, step=1)

    maybe = Maybe.some(raw or None).flat_map(lambda v: parse_int(v).fold(lambda _: Maybe.none(), Maybe.some))
    result = maybe.map(lambda v: v * int(factor))

    col1, col2 = st.columns(2)
    col1.metric("Вход", repr(maybe))
    col2.metric("После map", repr(result))
    st.write("fold:", result.fold(lambda: "значения нет", lambda v: f"значение {v}"))
    st.write("to_either:", repr(result.to_either(lambda: "No Value")))

# --- Either ---
elif section == "Either":
    st.subheader("Either — ошибка слева, результат справа")
    raw = st.text_input("Целое число", str(settings.sample))
    divisor = st.number_input("Делитель", value=2, step=1)

    def safe_div(v: int) -> Either[str, float]:
        if int(divisor) == 0:
            return Either.left("деление на ноль")
        return Either.right(v / int(divisor))

    result = parse_int(raw).flat_map(safe_div).map_left(lambda e: f"Ошибка: {e}")
    result.fold(st.error, lambda v: st.success(f"Результат: {v}"))

# --- Reader ---
elif section == "Reader":
    st.subheader("Reader — вычисление, зависящее от окружения")
    env = st.number_input("Окружение", value=settings.environment, step=1)

    doubled = Reader.unit(lambda e: e * 2)
    described = doubled.flat_map(lambda d: Reader.unit(lambda e: f"{e} * 2 = {d}"))
    rows = [
        {"вычисление": "unit(e * 2)", "результат": doubled.apply(int(env))},
        {"вычисление": "map(str).map(len)", "результат": doubled.map(str).map(len).apply(int(env))},
        {"вычисление": "flat_map(описание)", "результат": described.apply(int(env))},
        {"вычисление": "constant('ok')", "результат": Reader.constant("ok").apply(int(env))},
    ]
    st.table(pd.DataFrame(rows))

# --- Законы ---
elif section == "Законы":
    st.subheader("Проверка законов")
    sample = st.number_input("Проверочное значение", value=settings.sample, step=1)
    try:
        checks = law_report.apply(LawSettings(sample=int(sample), environment=int(sample)))
    except FunctionalCoreError as e:
        logger.exception("law report failed")
        st.error(str(e))
        st.stop()

    broken = failed(checks)
    col1, col2 = st.columns(2)
    col1.metric("Законов проверено", len(checks))
    col2.metric("Нарушено", len(broken))
    df = pd.DataFrame([asdict(c) for c in checks])
    st.table(df)
    if broken:
        st.error("Есть нарушенные законы")
    else:
        st.success("Все законы выполняются ✅")
