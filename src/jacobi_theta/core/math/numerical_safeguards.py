"""
Numerical Safeguards — вещественный modulo и проверки конечности

Модуль содержит примитивы, на которых строится редукция аргументов
тэта-функций:
- Вещественный modulo с асимметричным выбором floor/ceil
- Проверки NaN/Inf для float и complex скаляров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. modulo — чистая функция, без исключений (p == 0 или не-конечный
   результат → NaN)
2. Для a > 0 используется floor(a/p), для a <= 0 — ceil(a/p)
3. Все операции детерминированы и воспроизводимы
"""

import cmath
import math


# =============================================================================
# ВЕЩЕСТВЕННЫЙ MODULO
# =============================================================================


def modulo(a: float, p: float) -> float:
    """
    Приведение вещественного числа по периоду p.

    Формула: a - i * p, где
        i = floor(a / p), если a > 0
        i = ceil(a / p),  иначе

    Для a >= 0 результат лежит в [0, p). Для отрицательных a результат
    лежит в (-p, 0]: знак остатка следует за знаком a. Эта асимметрия
    важна для редукции Re(tau), где ветвление чувствительно к тому, по
    какую сторону нуля попал остаток.

    Args:
        a: Приводимое значение
        p: Период (ненулевой)

    Returns:
        Остаток a - i * p. Если p == 0 или a / p не конечно (NaN/Inf),
        возвращается NaN, как при IEEE-арифметике.

    Examples:
        >>> modulo(2.5, 1.0)
        0.5
        >>> modulo(-2.5, 1.0)
        -0.5
        >>> modulo(3.0, 2.0)
        1.0
        >>> modulo(-3.0, 2.0)
        -1.0
    """
    if p == 0:
        return math.nan

    ratio = a / p
    if not math.isfinite(ratio):
        return math.nan

    if a > 0:
        i = math.floor(ratio)
    else:
        i = math.ceil(ratio)

    return a - i * p


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно
    """
    return math.isfinite(value)


def is_valid_complex(value: complex) -> bool:
    """
    Проверка, что обе компоненты complex конечны.

    Args:
        value: Проверяемое значение (int/float допускаются)

    Returns:
        True если Re и Im конечны
    """
    return cmath.isfinite(complex(value))


def validate_finite_complex(value: complex, name: str = "value") -> complex:
    """
    Приведение к complex с проверкой конечности.

    Args:
        value: Значение (int, float или complex)
        name: Имя параметра для сообщения об ошибке

    Returns:
        complex(value)

    Raises:
        ValueError: если значение не приводится к complex или содержит NaN/Inf
    """
    try:
        result = complex(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a complex scalar, got {value!r}") from e

    if not is_valid_complex(result):
        raise ValueError(f"{name} contains NaN/Inf: {result}")

    return result
