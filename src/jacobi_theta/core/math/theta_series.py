"""
Theta Series — прямое суммирование q-ряда θ₃

Вычисляет логарифм q-ряда θ₃ для аргументов, уже приведённых в
фундаментальную полосу |Im(z)| <= Im(tau)/2, где ряд убывает геометрически.

ФОРМУЛА:
    Σ = 1 + Σ_{n>=1} [exp(iπn(nτ + 2z)) + exp(iπn(nτ - 2z))]
    series_log_theta3(z, τ) = log(Σ)   (главная ветвь)

КРИТЕРИЙ ОСТАНОВА:
    После не менее MIN_SERIES_TERMS членов суммирование прекращается, как
    только sum + term == sum в арифметике double. Это проверка неподвижной
    точки, а не epsilon-порог: порог не подставлять.
"""

import cmath
import logging
import math
from typing import Final

from jacobi_theta.core.math.exceptions import DivergentLogInput
from jacobi_theta.core.math.numerical_safeguards import is_valid_complex

logger = logging.getLogger(__name__)


# Минимальное число членов до проверки неподвижной точки
MIN_SERIES_TERMS: Final[int] = 3


def series_log_theta3(z: complex, tau: complex) -> complex:
    """
    Логарифм q-ряда θ₃(z, τ) прямым суммированием.

    Счётчик проходов не используется: функция не рекурсивна и всегда
    завершается для z в полосе и Im(tau) > 0.

    Args:
        z: Аргумент, приведённый в фундаментальную полосу
        tau: Модулярный параметр

    Returns:
        log(Σ) — главная ветвь логарифма суммы ряда

    Raises:
        DivergentLogInput: если аккумулятор точно равен нулю или стал NaN/Inf
    """
    out = complex(1.0, 0.0)
    n = 0

    while True:
        n += 1
        qweight = (
            cmath.exp(n * 1j * math.pi * (n * tau + 2.0 * z))
            + cmath.exp(n * 1j * math.pi * (n * tau - 2.0 * z))
        )
        out += qweight

        if abs(out) == 0:
            logger.warning("q-series accumulator vanished at n=%d (z=%s, tau=%s)", n, z, tau)
            raise DivergentLogInput(f"log(0): q-series accumulator is zero at n={n}")

        if not is_valid_complex(out):
            logger.warning("q-series accumulator is not finite at n=%d (z=%s, tau=%s)", n, z, tau)
            raise DivergentLogInput(f"q-series accumulator contains NaN/Inf at n={n}: {out}")

        if n >= MIN_SERIES_TERMS and out + qweight == out:
            break

    return cmath.log(out)
