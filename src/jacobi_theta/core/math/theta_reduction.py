"""
Theta Reduction — редукция аргумента и модулярные преобразования

Приводит произвольную пару (z, tau) в область, где q-ряд θ₃ сходится за
ограниченное число членов, и восстанавливает log θ₃ для исходной пары через
поправочные слагаемые применённых тождеств.

КОМПОНЕНТЫ:
- strip_log_theta3: периодичность и отражение по z (полоса |Im z| <= Im τ/2)
- modular_log_theta3: редукция Re(τ) по периоду 2, сдвиг через θ₄ и
  мнимое преобразование Якоби τ → -1/τ
- modular_log_theta4: θ₄(z, τ) = θ₃(z + 1/2, τ)
- phase_factor: M(z, τ) = iπ(z + τ/4), связывает log θ₂ с log θ₃

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Один счётчик проходов на всё вычисление верхнего уровня: передаётся
   явно в каждый рекурсивный вызов, +1 на вызов, никогда не сбрасывается
2. passes > max_passes → RecursionLimitExceeded (с именем редуктора)
3. log и sqrt — главные ветви (разрез по отрицательной вещественной оси)
4. Im(tau) > 0 не проверяется: при Im(tau) <= 0 цепочка завершается
   RecursionLimitExceeded (потолок или tau2 == 0 при инверсии)
"""

import cmath
import logging
import math
from typing import Final

from jacobi_theta.core.math.exceptions import RecursionLimitExceeded
from jacobi_theta.core.math.numerical_safeguards import modulo
from jacobi_theta.core.math.theta_series import series_log_theta3

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ РЕДУКЦИИ
# =============================================================================

# Потолок общего счётчика проходов (strip + modular) на одно вычисление
MAX_PASSES: Final[int] = 500

# |Re(tau2)| выше порога → сдвиг tau на 1 через θ₄
TAU_SHIFT_THRESHOLD: Final[float] = 0.6

# |tau2| и Im(tau2) ниже порогов → модулярная инверсия tau → -1/tau
INVERSION_MODULUS_THRESHOLD: Final[float] = 0.98
INVERSION_IMAG_THRESHOLD: Final[float] = 0.98


def _check_passes(stage: str, passes: int, max_passes: int) -> None:
    if passes > max_passes:
        logger.warning("Reduction pass ceiling exceeded in %s: %d > %d", stage, passes, max_passes)
        raise RecursionLimitExceeded(stage, passes, max_passes)


# =============================================================================
# РЕДУКЦИЯ ПО ПОЛОСЕ
# =============================================================================


def strip_log_theta3(
    z: complex,
    tau: complex,
    passes: int = 0,
    max_passes: int = MAX_PASSES,
) -> complex:
    """
    log θ₃(z, τ) для z вне полосы быстрой сходимости.

    Алгоритм:
        1. passes += 1; проверка потолка
        2. h = Im(τ)/2; Re(z) приводится в [0, 1) через modulo
        3. Im(z) < -h  → отражение: результат для -z без поправки
           Im(z) >= h  → сдвиг zmin = z - τ:
                         -2πi·zmin + log θ₃(zmin) - iπτ
           иначе       → прямое суммирование ряда

    Args:
        z: Аргумент
        tau: Модулярный параметр
        passes: Число проходов, уже израсходованных цепочкой
        max_passes: Потолок счётчика

    Returns:
        log θ₃(z, τ)

    Raises:
        RecursionLimitExceeded: если счётчик превысил max_passes
        DivergentLogInput: из прямого суммирования
    """
    passes += 1
    _check_passes("strip_log_theta3", passes, max_passes)

    z_imag = z.imag
    h = tau.imag / 2.0
    zuse = complex(modulo(z.real, 1.0), z_imag)

    if z_imag < -h:
        return strip_log_theta3(-zuse, tau, passes, max_passes)

    if z_imag >= h:
        zmin = zuse - tau
        return (
            -2.0 * math.pi * 1j * zmin
            + strip_log_theta3(zmin, tau, passes, max_passes)
            - 1j * math.pi * tau
        )

    return series_log_theta3(zuse, tau)


# =============================================================================
# МОДУЛЯРНАЯ РЕДУКЦИЯ
# =============================================================================


def _reduce_tau(tau: complex) -> complex:
    """Re(tau) → (-1, 1] по периоду 2 со смещением, зависящим от знака."""
    rl = tau.real
    if rl >= 0:
        return modulo(rl + 1.0, 2.0) - 1.0 + 1j * tau.imag
    return modulo(rl - 1.0, 2.0) + 1.0 + 1j * tau.imag


def modular_log_theta3(
    z: complex,
    tau: complex,
    passes: int = 0,
    max_passes: int = MAX_PASSES,
) -> complex:
    """
    log θ₃(z, τ) для произвольного τ.

    Алгоритм:
        1. passes += 1; проверка потолка
        2. tau2 = τ с Re, приведённой в (-1, 1]
        3. Re(tau2) > 0.6   → log θ₄(z, tau2 - 1)
           Re(tau2) <= -0.6 → log θ₄(z, tau2 + 1)
           |tau2| < 0.98 и Im(tau2) < 0.98 → инверсия, τ' = -1/tau2:
               iπτ'z² + log θ₃(-zτ', τ') - log(sqrt(-i·tau2))
           иначе → strip_log_theta3(z, tau2)

    Args:
        z: Аргумент
        tau: Модулярный параметр
        passes: Число проходов, уже израсходованных цепочкой
        max_passes: Потолок счётчика

    Returns:
        log θ₃(z, τ)

    Raises:
        RecursionLimitExceeded: если счётчик превысил max_passes или
            инверсия встретила tau2 == 0 (Im(tau) == 0)
        DivergentLogInput: из прямого суммирования
    """
    passes += 1
    _check_passes("modular_log_theta3", passes, max_passes)

    tau2 = _reduce_tau(tau)
    rl = tau2.real

    if rl > TAU_SHIFT_THRESHOLD:
        return modular_log_theta4(z, tau2 - 1.0, passes, max_passes)

    if rl <= -TAU_SHIFT_THRESHOLD:
        return modular_log_theta4(z, tau2 + 1.0, passes, max_passes)

    if abs(tau2) < INVERSION_MODULUS_THRESHOLD and tau2.imag < INVERSION_IMAG_THRESHOLD:
        if tau2 == 0:
            # Im(tau) == 0: цепочка сдвигов и инверсий не сходится к терминальной ветви
            logger.warning("Modular inversion reached tau2 == 0 (tau=%s)", tau)
            raise RecursionLimitExceeded("modular_log_theta3", passes, max_passes)

        tauprime = -1.0 / tau2
        logger.debug("Modular inversion tau2=%s -> %s (pass %d)", tau2, tauprime, passes)
        return (
            1j * math.pi * tauprime * z * z
            + modular_log_theta3(-z * tauprime, tauprime, passes, max_passes)
            - cmath.log(cmath.sqrt(-1j * tau2))
        )

    return strip_log_theta3(z, tau2, passes, max_passes)


def modular_log_theta4(
    z: complex,
    tau: complex,
    passes: int = 0,
    max_passes: int = MAX_PASSES,
) -> complex:
    """log θ₄(z, τ) = log θ₃(z + 1/2, τ); расходует один проход."""
    return modular_log_theta3(z + 0.5, tau, passes + 1, max_passes)


# =============================================================================
# ФАЗОВЫЙ МНОЖИТЕЛЬ
# =============================================================================


def phase_factor(z: complex, tau: complex) -> complex:
    """
    M(z, τ) = iπ(z + τ/4).

    log θ₂(z, τ) = M(z, τ) + log θ₃(z + τ/2, τ)
    """
    return 1j * math.pi * (z + tau / 4.0)
