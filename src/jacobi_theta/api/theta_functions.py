"""
Theta Functions — публичные функции θ₁…θ₄ и их логарифмы

Каждая функция — композиция движка редукции через тождества, связывающие
четыре тэта-функции с θ₃:

    log θ₂(z, τ) = M(z, τ) + log θ₃(z + τ/2, τ)
    log θ₁(z, τ) = log θ₂(z - 1/2, τ)
    log θ₃(z, τ) = modular_log_theta3(z, τ)
    log θ₄(z, τ) = modular_log_theta4(z, τ)
    θ_k = exp(log θ_k)

Тэта с характеристиками (a, b вещественные):

    log θ[a,b](z, τ) = iπa²τ + 2iπa(z + b) + log θ₃(z + aτ + b, τ)

Каждый вызов верхнего уровня начинает свой счётчик проходов с нуля;
состояния между вызовами нет, вызовы из разных потоков независимы.
"""

import cmath
import logging
import math
import sys
from dataclasses import dataclass
from typing import Final

from pydantic import ValidationError

from jacobi_theta.core.domain.theta_arguments import ThetaArguments, tau_from_nome
from jacobi_theta.core.math.exceptions import InvalidDomain
from jacobi_theta.core.math.numerical_safeguards import is_valid_float
from jacobi_theta.core.math.theta_reduction import (
    MAX_PASSES,
    modular_log_theta3,
    modular_log_theta4,
    phase_factor,
)

logger = logging.getLogger(__name__)

# Кадры стека сверх проходов редукции: публичный вызов, ряд, вызывающий код
RECURSION_FRAME_MARGIN: Final[int] = 100


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ThetaConfig:
    """Конфигурация вычисления тэта-функций.

    validate_domain=False сохраняет исходное поведение: область не
    проверяется заранее, единственный предохранитель — потолок проходов.
    """

    # Потолок общего счётчика проходов на одно вычисление
    max_passes: int = MAX_PASSES

    # Предварительная проверка Im(tau) > 0 и конечности аргументов
    validate_domain: bool = False

    def __post_init__(self):
        if self.max_passes <= 0:
            raise ValueError(f"max_passes must be positive, got {self.max_passes}")

        # Один проход = один кадр Python; потолок выше лимита даст RecursionError
        limit = sys.getrecursionlimit() - RECURSION_FRAME_MARGIN
        if self.max_passes > limit:
            raise ValueError(
                f"max_passes {self.max_passes} exceeds interpreter recursion limit "
                f"(at most {limit} with sys.getrecursionlimit()={sys.getrecursionlimit()})"
            )


# =============================================================================
# EVALUATOR
# =============================================================================


class ThetaEvaluator:
    """Вычислитель θ₁…θ₄ и их логарифмов.

    Параметр задаётся либо через tau, либо через ном q (ровно одно из двух).
    """

    def __init__(self, config: ThetaConfig | None = None):
        """Инициализация вычислителя.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ThetaConfig()

    def _arguments(
        self,
        z: complex,
        tau: complex | None,
        q: complex | None,
    ) -> tuple[complex, complex]:
        """Разрешение tau/q и, при validate_domain, проверка области."""
        if (tau is None) == (q is None):
            raise ValueError("exactly one of tau and q must be given")

        if q is not None:
            tau = tau_from_nome(q)

        if not self.config.validate_domain:
            return complex(z), complex(tau)

        try:
            args = ThetaArguments(z=z, tau=tau)
        except ValidationError as e:
            logger.debug("Rejected theta arguments z=%r tau=%r: %s", z, tau, e)
            raise InvalidDomain(f"invalid theta arguments: {e}") from e

        if not args.in_upper_half_plane:
            logger.debug("Rejected tau outside upper half-plane: %s", args.tau)
            raise InvalidDomain(f"tau must have positive imaginary part, got {args.tau}")

        return args.z, args.tau

    def _log_theta2(self, z: complex, tau: complex) -> complex:
        return phase_factor(z, tau) + modular_log_theta3(
            z + 0.5 * tau, tau, 0, self.config.max_passes
        )

    def _log_theta_ab(self, a: float, b: float, z: complex, tau: complex) -> complex:
        return (
            1j * math.pi * a * a * tau
            + 2j * math.pi * a * (z + b)
            + modular_log_theta3(z + a * tau + b, tau, 0, self.config.max_passes)
        )

    # -------------------------------------------------------------------------
    # Логарифмы
    # -------------------------------------------------------------------------

    def ljtheta1(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """log θ₁(z, τ) = log θ₂(z - 1/2, τ)."""
        z, tau = self._arguments(z, tau, q)
        return self._log_theta2(z - 0.5, tau)

    def ljtheta2(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """log θ₂(z, τ) = M(z, τ) + log θ₃(z + τ/2, τ)."""
        z, tau = self._arguments(z, tau, q)
        return self._log_theta2(z, tau)

    def ljtheta3(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """log θ₃(z, τ)."""
        z, tau = self._arguments(z, tau, q)
        return modular_log_theta3(z, tau, 0, self.config.max_passes)

    def ljtheta4(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """log θ₄(z, τ) = log θ₃(z + 1/2, τ)."""
        z, tau = self._arguments(z, tau, q)
        return modular_log_theta4(z, tau, 0, self.config.max_passes)

    def ljtheta_ab(
        self,
        a: float,
        b: float,
        z: complex,
        tau: complex | None = None,
        *,
        q: complex | None = None,
    ) -> complex:
        """Логарифм тэта-функции с характеристиками (a, b).

        θ[0,0] = θ₃, θ[0,1/2] = θ₄, θ[1/2,0] = θ₂, θ[1/2,1/2] = -θ₁.

        Args:
            a: Характеристика, сдвиг индекса суммирования
            b: Характеристика, сдвиг аргумента
            z: Аргумент
            tau: Модулярный параметр (или q)
            q: Ном (или tau)

        Returns:
            log θ[a,b](z, τ)

        Raises:
            ValueError: если a или b не конечные вещественные
        """
        if not (is_valid_float(a) and is_valid_float(b)):
            raise ValueError(f"characteristics must be finite reals, got a={a}, b={b}")
        z, tau = self._arguments(z, tau, q)
        return self._log_theta_ab(float(a), float(b), z, tau)

    # -------------------------------------------------------------------------
    # Значения
    # -------------------------------------------------------------------------

    def jtheta1(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """θ₁(z, τ)."""
        return cmath.exp(self.ljtheta1(z, tau, q=q))

    def jtheta2(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """θ₂(z, τ)."""
        return cmath.exp(self.ljtheta2(z, tau, q=q))

    def jtheta3(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """θ₃(z, τ)."""
        return cmath.exp(self.ljtheta3(z, tau, q=q))

    def jtheta4(self, z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
        """θ₄(z, τ)."""
        return cmath.exp(self.ljtheta4(z, tau, q=q))

    def jtheta_ab(
        self,
        a: float,
        b: float,
        z: complex,
        tau: complex | None = None,
        *,
        q: complex | None = None,
    ) -> complex:
        """θ[a,b](z, τ)."""
        return cmath.exp(self.ljtheta_ab(a, b, z, tau, q=q))


# =============================================================================
# МОДУЛЬНЫЕ ФУНКЦИИ
# =============================================================================

_DEFAULT_EVALUATOR = ThetaEvaluator()


def ljtheta1(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.ljtheta1(z, tau, q=q)


def ljtheta2(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.ljtheta2(z, tau, q=q)


def ljtheta3(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.ljtheta3(z, tau, q=q)


def ljtheta4(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.ljtheta4(z, tau, q=q)


def jtheta1(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.jtheta1(z, tau, q=q)


def jtheta2(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.jtheta2(z, tau, q=q)


def jtheta3(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.jtheta3(z, tau, q=q)


def jtheta4(z: complex, tau: complex | None = None, *, q: complex | None = None) -> complex:
    return _DEFAULT_EVALUATOR.jtheta4(z, tau, q=q)


def ljtheta_ab(
    a: float,
    b: float,
    z: complex,
    tau: complex | None = None,
    *,
    q: complex | None = None,
) -> complex:
    return _DEFAULT_EVALUATOR.ljtheta_ab(a, b, z, tau, q=q)


def jtheta_ab(
    a: float,
    b: float,
    z: complex,
    tau: complex | None = None,
    *,
    q: complex | None = None,
) -> complex:
    return _DEFAULT_EVALUATOR.jtheta_ab(a, b, z, tau, q=q)
