"""
jacobi_theta — тэта-функции Якоби θ₁…θ₄ для произвольных z и tau

Машинная точность во всей верхней полуплоскости tau за счёт редукции
аргумента и модулярных преобразований.
"""

from jacobi_theta.api import (
    ThetaConfig,
    ThetaEvaluator,
    jtheta1,
    jtheta2,
    jtheta3,
    jtheta4,
    jtheta_ab,
    ljtheta1,
    ljtheta2,
    ljtheta3,
    ljtheta4,
    ljtheta_ab,
)
from jacobi_theta.core.domain import ThetaArguments, nome_from_tau, tau_from_nome
from jacobi_theta.core.math import (
    DivergentLogInput,
    InvalidDomain,
    RecursionLimitExceeded,
    ThetaEvaluationError,
    modulo,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "ThetaConfig",
    "ThetaEvaluator",
    "jtheta1",
    "jtheta2",
    "jtheta3",
    "jtheta4",
    "jtheta_ab",
    "ljtheta1",
    "ljtheta2",
    "ljtheta3",
    "ljtheta4",
    "ljtheta_ab",
    # Domain
    "ThetaArguments",
    "nome_from_tau",
    "tau_from_nome",
    # Errors
    "DivergentLogInput",
    "InvalidDomain",
    "RecursionLimitExceeded",
    "ThetaEvaluationError",
    # Helpers
    "modulo",
]
