"""
Public API Module

Функции θ₁…θ₄, их логарифмы, тэта с характеристиками и вычислитель с
конфигурацией.
"""

from .theta_functions import (
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

__all__ = [
    # Classes
    "ThetaConfig",
    "ThetaEvaluator",
    # Functions
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
]
