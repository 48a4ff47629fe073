"""
Core math modules для jacobi_theta

Численные примитивы, прямое суммирование q-ряда и движок редукции
аргументов тэта-функций.
"""

# Numerical Safeguards
from jacobi_theta.core.math.numerical_safeguards import (
    is_valid_complex,
    is_valid_float,
    modulo,
    validate_finite_complex,
)

# Exceptions
from jacobi_theta.core.math.exceptions import (
    DivergentLogInput,
    InvalidDomain,
    RecursionLimitExceeded,
    ThetaEvaluationError,
)

# Theta Series
from jacobi_theta.core.math.theta_series import (
    MIN_SERIES_TERMS,
    series_log_theta3,
)

# Theta Reduction
from jacobi_theta.core.math.theta_reduction import (
    INVERSION_IMAG_THRESHOLD,
    INVERSION_MODULUS_THRESHOLD,
    MAX_PASSES,
    TAU_SHIFT_THRESHOLD,
    modular_log_theta3,
    modular_log_theta4,
    phase_factor,
    strip_log_theta3,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_complex",
    "is_valid_float",
    "modulo",
    "validate_finite_complex",
    # Exceptions
    "DivergentLogInput",
    "InvalidDomain",
    "RecursionLimitExceeded",
    "ThetaEvaluationError",
    # Theta Series
    "MIN_SERIES_TERMS",
    "series_log_theta3",
    # Theta Reduction
    "INVERSION_IMAG_THRESHOLD",
    "INVERSION_MODULUS_THRESHOLD",
    "MAX_PASSES",
    "TAU_SHIFT_THRESHOLD",
    "modular_log_theta3",
    "modular_log_theta4",
    "phase_factor",
    "strip_log_theta3",
]
