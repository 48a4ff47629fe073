"""
ThetaArguments — Модель аргументов тэта-функций

Immutable Pydantic модель пары (z, tau) с приведением к complex и проверкой
конечности, плюс конверсии между tau и номом q = exp(iπτ).
"""

import cmath
import math

from pydantic import BaseModel, Field, field_validator

from jacobi_theta.core.math.exceptions import InvalidDomain
from jacobi_theta.core.math.numerical_safeguards import validate_finite_complex


# =============================================================================
# МОДЕЛЬ АРГУМЕНТОВ
# =============================================================================


class ThetaArguments(BaseModel):
    """
    Аргументы одного вычисления тэта-функции.

    int/float/complex приводятся к complex; NaN/Inf отвергаются.
    Im(tau) > 0 здесь не требуется: см. in_upper_half_plane.
    """

    z: complex = Field(..., description="Аргумент z")
    tau: complex = Field(..., description="Модулярный параметр tau")

    model_config = {"frozen": True}

    @field_validator("z", "tau", mode="before")
    @classmethod
    def coerce_finite_complex(cls, v, info) -> complex:
        """Приведение к complex и проверка конечности обеих компонент"""
        return validate_finite_complex(v, name=info.field_name)

    @property
    def in_upper_half_plane(self) -> bool:
        """True если Im(tau) > 0"""
        return self.tau.imag > 0


# =============================================================================
# НОМ
# =============================================================================


def nome_from_tau(tau: complex) -> complex:
    """
    Ном q = exp(iπτ).

    Args:
        tau: Модулярный параметр

    Returns:
        q (|q| < 1 при Im(tau) > 0)
    """
    return cmath.exp(1j * math.pi * complex(tau))


def tau_from_nome(q: complex) -> complex:
    """
    Модулярный параметр по ному: tau = -i·log(q)/π.

    Главная ветвь log даёт Re(tau) в (-1, 1].

    Args:
        q: Ном, 0 < |q| < 1

    Returns:
        tau с Im(tau) > 0

    Raises:
        InvalidDomain: если q == 0, |q| >= 1 или q содержит NaN/Inf
    """
    try:
        q = validate_finite_complex(q, name="q")
    except ValueError as e:
        raise InvalidDomain(str(e)) from e

    if q == 0:
        raise InvalidDomain("nome q must be non-zero")

    if abs(q) >= 1.0:
        raise InvalidDomain(f"nome q must satisfy |q| < 1, got |q|={abs(q):.12g}")

    return -1j * cmath.log(q) / math.pi
