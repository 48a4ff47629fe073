"""
Domain models and value objects.

Contains the validated argument model and the nome conversions.
"""

from jacobi_theta.core.domain.theta_arguments import (
    ThetaArguments,
    nome_from_tau,
    tau_from_nome,
)

__all__ = [
    "ThetaArguments",
    "nome_from_tau",
    "tau_from_nome",
]
