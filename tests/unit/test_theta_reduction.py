"""
Тесты для Theta Reduction — редукция по полосе и модулярная редукция

Проверяемые инварианты:
1. Периодичность по Re(z) и квазипериодичность по tau
2. Отражение z → -z (чётность θ₃)
3. Модулярная инверсия согласована с мнимым преобразованием Якоби
4. Сдвиг tau на 1 через θ₄ (θ₃(z, τ+1) = θ₄(z, τ))
5. Общий счётчик проходов: потолок → RecursionLimitExceeded с именем редуктора
6. Im(tau) <= 0 завершается ошибкой, а не зависанием
"""

import cmath
import math

import pytest

from jacobi_theta.core.math.exceptions import RecursionLimitExceeded
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
from jacobi_theta.core.math.theta_series import series_log_theta3


def _brute_theta3(z: complex, tau: complex, terms: int = 60) -> complex:
    """Σ_{n=-N}^{N} exp(iπn²τ + 2iπnz)"""
    return sum(
        cmath.exp(1j * math.pi * n * n * tau + 2j * math.pi * n * z)
        for n in range(-terms, terms + 1)
    )


# =============================================================================
# ТЕСТЫ: Параметры
# =============================================================================


class TestReductionParameters:
    """Значения порогов ветвления."""

    def test_constants(self):
        """Потолок и пороги ветвления."""
        assert MAX_PASSES == 500
        assert TAU_SHIFT_THRESHOLD == 0.6
        assert INVERSION_MODULUS_THRESHOLD == 0.98
        assert INVERSION_IMAG_THRESHOLD == 0.98


# =============================================================================
# ТЕСТЫ: Редукция по полосе
# =============================================================================


class TestStripReduction:
    """Тесты strip_log_theta3."""

    def test_inside_strip_delegates_to_series(self):
        """z уже в полосе → совпадает с прямым суммированием."""
        z = 0.3 + 0.1j
        tau = 0.1 + 1.2j
        assert strip_log_theta3(z, tau) == series_log_theta3(z, tau)

    def test_real_part_periodicity(self):
        """Re(z) приводится в [0, 1): сдвиг на целое не меняет значение."""
        tau = 1.3j
        base = cmath.exp(strip_log_theta3(0.2 + 0.1j, tau))
        for k in (1, 2, -1, -5):
            shifted = cmath.exp(strip_log_theta3(0.2 + k + 0.1j, tau))
            assert cmath.isclose(shifted, base, rel_tol=1e-12)

    def test_reflection_below_strip(self):
        """Im(z) < -h → отражение, значение совпадает с рядом."""
        z = 0.35 - 0.9j
        tau = 0.2 + 1.0j
        result = cmath.exp(strip_log_theta3(z, tau))
        assert cmath.isclose(result, _brute_theta3(z, tau), rel_tol=1e-10)

    def test_shift_above_strip(self):
        """Im(z) >= h → сдвиг на tau с поправкой периодичности."""
        z = 0.15 + 2.3j
        tau = -0.3 + 1.0j
        result = cmath.exp(strip_log_theta3(z, tau))
        assert cmath.isclose(result, _brute_theta3(z, tau), rel_tol=1e-10)

    def test_quasi_periodicity_in_tau(self):
        """θ₃(z + τ) = exp(-iπτ - 2iπz) θ₃(z)."""
        z = 0.1 + 0.05j
        tau = 0.2 + 1.4j
        lhs = strip_log_theta3(z + tau, tau)
        rhs = -1j * math.pi * tau - 2j * math.pi * z + strip_log_theta3(z, tau)
        assert cmath.isclose(cmath.exp(lhs), cmath.exp(rhs), rel_tol=1e-11)

    def test_pass_ceiling(self):
        """Счётчик на потолке → следующий проход поднимает ошибку."""
        with pytest.raises(RecursionLimitExceeded) as exc_info:
            strip_log_theta3(0.2 + 0.1j, 1.3j, passes=MAX_PASSES)

        assert exc_info.value.stage == "strip_log_theta3"
        assert exc_info.value.passes == MAX_PASSES + 1
        assert str(exc_info.value) == "passes > 500 (strip_log_theta3)"

    def test_last_allowed_pass(self):
        """passes = MAX_PASSES - 1 → ровно последний разрешённый проход."""
        result = strip_log_theta3(0.2 + 0.1j, 1.3j, passes=MAX_PASSES - 1)
        assert result == series_log_theta3(0.2 + 0.1j, 1.3j)

    def test_negative_imaginary_tau_hits_ceiling(self):
        """Im(tau) < 0: полоса пуста, цепочка отражений упирается в потолок."""
        with pytest.raises(RecursionLimitExceeded, match="strip_log_theta3"):
            strip_log_theta3(0j, -1j)

    def test_custom_ceiling(self):
        """max_passes передаётся по всей цепочке."""
        with pytest.raises(RecursionLimitExceeded) as exc_info:
            strip_log_theta3(0j, -1j, max_passes=7)

        assert exc_info.value.max_passes == 7
        assert exc_info.value.passes == 8


# =============================================================================
# ТЕСТЫ: Модулярная редукция
# =============================================================================


class TestModularReduction:
    """Тесты modular_log_theta3 / modular_log_theta4."""

    def test_large_imaginary_part_matches_series(self):
        """Re(tau) уже в (-0.6, 0.6], |tau| >= 0.98 → редукция по полосе."""
        z = 0.25 + 0.1j
        tau = 0.25 + 1.5j
        assert modular_log_theta3(z, tau) == strip_log_theta3(z, tau)

    def test_convergence_tau_2i(self):
        """θ₃(0, 2i) против 50 членов медленного ряда."""
        expected = 1.0 + 2.0 * sum(math.exp(-2.0 * math.pi * n * n) for n in range(1, 51))
        result = cmath.exp(modular_log_theta3(0j, 2j))
        assert abs(result - expected) < 1e-12

    @pytest.mark.parametrize(
        "z, tau",
        [
            (0.2 + 0.1j, 0.3 + 0.4j),
            (0.7 - 0.05j, -0.2 + 0.5j),
            (0.1, 0.05 + 0.6j),
            (0.4 + 0.2j, 2.7 + 0.8j),
            (-1.3 + 0.1j, -3.9 + 1.1j),
        ],
    )
    def test_matches_brute_force(self, z, tau):
        """Инверсия и сдвиги tau против прямой суммы."""
        result = cmath.exp(modular_log_theta3(z, tau))
        assert cmath.isclose(result, _brute_theta3(z, tau, terms=80), rel_tol=1e-9)

    def test_inversion_matches_jacobi_transformation(self):
        """θ₃(z, τ) = (-iτ)^{-1/2} exp(iπτ'z²) θ₃(-zτ', τ'), τ' = -1/τ."""
        z = 0.15 + 0.05j
        tau = 0.1 + 0.3j
        tauprime = -1.0 / tau
        direct = cmath.exp(modular_log_theta3(z, tau))
        transformed = (
            cmath.exp(1j * math.pi * tauprime * z * z)
            * cmath.exp(modular_log_theta3(-z * tauprime, tauprime))
            / cmath.sqrt(-1j * tau)
        )
        assert cmath.isclose(direct, transformed, rel_tol=1e-9)

    def test_inversion_zero_argument(self):
        """θ₃(0, i/2) = √2 · θ₃(0, 2i)."""
        small = cmath.exp(modular_log_theta3(0j, 0.5j))
        large = cmath.exp(modular_log_theta3(0j, 2j))
        assert cmath.isclose(small, math.sqrt(2.0) * large, rel_tol=1e-12)

    def test_period_two_in_tau(self):
        """θ₃(z, τ + 2) = θ₃(z, τ)."""
        z = 0.3 + 0.1j
        tau = 0.2 + 0.9j
        base = cmath.exp(modular_log_theta3(z, tau))
        shifted = cmath.exp(modular_log_theta3(z, tau + 2.0))
        assert cmath.isclose(shifted, base, rel_tol=1e-10)

    def test_unit_shift_gives_theta4(self):
        """θ₃(z, τ + 1) = θ₄(z, τ)."""
        z = 0.3 + 0.1j
        tau = 0.2 + 0.9j
        lhs = cmath.exp(modular_log_theta3(z, tau + 1.0))
        rhs = cmath.exp(modular_log_theta4(z, tau))
        assert cmath.isclose(lhs, rhs, rel_tol=1e-10)

    def test_theta4_is_half_shift(self):
        """log θ₄(z, τ) = log θ₃(z + 1/2, τ) с одним лишним проходом."""
        z = 0.1 + 0.2j
        tau = 0.1 + 1.2j
        assert modular_log_theta4(z, tau) == modular_log_theta3(z + 0.5, tau, passes=1)

    def test_theta4_consumes_pass(self):
        """modular_log_theta4 расходует проход до modular_log_theta3."""
        with pytest.raises(RecursionLimitExceeded) as exc_info:
            modular_log_theta4(0.1, 1.2j, passes=MAX_PASSES - 1)

        assert exc_info.value.stage == "modular_log_theta3"
        assert exc_info.value.passes == MAX_PASSES + 1

    def test_pass_ceiling(self):
        """Потолок проверяется до редукции tau."""
        with pytest.raises(RecursionLimitExceeded) as exc_info:
            modular_log_theta3(0.1, 1.2j, passes=MAX_PASSES)

        assert str(exc_info.value) == "passes > 500 (modular_log_theta3)"

    def test_negative_imaginary_tau_terminates(self):
        """Im(tau) < 0 → RecursionLimitExceeded, без зависания."""
        with pytest.raises(RecursionLimitExceeded):
            modular_log_theta3(0j, -1j)

        with pytest.raises(RecursionLimitExceeded):
            modular_log_theta3(0.3 + 0.2j, 0.2 - 0.5j)

    def test_real_tau_inversion_at_zero(self):
        """tau = 1: сдвиг через θ₄ даёт tau2 == 0 → RecursionLimitExceeded без деления на 0."""
        with pytest.raises(RecursionLimitExceeded) as exc_info:
            modular_log_theta3(0.2, 1.0 + 0j)

        assert exc_info.value.stage == "modular_log_theta3"
        # modular_log_theta3 (1) → modular_log_theta4 (+1) → modular_log_theta3 (+1)
        assert exc_info.value.passes == 3
        assert exc_info.value.max_passes == MAX_PASSES


# =============================================================================
# ТЕСТЫ: Фазовый множитель
# =============================================================================


class TestPhaseFactor:
    """Тесты phase_factor."""

    def test_closed_form(self):
        """M(z, τ) = iπ(z + τ/4)."""
        assert phase_factor(0j, 0j) == 0j
        assert phase_factor(1.0, 0j) == 1j * math.pi
        assert cmath.isclose(phase_factor(0.5, 2j), 1j * math.pi * (0.5 + 0.5j))
