"""
Тесты для value-типа Real

Проверяет:
1. Арифметику и DivisionByZero
2. Вещественный и комплексный квадратный корень
3. Побитовое равенство, hash и порядок по модулю
4. Конверсию в Complex
"""

import dataclasses
import math

import pytest

from signaflo.core.math import Complex, DivisionByZero, FieldElement, Real


class TestRealArithmetic:
    """Тесты арифметики Real"""

    def test_default_is_zero(self) -> None:
        assert Real() == Real.zero()
        assert Real().as_float() == 0.0

    def test_field_operations(self) -> None:
        a = Real(6.0)
        b = Real(1.5)
        assert a.add(b) == Real(7.5)
        assert a.subtract(b) == Real(4.5)
        assert a.multiply(b) == Real(9.0)
        assert a.divide(b) == Real(4.0)

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(DivisionByZero, match="divide a real number by zero"):
            Real(1.0).divide(Real(0.0))

    def test_conjugate_is_self(self) -> None:
        a = Real(-2.0)
        assert a.conjugate() is a

    def test_magnitude_and_inverse(self) -> None:
        assert Real(-2.5).magnitude() == 2.5
        assert Real(-2.5).additive_inverse() == Real(2.5)

    def test_operators(self) -> None:
        assert Real(1.0) + Real(2.0) == Real(3.0)
        assert Real(1.0) + 2 == Real(3.0)
        assert 2 * Real(1.5) == Real(3.0)
        assert Real(3.0) - 1 == Real(2.0)
        assert Real(3.0) / 2 == Real(1.5)
        assert -Real(1.0) == Real(-1.0)
        assert abs(Real(-4.0)) == 4.0
        assert float(Real(0.25)) == 0.25
        assert 1.0 - Real(2.0) == Real(-1.0)
        assert 1 / Real(2.0) == Real(0.5)
        assert 3 - Real(1.0) == Real(2.0)

    def test_operator_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Real(1.0) / 0

    def test_reflected_division_by_zero(self) -> None:
        """Число / Real(0.0) — тот же DivisionByZero"""
        with pytest.raises(DivisionByZero, match="divide a real number by zero"):
            1.0 / Real(0.0)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            "1" - Real(1.0)  # type: ignore[operator]

    @pytest.mark.parametrize("value", ["1.0", "nan", None, 1j])
    def test_non_real_value_rejected(self, value: object) -> None:
        """Строки не разбираются, комплексные не принимаются"""
        with pytest.raises(TypeError, match="value must be a real number"):
            Real(value)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Real(1.0).value = 2.0  # type: ignore[misc]

    def test_is_field_element(self) -> None:
        assert isinstance(Real(1.0), FieldElement)


class TestRealSqrt:
    """Тесты квадратных корней Real"""

    def test_sqrt_positive(self) -> None:
        assert Real(9.0).sqrt() == Real(3.0)

    def test_sqrt_negative_is_nan(self) -> None:
        """Отрицательное значение: NaN без исключения"""
        assert math.isnan(Real(-1.0).sqrt().as_float())

    def test_complex_sqrt_negative(self) -> None:
        assert Real(-4.0).complex_sqrt() == Complex(0.0, 2.0)

    def test_complex_sqrt_positive(self) -> None:
        assert Real(4.0).complex_sqrt() == Complex(2.0, 0.0)


class TestRealEqualityAndOrdering:
    """Тесты равенства и порядка Real"""

    def test_bitwise_equality(self) -> None:
        assert Real(1.0) == Real(1.0)
        assert hash(Real(1.0)) == hash(Real(1.0))
        assert Real(0.0) != Real(-0.0)
        assert Real(float("nan")) == Real(float("nan"))

    def test_compare_by_magnitude(self) -> None:
        assert Real(-3.0).compare_by_magnitude(Real(2.0)) == 1
        assert Real(-2.0).compare_by_magnitude(Real(2.0)) == 0
        assert Real(1.0).compare_by_magnitude(Real(-2.0)) == -1

    def test_not_equal_to_complex(self) -> None:
        assert Real(1.0) != Complex(1.0)

    def test_str(self) -> None:
        assert str(Real(2.5)) == "2.5"


class TestRealToComplex:
    """Тесты конверсии Real → Complex"""

    def test_from_real_zero_imaginary(self) -> None:
        z = Complex.from_real(Real(-7.25))
        assert z == Complex(-7.25, 0.0)
        assert z.is_real()
