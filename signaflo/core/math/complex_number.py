"""
Complex — неизменяемое комплексное число

Value-тип из двух float-компонент (real, imaginary), реализующий контракт
FieldElement. Потокобезопасен за счёт неизменяемости: каждая операция
возвращает новое значение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После создания компоненты не меняются (frozen dataclass)
2. Равенство и hash — структурные, по битам обеих компонент (без epsilon)
3. is_real() и fallback-ветка sqrt() используют EPSILON = ulp(1.0),
   а строковое представление — точные сравнения с 0.0
4. Единственная ошибка — DivisionByZero при делителе, равном 0.0
5. Порядок (<, <=, >, >=) — по модулю, НЕ канонический порядок на C

ФОРМУЛЫ:
    (a + bi)(c + di) = (ac - bd) + (ad + cb)i
    (a + bi)/(c + di) = ((ac + bd) + (-ad + cb)i) / (c² + d²)
    sqrt(z) = (z + |z|) / |z + |z|| * sqrt(|z|)
"""

import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING

from signaflo.core.math.field_element import FieldElement
from signaflo.core.math.numerical_safeguards import (
    EPSILON,
    compare_floats,
    float_bits,
    is_negligible,
    require_nonzero_divisor,
    require_real_number,
)

if TYPE_CHECKING:
    from signaflo.core.math.real import Real


@dataclass(frozen=True, eq=False)
class Complex(FieldElement["Complex"]):
    """
    Комплексное число real + imaginary·i.

    Создание:
        Complex()          → 0.0
        Complex(x)         → x + 0.0i
        Complex(x, y)      → x + yi
        Complex.from_real(Real(x))
        Complex.zero()

    Операторы +, -, *, / принимают Complex и вещественные числа;
    abs(z) — модуль, -z — аддитивный обратный.
    """

    real: float = 0.0
    imaginary: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", require_real_number(self.real, "real"))
        object.__setattr__(
            self, "imaginary", require_real_number(self.imaginary, "imaginary")
        )

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_real(cls, real: "Real") -> "Complex":
        """Комплексное число с нулевой мнимой частью из Real."""
        return cls(real.as_float())

    @classmethod
    def zero(cls) -> "Complex":
        return cls(0.0, 0.0)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Complex | float") -> "Complex":
        """
        Сумма. Для вещественного other меняется только действительная часть.

        Args:
            other: Complex или вещественное число

        Returns:
            Новое значение self + other
        """
        if isinstance(other, Complex):
            return Complex(self.real + other.real, self.imaginary + other.imaginary)
        return Complex(self.real + other, self.imaginary)

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: "Complex") -> "Complex":
        real_part = self.real * other.real - self.imaginary * other.imaginary
        imaginary_part = self.real * other.imaginary + other.real * self.imaginary
        return Complex(real_part, imaginary_part)

    def _multiply_scalar(self, factor: float) -> "Complex":
        return Complex(self.real * factor, self.imaginary * factor)

    def divide_scalar(self, value: float) -> "Complex":
        """
        Деление обеих компонент на вещественное число.

        Raises:
            DivisionByZero: Если value == 0.0 (точное сравнение)
        """
        require_nonzero_divisor(value)
        return Complex(self.real / value, self.imaginary / value)

    def divide(self, other: "Complex") -> "Complex":
        """
        Деление через умножение на сопряжённое.

        Числитель self · conj(other), знаменатель c² + d². Деление на
        комплексный ноль даёт знаменатель 0.0 и поэтому DivisionByZero.
        """
        top = Complex(
            self.real * other.real + self.imaginary * other.imaginary,
            self.real * -other.imaginary + other.real * self.imaginary,
        )
        bottom = other.real * other.real + other.imaginary * other.imaginary
        return top.divide_scalar(bottom)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imaginary)

    def magnitude(self) -> float:
        # Без hypot-масштабирования: переполнение квадратов даёт inf по IEEE-754
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    def additive_inverse(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def sqrt(self) -> "Complex":
        """
        Главное значение квадратного корня (численно устойчивая формула).

        Около нуля и на отрицательной действительной полуоси
        (real < EPSILON и |imaginary| < EPSILON) возвращается
        (0.0, sqrt(|z|)). Иначе вектор z + |z| нормируется и масштабируется
        на sqrt(|z|), что не теряет точность при real ≈ ±|z|, в отличие от
        формулы sqrt((r+a)/2) + i·sign(b)·sqrt((r-a)/2).

        Returns:
            Корень с неотрицательной действительной частью
            (или нулевой действительной и неотрицательной мнимой)

        Examples:
            >>> Complex(-4.0).sqrt()
            Complex(real=0.0, imaginary=2.0)
        """
        if self.real < EPSILON and is_negligible(self.imaginary):
            return Complex(0.0, math.sqrt(self.magnitude()))

        # Случай отрицательного вещественного числа обработан выше,
        # поэтому z + |z| здесь не обращается в ноль
        r = self.magnitude()
        shifted = self.add(r)
        return shifted.divide_scalar(shifted.magnitude())._multiply_scalar(math.sqrt(r))

    def complex_sqrt(self) -> "Complex":
        return self.sqrt()

    # =========================================================================
    # ПРЕДИКАТЫ И СРАВНЕНИЯ
    # =========================================================================

    def is_real(self) -> bool:
        """True если |imaginary| < EPSILON (а не только при точном нуле)."""
        return is_negligible(self.imaginary)

    def compare_by_magnitude(self, other: "Complex") -> int:
        """
        Сравнение по модулю: compare_floats(|self|, |other|).

        ВАЖНО: это не порядок на комплексных числах. Complex(1, 0),
        Complex(0, 1) и Complex(-1, 0) эквивалентны в этом порядке, хотя
        структурно различны.
        """
        return compare_floats(self.magnitude(), other.magnitude())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return float_bits(self.real) == float_bits(other.real) and float_bits(
            self.imaginary
        ) == float_bits(other.imaginary)

    def __hash__(self) -> int:
        return hash((float_bits(self.real), float_bits(self.imaginary)))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_by_magnitude(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_by_magnitude(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_by_magnitude(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_by_magnitude(other) >= 0

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.add(other)
        if isinstance(other, numbers.Real):
            return self.add(float(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.subtract(other)
        if isinstance(other, numbers.Real):
            return self.subtract(Complex(other))
        return NotImplemented

    def __rsub__(self, other: object) -> "Complex":
        if isinstance(other, numbers.Real):
            return Complex(other).subtract(self)
        return NotImplemented

    def __mul__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self._multiply_scalar(float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Complex":
        if isinstance(other, Complex):
            return self.divide(other)
        if isinstance(other, numbers.Real):
            return self.divide_scalar(float(other))
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Complex":
        if isinstance(other, numbers.Real):
            return Complex(other).divide(self)
        return NotImplemented

    def __neg__(self) -> "Complex":
        return self.additive_inverse()

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        """
        Каноническая строка для логов и диагностики (не формат сериализации).

        Проверки на ноль точные (> 0.0), без EPSILON: Complex(1.0, 1e-20)
        печатается с мнимой частью, хотя is_real() для него True.

        Examples:
            >>> str(Complex(3.0, -4.0))
            '3.0 - 4.0i'
            >>> str(Complex(0.0, 2.5))
            '2.5i'
            >>> str(Complex())
            '0.0'
        """
        if abs(self.real) > 0.0:
            text = repr(self.real)
        else:
            if abs(self.imaginary) > 0.0:
                return f"{self.imaginary!r}i"
            return "0.0"

        if self.imaginary < 0.0:
            text += f" - {abs(self.imaginary)!r}i"
        elif self.imaginary > 0.0:
            text += f" + {self.imaginary!r}i"
        return text
