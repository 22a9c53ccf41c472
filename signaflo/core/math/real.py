"""
Real — неизменяемое вещественное число

Второй реализатор FieldElement наряду с Complex. Используется как внешний
вещественный тип, из которого строится Complex.from_real().
"""

import math
import numbers
from dataclasses import dataclass

from signaflo.core.math.complex_number import Complex
from signaflo.core.math.field_element import FieldElement
from signaflo.core.math.numerical_safeguards import (
    compare_floats,
    float_bits,
    require_nonzero_divisor,
    require_real_number,
)


@dataclass(frozen=True, eq=False)
class Real(FieldElement["Real"]):
    """
    Вещественное число как элемент поля.

    Равенство и hash — по битам значения, как у Complex.
    """

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", require_real_number(self.value, "value"))

    @classmethod
    def zero(cls) -> "Real":
        return cls(0.0)

    def as_float(self) -> float:
        return self.value

    def add(self, other: "Real") -> "Real":
        return Real(self.value + other.value)

    def subtract(self, other: "Real") -> "Real":
        return Real(self.value - other.value)

    def multiply(self, other: "Real") -> "Real":
        return Real(self.value * other.value)

    def divide(self, other: "Real") -> "Real":
        """
        Частное self / other.

        Raises:
            DivisionByZero: Если other.value == 0.0
        """
        require_nonzero_divisor(other.value, "a real number")
        return Real(self.value / other.value)

    def conjugate(self) -> "Real":
        return self

    def magnitude(self) -> float:
        return abs(self.value)

    def additive_inverse(self) -> "Real":
        return Real(-self.value)

    def sqrt(self) -> "Real":
        """
        Вещественный квадратный корень.

        Для отрицательного значения результат NaN (IEEE-754), исключение
        не возбуждается. Комплексный корень — complex_sqrt().
        """
        if self.value < 0.0:
            return Real(math.nan)
        return Real(math.sqrt(self.value))

    def complex_sqrt(self) -> Complex:
        return Complex(self.value).sqrt()

    def compare_by_magnitude(self, other: "Real") -> int:
        return compare_floats(self.magnitude(), other.magnitude())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return float_bits(self.value) == float_bits(other.value)

    def __hash__(self) -> int:
        return hash(float_bits(self.value))

    def __add__(self, other: object) -> "Real":
        if isinstance(other, Real):
            return self.add(other)
        if isinstance(other, numbers.Real):
            return self.add(Real(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "Real":
        if isinstance(other, Real):
            return self.subtract(other)
        if isinstance(other, numbers.Real):
            return self.subtract(Real(other))
        return NotImplemented

    def __rsub__(self, other: object) -> "Real":
        if isinstance(other, numbers.Real):
            return Real(other).subtract(self)
        return NotImplemented

    def __mul__(self, other: object) -> "Real":
        if isinstance(other, Real):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.multiply(Real(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Real":
        if isinstance(other, Real):
            return self.divide(other)
        if isinstance(other, numbers.Real):
            return self.divide(Real(other))
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Real":
        if isinstance(other, numbers.Real):
            return Real(other).divide(self)
        return NotImplemented

    def __neg__(self) -> "Real":
        return self.additive_inverse()

    def __abs__(self) -> float:
        return self.magnitude()

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return repr(self.value)
