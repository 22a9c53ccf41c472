"""
FieldElement — контракт элемента поля

Общий интерфейс скалярных value-типов (Real, Complex): аддитивная
единица/обратный элемент, четыре арифметические операции, сопряжение,
модуль, квадратный корень и порядок по модулю.

Все операции чистые: self никогда не изменяется, результат — новое значение.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from signaflo.core.math.complex_number import Complex

T = TypeVar("T", bound="FieldElement")


class FieldElement(ABC, Generic[T]):
    """
    Элемент поля.

    Порядок compare_by_magnitude — это порядок по модулю, а не канонический
    порядок на элементах: разные значения с равным модулем сравниваются
    как эквивалентные (при этом структурно они не равны).
    """

    @abstractmethod
    def add(self, other: T) -> T:
        """Сумма self + other."""

    @abstractmethod
    def subtract(self, other: T) -> T:
        """Разность self - other."""

    @abstractmethod
    def multiply(self, other: T) -> T:
        """Произведение self * other."""

    @abstractmethod
    def divide(self, other: T) -> T:
        """Частное self / other. Деление на ноль → DivisionByZero."""

    @abstractmethod
    def conjugate(self) -> T:
        """Сопряжённый элемент."""

    @abstractmethod
    def magnitude(self) -> float:
        """Модуль (евклидова норма)."""

    @abstractmethod
    def additive_inverse(self) -> T:
        """Аддитивный обратный элемент -self."""

    @abstractmethod
    def sqrt(self) -> T:
        """Квадратный корень в пределах типа."""

    @abstractmethod
    def complex_sqrt(self) -> "Complex":
        """Главное значение квадратного корня как комплексного числа."""

    @abstractmethod
    def compare_by_magnitude(self, other: T) -> int:
        """Сравнение по модулю: -1, 0 или +1."""
