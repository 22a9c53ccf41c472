"""
Numerical Safeguards — примитивы для скалярной арифметики

Модуль собирает общие численные правила для value-типов пакета:
- Epsilon машинной точности (ulp(1.0)) для проверок "почти ноль"
- Строгая проверка делителя: деление на точный 0.0 — ошибка, а не Inf/NaN
- Побитовое представление float для структурного равенства и hash
- Полный порядок на float (NaN наибольший, -0.0 < 0.0)
- Валидация диапазонов и типов входных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Делитель, равный 0.0 (точное сравнение), → DivisionByZero
2. Все остальные краевые случаи следуют IEEE-754 (NaN/Inf не подменяются)
3. Равенство по битам: 0.0 != -0.0, NaN == NaN
4. Все операции детерминированы и не имеют побочных эффектов
"""

import math
import numbers
import struct
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для 1.0: наименьший шаг float после 1.0
# Используется в is_real() и в fallback-ветке квадратного корня
EPSILON: Final[float] = math.ulp(1.0)

# Каноническое представление NaN
_CANONICAL_NAN_BITS: Final[int] = 0x7FF8000000000000


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Нарушение предусловия: делитель в точности равен 0.0.

    Возбуждается синхронно в месте вызова и никогда не обрабатывается внутри
    пакета. Деление на комплексный ноль приходит сюда же через знаменатель
    c² + d².
    """

    pass


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def require_nonzero_divisor(value: float, dividend: str = "a complex number") -> float:
    """
    Проверка делителя перед скалярным делением.

    Сравнение точное (value == 0.0), без epsilon: малые ненулевые
    делители допустимы, результат может уйти в Inf по IEEE-754.

    Args:
        value: Делитель
        dividend: Что делим (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        DivisionByZero: Если value == 0.0 (включая -0.0)

    Examples:
        >>> require_nonzero_divisor(2.0)
        2.0
        >>> require_nonzero_divisor(1e-300)
        1e-300
    """
    if value == 0.0:
        raise DivisionByZero(f"Attempt to divide {dividend} by zero.")
    return value


# =============================================================================
# ПРОВЕРКИ И СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """Проверка, что float конечен (не NaN, не Inf)."""
    return math.isfinite(value)


def is_negligible(value: float, eps: float = EPSILON) -> bool:
    """
    Проверка "почти ноль" относительно машинного epsilon.

    Args:
        value: Проверяемое значение
        eps: Порог (default: EPSILON = ulp(1.0))

    Returns:
        True если abs(value) < eps (строгое неравенство)
    """
    return abs(value) < eps


def float_bits(value: float) -> int:
    """
    64-битное знаковое представление float.

    NaN приводится к каноническому виду, поэтому все NaN дают одинаковые
    биты. Знак нуля сохраняется: float_bits(0.0) != float_bits(-0.0).

    Examples:
        >>> float_bits(0.0)
        0
        >>> float_bits(-0.0) < 0
        True
    """
    if math.isnan(value):
        return _CANONICAL_NAN_BITS
    return struct.unpack(">q", struct.pack(">d", value))[0]


def compare_floats(a: float, b: float) -> int:
    """
    Полный порядок на float (NaN наибольший, -0.0 < 0.0).

    Обычные значения сравниваются численно. Для совпадающих численно
    значений решает битовое представление: -0.0 < 0.0, NaN равен NaN
    и больше любого другого значения, включая +Inf.

    Returns:
        -1 если a < b, 0 если a эквивалентно b, +1 если a > b

    Examples:
        >>> compare_floats(1.0, 2.0)
        -1
        >>> compare_floats(-0.0, 0.0)
        -1
        >>> compare_floats(float('nan'), float('inf'))
        1
    """
    if a < b:
        return -1
    if a > b:
        return 1

    a_bits = float_bits(a)
    b_bits = float_bits(b)
    if a_bits == b_bits:
        return 0
    return -1 if a_bits < b_bits else 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


def require_real_number(value: object, name: str) -> float:
    """
    Приведение компоненты value-типа к float.

    Принимаются только вещественные числа (numbers.Real: int, float,
    Fraction, ...). Строки не разбираются: float("1.5") здесь не вызывается.

    Args:
        value: Компонента
        name: Имя компоненты (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        TypeError: Если value не numbers.Real
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)
