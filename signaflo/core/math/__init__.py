"""
Core math modules для signaflo

Скалярные value-типы (Real, Complex) с общим контрактом FieldElement
и численные примитивы, на которых они построены.
"""

# Numerical Safeguards
from signaflo.core.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    # Exceptions
    DivisionByZero,
    # Division
    require_nonzero_divisor,
    # Comparisons
    compare_floats,
    float_bits,
    is_negligible,
    is_valid_float,
    # Validation
    require_real_number,
    validate_in_range,
)

# Field elements
from signaflo.core.math.field_element import FieldElement
from signaflo.core.math.complex_number import Complex
from signaflo.core.math.real import Real

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPSILON",
    # Numerical Safeguards — Exceptions
    "DivisionByZero",
    # Numerical Safeguards — Division
    "require_nonzero_divisor",
    # Numerical Safeguards — Comparisons
    "compare_floats",
    "float_bits",
    "is_negligible",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "require_real_number",
    "validate_in_range",
    # Field elements
    "FieldElement",
    "Complex",
    "Real",
]
