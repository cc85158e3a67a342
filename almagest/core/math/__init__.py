"""
Core math modules для almagest

Скалярные примитивы с IEEE-семантикой, на которых построена система величин.
"""

from almagest.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Total operations
    ieee_divide,
    ieee_sqrt,
    # Checks and comparisons
    is_close,
    is_valid_float,
    is_zero,
    validate_non_negative,
)

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ieee_divide",
    "ieee_sqrt",
    "is_close",
    "is_valid_float",
    "is_zero",
    "validate_non_negative",
]
