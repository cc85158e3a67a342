"""
Numerical Safeguards — IEEE-семантика скалярной арифметики

Модуль задаёт правила float-арифметики для всех величин almagest:
- Деление по IEEE 754: x / 0 → ±inf, 0 / 0 → NaN (без ZeroDivisionError)
- Квадратный корень по IEEE 754: sqrt(x < 0) → NaN (без ValueError)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика тотальна: деление на ноль и вырожденные случаи не бросают исключений
2. NaN/Inf распространяются по правилам IEEE 754 (не санитизируются)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float (is_close)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float (is_close, is_zero)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ТОТАЛЬНЫЕ ОПЕРАЦИИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по IEEE 754.

    Python бросает ZeroDivisionError при делении на 0.0; здесь вместо этого
    возвращается знаковая бесконечность (или NaN для 0/0), как в IEEE 754.
    Знак результата учитывает знак нуля в знаменателе.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, либо ±inf / NaN при нулевом знаменателе

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(10.0, 0.0)
        inf
        >>> ieee_divide(10.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

    return numerator / denominator


def ieee_sqrt(value: float) -> float:
    """
    Квадратный корень по IEEE 754: отрицательный аргумент даёт NaN.

    Args:
        value: Аргумент

    Returns:
        sqrt(value) или NaN при value < 0

    Examples:
        >>> ieee_sqrt(4.0)
        2.0
        >>> ieee_sqrt(-1.0)
        nan
    """
    if value < 0.0:
        return math.nan
    return math.sqrt(value)


# =============================================================================
# ПРОВЕРКИ И EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное и не NaN.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN
    """
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
