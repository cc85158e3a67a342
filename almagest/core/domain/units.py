"""
Units — Типизированные физические величины

Единственный допустимый способ выражать длины, площади и объёмы в almagest:
- Meters / Kilometers (длина, 1 km = M_PER_KM m)
- MetersSquared (площадь)
- MetersCubed (объём)
- Eccentricity (безразмерная, >= 0)

ПРАВИЛА РАЗМЕРНОСТЕЙ (k — безразмерный скаляр int/float):
    m ± m → m          m * k, k * m, m / k → m
    m / m → k          m * m → m²
    m * m² → m³        m² / m → m
    m² ± m², m² * k, m² / k → m²
    m³ ± m³, m³ * k, m³ / k → m³
    km ± km, km * k, km / k → km;  km / km → k

Любая другая комбинация возвращает NotImplemented → TypeError.
ЗАПРЕЩЕНО смешивать единицы без явного конвертера (to_km / to_meters).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Величины immutable: присваивание атрибутов → AttributeError
2. Деление тотально: x / 0 → ±inf, 0 / 0 → NaN (см. numerical_safeguards)
3. Сравнения только внутри одного типа, по правилам float (NaN != NaN)
4. Eccentricity < 0 → EccentricityDomainViolation (единственный fallible конструктор)
"""

from typing import Any, ClassVar, Final, NoReturn, TypeVar, overload

from almagest.core.math.numerical_safeguards import ieee_divide

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Метров в километре (точный масштаб конверсии)
M_PER_KM: Final[float] = 1_000.0

_Q = TypeVar("_Q", bound="_Quantity")


def _is_scalar(other: object) -> bool:
    """Безразмерный скаляр: int или float (bool не считается скаляром)."""
    return isinstance(other, (int, float)) and not isinstance(other, bool)


# =============================================================================
# БАЗОВАЯ ВЕЛИЧИНА
# =============================================================================


class _Quantity:
    """
    Скалярная величина одной размерности.

    Реализует общую для всех размерностей алгебру: сложение/вычитание
    с величиной того же типа, умножение/деление на скаляр, сравнения.
    Кросс-размерные операции определяются в подклассах.
    """

    __slots__ = ("_value",)

    SYMBOL: ClassVar[str] = ""

    def __init__(self, value: float) -> None:
        object.__setattr__(self, "_value", float(value))

    @property
    def value(self) -> float:
        """Численное значение в единицах типа."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[float]]:
        return (type(self), (self._value,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return f"{self._value} {self.SYMBOL}"

    # -------------------------------------------------------------------------
    # Сравнения (только внутри одного типа)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __lt__(self: _Q, other: _Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __le__(self: _Q, other: _Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self: _Q, other: _Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value

    def __ge__(self: _Q, other: _Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value

    # -------------------------------------------------------------------------
    # Арифметика внутри размерности
    # -------------------------------------------------------------------------

    def __add__(self: _Q, other: _Q) -> _Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self: _Q, other: _Q) -> _Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __mul__(self: _Q, other: float) -> _Q:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(self._value * other)

    def __rmul__(self: _Q, other: float) -> _Q:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(other * self._value)

    def __truediv__(self: _Q, other: float) -> _Q:
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(ieee_divide(self._value, other))


# =============================================================================
# ДЛИНА
# =============================================================================


class Meters(_Quantity):
    """Длина в метрах (базовая единица)."""

    __slots__ = ()

    SYMBOL: ClassVar[str] = "m"
    ZERO: ClassVar["Meters"]

    def to_km(self) -> "Kilometers":
        """Конверсия m → km (деление на M_PER_KM)."""
        return Kilometers(self._value / M_PER_KM)

    @overload
    def __mul__(self, other: float) -> "Meters": ...

    @overload
    def __mul__(self, other: "Meters") -> "MetersSquared": ...

    @overload
    def __mul__(self, other: "MetersSquared") -> "MetersCubed": ...

    def __mul__(self, other):  # type: ignore[no-untyped-def]
        # m * m → m², m * m² → m³
        if isinstance(other, Meters):
            return MetersSquared(self._value * other._value)
        if isinstance(other, MetersSquared):
            return MetersCubed(self._value * other.value)
        return super().__mul__(other)

    @overload
    def __truediv__(self, other: float) -> "Meters": ...

    @overload
    def __truediv__(self, other: "Meters") -> float: ...

    def __truediv__(self, other):  # type: ignore[no-untyped-def]
        # m / m → безразмерное отношение
        if isinstance(other, Meters):
            return ieee_divide(self._value, other._value)
        return super().__truediv__(other)


Meters.ZERO = Meters(0.0)


class Kilometers(_Quantity):
    """Длина в километрах (1 km = M_PER_KM m)."""

    __slots__ = ()

    SYMBOL: ClassVar[str] = "km"

    def to_meters(self) -> Meters:
        """Конверсия km → m (умножение на M_PER_KM)."""
        return Meters(self._value * M_PER_KM)

    @overload
    def __truediv__(self, other: float) -> "Kilometers": ...

    @overload
    def __truediv__(self, other: "Kilometers") -> float: ...

    def __truediv__(self, other):  # type: ignore[no-untyped-def]
        if isinstance(other, Kilometers):
            return ieee_divide(self._value, other._value)
        return super().__truediv__(other)


# =============================================================================
# ПЛОЩАДЬ И ОБЪЁМ
# =============================================================================


class MetersSquared(_Quantity):
    """Площадь в m². Получается только из Meters * Meters."""

    __slots__ = ()

    SYMBOL: ClassVar[str] = "m²"

    @overload
    def __truediv__(self, other: float) -> "MetersSquared": ...

    @overload
    def __truediv__(self, other: Meters) -> Meters: ...

    def __truediv__(self, other):  # type: ignore[no-untyped-def]
        # m² / m → m
        if isinstance(other, Meters):
            return Meters(ieee_divide(self._value, other.value))
        return super().__truediv__(other)


class MetersCubed(_Quantity):
    """Объём в m³. Получается только из Meters * MetersSquared."""

    __slots__ = ()

    SYMBOL: ClassVar[str] = "m³"


# =============================================================================
# ЭКСЦЕНТРИСИТЕТ
# =============================================================================


class EccentricityDomainViolation(ValueError):
    """
    Нарушение domain эксцентриситета: e < 0.

    Единственная ошибка домена в almagest. Возникает при прямом создании
    Eccentricity, в Ellipse.from_periapsis_apoapsis (apoapsis < periapsis)
    и в eccentricity_from_focal_radii.
    """

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Eccentricity cannot be negative: {value} (invalid_eccentricity)")


class Eccentricity:
    """
    Эксцентриситет конического сечения (безразмерный, e >= 0).

    Верхняя граница не проверяется: e >= 1 (парабола/гипербола) допустим,
    производная геометрия эллипса в этом случае вырождается в inf/NaN.
    NaN принимается (NaN < 0 ложно).

    Raises:
        EccentricityDomainViolation: Если value < 0
    """

    __slots__ = ("_value",)

    def __init__(self, value: float) -> None:
        value = float(value)
        if value < 0.0:
            raise EccentricityDomainViolation(value)
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> float:
        return self._value

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Eccentricity is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Eccentricity is immutable")

    def __reduce__(self) -> tuple[type, tuple[float]]:
        return (Eccentricity, (self._value,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Eccentricity):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Eccentricity", self._value))

    def __repr__(self) -> str:
        return f"Eccentricity({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)
