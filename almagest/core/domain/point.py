"""
Point — Точка на плоскости орбиты

Immutable Pydantic модель. Используется только для положения фокуса эллипса;
поведения, кроме сравнения, не имеет.
"""

from pydantic import BaseModel, Field

from .units import Meters


class Point(BaseModel):
    """Двумерная точка, координаты в метрах."""

    x: Meters = Field(..., description="Координата x (m)")
    y: Meters = Field(..., description="Координата y (m)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @classmethod
    def origin(cls) -> "Point":
        """Начало координат (0 m, 0 m)."""
        return cls(x=Meters.ZERO, y=Meters.ZERO)
