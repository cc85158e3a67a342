"""
Ellipse — Геометрия кеплеровой орбиты (коническое сечение)

Immutable Pydantic модель: хранит только эксцентриситет, первичный фокус и
периапсис. Все остальные параметры формы производные и пересчитываются
при каждом вызове.

ФОРМУЛЫ:
    a   = r_p / (1 - e)              (большая полуось)
    b   = a * sqrt(1 - e²)           (малая полуось)
    f   = (a - b) / a                (сжатие)
    r_a = a * (1 + e)                (апоапсис)
    c   = e * a                      (фокальное расстояние)
    p   = r_p * (1 + e)              (фокальный параметр, = b² / a при e < 1)
    S   = π * a * b                  (площадь)

Вырожденные случаи не являются ошибками: при e = 1 большая полуось и
апоапсис равны +inf, при e > 1 малая полуось равна NaN.

Фокальные радиусы (r, r') — расстояния от точки орбиты до обоих фокусов:
    r + r'   = 2a
    |r - r'| = 2c  (точно для точек на большой оси)
"""

import math
from typing import Any

from pydantic import BaseModel, Field

from almagest.core.logging_config import get_logger
from almagest.core.math.numerical_safeguards import ieee_sqrt

from .conic import (
    DEFAULT_CONIC_CLASSIFICATION,
    ConicClassificationConfig,
    ConicType,
    classify_eccentricity,
)
from .point import Point
from .units import Eccentricity, Meters, MetersSquared

logger = get_logger(__name__)


# =============================================================================
# ELLIPSE MODEL
# =============================================================================


class Ellipse(BaseModel):
    """
    Коническое сечение, заданное эксцентриситетом, фокусом и периапсисом.

    Immutable модель (frozen=True). Производные величины не кешируются.
    """

    eccentricity: Eccentricity = Field(..., description="Эксцентриситет (e >= 0)")
    primary_focus: Point = Field(..., description="Гравитационный центр притяжения")
    periapsis: Meters = Field(
        ..., description="Расстояние от первичного фокуса до ближайшей точки орбиты"
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def model_post_init(self, context: Any, /) -> None:
        if self.eccentricity.value >= 1.0:
            logger.warning(
                f"Degenerate ellipse: e={self.eccentricity.value} >= 1, "
                f"semi-major axis is not finite-positive"
            )

    @classmethod
    def from_periapsis_apoapsis(
        cls, periapsis: Meters, apoapsis: Meters, focus: Point
    ) -> "Ellipse":
        """
        Построение эллипса по расстояниям периапсиса и апоапсиса.

        e = (r_a - r_p) / (r_a + r_p)

        Args:
            periapsis: Расстояние периапсиса r_p
            apoapsis: Расстояние апоапсиса r_a
            focus: Первичный фокус

        Returns:
            Ellipse

        Raises:
            EccentricityDomainViolation: Если apoapsis < periapsis (e < 0)
        """
        e = (apoapsis - periapsis) / (apoapsis + periapsis)
        logger.debug(f"from_periapsis_apoapsis: r_p={periapsis}, r_a={apoapsis} -> e={e}")
        return cls(eccentricity=Eccentricity(e), primary_focus=focus, periapsis=periapsis)

    def semi_major_axis(self) -> Meters:
        """Большая полуось a (половина длинной оси)."""
        return self.periapsis / (1.0 - self.eccentricity.value)

    def semi_minor_axis(self) -> Meters:
        """Малая полуось b (половина короткой оси)."""
        e = self.eccentricity.value
        return self.semi_major_axis() * ieee_sqrt(1.0 - e * e)

    def flattening(self) -> float:
        """
        Сжатие (a - b) / a — альтернативное эксцентриситету описание формы.

        Returns:
            Безразмерное сжатие: 0 для окружности
        """
        a = self.semi_major_axis()
        return (a - self.semi_minor_axis()) / a

    def apoapsis(self) -> Meters:
        """Расстояние от первичного фокуса до дальней точки орбиты."""
        return self.semi_major_axis() * (1.0 + self.eccentricity.value)

    def focal_distance(self) -> Meters:
        """Расстояние от центра эллипса до фокуса, c = e * a."""
        return self.eccentricity.value * self.semi_major_axis()

    def semi_latus_rectum(self) -> Meters:
        """Фокальный параметр p = r_p * (1 + e); конечен для любого конического сечения."""
        return self.periapsis * (1.0 + self.eccentricity.value)

    def area(self) -> MetersSquared:
        return self.semi_major_axis() * self.semi_minor_axis() * math.pi

    def conic_type(
        self, config: ConicClassificationConfig = DEFAULT_CONIC_CLASSIFICATION
    ) -> ConicType:
        """Тип конического сечения (CIRCLE/ELLIPSE/PARABOLA/HYPERBOLA)."""
        return classify_eccentricity(self.eccentricity, config)


# =============================================================================
# ФОКАЛЬНЫЕ РАДИУСЫ
# =============================================================================


def sum_of_focal_radii(r_f: Meters, r_f_prime: Meters) -> Meters:
    """
    Удвоенная большая полуось 2a по расстояниям от точки орбиты
    до первичного (r_f) и вторичного (r_f_prime) фокусов.
    """
    return r_f + r_f_prime


def difference_of_focal_radii(r_f: Meters, r_f_prime: Meters) -> Meters:
    """
    Удвоенное фокальное расстояние 2c = |r_f - r_f_prime|.
    """
    if r_f > r_f_prime:
        return r_f - r_f_prime
    return r_f_prime - r_f


def eccentricity_from_focal_radii(r_f: Meters, r_f_prime: Meters) -> Eccentricity:
    """
    Эксцентриситет орбиты по расстояниям от одной точки орбиты до обоих фокусов.

    e = c / a = (|r - r'| / 2) / ((r + r') / 2)

    Угол и время не требуются. Значение точно для точек на большой оси
    (периапсис/апоапсис).

    Args:
        r_f: Расстояние до первичного фокуса
        r_f_prime: Расстояние до вторичного фокуса

    Returns:
        Eccentricity

    Raises:
        EccentricityDomainViolation: Если отношение отрицательно
            (возможно только при отрицательных входных расстояниях)
    """
    a = sum_of_focal_radii(r_f, r_f_prime) / 2.0
    c = difference_of_focal_radii(r_f, r_f_prime) / 2.0
    return Eccentricity(c / a)
