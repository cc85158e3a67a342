"""
Conic — Классификация конического сечения по эксцентриситету

    e = 0      → CIRCLE
    0 < e < 1  → ELLIPSE
    e = 1      → PARABOLA
    e > 1      → HYPERBOLA

Классификация только маркирует режим; геометрия гиперболы не моделируется.
Сравнения с границами выполняются с толерантностью из
ConicClassificationConfig.
"""

import math
from dataclasses import dataclass
from enum import Enum

from almagest.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_zero,
    validate_non_negative,
)

from .units import Eccentricity


# =============================================================================
# ENUMS
# =============================================================================


class ConicType(str, Enum):
    """Тип конического сечения"""

    CIRCLE = "CIRCLE"
    ELLIPSE = "ELLIPSE"
    PARABOLA = "PARABOLA"
    HYPERBOLA = "HYPERBOLA"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConicClassificationConfig:
    """Толерантности классификации.

    - circular_eps: e <= circular_eps считается окружностью
    - parabolic_eps: |e - 1| <= parabolic_eps считается параболой
    """

    circular_eps: float = EPS_FLOAT_COMPARE_ABS
    parabolic_eps: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_non_negative(self.circular_eps, "circular_eps")
        validate_non_negative(self.parabolic_eps, "parabolic_eps")


DEFAULT_CONIC_CLASSIFICATION = ConicClassificationConfig()


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify_eccentricity(
    eccentricity: Eccentricity,
    config: ConicClassificationConfig = DEFAULT_CONIC_CLASSIFICATION,
) -> ConicType:
    """
    Классификация конического сечения по эксцентриситету.

    Args:
        eccentricity: Эксцентриситет (e >= 0 гарантирован типом)
        config: Толерантности границ

    Returns:
        ConicType

    Raises:
        ValueError: Если эксцентриситет NaN
    """
    e = eccentricity.value

    if math.isnan(e):
        raise ValueError("Cannot classify conic section with NaN eccentricity")

    if e <= config.circular_eps:
        return ConicType.CIRCLE
    if is_zero(e - 1.0, tol=config.parabolic_eps):
        return ConicType.PARABOLA
    if e < 1.0:
        return ConicType.ELLIPSE
    return ConicType.HYPERBOLA
