"""
Domain models and value objects.

Typed quantities (Meters, MetersSquared, Eccentricity, ...), Point,
conic classification and Ellipse geometry.
"""

from almagest.core.domain.conic import (
    DEFAULT_CONIC_CLASSIFICATION,
    ConicClassificationConfig,
    ConicType,
    classify_eccentricity,
)
from almagest.core.domain.ellipse import (
    Ellipse,
    difference_of_focal_radii,
    eccentricity_from_focal_radii,
    sum_of_focal_radii,
)
from almagest.core.domain.point import Point
from almagest.core.domain.units import (
    M_PER_KM,
    Eccentricity,
    EccentricityDomainViolation,
    Kilometers,
    Meters,
    MetersCubed,
    MetersSquared,
)

__all__ = [
    # Units module
    "M_PER_KM",
    "Meters",
    "Kilometers",
    "MetersSquared",
    "MetersCubed",
    "Eccentricity",
    "EccentricityDomainViolation",
    # Point model
    "Point",
    # Conic classification
    "ConicType",
    "ConicClassificationConfig",
    "DEFAULT_CONIC_CLASSIFICATION",
    "classify_eccentricity",
    # Ellipse model
    "Ellipse",
    "sum_of_focal_radii",
    "difference_of_focal_radii",
    "eccentricity_from_focal_radii",
]
