"""
almagest — static geometry of Keplerian orbits on a typed quantity system.
"""

from almagest.core.domain import (
    Eccentricity,
    EccentricityDomainViolation,
    Ellipse,
    Kilometers,
    Meters,
    MetersCubed,
    MetersSquared,
    Point,
    difference_of_focal_radii,
    eccentricity_from_focal_radii,
    sum_of_focal_radii,
)

__version__ = "0.1.0"

__all__ = [
    "Eccentricity",
    "EccentricityDomainViolation",
    "Ellipse",
    "Kilometers",
    "Meters",
    "MetersCubed",
    "MetersSquared",
    "Point",
    "difference_of_focal_radii",
    "eccentricity_from_focal_radii",
    "sum_of_focal_radii",
]
