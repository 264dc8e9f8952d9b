from dataclasses import dataclass

from core.math import Vec3


@dataclass(frozen=True)
class Sphere:
    """Solid sphere viewed from outside. Intersection lives in core.intersection."""
    center: Vec3
    radius: float
    color: Vec3
    reflectivity: float = 0.0  # reserved, not read by shading

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"Sphere reflectivity must be in [0, 1], got {self.reflectivity}")
