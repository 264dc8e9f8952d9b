import math

from core.math import Ray
from core.geometry import Sphere

NO_HIT = float('inf')


def intersect_sphere(sphere: Sphere, ray: Ray) -> float:
    """Distance to the near root, or NO_HIT. Assumes a unit-length ray direction."""
    oc = ray.origin - sphere.center
    b = ray.direction.dot(oc)
    c = oc.dot(oc) - sphere.radius * sphere.radius
    disc = b * b - c
    if disc < 0.0:
        return NO_HIT
    t = -b - math.sqrt(disc)
    # t == 0 counts as a miss: no self-hit at the origin
    return t if t > 0.0 else NO_HIT


_INTERSECTORS = {
    Sphere: intersect_sphere,
}


def intersect(obj, ray: Ray) -> float:
    intersector = _INTERSECTORS.get(type(obj))
    if intersector is None:
        raise TypeError(f"No intersection test for {type(obj).__name__}")
    return intersector(obj, ray)
