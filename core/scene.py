from typing import List
from dataclasses import dataclass

from core.math import Vec3, Ray
from core.shading import HitRecord
from core.intersection import intersect, NO_HIT


@dataclass(frozen=True)
class RenderSettings:
    width: int = 1024
    height: int = 1024
    light: Vec3 = Vec3(-5.0, -5.0, 10.0)
    eye: Vec3 = Vec3(0.0, 0.0, 2.0)
    specular_color: Vec3 = Vec3(1.0, 1.0, 1.0)
    shininess: float = 32.0

    def __post_init__(self):
        # pixel -> NDC divides by (width - 1) and (height - 1)
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Image must be at least 2x2, got {self.width}x{self.height}")


class Scene:
    def __init__(self):
        self.objects: List = []

    def add_object(self, obj):
        self.objects.append(obj)

    def __len__(self):
        return len(self.objects)

    def hit(self, ray: Ray, rec: HitRecord) -> bool:
        """Nearest positive hit over every object, first object wins ties."""
        closest_so_far = NO_HIT
        hit_index = -1

        for index, obj in enumerate(self.objects):
            t = intersect(obj, ray)
            if t < closest_so_far:
                closest_so_far = t
                hit_index = index

        if hit_index < 0:
            return False

        obj = self.objects[hit_index]
        rec.t = closest_so_far
        rec.index = hit_index
        rec.obj = obj
        rec.point = ray.point_at_parameter(closest_so_far)
        rec.normal = (rec.point - obj.center).normalize()
        return True
