import math

from core.math import Vec3


def phong_shade(point: Vec3, normal: Vec3, view_dir: Vec3, light_pos: Vec3,
                diffuse_color: Vec3, specular_color: Vec3, shininess: float,
                ambient: float = 0.1) -> Vec3:
    """
    Local Phong illumination (no shadow rays, the light sees every point).

    point: surface hit point
    normal: unit surface normal at point
    view_dir: unit vector from point towards the eye
    light_pos: point light position
    diffuse_color / specular_color: Kd / Ks
    The result is not clamped; channels can exceed 1.0.
    """
    ambient_term = diffuse_color * ambient

    to_light = (light_pos - point).normalize()
    n_dot_l = normal.dot(to_light)
    diffuse_term = diffuse_color * max(n_dot_l, 0.0)

    # R = 2 * dot(N, L) * N - L
    reflect_dir = (-to_light).reflect(normal).normalize()
    spec = max(reflect_dir.dot(view_dir), 0.0) ** shininess
    specular_term = specular_color * spec

    return ambient_term + diffuse_term + specular_term


class Checkerboard:
    """Screen-space checker used as the background for rays that miss."""

    def __init__(self,
                 cells: int = 5,
                 light: Vec3 = Vec3(0.9, 0.9, 0.9),
                 dark: Vec3 = Vec3(0.1, 0.1, 0.1)):
        self.cells = cells
        self.light = light
        self.dark = dark

    def cell(self, u: float, v: float):
        # u, v in [-1, 1]
        ix = math.floor((u + 1.0) * self.cells)
        iy = math.floor((v + 1.0) * self.cells)
        return ix, iy

    def is_light(self, u: float, v: float) -> bool:
        ix, iy = self.cell(u, v)
        return (ix + iy) % 2 == 0

    def sample(self, u: float, v: float) -> Vec3:
        return self.light if self.is_light(u, v) else self.dark


class HitRecord:
    def __init__(self):
        self.t = float('inf')
        self.index = -1
        self.obj = None
        self.point = None
        self.normal = None
