from core.math import Vec3, Ray


class Camera:
    """Pinhole eye looking through the unit image plane z = 0, [-1, 1] x [-1, 1]."""

    def __init__(self, origin: Vec3):
        self.origin = origin

    @staticmethod
    def pixel_to_ndc(i: int, j: int, width: int, height: int):
        u = -1.0 + 2.0 * i / (width - 1)
        v = -1.0 + 2.0 * j / (height - 1)
        return u, v

    def get_ray(self, u: float, v: float) -> Ray:
        direction = (Vec3(u, v, 0.0) - self.origin).normalize()
        return Ray(self.origin, direction)
