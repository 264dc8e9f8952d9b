from core.math import Vec3
from core.geometry import Sphere
from core.scene import Scene
from core.camera import Camera


class StackSceneBuilder:
    """Vertical stack of spheres receding in depth, colored red-to-blue bottom to top"""

    def __init__(self, n_spheres: int = 10, radius: float = 0.75):
        if n_spheres < 2:
            raise ValueError(f"Sphere stack needs at least 2 spheres, got {n_spheres}")
        self.n_spheres = n_spheres
        self.radius = radius

    def build_scene(self) -> Scene:
        scene = Scene()
        n = self.n_spheres
        for i in range(n):
            y = -1.0 + i * (2.0 / (n - 1))
            z = -2.0 - i * 0.5
            t = (n - i) / n
            color = Vec3(t, 0.5, 1.0 - t)
            scene.add_object(Sphere(Vec3(0.0, y, z), self.radius, color, 0.0))
        return scene

    def create_camera(self, origin: Vec3 = Vec3(0.0, 0.0, 2.0)) -> Camera:
        return Camera(origin)


class SingleSphereSceneBuilder:
    """One red sphere straight ahead of the eye"""

    def __init__(self, center: Vec3 = Vec3(0.0, 0.0, -3.0), radius: float = 0.75,
                 color: Vec3 = Vec3(1.0, 0.0, 0.0)):
        self.center = center
        self.radius = radius
        self.color = color

    def build_scene(self) -> Scene:
        scene = Scene()
        scene.add_object(Sphere(self.center, self.radius, self.color))
        return scene

    def create_camera(self, origin: Vec3 = Vec3(0.0, 0.0, 2.0)) -> Camera:
        return Camera(origin)


SCENE_BUILDERS = {
    'stack': StackSceneBuilder,
    'single': SingleSphereSceneBuilder,
}
