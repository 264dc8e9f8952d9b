import sys
import time
import numpy as np
from typing import List
from PIL import Image

from core.geometry import Sphere
from core.scene import Scene, RenderSettings
from core.camera import Camera
from core.shading import Checkerboard
from renderers.base_renderer import BaseRenderer, RendererFactory, format_elapsed


def _dot(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # same summation order as Vec3.dot
    return a[..., 0] * b[..., 0] + a[..., 1] * b[..., 1] + a[..., 2] * b[..., 2]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.sqrt(_dot(v, v))[..., None]


def quantize_array(c: np.ndarray) -> np.ndarray:
    """Vectorized quantize(): <= 0 -> 0, >= 1 -> 255, else floor(c * 255.999)."""
    scaled = (np.clip(c, 0.0, 1.0) * 255.999).astype(np.int64)
    out = np.where(c <= 0.0, 0, np.where(c >= 1.0, 255, scaled))
    return out.astype(np.uint8)


class NumpyRenderer(BaseRenderer):
    """Whole-frame renderer: every pixel's ray is evaluated at once as numpy arrays"""

    def __init__(self):
        super().__init__("numpy_raytracer")
        self.background = Checkerboard()

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "phong_shading",
            "checkerboard_background",
            "vectorized",
        ]

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings) -> Image.Image:
        start_time = time.time()

        print(f"numpy render start: {settings.width}x{settings.height}, {len(scene)} objects",
              file=sys.stderr)

        centers, radii, colors = self._prepare_scene_data(scene)
        origin = camera.origin.to_np()

        # row 0 of the image is the topmost screen row (j = H - 1)
        i = np.arange(settings.width, dtype=np.float64)
        j = np.arange(settings.height - 1, -1, -1, dtype=np.float64)
        u = -1.0 + 2.0 * i / (settings.width - 1)
        v = -1.0 + 2.0 * j / (settings.height - 1)
        uu, vv = np.meshgrid(u, v)

        plane = np.stack([uu, vv, np.zeros_like(uu)], axis=-1)
        directions = _normalize(plane - origin)

        best_t, hit_id = self._closest_hits(origin, directions, centers, radii)

        color = self._background(uu, vv)
        hit = hit_id >= 0
        if np.any(hit):
            color[hit] = self._shade(origin, directions[hit], best_t[hit],
                                     centers[hit_id[hit]], colors[hit_id[hit]], settings)

        image_array = quantize_array(color)

        print(f"numpy render done: {format_elapsed(time.time() - start_time)}", file=sys.stderr)

        return Image.fromarray(image_array)

    def _prepare_scene_data(self, scene: Scene):
        """Pack the sphere sequence into arrays, preserving scan order"""
        for obj in scene.objects:
            if not isinstance(obj, Sphere):
                raise TypeError(f"No intersection test for {type(obj).__name__}")

        count = len(scene.objects)
        centers = np.array([obj.center.to_np() for obj in scene.objects], dtype=np.float64).reshape(count, 3)
        radii = np.array([obj.radius for obj in scene.objects], dtype=np.float64)
        colors = np.array([obj.color.to_np() for obj in scene.objects], dtype=np.float64).reshape(count, 3)
        return centers, radii, colors

    def _closest_hits(self, origin, directions, centers, radii):
        shape = directions.shape[:-1]
        best_t = np.full(shape, np.inf)
        hit_id = np.full(shape, -1, dtype=np.int64)

        # linear scan, strict < keeps the first object on ties
        for k in range(len(radii)):
            oc = origin - centers[k]
            b = _dot(directions, oc)
            c = _dot(oc, oc) - radii[k] * radii[k]
            disc = b * b - c
            valid = disc >= 0.0
            t = -b - np.sqrt(np.where(valid, disc, 0.0))
            t = np.where(valid & (t > 0.0), t, np.inf)

            closer = t < best_t
            best_t = np.where(closer, t, best_t)
            hit_id = np.where(closer, k, hit_id)

        return best_t, hit_id

    def _shade(self, origin, directions, t, centers, kd, settings: RenderSettings):
        light = settings.light.to_np()
        ks = settings.specular_color.to_np()

        point = origin + directions * t[:, None]
        normal = _normalize(point - centers)
        view_dir = _normalize(origin - point)

        ambient = kd * 0.1
        to_light = _normalize(light - point)
        diffuse = kd * np.maximum(_dot(normal, to_light), 0.0)[:, None]

        neg_l = -to_light
        reflect_dir = _normalize(neg_l - normal * (2 * _dot(neg_l, normal))[:, None])
        spec = np.maximum(_dot(reflect_dir, view_dir), 0.0) ** settings.shininess
        specular = ks * spec[:, None]

        return ambient + diffuse + specular

    def _background(self, uu, vv):
        ix = np.floor((uu + 1.0) * self.background.cells).astype(np.int64)
        iy = np.floor((vv + 1.0) * self.background.cells).astype(np.int64)
        is_light = (ix + iy) % 2 == 0
        return np.where(is_light[..., None],
                        self.background.light.to_np(),
                        self.background.dark.to_np())


RendererFactory.register("numpy_raytracer", NumpyRenderer)
