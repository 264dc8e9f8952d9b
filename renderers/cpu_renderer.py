import sys
import time
from typing import List
from PIL import Image

from core.math import Vec3, Ray
from core.shading import HitRecord, Checkerboard, phong_shade
from core.scene import Scene, RenderSettings
from core.camera import Camera
from renderers.base_renderer import BaseRenderer, RendererFactory, quantize, format_elapsed


class CPURenderer(BaseRenderer):
    """Reference renderer: one ray per pixel, pure Python"""

    def __init__(self, progress_every: int = 128):
        super().__init__("cpu_raytracer")
        self.progress_every = progress_every
        self.background = Checkerboard()

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "phong_shading",
            "checkerboard_background",
        ]

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings) -> Image.Image:
        start_time = time.time()

        print(f"CPU render start: {settings.width}x{settings.height}, {len(scene)} objects",
              file=sys.stderr)

        output_image = Image.new("RGB", (settings.width, settings.height))
        pixels = output_image.load()

        for j in range(settings.height - 1, -1, -1):
            row = settings.height - 1 - j
            for i in range(settings.width):
                u, v = camera.pixel_to_ndc(i, j, settings.width, settings.height)
                ray = camera.get_ray(u, v)
                col = self._trace(ray, scene, camera, settings, u, v)
                pixels[i, row] = (quantize(col.x), quantize(col.y), quantize(col.z))

            if row % self.progress_every == 0:
                print(f"CPU rows remaining: {settings.height - row}", file=sys.stderr)

        print(f"CPU render done: {format_elapsed(time.time() - start_time)}", file=sys.stderr)

        return output_image

    def _trace(self, ray: Ray, scene: Scene, camera: Camera, settings: RenderSettings,
               u: float, v: float) -> Vec3:
        rec = HitRecord()
        if scene.hit(ray, rec):
            view_dir = (camera.origin - rec.point).normalize()
            return phong_shade(rec.point, rec.normal, view_dir, settings.light,
                               rec.obj.color, settings.specular_color, settings.shininess)

        return self.background.sample(u, v)


RendererFactory.register("cpu_raytracer", CPURenderer)
