from abc import ABC, abstractmethod
from typing import List
from PIL import Image
from core.scene import Scene, RenderSettings


def quantize(c: float) -> int:
    """Map a color channel to [0, 255]: <= 0 -> 0, >= 1 -> 255."""
    if c <= 0.0:
        return 0
    if c >= 1.0:
        return 255
    return int(c * 255.999)


def format_elapsed(elapsed: float) -> str:
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    return f"{minutes}m {seconds:.2f}s"


class BaseRenderer(ABC):
    """Base class every renderer implements"""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def render(self, scene: Scene, camera, settings: RenderSettings) -> Image.Image:
        """Render the scene and return an RGB PIL Image, top screen row first"""
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        """Features this renderer supports"""
        pass

    def get_name(self) -> str:
        return self.name

    def supports(self, feature: str) -> bool:
        return feature in self.get_capabilities()


class RendererFactory:
    _renderers = {}

    @classmethod
    def register(cls, name: str, renderer_class):
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        return list(cls._renderers.keys())
