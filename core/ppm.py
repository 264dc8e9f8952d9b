import sys
from typing import TextIO

from PIL import Image


def write_ppm(image: Image.Image, stream: TextIO = None):
    """Write an RGB image as plain-text PPM (P3), top row first."""
    if stream is None:
        stream = sys.stdout

    image = image.convert("RGB")
    width, height = image.size
    stream.write(f"P3\n{width} {height}\n255\n")

    pixels = image.load()
    for y in range(height):
        stream.write("".join(
            f"{r} {g} {b}\n" for r, g, b in (pixels[x, y] for x in range(width))
        ))
