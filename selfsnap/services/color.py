from PIL import Image
import numpy as np

LIGHT_TEXT = "#FFFFFF"
DARK_TEXT = "#111827"


def pick_text_color_from_region(
        image: Image.Image,
        x: int,
        y: int,
        w: int,
        h: int,
        light: str = LIGHT_TEXT,
        dark: str = DARK_TEXT,
        threshold: float = 140,
) -> str:
    """Return ``dark`` over bright regions and ``light`` over dark ones.

    The region is averaged per channel and weighted with the Rec. 709
    luminance coefficients. Parts of the region outside the image are ignored.
    """
    left, top = max(int(x), 0), max(int(y), 0)
    right, bottom = min(int(x + w), image.width), min(int(y + h), image.height)
    if right <= left or bottom <= top:
        raise ValueError(f"Region ({x}, {y}, {w}, {h}) does not overlap the image")

    region = np.asarray(image.convert("RGB").crop((left, top, right, bottom)), dtype=np.float64)
    r, g, b = region.reshape(-1, 3).mean(axis=0)
    luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b

    return dark if luminance > threshold else light
