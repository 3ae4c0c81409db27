from enum import Enum
from PIL import Image


class FilterMode(str, Enum):
    none = "none"
    bw = "bw"
    sepia = "sepia"


# Same coefficients as the CSS sepia(1) filter
SEPIA_MATRIX = (
    0.393, 0.769, 0.189, 0,
    0.349, 0.686, 0.168, 0,
    0.272, 0.534, 0.131, 0,
)


def ctx_filter(mode: FilterMode) -> str:
    """Canvas 2D ``filter`` string for the browser preview."""
    if mode == FilterMode.bw:
        return "grayscale(1)"
    if mode == FilterMode.sepia:
        return "sepia(1)"
    return "none"


def apply_filter(image: Image.Image, mode: FilterMode) -> Image.Image:
    rgb = image.convert("RGB")
    if mode == FilterMode.bw:
        return rgb.convert("L").convert("RGB")
    if mode == FilterMode.sepia:
        return rgb.convert("RGB", SEPIA_MATRIX)
    return rgb.copy()
