import math
from typing import List

from selfsnap.models.layout import GridLayoutOptions, Rect

SIDE_MARGIN = 0.06
TOP_MARGIN = 0.08
BOTTOM_RESERVED = 0.10
COL_GAP = 0.04
ROW_GAP = 0.04


class InvalidDimensions(ValueError):
    """The canvas is too small for the requested margins, gaps or aspect."""


def _default(value, fallback: float) -> float:
    return fallback if value is None else value


def resolve_options(options: GridLayoutOptions) -> GridLayoutOptions:
    """Copy of ``options`` with every margin and gap filled in from the canvas size."""
    canvas_w, canvas_h = options.canvas_w, options.canvas_h
    return options.model_copy(update={
        "side_margin": _default(options.side_margin, canvas_w * SIDE_MARGIN),
        "top_margin": _default(options.top_margin, canvas_h * TOP_MARGIN),
        "bottom_reserved": _default(options.bottom_reserved, canvas_h * BOTTOM_RESERVED),
        "col_gap": _default(options.col_gap, canvas_w * COL_GAP),
        "row_gap": _default(options.row_gap, canvas_h * ROW_GAP),
    })


def compute_4grid_slots(options: GridLayoutOptions) -> List[Rect]:
    """Lay out four equal slots in a centered 2x2 grid.

    Each slot keeps the exact ``aspect_w:aspect_h`` ratio and is fitted inside
    its cell. The block is centered horizontally between the side margins and
    anchored at ``top_margin``; ``bottom_reserved`` only shrinks the usable
    height. Slots come back as top-left, top-right, bottom-left, bottom-right.
    """
    resolved = resolve_options(options)
    canvas_w, canvas_h = resolved.canvas_w, resolved.canvas_h
    side_margin = resolved.side_margin
    top_margin = resolved.top_margin
    col_gap = resolved.col_gap
    row_gap = resolved.row_gap

    fields = resolved.model_dump()
    non_finite = sorted(name for name, value in fields.items() if not math.isfinite(value))
    if non_finite:
        raise InvalidDimensions(f"Layout values must be finite numbers: {', '.join(non_finite)}")
    if not (canvas_w > 0 and canvas_h > 0):
        raise InvalidDimensions(f"Canvas must be positive, got {canvas_w}x{canvas_h}")
    if not (resolved.aspect_w > 0 and resolved.aspect_h > 0):
        raise InvalidDimensions(f"Aspect must be positive, got {resolved.aspect_w}:{resolved.aspect_h}")

    usable_w = canvas_w - side_margin * 2
    usable_h = canvas_h - top_margin - resolved.bottom_reserved

    cell_w = (usable_w - col_gap) / 2
    cell_h = (usable_h - row_gap) / 2
    if not (cell_w > 0 and cell_h > 0):
        raise InvalidDimensions(
            f"Canvas {canvas_w}x{canvas_h} leaves no room for slots (cell {cell_w}x{cell_h})"
        )

    ratio = resolved.aspect_w / resolved.aspect_h
    if cell_w / cell_h > ratio:
        shot_h = cell_h
        shot_w = shot_h * ratio
    else:
        shot_w = cell_w
        shot_h = shot_w / ratio

    start_x = side_margin + (usable_w - (shot_w * 2 + col_gap)) / 2
    start_y = top_margin
    step_x = shot_w + col_gap
    step_y = shot_h + row_gap

    return [
        Rect(x=start_x, y=start_y, w=shot_w, h=shot_h),
        Rect(x=start_x + step_x, y=start_y, w=shot_w, h=shot_h),
        Rect(x=start_x, y=start_y + step_y, w=shot_w, h=shot_h),
        Rect(x=start_x + step_x, y=start_y + step_y, w=shot_w, h=shot_h),
    ]
