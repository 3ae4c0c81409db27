import itertools

import pytest

from selfsnap.models.layout import GridLayoutOptions, Rect
from selfsnap.services.layout import InvalidDimensions, compute_4grid_slots, resolve_options


def _overlap(a: Rect, b: Rect) -> bool:
    return a.x < b.right and b.x < a.right and a.y < b.bottom and b.y < a.bottom


@pytest.mark.parametrize("canvas_w, canvas_h", [(400, 600), (1200, 1800), (1920, 1080), (800, 800), (333.3, 517.9)])
def test_default_slots_keep_aspect_and_size(canvas_w, canvas_h):
    slots = compute_4grid_slots(GridLayoutOptions(canvas_w=canvas_w, canvas_h=canvas_h))

    assert len(slots) == 4
    for slot in slots:
        assert slot.w / slot.h == pytest.approx(3 / 4)
        assert slot.w == slots[0].w
        assert slot.h == slots[0].h


@pytest.mark.parametrize("canvas_w, canvas_h", [(400, 600), (1920, 1080), (800, 800)])
def test_slots_do_not_overlap_and_stay_inside_margins(canvas_w, canvas_h):
    slots = compute_4grid_slots(GridLayoutOptions(canvas_w=canvas_w, canvas_h=canvas_h))

    for a, b in itertools.combinations(slots, 2):
        assert not _overlap(a, b)

    side, top, bottom = canvas_w * 0.06, canvas_h * 0.08, canvas_h * 0.10
    for slot in slots:
        assert slot.x >= side - 1e-9
        assert slot.right <= canvas_w - side + 1e-9
        assert slot.y >= top - 1e-9
        assert slot.bottom <= canvas_h - bottom + 1e-9


def test_block_is_centered_between_side_margins():
    opts = GridLayoutOptions(canvas_w=1920, canvas_h=1080)
    top_left, top_right, _, _ = compute_4grid_slots(opts)

    assert (top_left.x + top_right.right) / 2 == pytest.approx(1920 / 2)


def test_portrait_canvas_boundary():
    slots = compute_4grid_slots(GridLayoutOptions(canvas_w=400, canvas_h=600))
    tl, tr, bl, br = slots

    assert tl.y == pytest.approx(48)
    assert tr.y == pytest.approx(48)
    assert tl.w == pytest.approx(168)
    assert tl.h == pytest.approx(224)
    assert (tl.x, tr.x) == (pytest.approx(24), pytest.approx(208))
    assert (bl.y, br.y) == (pytest.approx(296), pytest.approx(296))
    assert bl.x == tl.x
    assert br.x == tr.x


def test_square_aspect_gives_equal_squares():
    slots = compute_4grid_slots(GridLayoutOptions(canvas_w=800, canvas_h=800, aspect_w=1, aspect_h=1))

    for slot in slots:
        assert slot.w == pytest.approx(slot.h)
        assert slot.w == pytest.approx(312)
    assert slots[0].x == pytest.approx(72)


def test_explicit_options_override_defaults():
    opts = GridLayoutOptions(
        canvas_w=100, canvas_h=100,
        side_margin=0, top_margin=0, bottom_reserved=0, col_gap=0, row_gap=0,
        aspect_w=1, aspect_h=1,
    )
    slots = compute_4grid_slots(opts)

    assert [(s.x, s.y, s.w, s.h) for s in slots] == [
        (0, 0, 50, 50), (50, 0, 50, 50), (0, 50, 50, 50), (50, 50, 50, 50),
    ]


def test_camel_case_aliases_are_accepted():
    opts = GridLayoutOptions.model_validate({"canvasW": 400, "canvasH": 600, "topMargin": 10})

    assert compute_4grid_slots(opts)[0].y == 10


def test_huge_side_margin_raises():
    with pytest.raises(InvalidDimensions):
        compute_4grid_slots(GridLayoutOptions(canvas_w=400, canvas_h=600, side_margin=200))


def test_reserved_bands_eating_height_raise():
    with pytest.raises(InvalidDimensions):
        compute_4grid_slots(GridLayoutOptions(canvas_w=400, canvas_h=600, top_margin=300, bottom_reserved=300))


@pytest.mark.parametrize("canvas_w, canvas_h", [(0, 600), (400, 0), (-1, 600)])
def test_non_positive_canvas_raises(canvas_w, canvas_h):
    with pytest.raises(InvalidDimensions):
        compute_4grid_slots(GridLayoutOptions(canvas_w=canvas_w, canvas_h=canvas_h))


def test_non_positive_aspect_raises():
    with pytest.raises(InvalidDimensions):
        compute_4grid_slots(GridLayoutOptions(canvas_w=400, canvas_h=600, aspect_h=0))


def test_rect_is_immutable_and_boxes_to_pixels():
    rect = Rect(x=10.4, y=20.6, w=30.2, h=40.5)

    with pytest.raises(Exception):
        rect.x = 0
    assert rect.box() == (10, 21, 40, 61)


@pytest.mark.parametrize("overrides", [
    {"canvas_w": float("nan")},
    {"canvas_h": float("nan")},
    {"canvas_w": float("inf")},
    {"side_margin": float("nan")},
    {"top_margin": float("inf")},
    {"bottom_reserved": float("nan")},
    {"col_gap": float("-inf")},
    {"row_gap": float("nan")},
    {"aspect_w": float("nan")},
    {"aspect_h": float("inf")},
])
def test_nan_and_inf_inputs_raise(overrides):
    opts = GridLayoutOptions(**{"canvas_w": 400, "canvas_h": 600, **overrides})

    with pytest.raises(InvalidDimensions):
        compute_4grid_slots(opts)


def test_resolve_options_fills_defaults_and_keeps_overrides():
    resolved = resolve_options(GridLayoutOptions(canvas_w=400, canvas_h=600, bottom_reserved=100))

    assert resolved.side_margin == pytest.approx(24)
    assert resolved.top_margin == pytest.approx(48)
    assert resolved.bottom_reserved == 100
    assert resolved.col_gap == pytest.approx(16)
    assert resolved.row_gap == pytest.approx(24)
