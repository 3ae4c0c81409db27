import pytest
from PIL import Image

from selfsnap.services.color import DARK_TEXT, LIGHT_TEXT, pick_text_color_from_region


def test_white_region_gets_dark_text():
    img = Image.new("RGB", (50, 50), "white")

    assert pick_text_color_from_region(img, 0, 0, 50, 50) == DARK_TEXT


def test_black_region_gets_light_text():
    img = Image.new("RGB", (50, 50), "black")

    assert pick_text_color_from_region(img, 0, 0, 50, 50) == LIGHT_TEXT


def test_threshold_and_custom_colors():
    img = Image.new("RGB", (10, 10), (128, 128, 128))

    assert pick_text_color_from_region(img, 0, 0, 10, 10) == LIGHT_TEXT
    assert pick_text_color_from_region(img, 0, 0, 10, 10, threshold=100) == DARK_TEXT
    assert pick_text_color_from_region(img, 0, 0, 10, 10, light="#EEE", dark="#222", threshold=100) == "#222"


def test_only_the_region_is_measured():
    img = Image.new("RGB", (100, 50), "black")
    img.paste((255, 255, 255), (50, 0, 100, 50))

    assert pick_text_color_from_region(img, 0, 0, 50, 50) == LIGHT_TEXT
    assert pick_text_color_from_region(img, 50, 0, 50, 50) == DARK_TEXT


def test_green_weighs_more_than_blue():
    green = Image.new("RGB", (10, 10), (0, 255, 0))
    blue = Image.new("RGB", (10, 10), (0, 0, 255))

    assert pick_text_color_from_region(green, 0, 0, 10, 10) == DARK_TEXT
    assert pick_text_color_from_region(blue, 0, 0, 10, 10) == LIGHT_TEXT


def test_rgba_alpha_is_ignored_and_region_clipped():
    img = Image.new("RGBA", (20, 20), (255, 255, 255, 0))

    assert pick_text_color_from_region(img, 10, 10, 100, 100) == DARK_TEXT


def test_region_outside_image_raises():
    img = Image.new("RGB", (20, 20), "white")

    with pytest.raises(ValueError):
        pick_text_color_from_region(img, 30, 30, 5, 5)
