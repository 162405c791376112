"""
Device classification and orientation checks
"""
import math

import pytest

from core.data_models import DeviceClass, InvalidDimensionError, Orientation, Viewport
from core.ui_logic.device_classifier import Breakpoints, classify, is_landscape, is_tablet, orientation


@pytest.mark.parametrize("width,height,expected", [
    (320, 640, DeviceClass.SMALL_PHONE),
    (359, 700, DeviceClass.SMALL_PHONE),
    (360, 700, DeviceClass.MEDIUM_PHONE),
    (399, 700, DeviceClass.MEDIUM_PHONE),
    (400, 700, DeviceClass.LARGE_PHONE),
    (640, 320, DeviceClass.LARGE_PHONE),
    (800, 1024, DeviceClass.TABLET),
    (1023, 768, DeviceClass.TABLET),
    (1024, 800, DeviceClass.LARGE_TABLET),
    (1366, 1024, DeviceClass.LARGE_TABLET),
])
def test_classify_scenarios(width, height, expected):
    assert classify(Viewport(width, height)) is expected


def test_tablet_split_ignores_orientation():
    for short, long in [(768, 900), (800, 1023), (900, 1200), (1100, 1400)]:
        portrait = classify(Viewport(short, long))
        landscape = classify(Viewport(long, short))
        assert portrait in (DeviceClass.TABLET, DeviceClass.LARGE_TABLET)
        assert landscape in (DeviceClass.TABLET, DeviceClass.LARGE_TABLET)
        assert portrait is (DeviceClass.TABLET if short < 1024 else DeviceClass.LARGE_TABLET)
        assert landscape is (DeviceClass.TABLET if long < 1024 else DeviceClass.LARGE_TABLET)


def test_phone_tier_depends_only_on_width():
    for width in (200, 359, 360, 399, 400, 700, 1200):
        results = {classify(Viewport(width, height)) for height in (0, 100, 500, 767)}
        assert len(results) == 1


def test_wide_viewport_with_short_edge_under_tablet_is_phone():
    assert classify(Viewport(1200, 700)) is DeviceClass.LARGE_PHONE


def test_classify_is_idempotent():
    viewport = Viewport(800, 1024)
    assert classify(viewport) is classify(viewport)


def test_zero_dimensions_are_accepted():
    assert classify(Viewport(0, 0)) is DeviceClass.SMALL_PHONE


@pytest.mark.parametrize("width,height", [(-1, 500), (500, -1), (math.nan, 500), (500, math.inf)])
def test_malformed_viewport_raises(width, height):
    with pytest.raises(InvalidDimensionError):
        classify(Viewport(width, height))


def test_orientation():
    assert orientation(Viewport(320, 640)) is Orientation.PORTRAIT
    assert orientation(Viewport(640, 320)) is Orientation.LANDSCAPE
    assert orientation(Viewport(500, 500)) is Orientation.PORTRAIT
    assert is_landscape(Viewport(1024, 800))


def test_is_tablet():
    assert not is_tablet(Viewport(400, 700))
    assert is_tablet(Viewport(800, 1024))
    assert is_tablet(Viewport(1280, 800))


def test_breakpoints_must_increase():
    with pytest.raises(ValueError):
        Breakpoints(small=400, medium=360)


def test_custom_breakpoints():
    breakpoints = Breakpoints(small=300, medium=350, large=450, tablet=600, large_tablet=900)
    assert classify(Viewport(320, 640), breakpoints) is DeviceClass.MEDIUM_PHONE
    assert classify(Viewport(700, 650), breakpoints) is DeviceClass.TABLET
