"""
Percentage and font scaling against the current screen.

Resolve percentage-of-screen sizes and responsive font sizes to whole
device pixels. Pixel rounding is an injected capability so the functions
stay pure and testable without a running UI.
"""
import math
from typing import Callable, Dict, Union

from ..data_models import PlatformFamily, Viewport

# Maps a float size to the nearest addressable device pixel
PixelRounder = Callable[[float], float]
Percentage = Union[float, str]

REFERENCE_WIDTH = 640
MIN_FONT_SIZE = 1

PLATFORM_FONT_OFFSET = {
    PlatformFamily.DEFAULT: 0,
    PlatformFamily.ANDROID: -2,
}

SPACING_PERCENTAGES = {
    'xs': 2,
    'sm': 4,
    'md': 8,
    'lg': 12,
    'xl': 16,
}

TYPOGRAPHY_BASE_SIZES = {
    'h1': 56,
    'h2': 48,
    'h3': 40,
    'h4': 36,
    'body': 32,
    'caption': 28,
    'small': 24,
}


def identity_rounder(value: float) -> float:
    return value


def make_pixel_rounder(device_pixel_ratio: float) -> PixelRounder:
    """
    Build a rounding function for a display's pixel density.

    Args:
        device_pixel_ratio: Physical pixels per logical pixel

    Returns:
        Function snapping a logical size to the nearest physical pixel

    Raises:
        ValueError: If the ratio is not a positive finite number
    """
    if not math.isfinite(device_pixel_ratio) or device_pixel_ratio <= 0:
        raise ValueError(f"Device pixel ratio must be positive: {device_pixel_ratio!r}")

    def nearest_device_pixel(value: float) -> float:
        return round_half_up(value * device_pixel_ratio) / device_pixel_ratio

    return nearest_device_pixel


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up."""
    return math.floor(value + 0.5)


def parse_percentage(percentage: Percentage) -> float:
    """
    Accept a percentage as a number or a string like ``"4%"``.

    Raises:
        ValueError: If the string is not a number
    """
    if isinstance(percentage, str):
        return float(percentage.strip().rstrip('%'))
    return float(percentage)


def percent_of(dimension: float, percentage: Percentage,
               rounder: PixelRounder = identity_rounder) -> int:
    value = parse_percentage(percentage) * dimension / 100
    return round_half_up(rounder(value))


def percent_of_width(viewport: Viewport, percentage: Percentage,
                     rounder: PixelRounder = identity_rounder) -> int:
    """
    Resolve a percentage of the viewport width to device pixels.

    Args:
        viewport: Current viewport
        percentage: Percentage of the width, e.g. ``4`` or ``"4%"``
        rounder: Nearest-device-pixel capability

    Returns:
        Whole pixel size
    """
    return percent_of(viewport.validate().width, percentage, rounder)


def percent_of_height(viewport: Viewport, percentage: Percentage,
                      rounder: PixelRounder = identity_rounder) -> int:
    """
    Resolve a percentage of the viewport height to device pixels.

    Args:
        viewport: Current viewport
        percentage: Percentage of the height, e.g. ``6`` or ``"6%"``
        rounder: Nearest-device-pixel capability

    Returns:
        Whole pixel size
    """
    return percent_of(viewport.validate().height, percentage, rounder)


def responsive_font(viewport: Viewport, base_size: float,
                    rounder: PixelRounder = identity_rounder,
                    platform_family: PlatformFamily = PlatformFamily.DEFAULT) -> int:
    """
    Scale a font size relative to the reference width.

    Android renders glyphs slightly larger at the same nominal size, so
    its result is reduced by a fixed offset. The result never drops below
    MIN_FONT_SIZE.

    Args:
        viewport: Current viewport
        base_size: Font size at the reference width
        rounder: Nearest-device-pixel capability
        platform_family: Platform tag selecting the offset

    Returns:
        Font size in whole pixels
    """
    scale = viewport.validate().width / REFERENCE_WIDTH
    size = round_half_up(rounder(base_size * scale))
    size += PLATFORM_FONT_OFFSET.get(platform_family, 0)
    return max(MIN_FONT_SIZE, size)


def spacing_scale(viewport: Viewport, rounder: PixelRounder = identity_rounder) -> Dict[str, int]:
    """Named spacing steps for the current width."""
    return {
        name: percent_of_width(viewport, percentage, rounder)
        for name, percentage in SPACING_PERCENTAGES.items()
    }


def typography_scale(viewport: Viewport, rounder: PixelRounder = identity_rounder,
                     platform_family: PlatformFamily = PlatformFamily.DEFAULT) -> Dict[str, int]:
    """Named font sizes for the current width."""
    return {
        name: responsive_font(viewport, base_size, rounder, platform_family)
        for name, base_size in TYPOGRAPHY_BASE_SIZES.items()
    }
