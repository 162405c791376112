"""
UI logic package - portable across platforms.

Device classification, grid layout calculations, responsive scaling, and
viewport change subscriptions. No UI framework dependencies.
"""
from .device_classifier import BREAKPOINTS, Breakpoints, classify, is_landscape, is_tablet, orientation
from .grid_layout import GridDimensions, GridLayout, GridPosition, adaptive_padding, grid_columns, group_rows
from .layout_engine import LayoutEngine
from .scaling import (
    REFERENCE_WIDTH,
    make_pixel_rounder,
    percent_of_height,
    percent_of_width,
    responsive_font,
    spacing_scale,
    typography_scale,
)
from .subscriptions import (
    CallbackDimensionSource,
    DimensionSource,
    ManualDimensionSource,
    SubscriptionHandle,
    ViewportSubscriptions,
)

__all__ = [
    'BREAKPOINTS',
    'Breakpoints',
    'classify',
    'is_landscape',
    'is_tablet',
    'orientation',
    'GridDimensions',
    'GridLayout',
    'GridPosition',
    'adaptive_padding',
    'grid_columns',
    'group_rows',
    'LayoutEngine',
    'REFERENCE_WIDTH',
    'make_pixel_rounder',
    'percent_of_height',
    'percent_of_width',
    'responsive_font',
    'spacing_scale',
    'typography_scale',
    'CallbackDimensionSource',
    'DimensionSource',
    'ManualDimensionSource',
    'SubscriptionHandle',
    'ViewportSubscriptions',
]
