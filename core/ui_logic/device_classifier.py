"""
Device classification from screen geometry.

Map a viewport to one of five device classes using the breakpoint table,
and derive orientation. No UI framework dependencies - pure functions
that work with any dimension source.
"""
from dataclasses import dataclass

from ..data_models import DeviceClass, Orientation, Viewport


@dataclass(frozen=True, slots=True)
class Breakpoints:
    """Width thresholds separating device classes, in logical pixels."""
    small: int = 360
    medium: int = 400
    large: int = 500
    tablet: int = 768
    large_tablet: int = 1024

    def __post_init__(self) -> None:
        thresholds = [self.small, self.medium, self.large, self.tablet, self.large_tablet]
        if any(lower >= upper for lower, upper in zip(thresholds, thresholds[1:])):
            raise ValueError(f"Breakpoints must be strictly increasing: {thresholds}")


BREAKPOINTS = Breakpoints()

TABLET_CLASSES = frozenset({DeviceClass.TABLET, DeviceClass.LARGE_TABLET})


def classify(viewport: Viewport, breakpoints: Breakpoints = BREAKPOINTS) -> DeviceClass:
    """
    Classify a device by its viewport.

    The phone/tablet split uses the smaller dimension so that rotating a
    tablet never turns it into a phone. The sub-tiers use the raw width,
    since they describe available horizontal room.

    Args:
        viewport: Current viewport
        breakpoints: Threshold table to classify against

    Returns:
        DeviceClass for the viewport

    Raises:
        InvalidDimensionError: If the viewport has negative or non-finite dimensions
    """
    viewport.validate()
    width = viewport.width
    min_dimension = min(width, viewport.height)

    if min_dimension < breakpoints.tablet:
        if width < breakpoints.small:
            return DeviceClass.SMALL_PHONE
        if width < breakpoints.medium:
            return DeviceClass.MEDIUM_PHONE
        return DeviceClass.LARGE_PHONE

    if width < breakpoints.large_tablet:
        return DeviceClass.TABLET
    return DeviceClass.LARGE_TABLET


def orientation(viewport: Viewport) -> Orientation:
    """Landscape iff the viewport is wider than it is tall."""
    if viewport.width > viewport.height:
        return Orientation.LANDSCAPE
    return Orientation.PORTRAIT


def is_landscape(viewport: Viewport) -> bool:
    return orientation(viewport) is Orientation.LANDSCAPE


def is_tablet(viewport: Viewport, breakpoints: Breakpoints = BREAKPOINTS) -> bool:
    """True if the viewport classifies as a tablet or large tablet."""
    return classify(viewport, breakpoints) in TABLET_CLASSES
