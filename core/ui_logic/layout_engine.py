"""
Responsive layout engine.

Binds the pure classification, grid and scaling functions to an injected
dimension source, pixel rounding function and platform family. Every query
reads the source afresh, so derived values never go stale after rotation
or resize.
"""
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional, TypeVar

from ..data_models import (
    DeviceClass,
    InvalidDimensionError,
    LayoutSnapshot,
    Orientation,
    PlatformFamily,
    Viewport,
)
from . import device_classifier, grid_layout, scaling
from .device_classifier import BREAKPOINTS, Breakpoints
from .scaling import Percentage, PixelRounder
from .subscriptions import ChangeCallback, DimensionSource, SubscriptionHandle, ViewportSubscriptions

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

DEFAULT_COLUMNS = 1


def degrade_to(fallback: Callable[["LayoutEngine"], Any]) -> Callable[[F], F]:
    # Returns the fallback layout value when the viewport or a percentage is malformed
    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: "LayoutEngine", *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except ValueError as exc:
                logger.warning("%s: %s, using default layout", func.__name__, exc)
                return fallback(self)
        return wrapper  # type: ignore[return-value]
    return decorator


class LayoutEngine:
    """
    Responsive layout queries against the current viewport.

    Malformed viewports and percentages never propagate: the engine logs a
    warning and falls back to the single-column default layout.
    """

    def __init__(
        self,
        source: DimensionSource,
        *,
        nearest_device_pixel: PixelRounder = scaling.identity_rounder,
        platform_family: PlatformFamily = PlatformFamily.DEFAULT,
        fixed_columns: Optional[int] = None,
        breakpoints: Breakpoints = BREAKPOINTS,
    ) -> None:
        """
        Initialize layout engine.

        Args:
            source: Dimension source supplying the viewport
            nearest_device_pixel: Rounds a size to the nearest device pixel
            platform_family: Selects the font-size correction
            fixed_columns: Column count that replaces the automatic one in snapshots
            breakpoints: Threshold table for device classification
        """
        if fixed_columns is not None and fixed_columns < 1:
            raise ValueError(f"fixed_columns must be at least 1, got {fixed_columns}")

        self.source = source
        self.nearest_device_pixel = nearest_device_pixel
        self.platform_family = platform_family
        self.fixed_columns = fixed_columns
        self.breakpoints = breakpoints
        self.subscriptions = ViewportSubscriptions(source)

    def viewport(self) -> Viewport:
        return self.source.get_current()

    # ------------------------------------------------------------------
    @degrade_to(lambda self: DeviceClass.SMALL_PHONE)
    def classify(self) -> DeviceClass:
        return device_classifier.classify(self.viewport(), self.breakpoints)

    @degrade_to(lambda self: Orientation.PORTRAIT)
    def orientation(self) -> Orientation:
        return device_classifier.orientation(self.viewport().validate())

    @degrade_to(lambda self: False)
    def is_tablet(self) -> bool:
        return device_classifier.is_tablet(self.viewport(), self.breakpoints)

    @degrade_to(lambda self: DEFAULT_COLUMNS)
    def grid_columns(self, width_override: Optional[float] = None) -> int:
        return grid_layout.grid_columns(self.viewport(), width_override, self.breakpoints)

    def display_columns(self) -> int:
        """Column count to render with: the fixed count if configured."""
        return self.fixed_columns or self.grid_columns()

    @degrade_to(lambda self: grid_layout.MIN_PADDING)
    def adaptive_padding(self) -> int:
        return grid_layout.adaptive_padding(self.viewport(), self.nearest_device_pixel, self.breakpoints)

    @degrade_to(lambda self: 0)
    def percent_of_width(self, percentage: Percentage) -> int:
        return scaling.percent_of_width(self.viewport(), percentage, self.nearest_device_pixel)

    @degrade_to(lambda self: 0)
    def percent_of_height(self, percentage: Percentage) -> int:
        return scaling.percent_of_height(self.viewport(), percentage, self.nearest_device_pixel)

    def responsive_font(self, base_size: float) -> int:
        try:
            return scaling.responsive_font(
                self.viewport(), base_size, self.nearest_device_pixel, self.platform_family
            )
        except InvalidDimensionError as exc:
            logger.warning("responsive_font: %s, using unscaled size", exc)
            return max(scaling.MIN_FONT_SIZE, int(base_size))

    @degrade_to(lambda self: {name: grid_layout.MIN_PADDING for name in scaling.SPACING_PERCENTAGES})
    def spacing_scale(self) -> Dict[str, int]:
        return scaling.spacing_scale(self.viewport(), self.nearest_device_pixel)

    @degrade_to(lambda self: dict(scaling.TYPOGRAPHY_BASE_SIZES))
    def typography_scale(self) -> Dict[str, int]:
        return scaling.typography_scale(self.viewport(), self.nearest_device_pixel, self.platform_family)

    def snapshot(self) -> LayoutSnapshot:
        """
        Compute every derived layout value for the current viewport.

        Returns:
            LayoutSnapshot for a single viewport read
        """
        viewport = self.viewport()
        try:
            device_class = device_classifier.classify(viewport, self.breakpoints)
            return LayoutSnapshot(
                viewport=viewport,
                device_class=device_class,
                orientation=device_classifier.orientation(viewport),
                is_tablet=device_class in device_classifier.TABLET_CLASSES,
                columns=self.fixed_columns or grid_layout.grid_columns(viewport, None, self.breakpoints),
                padding=grid_layout.adaptive_padding(viewport, self.nearest_device_pixel, self.breakpoints),
                spacing=scaling.spacing_scale(viewport, self.nearest_device_pixel),
                typography=scaling.typography_scale(viewport, self.nearest_device_pixel, self.platform_family),
            )
        except InvalidDimensionError as exc:
            logger.warning("snapshot: %s, using default layout", exc)
            return LayoutSnapshot(
                viewport=viewport,
                device_class=DeviceClass.SMALL_PHONE,
                orientation=Orientation.PORTRAIT,
                is_tablet=False,
                columns=self.fixed_columns or DEFAULT_COLUMNS,
                padding=grid_layout.MIN_PADDING,
                spacing={name: grid_layout.MIN_PADDING for name in scaling.SPACING_PERCENTAGES},
                typography=dict(scaling.TYPOGRAPHY_BASE_SIZES),
            )

    # ------------------------------------------------------------------
    def subscribe(self, on_change: ChangeCallback) -> SubscriptionHandle:
        """Call ``on_change`` after every viewport change until released."""
        return self.subscriptions.subscribe(on_change)

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        self.subscriptions.unsubscribe(handle)

    def close(self) -> None:
        """Release all subscriptions held through this engine."""
        self.subscriptions.close()
