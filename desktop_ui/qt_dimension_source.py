"""
Qt platform capabilities for the layout engine.

Supplies the viewport of a QWindow, pixel rounding for the window's screen
density, and the platform family of the running Qt build. Desktop-only module.
"""
import logging
from typing import Optional

from PySide6.QtCore import QSysInfo
from PySide6.QtGui import QGuiApplication, QWindow

from core.data_models import PlatformFamily, Viewport
from core.ui_logic.scaling import make_pixel_rounder
from core.ui_logic.subscriptions import CallbackDimensionSource

logger = logging.getLogger(__name__)


def detect_platform_family() -> PlatformFamily:
    """Platform family of the running Qt build."""
    if QSysInfo.productType() == "android":
        return PlatformFamily.ANDROID
    return PlatformFamily.DEFAULT


class QtWindowDimensionSource(CallbackDimensionSource):
    """
    Dimension source tracking the size of a QWindow.

    Until a window is attached the source reports its initial size. Qt
    stores the whole geometry before emitting either edge signal, so a
    resize that changes both dimensions notifies once: the second signal
    reads an unchanged viewport and is dropped.
    """

    def __init__(self, width: float, height: float) -> None:
        super().__init__(width, height)
        self._window: Optional[QWindow] = None

    def attach(self, window: QWindow) -> None:
        """
        Start tracking a window, replacing any window tracked before.

        Args:
            window: Window whose size is the viewport
        """
        self.detach()
        self._window = window
        window.widthChanged.connect(self._on_geometry_changed)
        window.heightChanged.connect(self._on_geometry_changed)
        logger.debug("Tracking window size %dx%d", window.width(), window.height())
        self._on_geometry_changed()

    def detach(self) -> None:
        if self._window is None:
            return
        self._window.widthChanged.disconnect(self._on_geometry_changed)
        self._window.heightChanged.disconnect(self._on_geometry_changed)
        self._window = None

    def _on_geometry_changed(self, *_args: int) -> None:
        if self._window is None:
            return
        self._publish(Viewport(self._window.width(), self._window.height()))

    def device_pixel_ratio(self) -> float:
        # Read on every call, the window may move to a screen with another density
        if self._window is not None:
            return self._window.devicePixelRatio()
        screen = QGuiApplication.primaryScreen()
        return screen.devicePixelRatio() if screen else 1.0

    def nearest_device_pixel(self, value: float) -> float:
        return make_pixel_rounder(self.device_pixel_ratio())(value)

    @property
    def window(self) -> Optional[QWindow]:
        return self._window
