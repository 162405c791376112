import logging
import os
import sys
from pathlib import Path

from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine

from config import ConfigurationError, DesktopConfiguration
from core.data_models import StatCard
from core.ui_logic.layout_engine import LayoutEngine
from desktop_ui.coordinator import LayoutCoordinator
from desktop_ui.qt_dimension_source import QtWindowDimensionSource, detect_platform_family

logger = logging.getLogger(__name__)

DEFAULT_CARDS = [
    StatCard("sales", "Total Sales", "$24.5K", "This month", "up", "+12%"),
    StatCard("users", "New Users", "1,234", "This week", "up", "+8%"),
    StatCard("orders", "Orders", "456", "Today", "down", "-3%"),
    StatCard("revenue", "Revenue", "$12.3K", "This week", "up", "+15%"),
]


def main() -> int:
    try:
        config = DesktopConfiguration.from_env()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    # Set Qt Quick Controls style to Basic to allow background customization
    os.environ["QT_QUICK_CONTROLS_STYLE"] = "Basic"

    app = QGuiApplication(sys.argv)

    source = QtWindowDimensionSource(config.window_width, config.window_height)
    platform_family = config.platform_family or detect_platform_family()
    engine = LayoutEngine(
        source,
        nearest_device_pixel=source.nearest_device_pixel,
        platform_family=platform_family,
        fixed_columns=config.fixed_columns,
    )
    coordinator = LayoutCoordinator(engine, DEFAULT_CARDS)
    logger.info("Starting dashboard (%s platform)", platform_family.value)

    qml_engine = QQmlApplicationEngine()
    context = qml_engine.rootContext()
    context.setContextProperty("responsive", coordinator)
    context.setContextProperty("statModel", coordinator.card_model)
    context.setContextProperty("initialWidth", config.window_width)
    context.setContextProperty("initialHeight", config.window_height)

    qml_file = Path(__file__).parent / "qml" / "Dashboard.qml"
    qml_engine.load(str(qml_file))

    if not qml_engine.rootObjects():
        print("Failed to load QML")
        coordinator.cleanup()
        return 1

    source.attach(qml_engine.rootObjects()[0])

    try:
        return app.exec()
    finally:
        coordinator.cleanup()
        engine.close()
        source.detach()
