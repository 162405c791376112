"""
Test coordinator properties and Qt signal integration
"""
import os

import pytest

pytest.importorskip("PySide6")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtGui import QGuiApplication, QWindow

from core.data_models import StatCard
from core.ui_logic.layout_engine import LayoutEngine
from core.ui_logic.subscriptions import ManualDimensionSource
from desktop_ui.coordinator import LayoutCoordinator
from desktop_ui.qt_dimension_source import QtWindowDimensionSource
from desktop_ui.qt_models.stat_card_model import StatCardModel

CARDS = [
    StatCard("sales", "Total Sales", "$24.5K", "This month", "up", "+12%"),
    StatCard("users", "New Users", "1,234", "This week", "up", "+8%"),
    StatCard("orders", "Orders", "456", "Today", "down", "-3%"),
]


@pytest.fixture(scope="module")
def app():
    return QGuiApplication.instance() or QGuiApplication([])


def test_coordinator_properties_follow_rotation(app):
    source = ManualDimensionSource(320, 640)
    coordinator = LayoutCoordinator(LayoutEngine(source), CARDS)

    assert coordinator.gridColumns == 1
    assert coordinator.deviceClass == "smallPhone"
    assert coordinator.orientation == "portrait"
    assert not coordinator.isTablet
    assert coordinator.adaptivePadding == 13

    signals = []
    coordinator.layoutChanged.connect(lambda: signals.append(True))

    source.set_viewport(640, 320)
    app.processEvents()

    assert signals == [True]
    assert coordinator.gridColumns == 2
    assert coordinator.deviceClass == "largePhone"
    assert coordinator.orientation == "landscape"
    assert coordinator.spacing["sm"] == 26
    assert coordinator.responsiveFont(28) == 28
    assert coordinator.percentWidth(50) == 320

    coordinator.cleanup()
    source.set_viewport(320, 640)
    assert signals == [True]
    assert source.listener_count == 0


def test_card_positions_track_columns(app):
    source = ManualDimensionSource(800, 1024)
    coordinator = LayoutCoordinator(LayoutEngine(source), CARDS)
    model = coordinator.card_model

    third = model.index(2)
    assert model.rowCount() == 3
    assert model.data(third, StatCardModel.RowRole) == 1
    assert model.data(third, StatCardModel.ColumnRole) == 0

    source.set_viewport(1024, 800)
    assert model.data(third, StatCardModel.RowRole) == 0
    assert model.data(third, StatCardModel.ColumnRole) == 2
    assert coordinator.gridHeight == coordinator.cardHeight

    coordinator.cleanup()


def test_model_roles(app):
    model = StatCardModel(CARDS)
    index = model.index(2)
    assert model.data(index, StatCardModel.TitleRole) == "Orders"
    assert model.data(index, StatCardModel.TrendRole) == "down"
    assert model.data(model.index(5), StatCardModel.TitleRole) is None
    assert model.roleNames()[StatCardModel.ValueRole].data() == b"cardValue"

    model.clear()
    assert model.rowCount() == 0


def test_window_dimension_source(app):
    window = QWindow()
    window.resize(500, 900)
    source = QtWindowDimensionSource(400, 800)
    assert source.get_current().width == 400

    source.attach(window)
    assert (source.get_current().width, source.get_current().height) == (window.width(), window.height())
    assert source.device_pixel_ratio() > 0

    source.detach()
    assert source.window is None


def test_window_resize_notifies_once_with_new_size(app):
    window = QWindow()
    window.resize(320, 640)
    source = QtWindowDimensionSource(320, 640)
    source.attach(window)
    engine = LayoutEngine(source)

    seen = []
    engine.subscribe(lambda: seen.append(
        (engine.viewport().width, engine.viewport().height, engine.grid_columns())
    ))

    window.resize(800, 400)
    app.processEvents()
    assert seen == [(800, 400, 2)]

    source.detach()
    window.resize(1024, 800)
    app.processEvents()
    assert seen == [(800, 400, 2)]
    engine.close()


def test_quick_action_rows_follow_columns(app):
    source = ManualDimensionSource(320, 640)
    coordinator = LayoutCoordinator(LayoutEngine(source), CARDS)
    assert coordinator.quickActionRows == [
        ["Add Product", "View Reports"],
        ["Manage Users", "Settings"],
    ]

    source.set_viewport(1024, 800)
    assert coordinator.quickActionRows == [
        ["Add Product", "View Reports", "Manage Users", "Settings", ""],
    ]
    coordinator.cleanup()
