import logging
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QObject, Property, Signal, Slot

from core.data_models import StatCard
from core.ui_logic.grid_layout import GridDimensions, group_rows
from core.ui_logic.layout_engine import LayoutEngine
from desktop_ui.qt_models.stat_card_model import StatCardModel

logger = logging.getLogger(__name__)

# Card height as a percentage of the window height
CARD_HEIGHT_PERCENT = 25

QUICK_ACTIONS = ["Add Product", "View Reports", "Manage Users", "Settings"]


class LayoutCoordinator(QObject):
    """Publishes the layout engine to QML and keeps the card grid in step with the window."""

    # Single notify signal: every layout property changes together
    layoutChanged = Signal()

    def __init__(self, engine: LayoutEngine, cards: Optional[List[StatCard]] = None) -> None:
        super().__init__()
        self.engine = engine
        self.card_model = StatCardModel(cards)
        self._last_columns = self.engine.display_columns()
        self._subscription = self.engine.subscribe(self._on_viewport_changed)
        self._update_card_grid()
        logger.info("Creating LayoutCoordinator (%d columns)", self._last_columns)

    def _on_viewport_changed(self) -> None:
        """Handle viewport changes from the dimension source"""
        columns = self.engine.display_columns()
        if columns != self._last_columns:
            logger.info(
                "Layout change: %s %s, %d -> %d columns",
                self.engine.classify().value,
                self.engine.orientation().value,
                self._last_columns,
                columns,
            )
            self._last_columns = columns
        self._update_card_grid()
        self.layoutChanged.emit()

    def _update_card_grid(self) -> None:
        viewport = self.engine.viewport()
        self.card_model.update_grid(GridDimensions(
            columns=self.engine.display_columns(),
            container_width=max(1, int(viewport.width)),
            padding=self.engine.adaptive_padding(),
            spacing=self.engine.spacing_scale()['sm'],
            cell_height=max(1, self.engine.percent_of_height(CARD_HEIGHT_PERCENT)),
        ))

    # Qt Properties for QML binding
    @Property(int, notify=layoutChanged)
    def gridColumns(self) -> int:
        return self.engine.display_columns()

    @Property(str, notify=layoutChanged)
    def deviceClass(self) -> str:
        return self.engine.classify().value

    @Property(str, notify=layoutChanged)
    def orientation(self) -> str:
        return self.engine.orientation().value

    @Property(bool, notify=layoutChanged)
    def isTablet(self) -> bool:
        return self.engine.is_tablet()

    @Property(int, notify=layoutChanged)
    def adaptivePadding(self) -> int:
        return self.engine.adaptive_padding()

    @Property(int, notify=layoutChanged)
    def cardHeight(self) -> int:
        return self.card_model.grid.dimensions.cell_height

    @Property(int, notify=layoutChanged)
    def gridHeight(self) -> int:
        """Height of the card grid for the current card count"""
        return self.card_model.total_height()

    @Property("QVariantMap", notify=layoutChanged)
    def spacing(self) -> Dict[str, Any]:
        return self.engine.spacing_scale()

    @Property("QVariantMap", notify=layoutChanged)
    def typography(self) -> Dict[str, Any]:
        return self.engine.typography_scale()

    @Property("QVariantList", notify=layoutChanged)
    def quickActionRows(self) -> List[List[str]]:
        """Quick actions split into rows, with "" filling the last row"""
        columns = max(2, self.engine.display_columns())
        return [[action or "" for action in row] for row in group_rows(QUICK_ACTIONS, columns)]

    @Slot(float, result=int)
    def percentWidth(self, percentage: float) -> int:
        return self.engine.percent_of_width(percentage)

    @Slot(float, result=int)
    def percentHeight(self, percentage: float) -> int:
        return self.engine.percent_of_height(percentage)

    @Slot(float, result=int)
    def responsiveFont(self, base_size: float) -> int:
        return self.engine.responsive_font(base_size)

    @Slot(str)
    def openCard(self, card_id: str) -> None:
        logger.info("Card selected: %s", card_id)

    def cleanup(self) -> None:
        """Release the viewport subscription"""
        logger.info("Cleaning up LayoutCoordinator")
        self._subscription.release()
