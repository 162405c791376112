from typing import Any, List, Optional

from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, QPersistentModelIndex, Qt

from core.data_models import StatCard
from core.ui_logic.grid_layout import GridDimensions, GridLayout


class StatCardModel(QAbstractListModel):
    """Dashboard statistic cards with their current grid geometry."""

    CardIdRole = Qt.ItemDataRole.UserRole + 1
    TitleRole = Qt.ItemDataRole.UserRole + 2
    ValueRole = Qt.ItemDataRole.UserRole + 3
    SubtitleRole = Qt.ItemDataRole.UserRole + 4
    TrendRole = Qt.ItemDataRole.UserRole + 5
    TrendValueRole = Qt.ItemDataRole.UserRole + 6
    RowRole = Qt.ItemDataRole.UserRole + 7
    ColumnRole = Qt.ItemDataRole.UserRole + 8
    XRole = Qt.ItemDataRole.UserRole + 9
    YRole = Qt.ItemDataRole.UserRole + 10
    WidthRole = Qt.ItemDataRole.UserRole + 11

    GEOMETRY_ROLES = [RowRole, ColumnRole, XRole, YRole, WidthRole]

    def __init__(self, cards: Optional[List[StatCard]] = None) -> None:
        super().__init__()
        self.cards: List[StatCard] = list(cards or [])
        self.grid = GridLayout(GridDimensions())

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self.cards)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self.cards):
            return None

        card = self.cards[index.row()]

        if role == self.CardIdRole:
            return card.id
        elif role in (self.TitleRole, Qt.ItemDataRole.DisplayRole):
            return card.title
        elif role == self.ValueRole:
            return card.value
        elif role == self.SubtitleRole:
            return card.subtitle
        elif role == self.TrendRole:
            return card.trend or ""
        elif role == self.TrendValueRole:
            return card.trend_value or ""

        position = self.grid.get_position(index.row())
        if role == self.RowRole:
            return position.row
        elif role == self.ColumnRole:
            return position.column
        elif role == self.XRole:
            return position.x
        elif role == self.YRole:
            return position.y
        elif role == self.WidthRole:
            return position.width

        return None

    def roleNames(self) -> dict[int, QByteArray]:
        return {
            self.CardIdRole: QByteArray(b"cardId"),
            self.TitleRole: QByteArray(b"cardTitle"),
            self.ValueRole: QByteArray(b"cardValue"),
            self.SubtitleRole: QByteArray(b"cardSubtitle"),
            self.TrendRole: QByteArray(b"cardTrend"),
            self.TrendValueRole: QByteArray(b"cardTrendValue"),
            self.RowRole: QByteArray(b"gridRow"),
            self.ColumnRole: QByteArray(b"gridColumn"),
            self.XRole: QByteArray(b"cellX"),
            self.YRole: QByteArray(b"cellY"),
            self.WidthRole: QByteArray(b"cellWidth"),
        }

    def set_cards(self, cards: List[StatCard]) -> None:
        self.beginResetModel()
        self.cards = list(cards)
        self.endResetModel()

    def clear(self) -> None:
        self.set_cards([])

    def update_grid(self, dimensions: GridDimensions) -> None:
        """Apply new grid geometry and refresh the position roles."""
        self.grid.update_dimensions(dimensions)
        if self.cards:
            self.dataChanged.emit(self.index(0), self.index(len(self.cards) - 1), self.GEOMETRY_ROLES)

    def total_height(self) -> int:
        return self.grid.get_total_height(len(self.cards))
