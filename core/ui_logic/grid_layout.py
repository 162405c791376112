"""
Grid mathematics for the responsive card layout.

Decide the column count from device class and orientation, resolve the
adaptive horizontal padding, and calculate cell positions for a given
column count. No UI framework dependencies - works with any renderer.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from ..data_models import DeviceClass, Orientation, Viewport
from .device_classifier import BREAKPOINTS, Breakpoints, classify, orientation
from .scaling import PixelRounder, identity_rounder, percent_of_width

T = TypeVar('T')

MIN_PADDING = 1

# (portrait, landscape) columns per device class
COLUMN_TABLE: Dict[DeviceClass, Tuple[int, int]] = {
    DeviceClass.SMALL_PHONE: (1, 2),
    DeviceClass.MEDIUM_PHONE: (1, 2),
    DeviceClass.LARGE_PHONE: (1, 2),
    DeviceClass.TABLET: (2, 4),
    DeviceClass.LARGE_TABLET: (3, 5),
}
DEFAULT_COLUMNS = (1, 2)

PADDING_PERCENTAGES: Dict[DeviceClass, int] = {
    DeviceClass.SMALL_PHONE: 4,
    DeviceClass.MEDIUM_PHONE: 4,
    DeviceClass.LARGE_PHONE: 6,
    DeviceClass.TABLET: 8,
}
DEFAULT_PADDING_PERCENTAGE = 10


def columns_for(device_class: DeviceClass, current_orientation: Orientation) -> int:
    """Look up the column count for a device class and orientation."""
    portrait, landscape = COLUMN_TABLE.get(device_class, DEFAULT_COLUMNS)
    return landscape if current_orientation is Orientation.LANDSCAPE else portrait


def grid_columns(viewport: Viewport, width_override: Optional[float] = None,
                 breakpoints: Breakpoints = BREAKPOINTS) -> int:
    """
    Calculate the number of grid columns for the viewport.

    Args:
        viewport: Current viewport
        width_override: Width to use instead of the viewport width; the
            height always comes from the viewport
        breakpoints: Threshold table to classify against

    Returns:
        Column count, at least 1
    """
    if width_override:
        viewport = Viewport(width_override, viewport.height)
    return columns_for(classify(viewport, breakpoints), orientation(viewport))


def adaptive_padding(viewport: Viewport, rounder: PixelRounder = identity_rounder,
                     breakpoints: Breakpoints = BREAKPOINTS) -> int:
    """
    Horizontal container padding, tiered by device class.

    Args:
        viewport: Current viewport
        rounder: Nearest-device-pixel capability
        breakpoints: Threshold table to classify against

    Returns:
        Padding in whole pixels, never below MIN_PADDING
    """
    percentage = PADDING_PERCENTAGES.get(classify(viewport, breakpoints), DEFAULT_PADDING_PERCENTAGE)
    return max(MIN_PADDING, percent_of_width(viewport, percentage, rounder))


def group_rows(items: Sequence[T], columns: int) -> List[List[Optional[T]]]:
    """
    Split items into grid rows.

    The last row is padded with None so every row has ``columns`` slots.

    Args:
        items: Items in display order
        columns: Number of columns per row

    Returns:
        List of rows
    """
    columns = max(1, columns)
    rows: List[List[Optional[T]]] = []
    for start in range(0, len(items), columns):
        row: List[Optional[T]] = list(items[start:start + columns])
        row.extend([None] * (columns - len(row)))
        rows.append(row)
    return rows


@dataclass(slots=True)
class GridDimensions:
    """Grid container geometry and spacing."""
    columns: int = 1
    container_width: int = 360
    padding: int = 16
    spacing: int = 8
    cell_height: int = 120

    @property
    def cell_width(self) -> int:
        """Width of one cell after padding and gutters are removed."""
        available = self.container_width - (2 * self.padding) - ((self.columns - 1) * self.spacing)
        return max(1, available // self.columns)

    @property
    def total_cell_height(self) -> int:
        """Total height including spacing for one cell."""
        return self.cell_height + self.spacing


@dataclass(slots=True)
class GridPosition:
    """Position of an item in the grid."""
    row: int
    column: int
    x: int
    y: int
    width: int
    index: int

    def __str__(self) -> str:
        return f"GridPosition(row={self.row}, col={self.column}, x={self.x}, y={self.y}, idx={self.index})"


class GridLayout:
    """
    Manages cell geometry for the card grid.

    Column count and padding are supplied by the caller, normally from
    grid_columns() and adaptive_padding() for the current viewport.
    """

    def __init__(self, dimensions: GridDimensions) -> None:
        """
        Initialize grid layout with specified dimensions.

        Args:
            dimensions: Grid dimensions and spacing configuration
        """
        if dimensions.columns < 1:
            raise ValueError(f"Grid needs at least one column, got {dimensions.columns}")
        self.dimensions = dimensions

    def get_position(self, index: int) -> GridPosition:
        """
        Calculate grid position for item at given index.

        Args:
            index: Zero-based index of item

        Returns:
            GridPosition with row, column, and pixel coordinates
        """
        dims = self.dimensions
        row = index // dims.columns
        column = index % dims.columns
        cell_width = dims.cell_width

        x = dims.padding + column * (cell_width + dims.spacing)
        y = row * dims.total_cell_height

        return GridPosition(
            row=row,
            column=column,
            x=x,
            y=y,
            width=cell_width,
            index=index
        )

    def get_positions_batch(self, start_index: int, count: int) -> List[GridPosition]:
        """
        Calculate positions for a batch of items.

        Args:
            start_index: Starting index for batch
            count: Number of positions to calculate

        Returns:
            List of GridPosition objects
        """
        return [self.get_position(start_index + i) for i in range(count)]

    def get_row_count(self, item_count: int) -> int:
        return math.ceil(item_count / self.dimensions.columns)

    def get_total_height(self, item_count: int) -> int:
        """
        Calculate total height needed for given number of items.

        Args:
            item_count: Number of items to display

        Returns:
            Total height in pixels
        """
        rows = self.get_row_count(item_count)
        if rows == 0:
            return 0
        return rows * self.dimensions.cell_height + (rows - 1) * self.dimensions.spacing

    def update_dimensions(self, new_dimensions: GridDimensions) -> None:
        """
        Update grid dimensions after a viewport change.

        Args:
            new_dimensions: New grid dimensions to use
        """
        if new_dimensions.columns < 1:
            raise ValueError(f"Grid needs at least one column, got {new_dimensions.columns}")
        self.dimensions = new_dimensions
