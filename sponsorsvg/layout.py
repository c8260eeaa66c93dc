import math
from typing import NamedTuple

AVATAR_SIZE = 60
SPACING = 10
COLUMNS = 6
PADDING = 20
HEADER_HEIGHT = 40
# Room for the name label under each avatar.
LABEL_HEIGHT = 20
ROW_PITCH = AVATAR_SIZE + SPACING + LABEL_HEIGHT


class Slot(NamedTuple):
    col: int
    row: int
    x: int
    y: int
    center_x: int
    center_y: int


def layout(index: int) -> Slot:
    """Grid slot for the sponsor at `index`."""
    col = index % COLUMNS
    row = index // COLUMNS
    x = PADDING + col * (AVATAR_SIZE + SPACING)
    y = HEADER_HEIGHT + PADDING + row * ROW_PITCH
    return Slot(
        col=col,
        row=row,
        x=x,
        y=y,
        center_x=x + AVATAR_SIZE // 2,
        center_y=y + AVATAR_SIZE // 2,
    )


def canvas_size(total: int) -> tuple[int, int]:
    """(width, height) of the canvas holding `total` sponsors."""
    rows = math.ceil(total / COLUMNS)
    # NOTE: the last column has no trailing spacing.
    width = (AVATAR_SIZE + SPACING) * COLUMNS + PADDING * 2 - SPACING
    height = HEADER_HEIGHT + ROW_PITCH * rows + PADDING
    return width, height
