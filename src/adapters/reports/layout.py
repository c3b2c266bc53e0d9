"""Declarative page layout for fixed-format reports.

A report is described as an ordered list of blocks with known heights.
``layout_blocks`` decides, without drawing anything, on which page and at
which vertical offset each block lands. Drawing happens afterwards from
the resulting placements.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PageGeometry:
    """Vertical geometry of a page, in millimetres."""

    width: float = 210.0
    height: float = 297.0
    top_margin: float = 15.0
    bottom_margin: float = 20.0
    side_margin: float = 20.0

    @property
    def bottom_limit(self) -> float:
        """Return the lowest y a block may reach."""
        return self.height - self.bottom_margin

    @property
    def content_width(self) -> float:
        """Return the usable width between side margins."""
        return self.width - 2 * self.side_margin


@dataclass(frozen=True)
class Block:
    """A unit of content that is never split across pages.

    Attributes:
        kind: Drawing routine identifier.
        height: Height occupied by the block.
        payload: Data handed to the drawing routine.
        space_after: Gap left below the block.
        min_space: Room required below the cursor before placing the block,
            when larger than its own height (keeps titles with content).
        repeat_header: Block re-emitted first on a page this block opens,
            used for table headers.
    """

    kind: str
    height: float
    payload: Any = None
    space_after: float = 0.0
    min_space: float = 0.0
    repeat_header: "Block | None" = None

    @property
    def required_space(self) -> float:
        """Return the room needed to place the block."""
        return max(self.height, self.min_space)


@dataclass(frozen=True)
class PlacedBlock:
    """A block bound to a page index (0-based) and a y offset."""

    block: Block
    page: int
    y: float


@dataclass(frozen=True)
class Layout:
    """Result of the layout pass."""

    placements: tuple[PlacedBlock, ...]
    page_count: int

    def pages(self) -> list[list[PlacedBlock]]:
        """Return placements grouped per page, in page order."""
        grouped: list[list[PlacedBlock]] = [[] for _ in range(self.page_count)]
        for placement in self.placements:
            grouped[placement.page].append(placement)
        return grouped


def layout_blocks(
    blocks: list[Block],
    geometry: PageGeometry | None = None,
) -> Layout:
    """Assign every block a page and a vertical offset.

    A page break happens before a block whose required space does not fit
    between the cursor and the bottom limit, unless the cursor is already
    at the top of a page (oversized blocks are placed anyway).

    Args:
        blocks: Blocks in reading order.
        geometry: Page geometry, A4 portrait by default.

    Returns:
        Layout: Placements and the total page count.
    """
    page_geometry = geometry or PageGeometry()
    placements: list[PlacedBlock] = []
    page = 0
    cursor = page_geometry.top_margin

    for block in blocks:
        at_top = cursor <= page_geometry.top_margin
        if (
            not at_top
            and cursor + block.required_space > page_geometry.bottom_limit
        ):
            page += 1
            cursor = page_geometry.top_margin
            if block.repeat_header is not None:
                placements.append(
                    PlacedBlock(block.repeat_header, page, cursor)
                )
                cursor += block.repeat_header.height
        placements.append(PlacedBlock(block, page, cursor))
        cursor += block.height + block.space_after

    return Layout(placements=tuple(placements), page_count=page + 1)


__all__ = [
    "PageGeometry",
    "Block",
    "PlacedBlock",
    "Layout",
    "layout_blocks",
]
