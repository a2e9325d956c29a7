"""Block metrics and the glyph-space to document-space transform.

Glyph space has an arbitrary origin with Y pointing up. Document space has
its origin at the top-left corner of the padded rectangle with Y pointing
down.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from textstencil.domain import BoundingBox, Coordinate, LineRecord


@dataclass(frozen=True, slots=True)
class BlockMetrics:
    """Overall dimensions of the laid out text block.

    Attributes:
        block_width: Union width of all line boxes
        y_min_total: Bottom of the block (ymin of the bottom line)
        y_max_total: Top of the block (stack offset plus ymax of the top line)
        rect_width: Block width plus padding on both sides
        rect_height: Block height plus padding on both sides
    """

    block_width: float
    y_min_total: float
    y_max_total: float
    rect_width: float
    rect_height: float

    @property
    def total_text_height(self) -> float:
        return self.y_max_total - self.y_min_total

    @classmethod
    def measure(cls, lines: Sequence[LineRecord], padding: float) -> "BlockMetrics":
        """Measure a non-empty stack of lines.

        Args:
            lines: Records ordered bottom to top
            padding: Margin added on every side

        Raises:
            ValueError: If there are no lines
        """
        if not lines:
            raise ValueError("Cannot measure an empty block")

        block_width = reduce(BoundingBox.union, (line.bbox for line in lines)).width

        bottom, top = lines[0], lines[-1]
        y_min_total = bottom.bbox.ymin
        y_max_total = top.stack_y + top.bbox.ymax
        total_text_height = y_max_total - y_min_total

        return cls(
            block_width=block_width,
            y_min_total=y_min_total,
            y_max_total=y_max_total,
            rect_width=block_width + padding * 2,
            rect_height=total_text_height + padding * 2,
        )


@dataclass(frozen=True, slots=True)
class CoordinateTransformer:
    """Affine map from glyph space to document space.

    Attributes:
        padding: Margin on every side
        rect_height: Height of the padded rectangle
        y_min_total: Glyph-space Y that lands on the bottom padding line
    """

    padding: float
    rect_height: float
    y_min_total: float

    @classmethod
    def from_metrics(cls, metrics: BlockMetrics, padding: float) -> "CoordinateTransformer":
        return cls(padding=padding, rect_height=metrics.rect_height, y_min_total=metrics.y_min_total)

    def transform(self, x: float, y: float) -> Coordinate:
        """Map a glyph-space point to document space (flips Y)."""
        tx = x + self.padding
        ty = self.rect_height - (y - self.y_min_total + self.padding)
        return tx, ty
