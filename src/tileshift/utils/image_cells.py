from __future__ import annotations

from dataclasses import dataclass
from typing import List

from tileshift.constants import BOARD_SIZE


@dataclass(frozen=True, slots=True)
class CellRegion:
	"""Rectangle of the source image that becomes the artwork of grid cell (x, y).

	Grid row 0 is the top of the picture, so its region has the largest
	``bottom`` in image coordinates that grow upward.
	"""

	x: int
	y: int
	left: int
	bottom: int
	width: int
	height: int


def slice_image(image_width: int, image_height: int, size: int = BOARD_SIZE) -> List[CellRegion]:
	"""Split an image into ``size * size`` equal regions in row-major cell order.

	Integer division drops any remainder pixels on the right and top edges.
	"""
	cell_w = image_width // size
	cell_h = image_height // size
	regions: List[CellRegion] = []
	for y in range(size):
		for x in range(size):
			regions.append(
				CellRegion(
					x=x,
					y=y,
					left=x * cell_w,
					bottom=(size - 1 - y) * cell_h,
					width=cell_w,
					height=cell_h,
				)
			)
	return regions
