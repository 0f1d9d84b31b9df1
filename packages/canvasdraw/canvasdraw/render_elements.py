#--------------------------------------------------------------------------
#     This file is part of canvasdraw - a canvas script renderer
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Rendering elements consumed by the canvas draw visitor."""

# Standard Library
import dataclasses


#============================================
@dataclasses.dataclass(frozen=True)
class ElementGroup:
	children: tuple = ()

	def __post_init__(self):
		# accept any iterable but store an immutable ordered tuple
		object.__setattr__(self, "children", tuple(self.children))

	def __iter__(self):
		return iter(self.children)

	def __len__(self):
		return len(self.children)


#============================================
@dataclasses.dataclass(frozen=True)
class AtomSymbolElement:
	x: float
	y: float
	text: str
	color: object = (0, 0, 0)


#============================================
@dataclasses.dataclass(frozen=True)
class LineElement:
	x1: float
	y1: float
	x2: float
	y2: float
	width: float
	color: object | None = None


#============================================
def element_points(element):
	"""Yield every model space point referenced by an element tree.

	Groups are walked depth-first in stored order. Unknown element
	variants contribute no points.
	"""
	if isinstance(element, ElementGroup):
		for child in element:
			yield from element_points(child)
	elif isinstance(element, AtomSymbolElement):
		yield (element.x, element.y)
	elif isinstance(element, LineElement):
		yield (element.x1, element.y1)
		yield (element.x2, element.y2)


#============================================
def element_bounds(element):
	"""Return (x1, y1, x2, y2) model bounds of a tree, or None when empty."""
	x1, y1, x2, y2 = None, None, None, None
	for x, y in element_points(element):
		if x1 is None or x < x1:
			x1 = x
		if x2 is None or x > x2:
			x2 = x
		if y1 is None or y < y1:
			y1 = y
		if y2 is None or y > y2:
			y2 = y
	if x1 is None:
		return None
	return (x1, y1, x2, y2)


#============================================
def count_elements(element):
	"""Count symbol and line leaves in a tree."""
	if isinstance(element, ElementGroup):
		return sum(count_elements(child) for child in element.children)
	if isinstance(element, (AtomSymbolElement, LineElement)):
		return 1
	return 0
