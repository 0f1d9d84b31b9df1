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

"""2D affine transform from model space to device space."""

# Standard Library
import math


#============================================
def _multiply(m1, m2):
	"""Return m1 x m2 for 2x3 affine matrices stored as (a, b, c, d, e, f)."""
	a1, b1, c1, d1, e1, f1 = m1
	a2, b2, c2, d2, e2, f2 = m2
	return (
		a1 * a2 + b1 * d2,
		a1 * b2 + b1 * e2,
		a1 * c2 + b1 * f2 + c1,
		d1 * a2 + e1 * d2,
		d1 * b2 + e1 * e2,
		d1 * c2 + e1 * f2 + f1,
	)


#============================================
class Transform:
	"""Affine map x' = a*x + b*y + c, y' = d*x + e*y + f.

	Every set_* call appends an operation that is applied after the
	operations already present, so the calls read in application order.
	"""

	IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0)

	def __init__(self, matrix=None):
		if matrix is None:
			matrix = self.IDENTITY
		if len(matrix) != 6:
			raise ValueError("Affine matrix needs six values (a, b, c, d, e, f)")
		self.matrix = tuple(float(value) for value in matrix)

	def __repr__(self):
		return "Transform(%r)" % (self.matrix,)

	def __eq__(self, other):
		if not isinstance(other, Transform):
			return NotImplemented
		return self.matrix == other.matrix

	def _append(self, matrix):
		self.matrix = _multiply(matrix, self.matrix)
		return self

	def set_move(self, dx, dy):
		return self._append((1.0, 0.0, dx, 0.0, 1.0, dy))

	def set_scaling(self, scale_x, scale_y=None):
		if scale_y is None:
			scale_y = scale_x
		return self._append((scale_x, 0.0, 0.0, 0.0, scale_y, 0.0))

	def set_rotation(self, angle):
		"""Rotate by angle (radians) around the origin."""
		cos_a = math.cos(angle)
		sin_a = math.sin(angle)
		return self._append((cos_a, -sin_a, 0.0, sin_a, cos_a, 0.0))

	def compose(self, other):
		"""Return a new transform applying self first, then other."""
		return Transform(_multiply(other.matrix, self.matrix))

	def determinant(self):
		a, b, _c, d, e, _f = self.matrix
		return a * e - b * d

	def get_inverse(self):
		a, b, c, d, e, f = self.matrix
		det = self.determinant()
		if det == 0:
			raise ValueError("Transform is singular and cannot be inverted")
		ia = e / det
		ib = -b / det
		id_ = -d / det
		ie = a / det
		return Transform((ia, ib, -(ia * c + ib * f), id_, ie, -(id_ * c + ie * f)))

	def transform_xy(self, x, y):
		a, b, c, d, e, f = self.matrix
		return (a * x + b * y + c, d * x + e * y + f)
