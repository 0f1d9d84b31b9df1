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

"""Paint driver: fit an element tree into a device rectangle and draw it."""

# local repo modules
from . import canvas_draw
from . import font_manager as font_manager_module
from . import render_elements
from . import renderer_model as renderer_model_module
from . import transform as transform_module


#============================================
def _bounds_center(bbox):
	x1, y1, x2, y2 = bbox
	return ((x1 + x2) / 2.0, (y1 + y2) / 2.0)


#============================================
def fit_scale(model_bounds, bounds, margin=0, zoom_factor=1.0):
	"""Largest uniform scale placing model_bounds inside the device bounds.

	Args:
		model_bounds: (x1, y1, x2, y2) in model space.
		bounds: (x, y, width, height) device rectangle.
		margin: device pixels kept free on every side.
		zoom_factor: multiplier applied to the fitted scale.

	Returns:
		float: device pixels per model unit.
	"""
	_x, _y, width, height = bounds
	available_width = width - 2 * margin
	available_height = height - 2 * margin
	if available_width <= 0 or available_height <= 0:
		raise ValueError("Device bounds are smaller than the margins")
	x1, y1, x2, y2 = model_bounds
	model_width = x2 - x1
	model_height = y2 - y1
	candidates = []
	if model_width > 0:
		candidates.append(available_width / model_width)
	if model_height > 0:
		candidates.append(available_height / model_height)
	if not candidates:
		# a single point has no extent to fit
		return float(zoom_factor)
	return min(candidates) * zoom_factor


#============================================
def build_transform(model_center, bounds, scale):
	"""Map model_center to the bounds center, scale, and flip y upward."""
	x, y, width, height = bounds
	tr = transform_module.Transform()
	tr.set_move(-model_center[0], -model_center[1])
	tr.set_scaling(scale, -scale)
	tr.set_move(x + width / 2.0, y + height / 2.0)
	return tr


#============================================
def paint(element, visitor, bounds, model=None, font_manager=None, fit=True):
	"""Configure the visitor for the device bounds and draw the tree.

	With fit=True the model "scale" parameter is replaced by the fitted
	scale, so line widths follow the zoom of the drawing. With fit=False
	the current scale is kept and the tree is only centered.

	Returns:
		CanvasDrawContext: the context the visitor painted with.
	"""
	if model is None:
		model = renderer_model_module.RendererModel()
	if font_manager is None:
		font_manager = font_manager_module.EstimatedFontManager()
	model_bounds = render_elements.element_bounds(element)
	if model_bounds is None:
		center = (0.0, 0.0)
	else:
		center = _bounds_center(model_bounds)
		if fit:
			scale = fit_scale(model_bounds, bounds,
					margin=model.get_parameter("margin"),
					zoom_factor=model.get_parameter("zoom_factor"))
			model.set_parameter("scale", scale)
	tr = build_transform(center, bounds, model.get_parameter("scale"))
	context = canvas_draw.CanvasDrawContext(
		transform=tr,
		font_manager=font_manager,
		renderer_model=model,
	)
	visitor.set_context(context)
	visitor.visit(element)
	return context
