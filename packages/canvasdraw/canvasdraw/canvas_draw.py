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

"""Draw visitor writing HTML5 canvas javascript for rendering elements.

The visitor walks an element tree and writes statements against a 2D
drawing context named `context`, for example:

	context.font="16pt Arial";
	context.strokeStyle="#444444";
	context.lineWidth=2;
	context.moveTo(10,10); context.lineTo(40,10); context.stroke();

The text can be pasted into a page after
`var context = canvas.getContext("2d");`.
"""

# Standard Library
import dataclasses
import io
import json

# local repo modules
from . import colors
from . import render_elements


LINE_COLOR = colors.to_hex(colors.DARK_GRAY)
BACKING_COLOR = colors.to_hex(colors.WHITE)
SYMBOL_DEFAULT_COLOR = colors.to_hex(colors.BLACK)


#============================================
@dataclasses.dataclass(frozen=True)
class CanvasDrawContext:
	"""Everything the visitor reads while painting one tree."""
	transform: object
	font_manager: object
	renderer_model: object


#============================================
class CanvasDrawVisitor:
	"""Visitor writing canvas drawing statements to a text writer.

	Usage:

	visitor = CanvasDrawVisitor(writer)
	visitor.set_context(CanvasDrawContext(transform, font_manager, model))
	visitor.visit(element_tree)
	visitor.errors    # messages for statements the writer refused

	set_context must be called before visit; it also writes the font
	statement. Writer failures (OSError, ValueError) are collected in errors and the
	traversal goes on with the next statement.
	"""

	def __init__(self, writer):
		self.writer = writer
		self.context = None
		self.errors = []

	def set_context(self, context):
		"""Install transform, fonts and model, then write the font statement."""
		if context.transform is None:
			raise ValueError("Draw context requires a transform")
		if context.font_manager is None:
			raise ValueError("Draw context requires a font manager")
		if context.renderer_model is None:
			raise ValueError("Draw context requires a renderer model")
		self.context = context
		self.set_font(context.font_manager.get_font())

	def _require_context(self):
		if self.context is None:
			raise RuntimeError("Draw context is not set, call set_context() before drawing")
		return self.context

	def _write(self, text):
		try:
			self.writer.write(text)
		except (OSError, ValueError) as exc:
			self.errors.append(f"Could not write to writer: {exc}")
			return False
		return True

	def transform_point(self, x, y):
		context = self._require_context()
		tx, ty = context.transform.transform_xy(x, y)
		return (int(tx), int(ty))

	def set_font(self, font):
		self._require_context()
		self._write("context.font=%s;\n" % js_string("%dpt %s" % (font.size, font.family)))

	def visit(self, element):
		self._require_context()
		if isinstance(element, render_elements.ElementGroup):
			for child in element:
				self.visit(child)
		elif isinstance(element, render_elements.AtomSymbolElement):
			self.visit_symbol(element)
		elif isinstance(element, render_elements.LineElement):
			self.visit_line(element)

	def visit_symbol(self, element):
		context = self._require_context()
		x, y = self.transform_point(element.x, element.y)
		metrics = context.font_manager.text_metrics(element.text)
		# white disc erases bond lines passing under the label
		self._write('context.fillStyle="%s";' % BACKING_COLOR)
		self.draw_circle(x, y, backing_radius(metrics))
		base_x, base_y = text_base_point(x, y, metrics)
		fill = colors.color_to_hex(element.color) or SYMBOL_DEFAULT_COLOR
		self._write('context.fillStyle="%s";\n' % fill)
		self._write('context.fillText(%s,%d,%d);\n' % (js_string(element.text), base_x, base_y))

	def visit_line(self, element):
		context = self._require_context()
		x1, y1 = self.transform_point(element.x1, element.y1)
		x2, y2 = self.transform_point(element.x2, element.y2)
		scale = context.renderer_model.get_parameter("scale")
		self._write('context.strokeStyle="%s";\n' % LINE_COLOR)
		self._write("context.lineWidth=%d;\n" % device_line_width(element.width, scale))
		self.draw_line(x1, y1, x2, y2)

	def draw_line(self, x1, y1, x2, y2):
		self._write("context.moveTo(%d,%d); context.lineTo(%d,%d); context.stroke();\n"
				% (x1, y1, x2, y2))

	def draw_circle(self, x, y, radius):
		self._write("context.beginPath();"
				"context.arc(%d,%d,%d,0,Math.PI*2,true);"
				"context.closePath();"
				"context.fill();\n" % (x, y, radius))


#============================================
def js_string(text):
	"""Quote text as a javascript string literal safe inside a <script> block."""
	return json.dumps(text).replace("</", "<\\/")


#============================================
def backing_radius(metrics):
	"""Radius of the disc behind a label, half of its larger extent."""
	return max(int(metrics.width), int(metrics.height)) // 2


#============================================
def text_base_point(x, y, metrics):
	"""Baseline origin that centers text on the device point (x, y).

	fillText anchors at the left end of the baseline, so the text is moved
	left by half its width and down by the ascent minus half its height.
	"""
	base_x = int(x - metrics.width / 2.0)
	base_y = int(y + (metrics.ascent - metrics.height / 2.0))
	return (base_x, base_y)


#============================================
def device_line_width(model_width, scale):
	width = int(model_width * scale)
	if width < 0:
		return 1
	return width


#============================================
def elements_to_canvas_script(element, context):
	"""Render one element tree to a new script string.

	Returns:
		tuple: (script_text, errors) where errors lists writer failures.
	"""
	buffer = io.StringIO()
	visitor = CanvasDrawVisitor(buffer)
	visitor.set_context(context)
	visitor.visit(element)
	return buffer.getvalue(), list(visitor.errors)
