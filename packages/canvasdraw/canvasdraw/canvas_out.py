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

"""Single entry point writing canvas scripts or HTML pages to files."""

# Standard Library
import html
import io
import os

# local repo modules
from . import canvas_draw
from . import font_manager
from . import renderer
from . import renderer_model


HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>%(title)s</title>
</head>
<body>
<canvas id="%(canvas_id)s" width="%(width)d" height="%(height)d"></canvas>
<script>
var context = document.getElementById("%(canvas_id)s").getContext("2d");
%(script)s</script>
</body>
</html>
"""


#============================================
def _resolve_format(filename, format_override):
	if format_override:
		output_format = format_override.lower()
	else:
		output_format = os.path.splitext(filename)[1].lower().lstrip(".")
	if output_format in ("js", "html"):
		return output_format
	raise ValueError(
		"Output format could not be determined; use format=js|html or a matching filename."
	)


#============================================
def _build_font_manager(font_backend, font_size, font_name):
	if font_backend == "estimated":
		return font_manager.EstimatedFontManager(font_size=font_size, font_name=font_name)
	if font_backend == "cairo":
		try:
			from . import cairo_metrics
		except ImportError as exc:
			raise RuntimeError("Cairo font metrics require pycairo.") from exc
		return cairo_metrics.CairoFontManager(font_size=font_size, font_name=font_name)
	raise ValueError(f"Unknown font backend: {font_backend!r}")


#============================================
def script_to_html(script, width, height, title="canvas", canvas_id="canvas"):
	"""Wrap a canvas script in a page that defines the `context` variable."""
	return HTML_TEMPLATE % {
		"title": html.escape(title),
		"canvas_id": html.escape(canvas_id, quote=True),
		"width": width,
		"height": height,
		"script": script,
	}


#============================================
def render_script(element, width=512, height=512, font_backend="estimated",
		font_size=16, font_name="Arial", fit=True, **model_options):
	"""Paint an element tree into a width x height canvas.

	Returns:
		tuple: (script_text, errors)
	"""
	fonts = _build_font_manager(font_backend, font_size, font_name)
	model = renderer_model.RendererModel(**model_options)
	buffer = io.StringIO()
	visitor = canvas_draw.CanvasDrawVisitor(buffer)
	renderer.paint(element, visitor, (0, 0, width, height),
			model=model, font_manager=fonts, fit=fit)
	return buffer.getvalue(), list(visitor.errors)


#============================================
def elements_to_output(element, filename, format=None, width=512, height=512, **options):
	"""Write a canvas script (js) or a standalone page (html) for a tree.

	Returns:
		list: writer errors collected while painting.
	"""
	output_format = _resolve_format(filename, format)
	script, errors = render_script(element, width=width, height=height, **options)
	if output_format == "html":
		text = script_to_html(script, width, height,
				title=os.path.splitext(os.path.basename(filename))[0])
	else:
		text = script
	with open(filename, "w", encoding="utf-8") as handle:
		handle.write(text)
	return errors
