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

"""JSON form of rendering element trees."""

# Standard Library
import json

# local repo modules
from . import colors
from . import render_elements


#============================================
def _serialize_number(value, digits):
	if isinstance(value, int):
		return value
	if isinstance(value, float):
		return round(value, digits)
	return value


#============================================
def element_to_json_dict(element, round_digits=3):
	if isinstance(element, render_elements.ElementGroup):
		return {
			"kind": "group",
			"children": [element_to_json_dict(child, round_digits) for child in element.children],
		}
	if isinstance(element, render_elements.AtomSymbolElement):
		return {
			"kind": "symbol",
			"x": _serialize_number(element.x, round_digits),
			"y": _serialize_number(element.y, round_digits),
			"text": element.text,
			"color": colors.color_to_hex(element.color),
		}
	if isinstance(element, render_elements.LineElement):
		return {
			"kind": "line",
			"p1": [_serialize_number(element.x1, round_digits), _serialize_number(element.y1, round_digits)],
			"p2": [_serialize_number(element.x2, round_digits), _serialize_number(element.y2, round_digits)],
			"width": _serialize_number(element.width, round_digits),
			"color": colors.color_to_hex(element.color),
		}
	raise ValueError(f"Unsupported rendering element: {element!r}")


#============================================
def _color_from_json(value):
	if value is None:
		return None
	if isinstance(value, list):
		return tuple(value)
	return value


#============================================
def _point_from_json(value, key):
	if not isinstance(value, (list, tuple)) or len(value) != 2:
		raise ValueError(f"Line element needs a two number {key!r} point")
	return float(value[0]), float(value[1])


#============================================
def element_from_json_dict(data):
	"""Build an element tree from its JSON dict form.

	Symbol colors may be "#rrggbb" strings or [r, g, b] lists. Missing or
	mistyped fields raise ValueError.
	"""
	try:
		return _element_from_json_dict(data)
	except (TypeError, KeyError) as exc:
		raise ValueError(f"Malformed element entry: {exc!r}") from exc


#============================================
def _element_from_json_dict(data):
	if not isinstance(data, dict):
		raise ValueError(f"Element entry must be an object, got {type(data).__name__}")
	kind = data.get("kind")
	if kind == "group":
		return render_elements.ElementGroup(
			[_element_from_json_dict(child) for child in data.get("children", [])]
		)
	if kind == "symbol":
		color = _color_from_json(data.get("color"))
		if color is None:
			color = colors.BLACK
		return render_elements.AtomSymbolElement(
			x=float(data["x"]),
			y=float(data["y"]),
			text=str(data["text"]),
			color=color,
		)
	if kind == "line":
		x1, y1 = _point_from_json(data.get("p1"), "p1")
		x2, y2 = _point_from_json(data.get("p2"), "p2")
		return render_elements.LineElement(
			x1, y1, x2, y2,
			width=float(data.get("width", 1.0)),
			color=_color_from_json(data.get("color")),
		)
	raise ValueError(f"Unknown element kind: {kind!r}")


#============================================
def element_to_json_text(element, round_digits=3):
	return json.dumps(element_to_json_dict(element, round_digits=round_digits), indent=2, sort_keys=True)


#============================================
def element_from_json_text(text):
	try:
		data = json.loads(text)
	except json.JSONDecodeError as exc:
		raise ValueError(f"Element tree is not valid JSON: {exc}") from exc
	# a bare list is read as the children of a top-level group
	if isinstance(data, list):
		data = {"kind": "group", "children": data}
	return element_from_json_dict(data)
