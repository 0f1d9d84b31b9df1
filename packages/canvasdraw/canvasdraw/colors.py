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

"""Color encoding for canvas style statements."""


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DARK_GRAY = (68, 68, 68)


#============================================
def _check_channel(value):
	if isinstance(value, bool) or not isinstance(value, int):
		raise ValueError(f"Color channel must be an integer, got {value!r}")
	if value < 0 or value > 255:
		raise ValueError(f"Color channel out of range 0-255: {value}")
	return value


#============================================
def to_hex(color):
	"""Encode an (r, g, b) integer triple as a lowercase #rrggbb string.

	Channels below 16 are zero padded, so (5, 5, 5) gives #050505.
	"""
	if len(color) != 3:
		raise ValueError(f"Color needs three channels, got {color!r}")
	channels = [_check_channel(value) for value in color]
	return "#%02x%02x%02x" % (channels[0], channels[1], channels[2])


#============================================
def _normalize_hex_color(text):
	value = text[1:]
	if len(value) == 3:
		value = "".join(ch * 2 for ch in value)
	if len(value) != 6:
		raise ValueError(f"Invalid hex color: {text!r}")
	try:
		int(value, 16)
	except ValueError as exc:
		raise ValueError(f"Invalid hex color: {text!r}") from exc
	return "#" + value.lower()


#============================================
def color_to_hex(color):
	"""Encode an element color given as an RGB triple or a hex string."""
	if color is None:
		return None
	if isinstance(color, str):
		text = color.strip()
		if not text.startswith("#"):
			raise ValueError(f"Invalid hex color: {color!r}")
		return _normalize_hex_color(text)
	if isinstance(color, (tuple, list)):
		return to_hex(color)
	raise ValueError(f"Unsupported color value: {color!r}")
