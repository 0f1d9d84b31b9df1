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

"""Font manager that measures text with Cairo's toy font API."""

# Third Party
import cairo

# local repo modules
from . import font_manager


#============================================
class CairoFontManager:
	"""Measure labels with cairo font_extents and text_extents.

	One point is treated as one device pixel, so font_size maps directly
	to the cairo font size.
	"""

	default_options = {
		'font_size': 16,
		'font_name': "Arial",
		'bold': False,
	}

	def __init__(self, **kw):
		for key, value in self.__class__.default_options.items():
			setattr(self, key, value)
		for key, value in kw.items():
			if key not in self.__class__.default_options:
				raise ValueError(f"Unknown font manager option: {key!r}")
			setattr(self, key, value)
		if self.font_size <= 0:
			raise ValueError("font_size must be positive")
		# a 1x1 surface is enough for measuring
		self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
		self.context = cairo.Context(self.surface)
		weight = cairo.FONT_WEIGHT_BOLD if self.bold else cairo.FONT_WEIGHT_NORMAL
		self.context.select_font_face(self.font_name, cairo.FONT_SLANT_NORMAL, weight)
		self.context.set_font_size(self.font_size)

	def get_font(self):
		return font_manager.FontDescriptor(size=int(self.font_size), family=self.font_name)

	def text_metrics(self, text):
		ascent, descent, _height, _max_x, _max_y = self.context.font_extents()
		extents = self.context.text_extents(text)
		return font_manager.TextMetrics(
			width=extents.x_advance,
			height=ascent + descent,
			ascent=ascent,
		)
