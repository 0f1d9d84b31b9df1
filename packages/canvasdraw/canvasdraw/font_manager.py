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

"""Font descriptors and text metrics used to size and place labels."""

# Standard Library
import dataclasses


#============================================
@dataclasses.dataclass(frozen=True)
class FontDescriptor:
	size: int
	family: str


#============================================
@dataclasses.dataclass(frozen=True)
class TextMetrics:
	width: float
	height: float
	ascent: float


# advance widths of Helvetica (AFM units per 1000 em); Arial shares them
_HELVETICA_WIDTHS = {
	' ': 278, '!': 278, '"': 355, '#': 556, '$': 556, '%': 889, '&': 667,
	"'": 191, '(': 333, ')': 333, '*': 389, '+': 584, ',': 278, '-': 333,
	'.': 278, '/': 278, ':': 278, ';': 278, '<': 584, '=': 584, '>': 584,
	'?': 556, '@': 1015, '[': 278, '\\': 278, ']': 278, '^': 469, '_': 556,
	'A': 667, 'B': 667, 'C': 722, 'D': 722, 'E': 667, 'F': 611, 'G': 778,
	'H': 722, 'I': 278, 'J': 500, 'K': 667, 'L': 556, 'M': 833, 'N': 722,
	'O': 778, 'P': 667, 'Q': 778, 'R': 722, 'S': 667, 'T': 611, 'U': 722,
	'V': 667, 'W': 944, 'X': 667, 'Y': 667, 'Z': 611,
	'a': 556, 'b': 556, 'c': 500, 'd': 556, 'e': 556, 'f': 278, 'g': 556,
	'h': 556, 'i': 222, 'j': 222, 'k': 500, 'l': 222, 'm': 833, 'n': 556,
	'o': 556, 'p': 556, 'q': 556, 'r': 333, 's': 500, 't': 278, 'u': 556,
	'v': 500, 'w': 722, 'x': 500, 'y': 500, 'z': 500,
}
# digits all share one advance
_HELVETICA_WIDTHS.update({digit: 556 for digit in "0123456789"})
_HELVETICA_DEFAULT_WIDTH = 556
_HELVETICA_ASCENT = 718
_HELVETICA_DESCENT = 207


#============================================
class EstimatedFontManager:
	"""Font manager measuring text from a built-in Helvetica width table.

	Usage:

	manager = EstimatedFontManager(font_size=16, font_name="Arial")
	manager.get_font()            # FontDescriptor(16, "Arial")
	manager.text_metrics("Cl")    # TextMetrics(width, height, ascent)

	Widths are summed per character so proportional labels such as "Cl"
	and "W" get different widths; the family name is only reported, the
	table is used for every family.
	"""

	default_options = {
		'font_size': 16,
		'font_name': "Arial",
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

	def get_font(self):
		return FontDescriptor(size=int(self.font_size), family=self.font_name)

	def text_metrics(self, text):
		em = float(self.font_size) / 1000.0
		advance = sum(_HELVETICA_WIDTHS.get(ch, _HELVETICA_DEFAULT_WIDTH) for ch in text)
		ascent = _HELVETICA_ASCENT * em
		height = (_HELVETICA_ASCENT + _HELVETICA_DESCENT) * em
		return TextMetrics(width=advance * em, height=height, ascent=ascent)
