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

"""Keyed rendering parameters shared by the paint driver and the visitor."""


class RendererModel:
	"""Parameter store read by the draw visitor.

	Usage:

	model = RendererModel(scale=2.0)
	model.get_parameter("scale")
	model.set_parameter("margin", 20)

	Every parameter has a default in default_parameters; unknown names are
	rejected both in the constructor and in the accessors.
	"""

	default_parameters = {
		# device pixels per model unit, updated by renderer.paint when fitting
		'scale': 1.0,
		# extra magnification applied on top of the fitted scale
		'zoom_factor': 1.0,
		# device pixels kept free around the drawing when fitting
		'margin': 10,
	}

	def __init__(self, **kw):
		self._parameters = dict(self.__class__.default_parameters)
		for key, value in kw.items():
			self.set_parameter(key, value)

	def _check_name(self, name):
		if name not in self._parameters:
			raise ValueError(f"Unknown renderer parameter: {name!r}")

	def get_parameter(self, name):
		self._check_name(name)
		return self._parameters[name]

	def set_parameter(self, name, value):
		self._check_name(name)
		self._parameters[name] = value

	def parameters(self):
		return dict(self._parameters)
