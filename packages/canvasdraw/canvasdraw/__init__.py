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

"""Render abstract 2D drawing elements as HTML5 canvas javascript."""

from . import canvas_draw
from . import canvas_out
from . import colors
from . import elements_json
from . import font_manager
from . import render_elements
from . import renderer
from . import renderer_model
from . import transform

from .canvas_draw import CanvasDrawContext
from .canvas_draw import CanvasDrawVisitor
from .canvas_draw import elements_to_canvas_script
from .font_manager import EstimatedFontManager
from .font_manager import FontDescriptor
from .render_elements import AtomSymbolElement
from .render_elements import ElementGroup
from .render_elements import LineElement
from .renderer_model import RendererModel
from .transform import Transform

__version__ = "0.1.0"
