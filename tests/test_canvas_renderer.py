"""Tests for the fit-to-bounds paint driver."""

# Standard Library
import io

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_canvasdraw_to_sys_path()

# local repo modules
from canvasdraw import canvas_draw
from canvasdraw import render_elements
from canvasdraw import renderer
from canvasdraw import renderer_model


#============================================
def _tree():
	return render_elements.ElementGroup([
		render_elements.LineElement(0, 0, 10, 0, width=1.0),
		render_elements.AtomSymbolElement(10, 0, "O", color=(255, 0, 0)),
	])


#============================================
def test_element_bounds():
	assert render_elements.element_bounds(_tree()) == (0, 0, 10, 0)
	assert render_elements.element_bounds(render_elements.ElementGroup()) is None
	assert render_elements.count_elements(_tree()) == 2


#============================================
def test_fit_scale():
	assert renderer.fit_scale((0, 0, 10, 20), (0, 0, 100, 100), margin=10) == pytest.approx(4.0)
	assert renderer.fit_scale((0, 0, 10, 20), (0, 0, 100, 100), margin=10, zoom_factor=0.5) == pytest.approx(2.0)
	assert renderer.fit_scale((3, 3, 3, 3), (0, 0, 100, 100), zoom_factor=2.0) == pytest.approx(2.0)
	with pytest.raises(ValueError):
		renderer.fit_scale((0, 0, 10, 10), (0, 0, 20, 20), margin=10)


#============================================
def test_build_transform_centers_and_flips_y():
	tr = renderer.build_transform((5, 5), (0, 0, 100, 100), 2.0)
	assert tr.transform_xy(5, 5) == (50.0, 50.0)
	assert tr.transform_xy(6, 5) == (52.0, 50.0)
	assert tr.transform_xy(5, 6) == (50.0, 48.0)


#============================================
def test_paint_fits_tree_and_updates_scale():
	buffer = io.StringIO()
	visitor = canvas_draw.CanvasDrawVisitor(buffer)
	model = renderer_model.RendererModel(margin=10)
	context = renderer.paint(_tree(), visitor, (0, 0, 120, 120), model=model)
	assert model.get_parameter("scale") == pytest.approx(10.0)
	assert context.renderer_model is model
	text = buffer.getvalue()
	assert text.startswith('context.font="16pt Arial";\n')
	assert "context.lineWidth=10;\n" in text
	assert "context.moveTo(10,60); context.lineTo(110,60); context.stroke();\n" in text
	assert "context.arc(110,60," in text


#============================================
def test_paint_without_fit_keeps_scale():
	buffer = io.StringIO()
	visitor = canvas_draw.CanvasDrawVisitor(buffer)
	model = renderer_model.RendererModel(scale=2.0)
	renderer.paint(_tree(), visitor, (0, 0, 120, 120), model=model, fit=False)
	text = buffer.getvalue()
	assert model.get_parameter("scale") == 2.0
	assert "context.lineWidth=2;\n" in text
	assert "context.moveTo(50,60); context.lineTo(70,60); context.stroke();\n" in text


#============================================
def test_paint_empty_tree_writes_only_font():
	buffer = io.StringIO()
	visitor = canvas_draw.CanvasDrawVisitor(buffer)
	model = renderer_model.RendererModel()
	renderer.paint(render_elements.ElementGroup(), visitor, (0, 0, 100, 100), model=model)
	assert buffer.getvalue() == 'context.font="16pt Arial";\n'
	assert model.get_parameter("scale") == 1.0


#============================================
def test_renderer_model_rejects_unknown_parameters():
	with pytest.raises(ValueError):
		renderer_model.RendererModel(bond_length=30)
	model = renderer_model.RendererModel()
	with pytest.raises(ValueError):
		model.get_parameter("bond_length")
	model.set_parameter("zoom_factor", 1.5)
	assert model.parameters()["zoom_factor"] == 1.5
