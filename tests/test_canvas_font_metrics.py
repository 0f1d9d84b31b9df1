"""Tests for font descriptors and text metrics providers."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_canvasdraw_to_sys_path()

# local repo modules
from canvasdraw import font_manager


#============================================
def test_estimated_defaults():
	manager = font_manager.EstimatedFontManager()
	assert manager.get_font() == font_manager.FontDescriptor(size=16, family="Arial")


#============================================
def test_estimated_metrics_follow_string():
	manager = font_manager.EstimatedFontManager(font_size=10)
	metrics = manager.text_metrics("Cl")
	assert metrics.width == pytest.approx((722 + 222) * 0.01)
	assert metrics.ascent == pytest.approx(7.18)
	assert metrics.height == pytest.approx(9.25)
	assert manager.text_metrics("W").width > manager.text_metrics("I").width
	assert manager.text_metrics("").width == 0


#============================================
def test_estimated_metrics_scale_with_font_size():
	small = font_manager.EstimatedFontManager(font_size=8).text_metrics("NH2")
	large = font_manager.EstimatedFontManager(font_size=16).text_metrics("NH2")
	assert large.width == pytest.approx(2 * small.width)
	assert large.height == pytest.approx(2 * small.height)


#============================================
def test_estimated_options_are_validated():
	with pytest.raises(ValueError):
		font_manager.EstimatedFontManager(font_weight="bold")
	with pytest.raises(ValueError):
		font_manager.EstimatedFontManager(font_size=0)


#============================================
def test_cairo_metrics():
	pytest.importorskip("cairo")
	from canvasdraw import cairo_metrics
	manager = cairo_metrics.CairoFontManager(font_size=20, font_name="sans-serif")
	assert manager.get_font() == font_manager.FontDescriptor(size=20, family="sans-serif")
	metrics = manager.text_metrics("Cl")
	assert metrics.width > 0
	assert 0 < metrics.ascent <= metrics.height
	assert manager.text_metrics("WW").width > manager.text_metrics("W").width
