"""
Unit tests for the Placement model.
"""
import pytest

from image_pdf_toolkit.core.models import Placement


def test_edges_and_aspect_ratio():
    p = Placement(width=210.0, height=157.5, x=0.0, y=69.75)
    assert p.right == 210.0
    assert p.bottom == pytest.approx(227.25)
    assert p.aspect_ratio == pytest.approx(800 / 600)


def test_zero_height_has_zero_aspect_ratio():
    assert Placement(width=10, height=0, x=0, y=0).aspect_ratio == 0.0


@pytest.mark.parametrize("width,height", [(-1, 10), (10, -0.5)])
def test_negative_size_rejected(width, height):
    with pytest.raises(ValueError):
        Placement(width=width, height=height, x=0, y=0)


class TestFitsWithin:
    def test_full_page_fits(self):
        assert Placement(width=210, height=297, x=0, y=0).fits_within(210, 297)

    def test_overflow_detected(self):
        assert not Placement(width=211, height=297, x=0, y=0).fits_within(210, 297)
        assert not Placement(width=100, height=100, x=-1, y=0).fits_within(210, 297)
        assert not Placement(width=100, height=100, x=0, y=200).fits_within(210, 297)

    def test_rounding_error_tolerated(self):
        p = Placement(width=210.0000000001, height=297, x=0, y=0)
        assert p.fits_within(210, 297)
        assert not p.fits_within(210, 297, tolerance=0.0)
