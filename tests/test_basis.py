"""Tests for the basis transform."""

import numpy
import pytest

from bezspline.basis import BASIS, DEGREE, WIDTH, segment, coefficients
from bezspline.curve import Curve
from bezspline.errors import InvalidInput
from bezspline.spline import Spline, gmatrix


def test_basis_shape():
    assert DEGREE == 4
    assert WIDTH == 5
    assert BASIS.shape == (WIDTH, WIDTH)
    assert numpy.array_equal(BASIS[0], [1, -4, 6, 4, 1])
    assert numpy.array_equal(BASIS[:, 0], [1, -4, 6, -4, 1])


def test_basis_is_read_only():
    with pytest.raises(ValueError):
        BASIS[0, 0] = 2


def test_segment_unit_vectors_give_basis_columns():
    for j in range(WIDTH):
        g = numpy.zeros(WIDTH)
        g[j] = 1
        assert numpy.array_equal(segment(g), BASIS[:, j])


def test_segment_linear_ramp():
    # a ramp starting at a gives [8a+24, 0, 0, 4, a]
    for a in [0, 1, 3, -2.5]:
        g = a + numpy.arange(WIDTH)
        assert numpy.allclose(segment(g), [8*a + 24, 0, 0, 4, a])


def test_segment_is_linear():
    rng = numpy.random.default_rng(0)
    g1 = rng.normal(size=WIDTH)
    g2 = rng.normal(size=WIDTH)
    assert numpy.allclose(segment(3.5 * g1), 3.5 * segment(g1))
    assert numpy.allclose(segment(g1 + g2), segment(g1) + segment(g2))


def test_segment_into_output_row():
    out = numpy.full(WIDTH, 99.0)
    result = segment([1, 1, 1, 1, 1], out=out)
    assert result is out
    assert numpy.array_equal(out, BASIS.sum(axis=1))


def test_segment_rejects_wrong_width():
    with pytest.raises(InvalidInput):
        segment([1, 2, 3, 4])
    with pytest.raises(InvalidInput):
        segment([1, 2, 3, 4, 5], out=numpy.zeros(4))


def test_coefficients_maps_segment_over_rows():
    rng = numpy.random.default_rng(1)
    curve = Curve.from_samples(rng.normal(size=12))
    geometry = gmatrix(Spline(curve), curve)
    spline = Spline(curve)
    coefficients(spline, geometry)
    for i in range(spline.num_segs):
        assert numpy.allclose(spline.coeff[i], segment(geometry.coeff[i]))


def test_coefficients_rejects_mismatched_segment_counts():
    spline = Spline(Curve(8))
    geometry = Spline(Curve(9))
    with pytest.raises(InvalidInput):
        coefficients(spline, geometry)
