"""Basis transform: convert windows of raw curve samples into polynomial
coefficients by multiplication with a constant basis matrix.

Each segment is transformed independently of the others.
"""
import numpy

from .errors import InvalidInput

DEGREE = 4
WIDTH = DEGREE + 1

# quartic Bezier basis matrix
BASIS = numpy.array([
    [ 1,  -4,   6,  4,  1],
    [-4,  12, -12,  4,  0],
    [ 6, -12,   6,  0,  0],
    [-4,   4,   0,  0,  0],
    [ 1,   0,   0,  0,  0]], dtype=float)
BASIS.flags.writeable = False

def segment(geometry, out=None):
    """Compute the coefficients for one segment from its geometry row.

    Parameters:
        geometry: WIDTH consecutive curve samples.
        out: optional float64 array of length WIDTH to write the result into.

    Returns: array of WIDTH coefficients, BASIS . geometry
    """
    geometry = numpy.asarray(geometry, dtype=float)
    if geometry.shape != (WIDTH,):
        raise InvalidInput('Geometry row must have {} values, got shape {}.'.format(WIDTH, geometry.shape))
    if out is None:
        return BASIS.dot(geometry)
    if out.shape != (WIDTH,):
        raise InvalidInput('Coefficient row must have {} values, got shape {}.'.format(WIDTH, out.shape))
    out[:] = BASIS.dot(geometry)
    return out

def coefficients(spline, geometry):
    """Fill a spline's coefficient rows from the matching rows of a geometry
    matrix (itself stored as a Spline, see spline.gmatrix).

    Parameters:
        spline: Spline to receive the coefficients.
        geometry: Spline holding one geometry row per segment.
    """
    if spline.num_segs != geometry.num_segs:
        raise InvalidInput('Spline has {} segments but the geometry matrix has {}.'.format(
            spline.num_segs, geometry.num_segs))
    for s_row, g_row in zip(spline.coeff, geometry.coeff):
        segment(g_row, out=s_row)
