"""Fit piecewise Bezier splines to curves and evaluate them.

A spline is fit to a curve of L samples by sliding a window of WIDTH (=DEGREE+1)
samples along the curve, giving L - DEGREE segments. Each window (a row of the
"geometry matrix") is multiplied by the constant basis matrix to give that
segment's polynomial coefficients. The first and last points of the curve are
not connected to the spline.

Each segment is evaluated as the cubic
    coeff[0]*t**3 + coeff[1]*t**2 + coeff[2]*t + coeff[3]
for t in [0, 1]. Note that the basis product yields WIDTH coefficients per
segment, of which only the first four are used by the evaluator; the fifth is
computed and stored but never evaluated.

Example:
    curve = Curve.from_samples(samples)
    solution, spline = resample(curve, resolution=10)
"""
import logging

import numpy

from . import basis
from . import datafile
from .basis import DEGREE, WIDTH
from .curve import Curve
from .errors import AllocationFailure, InvalidInput, IOFailure, ReleasedError

logger = logging.getLogger(__name__)

SPLINE_FILE = 'spline.txt'
# number of coefficients per segment consumed by polynomial()
EVALUATED_COEFFICIENTS = 4

class Spline:
    """Per-segment polynomial coefficients derived from a curve.

    Attributes:
        curve: the Curve this spline was built from (not owned: releasing the
            spline leaves the curve alone, and vice versa).
        num_segs: number of segments, len(curve) - DEGREE.
        len: total number of coefficients, num_segs * WIDTH.
        coeff: contiguous array of shape (num_segs, WIDTH); coeff[i] is the
            coefficient row of segment i.

    The coefficients are zero until filled by fit_spline() (or by gmatrix(),
    when the spline is used to hold a geometry matrix).
    """
    def __init__(self, curve):
        if curve.released:
            raise ReleasedError('Cannot build a spline from a released curve.')
        if curve.len < WIDTH:
            raise InvalidInput('A curve of {} samples is too short to fit: at least {} are required.'.format(
                curve.len, WIDTH))
        num_segs = curve.len - DEGREE
        try:
            self._coeff = numpy.zeros((num_segs, WIDTH), dtype=float)
        except MemoryError as e:
            raise AllocationFailure('Could not allocate a spline of {} segments.'.format(num_segs)) from e
        self.curve = curve
        self.num_segs = num_segs
        self.len = num_segs * WIDTH

    @property
    def released(self):
        return self._coeff is None

    @property
    def coeff(self):
        if self._coeff is None:
            raise ReleasedError('Spline has been released.')
        return self._coeff

    def __len__(self):
        return self.num_segs

    def __repr__(self):
        if self.released:
            return 'Spline(<released>)'
        return 'Spline(num_segs={})'.format(self.num_segs)

    def release(self):
        """Drop the coefficients and detach from the source curve. The curve
        itself is not released."""
        if self._coeff is None:
            raise ReleasedError('Spline has already been released.')
        self._coeff = None
        self.curve = None
        self.len = 0
        self.num_segs = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if not self.released:
            self.release()

    def dump(self, path=SPLINE_FILE):
        """Write the evaluated coefficients of each segment to a text file.

        Failure to write is logged and reported by returning False."""
        try:
            dump_spline(self, path)
        except IOFailure as e:
            logger.warning('failed to write spline to file: %s', e)
            return False
        return True

def gmatrix(geometry, curve):
    """Fill 'geometry' with the geometry matrix of 'curve': row i holds the
    samples curve.x[i:i+WIDTH].

    Parameters:
        geometry: Spline built from 'curve', used as storage for the matrix.
        curve: Curve to take the sample windows from.
    """
    num_segs = curve.len - DEGREE
    if geometry.num_segs != num_segs:
        raise InvalidInput('Geometry matrix has {} rows, but a curve of {} samples needs {}.'.format(
            geometry.num_segs, curve.len, num_segs))
    x = curve.x
    for i in range(num_segs):
        geometry.coeff[i] = x[i:i+WIDTH]
    return geometry

def fit_spline(curve, spline=None):
    """Compute the Bezier spline coefficients for every window of a curve.

    Parameters:
        curve: Curve of at least WIDTH samples.
        spline: Spline built from 'curve' to write the coefficients into. If
            None, a new one is created.

    Returns: the filled spline.
    """
    if spline is None:
        spline = Spline(curve)
    elif spline.released:
        raise ReleasedError('Cannot fit into a released spline.')
    elif spline.curve is not curve:
        raise InvalidInput('Spline was built from a different curve.')
    # the geometry matrix only lives for the duration of this call
    with Spline(curve) as geometry:
        gmatrix(geometry, curve)
        basis.coefficients(spline, geometry)
    logger.debug('fit %d spline segments to a curve of %d samples', spline.num_segs, curve.len)
    return spline

def _check_parameter(t):
    t = numpy.asarray(t, dtype=float)
    if not numpy.all((t >= 0) & (t <= 1)):
        raise InvalidInput('Parameter values must lie in [0, 1].')
    return t

def polynomial(coeff, t):
    """Evaluate one segment's cubic polynomial at parameter value(s) t.

    Parameters:
        coeff: coefficient row of a segment. Only the first four values are
            used: coeff[0]*t**3 + coeff[1]*t**2 + coeff[2]*t + coeff[3]
        t: scalar or array of parameter values in [0, 1].

    Returns: a float if t is a scalar, otherwise an array shaped like t.
    """
    coeff = numpy.asarray(coeff, dtype=float)
    if coeff.ndim != 1 or len(coeff) < EVALUATED_COEFFICIENTS:
        raise InvalidInput('Coefficient row must have at least {} values, got shape {}.'.format(
            EVALUATED_COEFFICIENTS, coeff.shape))
    t = _check_parameter(t)
    value = coeff[0]*t*t*t + coeff[1]*t*t + coeff[2]*t + coeff[3]
    if value.ndim == 0:
        return float(value)
    return value

def evaluate(spline, solution):
    """Evaluate a spline into a properly-sized solution curve.

    len(solution) must be a positive integer multiple of the number of spline
    segments. Each segment is evaluated at res = len(solution) / num_segs
    equally-spaced parameter values t = j/res, j = 0..res-1 (i.e. starting at
    zero and stopping short of one), and segment i fills solution.x[i*res:(i+1)*res].

    Returns: the solution curve.
    """
    coeff = spline.coeff
    x = solution.x
    num_segs = spline.num_segs
    if solution.len == 0 or solution.len % num_segs != 0:
        raise InvalidInput('Solution length ({}) must be a positive multiple of the number of segments ({}).'.format(
            solution.len, num_segs))
    res = solution.len // num_segs
    t = numpy.arange(res) / res
    # same arithmetic as polynomial(), for all segments at once
    c = coeff[:, :EVALUATED_COEFFICIENTS, numpy.newaxis]
    values = c[:,0]*t*t*t + c[:,1]*t*t + c[:,2]*t + c[:,3]
    x[:] = values.ravel()
    logger.debug('evaluated %d segments at %d points each', num_segs, res)
    return solution

def resample(curve, resolution):
    """Fit a spline to a curve and evaluate it at 'resolution' points per segment.

    Returns: (solution, spline), where solution is a new Curve of
        spline.num_segs * resolution samples.
    """
    resolution = int(resolution)
    if resolution < 1:
        raise InvalidInput('Resolution must be at least 1, not {}.'.format(resolution))
    spline = fit_spline(curve)
    solution = Curve(spline.num_segs * resolution)
    evaluate(spline, solution)
    return solution, spline

def dump_spline(spline, path=SPLINE_FILE):
    """Write the first four coefficients of each segment to 'path', one
    comma-separated segment per line. Raises IOFailure if the file cannot be written."""
    return datafile.write_delimited(path, spline.coeff[:, :EVALUATED_COEFFICIENTS])

def load_spline_coefficients(path=SPLINE_FILE):
    """Read the coefficients written by dump_spline().

    Returns: array of shape (num_segs, 4)
    """
    rows = datafile.read_delimited(path)
    if any(len(row) != EVALUATED_COEFFICIENTS for row in rows):
        raise IOFailure('{} does not contain {} coefficients per line.'.format(path, EVALUATED_COEFFICIENTS))
    return numpy.array(rows, dtype=float).reshape(len(rows), EVALUATED_COEFFICIENTS)
