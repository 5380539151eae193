import logging
import operator

import numpy

from . import datafile
from .errors import AllocationFailure, InvalidInput, IOFailure, ReleasedError

logger = logging.getLogger(__name__)

CURVE_FILE = 'curve.txt'

class Curve:
    """A sequence of scalar samples: the input to a spline fit, or the
    output buffer filled by evaluating a spline.

    Samples are stored as a 1-D float64 array in the 'x' attribute.

    A curve owns its storage until release() is called (or the 'with' block
    it is managing exits); any later use raises ReleasedError.

    Example:
        with Curve(10) as curve:
            curve.x[:] = numpy.linspace(0, 1, 10)
    """
    def __init__(self, length):
        try:
            length = operator.index(length)
        except TypeError as e:
            raise InvalidInput('Curve length must be an integer, not {!r}.'.format(length)) from e
        if length < 0:
            raise InvalidInput('Curve length must be >= 0, not {}.'.format(length))
        try:
            self._x = numpy.zeros(length, dtype=float)
        except MemoryError as e:
            raise AllocationFailure('Could not allocate a curve of {} samples.'.format(length)) from e
        self.len = length

    @classmethod
    def from_samples(cls, samples):
        """Create a curve holding a copy of the given 1-D samples."""
        samples = numpy.asarray(samples, dtype=float)
        if samples.ndim != 1:
            raise InvalidInput('Curve samples must be one-dimensional, got shape {}.'.format(samples.shape))
        curve = cls(len(samples))
        curve.x[:] = samples
        return curve

    @property
    def released(self):
        return self._x is None

    @property
    def x(self):
        if self._x is None:
            raise ReleasedError('Curve has been released.')
        return self._x

    def __len__(self):
        return self.len

    def __repr__(self):
        if self.released:
            return 'Curve(<released>)'
        return 'Curve({})'.format(self.len)

    def release(self):
        """Drop the sample storage and reset the length to zero."""
        if self._x is None:
            raise ReleasedError('Curve has already been released.')
        self._x = None
        self.len = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if not self.released:
            self.release()

    def dump(self, path=CURVE_FILE):
        """Write the samples to a text file, one per line.

        Failure to write is logged and reported by returning False; the curve
        itself is unaffected."""
        try:
            dump_curve(self, path)
        except IOFailure as e:
            logger.warning('failed to write curve to file: %s', e)
            return False
        return True

def dump_curve(curve, path=CURVE_FILE):
    """Write a curve's samples to 'path', one '%g'-formatted value per line.
    Raises IOFailure if the file cannot be written."""
    return datafile.write_delimited(path, ([value] for value in curve.x))

def load_curve(path=CURVE_FILE):
    """Read a curve written by dump_curve()."""
    rows = datafile.read_delimited(path)
    if any(len(row) != 1 for row in rows):
        raise IOFailure('{} does not contain one sample per line.'.format(path))
    return Curve.from_samples([row[0] for row in rows])
