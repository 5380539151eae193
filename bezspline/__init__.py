'''
# bezspline

Fit piecewise Bezier splines through ordered 1-D samples and evaluate them at
arbitrary resolution, e.g. to smooth a sampled trajectory.

 - curve: the Curve sample container, and reading/writing curves as text files.
 - basis: the constant basis matrix and the per-segment basis transform.
 - spline: the Spline coefficient container; geometry-matrix construction,
   spline fitting, polynomial evaluation and resampling.
 - datafile: reading and writing delimited numeric text files.
 - errors: the exception classes raised by the above.
'''

from .errors import BezierError, InvalidInput, AllocationFailure, IOFailure, ReleasedError
from .curve import Curve, dump_curve, load_curve
from .basis import BASIS, DEGREE, WIDTH, segment, coefficients
from .spline import (Spline, gmatrix, fit_spline, polynomial, evaluate, resample,
    dump_spline, load_spline_coefficients)
