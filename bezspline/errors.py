class BezierError(Exception):
    """Base class for all errors raised by bezspline."""

class InvalidInput(BezierError, ValueError):
    """A curve, spline or parameter has the wrong shape or range."""

class AllocationFailure(BezierError, MemoryError):
    """Storage for a curve or spline could not be allocated."""

class IOFailure(BezierError, OSError):
    """A curve or spline file could not be written or read."""

class ReleasedError(BezierError, RuntimeError):
    """A curve or spline was used (or released) after it was released."""
