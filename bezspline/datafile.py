import pathlib

from .errors import IOFailure

def format_value(value):
    """Format a number in the minimal-precision '%g' style."""
    return '%g' % value

def write_delimited(path, data, delimiter=','):
    """Write a list of lists (or iterable of iterables) of numbers to a
    delimited file, one row per line.

    Each value is written in '%g' format. Rows of a single value produce one
    number per line.

    Raises IOFailure if the file cannot be written. If the file could not be
    opened, any existing file at 'path' is left alone; if writing failed after
    opening, the half-written file is removed before the error propagates."""
    path = pathlib.Path(path)
    try:
        f = path.open('w')
    except OSError as e:
        raise IOFailure('could not write {}: {}'.format(path, e.strerror or e)) from e
    try:
        with f:
            for row in data:
                f.write(delimiter.join(map(format_value, row)) + '\n')
    except OSError as e:
        # this call truncated the file: remove the partial contents if the
        # directory allows it
        try:
            path.unlink()
        except OSError:
            pass
        raise IOFailure('could not write {}: {}'.format(path, e.strerror or e)) from e
    return path

def read_delimited(path, delimiter=','):
    """Read a delimited file of numbers into a list of lists of floats.

    Blank lines are skipped. Raises IOFailure if the file cannot be opened or
    contains a non-numeric value."""
    path = pathlib.Path(path)
    rows = []
    try:
        with path.open('r') as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue # skip blank lines
                try:
                    rows.append([float(val) for val in line.split(delimiter)])
                except ValueError as e:
                    raise IOFailure('{}, line {}: {}'.format(path, line_number, e)) from e
    except IOFailure:
        raise
    except OSError as e:
        raise IOFailure('could not read {}: {}'.format(path, e.strerror or e)) from e
    return rows
