"""
This module defines the exceptions raised by astrokit when a routine is handed input it cannot work with.

Both exceptions subclass :class:`ValueError` so that code which already guards against ``ValueError`` continues to
work.

Note that zero length (degenerate) vectors are never considered errors.  See :func:`.unit` for details.
"""


class DimensionMismatchError(ValueError):
    """
    Raised when an input does not have the length/shape a routine requires.

    For instance, this is raised when :func:`.cross` is given something other than 3 element vectors, or when
    :func:`.vector_projection` is given two vectors of different lengths.
    """


class InvalidAxisError(ValueError):
    """
    Raised when a principal axis selector is not one of x, y, or z.

    See :func:`.interp_axis` for the accepted selectors.
    """
