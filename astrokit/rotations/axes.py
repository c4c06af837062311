"""
This module provides the :class:`Axis` enumeration used to select a principal coordinate axis, along with a helper to
interpret the different ways a user may specify an axis.
"""

from enum import Enum
from numbers import Integral

from astrokit._typing import AXIS_LIKE
from astrokit.exceptions import InvalidAxisError


class Axis(Enum):
    """
    This enumeration provides the principal coordinate axes that elementary rotations can be performed about.

    See :func:`.rotation_matrix` for more details.
    """

    X = "x"
    """
    The first (x) axis
    """

    Y = "y"
    """
    The second (y) axis
    """

    Z = "z"
    """
    The third (z) axis
    """


_AXIS_NUMBERS = {1: Axis.X, 2: Axis.Y, 3: Axis.Z}


def interp_axis(axis: AXIS_LIKE) -> Axis:
    """
    This function interprets a principal axis selector and returns the corresponding :class:`Axis` member.

    The axis can be specified as an :class:`Axis` member, as one of the strings ``'x'``, ``'y'``, or ``'z'`` (case
    insensitive), or as one of the integers ``1``, ``2``, or ``3``.

        >>> from astrokit.rotations import interp_axis
        >>> interp_axis('Z')
        <Axis.Z: 'z'>
        >>> interp_axis(1)
        <Axis.X: 'x'>

    :param axis: The axis selector to interpret
    :return: The interpreted axis
    :raises InvalidAxisError: if the selector does not correspond to the x, y, or z axis
    """

    if isinstance(axis, Axis):
        return axis

    if isinstance(axis, str):
        try:
            return Axis(axis.lower())
        except ValueError:
            raise InvalidAxisError('Unknown axis {!r}.  The axis must be one of x, y, or z'.format(axis)) from None

    if isinstance(axis, Integral) and not isinstance(axis, bool):
        if int(axis) in _AXIS_NUMBERS:
            return _AXIS_NUMBERS[int(axis)]

    raise InvalidAxisError('Unknown axis {!r}.  The axis must be one of x, y, or z'.format(axis))
