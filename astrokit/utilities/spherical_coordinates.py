"""
This module contains helper functions for transforming from/to spherical coordinates.
"""

from typing import Tuple, Union

import numpy as np

from astrokit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY
from astrokit.vectors import _check_first_axis


def spherical_to_cartesian(r: SCALAR_OR_ARRAY, azimuth: SCALAR_OR_ARRAY, elevation: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This utility converts (a) magnitude, azimuth, and elevation triple(s) expressed in units of radians into (a)
    Cartesian vector(s).

    The conversion is given by:

    .. math::
        \mathbf{x}=r\left[\begin{array}{c}\text{cos}(\alpha)\text{cos}(\delta)\\
        \text{sin}(\alpha)\text{cos}(\delta)\\
        \text{sin}(\delta)\end{array}\right]

    where :math:`r` is the magnitude, :math:`\alpha` is the azimuth (right ascension), :math:`\delta` is the elevation
    (declination), and :math:`\mathbf{x}` is the resulting vector.  This is defined for all real inputs.

    This function performs broadcast rules using numpy conventions, therefore you can provide inputs with different
    shapes, so long as they are able to be broadcast (you could add them together and numpy wouldn't complain).  If you
    provide >1D arrays then they will be raveled using c convention.  When multiple conversions are performed, each
    vector is specified as a column in the array.

    :param r: The magnitude(s) of the vector(s)
    :param azimuth: The azimuth(s) in units of radians
    :param elevation: The elevation(s) in units of radians
    :return: A 3 element vector, or a 3xn array of vectors, corresponding to the input triple(s)
    """

    r, azimuth, elevation = np.broadcast_arrays(np.asarray(r, dtype=np.float64),
                                                np.asarray(azimuth, dtype=np.float64),
                                                np.asarray(elevation, dtype=np.float64))

    # ensure our arrays are flat
    r = r.ravel()
    azimuth = azimuth.ravel()
    elevation = elevation.ravel()

    x = r * np.cos(azimuth) * np.cos(elevation)
    y = r * np.sin(azimuth) * np.cos(elevation)
    z = r * np.sin(elevation)

    return np.vstack([x, y, z]).squeeze()


def cartesian_to_spherical(vector: ARRAY_LIKE) -> Union[Tuple[float, float, float],
                                                         Tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY]]:
    r"""
    This function converts (a) Cartesian vector(s) into magnitude, azimuth, and elevation.

    The azimuth is the angle between the x axis and the projection of the vector onto the xy-plane and is output
    between 0 and 2 pi.  The elevation is the angle between the xy-plane and the vector and is output between -pi/2 and
    pi/2 (positive values indicate the vector has a positive z component).  These are computed using

    .. math::
        r = \left\|\mathbf{x}\right\| \\
        \delta = \text{tan}^{-1}\left(\frac{z}{\sqrt{x^2+y^2}}\right) \\
        \alpha = \text{tan}^{-1}\left(\frac{y}{x}\right)

    The zero vector is converted to ``(0, 0, 0)``.

    Note that the vector input should be along the first axis (or as columns if there are multiple vectors).  If the
    input contains more than 1 vector then the output will be 3 arrays.  Otherwise the output will be 3 floats.

    :param vector: The vector(s) to convert
    :return: The magnitude(s), azimuth(s), and elevation(s) as a tuple with angles in units of radians
    :raises DimensionMismatchError: if the first axis of vector is not length 3
    """

    vector = np.asarray(vector, dtype=np.float64)

    _check_first_axis(vector, 'vector')

    x, y, z = vector

    r = np.sqrt(x ** 2 + y ** 2 + z ** 2)
    elevation = np.arctan2(z, np.hypot(x, y))
    azimuth = np.arctan2(y, x)

    # wrap the azimuth into [0, 2pi)
    azimuth = np.where(azimuth < 0, azimuth + 2 * np.pi, azimuth)

    if vector.ndim == 1:
        return float(r), float(azimuth), float(elevation)

    return r, azimuth, elevation
