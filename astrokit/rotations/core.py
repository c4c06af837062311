# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the routines for rotating vectors and for building rotation matrices.

There are two independent ways to rotate a vector :math:`\mathbf{v}` about an axis :math:`\mathbf{k}` by an angle
:math:`\theta` provided here.  The first, :func:`axis_angle_rotation`, applies Rodrigues' rotation formula directly to
the vector.  The second, :func:`axis_angle_rotation_to_rotation_matrix`, builds the equivalent rotation matrix which can
then be applied to any number of vectors using matrix multiplication.  The two are numerically consistent to within
floating point rounding::

    >>> import numpy as np
    >>> from astrokit.rotations import axis_angle_rotation, axis_angle_rotation_to_rotation_matrix
    >>> v, k, theta = [1.2, 3.0, -5.0], [-0.1, 16.2, 2.1], 0.123
    >>> np.allclose(axis_angle_rotation(v, k, theta), axis_angle_rotation_to_rotation_matrix(k, theta) @ v)
    True

The elementary rotations about the principal axes are provided by :func:`rotation_matrix`.

All angles are in units of radians.  No normalization of the angles is performed (or required).
"""


import numpy as np

from astrokit._typing import ARRAY_LIKE, ARRAY_LIKE_2D, DOUBLE_ARRAY, SCALAR_OR_ARRAY, AXIS_LIKE
from astrokit.exceptions import DimensionMismatchError
from astrokit.rotations.axes import Axis, interp_axis
from astrokit.vectors import unit, cross, _check_first_axis, _check_vector


__all__ = ['axis_angle_rotation', 'cross_matrix', 'axis_angle_rotation_to_rotation_matrix', 'rotation_matrix',
           'is_rotation_matrix']


def axis_angle_rotation(vector: ARRAY_LIKE, axis: ARRAY_LIKE, theta: float) -> DOUBLE_ARRAY:
    r"""
    This function rotates a vector about an axis by an angle using Rodrigues' rotation formula.

    The rotated vector is computed according to

    .. math::
        \mathbf{v}_{rot}=\mathbf{v}\text{cos}(\theta)+(\hat{\mathbf{k}}\times\mathbf{v})\text{sin}(\theta)+
        \hat{\mathbf{k}}(\hat{\mathbf{k}}\cdot\mathbf{v})(1-\text{cos}(\theta))

    where :math:`\mathbf{v}` is the vector to rotate, :math:`\hat{\mathbf{k}}` is the unit vector of the rotation axis,
    and :math:`\theta` is the angle to rotate by in radians.

    The rotation axis does not need to be unit length.  If it is the zero vector then :math:`\hat{\mathbf{k}}` is the
    zero vector (see :func:`.unit`) and the result is :math:`\mathbf{v}\text{cos}(\theta)`, that is, the vector is
    scaled but not rotated.

    ``vector`` can also be a 3xn array, in which case each column is rotated about the same axis.

    :param vector: The vector(s) to rotate
    :param axis: The 3 element axis to rotate about
    :param theta: The angle to rotate by in radians
    :return: The rotated vector(s)
    :raises DimensionMismatchError: if the axis is not a 3 element vector or the first axis of vector is not length 3
    """

    vector = np.asarray(vector, dtype=np.float64)
    axis = np.asarray(axis, dtype=np.float64)

    _check_first_axis(vector, 'vector')
    _check_vector(axis, 'axis')

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    khat = unit(axis)

    # shape the axis so it broadcasts against column vectors
    khat_columns = khat.reshape((3,) + (1,) * (vector.ndim - 1))

    return vector * ctheta + cross(khat, vector) * stheta + khat_columns * (khat @ vector) * (1 - ctheta)


def cross_matrix(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the skew symmetric cross product matrix for a vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    where :math:`\times` indicates the cross product and :math:`\left[\bullet\times\right]` is the skew symmetric cross
    product matrix.  The matrix is antisymmetric (its transpose is its negative) with a zero diagonal.

    This function is vectorized, therefore you can input multiple vectors as a 3xn array where each column is an
    independent vector.  The resulting output will be nx3x3 where the first axis stores each matrix.

    :param vector: The vector(s) to compute the cross product matrix for
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    :raises DimensionMismatchError: if the first axis of vector is not length 3
    """

    vector = np.asarray(vector, dtype=np.float64)

    _check_first_axis(vector, 'vector')

    if vector.ndim > 1:
        zeros = np.zeros(vector.shape[-1])

        return np.array([zeros, -vector[2], vector[1],
                         vector[2], zeros, -vector[0],
                         -vector[1], vector[0], zeros]).T.reshape(-1, 3, 3)

    return np.array([[0., -vector[2], vector[1]],
                     [vector[2], 0., -vector[0]],
                     [-vector[1], vector[0], 0.]])


def axis_angle_rotation_to_rotation_matrix(axis: ARRAY_LIKE, theta: float) -> DOUBLE_ARRAY:
    r"""
    This function computes the rotation matrix corresponding to a rotation about an axis by an angle.

    The rotation matrix is

    .. math::
        \mathbf{T}=\mathbf{I}_{3\times 3}+\text{sin}(\theta)\mathbf{W}+(1-\text{cos}(\theta))\mathbf{W}^2
        =\text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\mathbf{W}+
        (1-\text{cos}(\theta))\hat{\mathbf{k}}\hat{\mathbf{k}}^T

    where :math:`\mathbf{W}=\left[\hat{\mathbf{k}}\times\right]` is the cross product matrix of the unit rotation axis
    (see :func:`cross_matrix`) and :math:`\mathbf{I}_{3\times 3}` is the identity matrix.  The two forms are identical
    for a unit axis since :math:`\mathbf{W}^2=\hat{\mathbf{k}}\hat{\mathbf{k}}^T-\mathbf{I}_{3\times 3}`.  The second
    form is the one evaluated, which makes ``T @ v`` agree with :func:`axis_angle_rotation` for every ``v``, including
    when the axis is the zero vector (in which case :math:`\mathbf{T}=\text{cos}(\theta)\mathbf{I}_{3\times 3}`).

    For any nonzero axis the result is orthogonal with a determinant of 1.

    :param axis: The 3 element axis to rotate about
    :param theta: The angle to rotate by in radians
    :return: The 3x3 rotation matrix
    :raises DimensionMismatchError: if the axis is not a 3 element vector
    """

    axis = np.asarray(axis, dtype=np.float64)

    _check_vector(axis, 'axis')

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    khat = unit(axis)

    return ctheta * np.eye(3) + stheta * cross_matrix(khat) + (1 - ctheta) * np.outer(khat, khat)


def rotation_matrix(axis: AXIS_LIKE, theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function returns the elementary rotation matrix for a rotation of the coordinate frame about a principal axis.

    The matrices are defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & \text{sin}(\theta) \\
        0 & -\text{sin}(\theta) & \text{cos}(\theta) \end{array}\right] \\
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & -\text{sin}(\theta) \\
        0 & 1 & 0 \\
        \text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right] \\
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & \text{sin}(\theta) & 0 \\
        -\text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    so that ``rotation_matrix(axis, theta) @ v`` expresses :math:`\mathbf{v}` in a frame that has been rotated by
    :math:`\theta` about ``axis`` following the right hand rule.  This is the transpose of the matrix you would get from
    :func:`axis_angle_rotation_to_rotation_matrix` for the same axis and angle.  For example::

        >>> import numpy as np
        >>> from astrokit.rotations import rotation_matrix, Axis
        >>> rotation_matrix(Axis.Z, np.pi/4) @ [np.sqrt(2), 0, 0]
        array([ 1., -1.,  0.])

    The axis can be given as an :class:`.Axis` member, one of ``'x'``, ``'y'``, ``'z'``, or one of ``1``, ``2``,
    ``3`` (see :func:`.interp_axis`).

    Theta can be a scalar or a vector.  If theta is a vector then each theta value will have a corresponding rotation
    matrix down the first axis of the output.

    :param axis: The principal axis to rotate about
    :param theta: The angle(s) to form the rotation matrix(ces) for in radians
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    :raises InvalidAxisError: if axis is not one of the x, y, or z axes
    """

    axis = interp_axis(axis)

    # ensure we have an array of theta(s)
    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    if axis is Axis.X:
        elements = [ones, zeros, zeros, zeros, ctheta, stheta, zeros, -stheta, ctheta]
    elif axis is Axis.Y:
        elements = [ctheta, zeros, -stheta, zeros, ones, zeros, stheta, zeros, ctheta]
    else:
        elements = [ctheta, stheta, zeros, -stheta, ctheta, zeros, zeros, zeros, ones]

    # form and return the matrix(ces)
    return np.vstack(elements).T.reshape(-1, 3, 3).squeeze()


def is_rotation_matrix(matrix: ARRAY_LIKE_2D, tolerance: float = 1e-10) -> bool:
    r"""
    This function checks whether a matrix is a proper rotation matrix.

    A proper rotation matrix is orthogonal (:math:`\mathbf{T}\mathbf{T}^T=\mathbf{I}`) and has a determinant of
    :math:`+1`.  Both conditions are checked to within the absolute ``tolerance``.

    :param matrix: The 3x3 matrix to check
    :param tolerance: The absolute tolerance to use for the checks
    :return: ``True`` if the matrix is a rotation matrix to within the tolerance
    :raises DimensionMismatchError: if the matrix is not 3x3
    """

    matrix = np.asarray(matrix, dtype=np.float64)

    if matrix.shape != (3, 3):
        raise DimensionMismatchError('The matrix must be 3x3 (got shape {})'.format(matrix.shape))

    orthogonal = np.allclose(matrix @ matrix.T, np.eye(3), rtol=0, atol=tolerance)

    return bool(orthogonal and abs(np.linalg.det(matrix) - 1) <= tolerance)
