# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the basic vector algebra routines that the rest of astrokit (and the routines built on top of it)
rely on.

The routines are split into two groups.  The first group contains the primitives that work with 3 element vectors:

=================  =====================================================================================================
Function           Description
=================  =====================================================================================================
:func:`cross`      The cross product of two 3 element vectors (or 3xn arrays of column vectors)
:func:`unit`       The unit vector in the direction of a vector (or of each column of an array)
:func:`uhat_dot`   The time derivative of the unit vector of a vector given the vector and its time derivative
:func:`ucross`     The unit vector in the direction of the cross product of two vectors
=================  =====================================================================================================

The second group contains composite routines:

=========================  =============================================================================================
Function                   Description
=========================  =============================================================================================
:func:`outer_product`      The outer product :math:`\mathbf{a}\mathbf{b}^T` of two vectors of any length
:func:`box_product`        The scalar triple product :math:`\mathbf{a}\cdot(\mathbf{b}\times\mathbf{c})`
:func:`vector_projection`  The orthogonal projection of one vector onto another vector of the same length
=========================  =============================================================================================

Degenerate (zero length) vectors are never treated as errors.  Anywhere a direction is required from a zero length
vector (:func:`unit`, :func:`uhat_dot`, :func:`ucross`, and :func:`vector_projection`) the zero vector is returned
instead of dividing by zero.  If you need to know whether this happened, each of these functions accepts a
``return_degenerate`` flag which causes a boolean (or boolean array) to be returned alongside the result.  You can also
check directly using :func:`is_degenerate`.

Inputs that do not have the required length raise a :class:`.DimensionMismatchError`.
"""

from typing import Optional, Union, Tuple

import numpy as np

from astrokit._typing import ARRAY_LIKE, DOUBLE_ARRAY
from astrokit.exceptions import DimensionMismatchError


__all__ = ['cross', 'unit', 'is_degenerate', 'uhat_dot', 'ucross', 'outer_product', 'box_product',
           'vector_projection']


def _check_first_axis(array: np.ndarray, name: str, length: int = 3):
    """
    Raise a :class:`.DimensionMismatchError` if the first axis of ``array`` is not ``length`` long.

    :param array: The array to check
    :param name: The name of the argument for the error message
    :param length: The required length of the first axis
    :raises DimensionMismatchError: if the first axis is not the required length
    """

    if array.ndim == 0 or array.shape[0] != length:
        raise DimensionMismatchError('The length of the first axis of {} must be {} (got shape {})'.format(
            name, length, array.shape))


def _check_vector(array: np.ndarray, name: str, length: int = 3):
    """
    Raise a :class:`.DimensionMismatchError` if ``array`` is not a 1D array of ``length`` elements.

    :param array: The array to check
    :param name: The name of the argument for the error message
    :param length: The required number of elements
    :raises DimensionMismatchError: if the array is not 1D or not the required length
    """

    if array.shape != (length,):
        raise DimensionMismatchError('{} must be a {} element vector (got shape {})'.format(name, length,
                                                                                             array.shape))


def _norm(vector: np.ndarray, axis: Optional[int] = None, keepdims: bool = False) -> Union[float, np.ndarray]:
    """
    The Euclidean norm of ``vector`` computed with :func:`numpy.hypot` so that it neither overflows nor underflows.

    The result is exactly 0 only when every element is 0.

    :param vector: The array to compute the norm of
    :param axis: The axis to compute the norm along.  If ``None`` the array is flattened first
    :param keepdims: Whether to keep the reduced axis with length 1
    :return: The norm(s)
    """

    if axis is None:
        return float(np.hypot.reduce(vector.ravel()))

    return np.hypot.reduce(vector, axis=axis, keepdims=keepdims)


def cross(a: ARRAY_LIKE, b: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the cross product of two 3 element vectors.

    The cross product is defined as

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\begin{array}{c}a_2b_3-b_2a_3\\ a_3b_1-b_3a_1\\ a_1b_2-b_1a_2
        \end{array}\right]

    This function is defined for all inputs.  If :math:`\mathbf{a}` and :math:`\mathbf{b}` are parallel (or either is
    the zero vector) the result is the zero vector.

    This function is vectorized, therefore you can specify multiple vectors as a 3xn array where each column is an
    independent vector.  A single 3 element vector will be broadcast against a 3xn array.

    :param a: The left vector(s) of the cross product
    :param b: The right vector(s) of the cross product
    :return: The cross product(s) of a and b
    :raises DimensionMismatchError: if the first axis of either input is not length 3
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    _check_first_axis(a, 'a')
    _check_first_axis(b, 'b')

    try:
        np.broadcast_shapes(a.shape[1:], b.shape[1:])
    except ValueError:
        raise DimensionMismatchError('The columns of a and b cannot be paired (got shapes {} and {})'.format(
            a.shape, b.shape)) from None

    a1, a2, a3 = a
    b1, b2, b3 = b

    return np.array([a2 * b3 - b2 * a3,
                     a3 * b1 - b3 * a1,
                     a1 * b2 - b1 * a2])


def is_degenerate(vector: ARRAY_LIKE) -> Union[bool, np.ndarray]:
    """
    This function checks whether a vector has exactly zero length, in which case it has no direction.

    If ``vector`` is 2D then each column is checked independently and a boolean array is returned.

    :param vector: The vector(s) to check
    :return: ``True`` where the vector has zero length
    """

    vector = np.asarray(vector, dtype=np.float64)

    if vector.ndim > 1:
        return ~vector.any(axis=0)

    return not vector.any()


def unit(vector: ARRAY_LIKE,
         return_degenerate: bool = False) -> Union[DOUBLE_ARRAY, Tuple[DOUBLE_ARRAY, Union[bool, np.ndarray]]]:
    r"""
    This function returns the unit vector in the direction of ``vector``.

    The unit vector is computed as

    .. math::
        \hat{\mathbf{v}}=\frac{\mathbf{v}}{\left\|\mathbf{v}\right\|}

    If the vector has exactly zero length then the zero vector of the same length is returned instead of dividing by
    zero.  If the direction matters to you, set ``return_degenerate`` to ``True`` and check the returned flag.

    1D inputs can be of any length.  If ``vector`` is 2D then each column is normalized independently (and any zero
    columns are left as zero).

        >>> from astrokit.vectors import unit
        >>> unit([3, 0, 4])
        array([0.6, 0. , 0.8])
        >>> unit([0, 0, 0], return_degenerate=True)
        (array([0., 0., 0.]), True)

    :param vector: The vector(s) to normalize
    :param return_degenerate: A flag specifying whether to also return whether the input had zero length
    :return: The unit vector(s), and optionally the degenerate flag(s)
    """

    vector = np.asarray(vector, dtype=np.float64)

    if vector.ndim > 1:

        norms = _norm(vector, axis=0, keepdims=True)

        degenerate = (norms == 0).ravel()

        # leave the zero columns as zero
        result = np.divide(vector, norms, out=np.zeros_like(vector), where=norms != 0)

    else:

        norm = _norm(vector)

        degenerate = bool(norm == 0)

        if degenerate:
            result = np.zeros_like(vector)
        else:
            result = vector / norm

    if return_degenerate:
        return result, degenerate

    return result


def uhat_dot(u: ARRAY_LIKE, udot: ARRAY_LIKE,
             return_degenerate: bool = False) -> Union[DOUBLE_ARRAY, Tuple[DOUBLE_ARRAY, bool]]:
    r"""
    This function computes the time derivative of the unit vector of :math:`\mathbf{u}`.

    The derivative is given by

    .. math::
        \frac{d\hat{\mathbf{u}}}{dt}=\frac{\dot{\mathbf{u}}-(\hat{\mathbf{u}}\cdot\dot{\mathbf{u}})\hat{\mathbf{u}}}
        {\left\|\mathbf{u}\right\|}

    where :math:`\dot{\mathbf{u}}` is the time derivative of :math:`\mathbf{u}`.

    The unit vector map is singular at the origin, therefore if :math:`\mathbf{u}` has zero length the zero vector is
    returned.

    :param u: The 3 element vector
    :param udot: The time derivative of the vector
    :param return_degenerate: A flag specifying whether to also return whether u had zero length
    :return: The time derivative of the unit vector, and optionally the degenerate flag
    :raises DimensionMismatchError: if u or udot is not a 3 element vector
    """

    u = np.asarray(u, dtype=np.float64)
    udot = np.asarray(udot, dtype=np.float64)

    _check_vector(u, 'u')
    _check_vector(udot, 'udot')

    umag = _norm(u)

    degenerate = bool(umag == 0)

    if degenerate:
        result = np.zeros(3)
    else:
        uhat = u / umag
        result = (udot - (uhat @ udot) * uhat) / umag

    if return_degenerate:
        return result, degenerate

    return result


def ucross(a: ARRAY_LIKE, b: ARRAY_LIKE,
           return_degenerate: bool = False) -> Union[DOUBLE_ARRAY, Tuple[DOUBLE_ARRAY, Union[bool, np.ndarray]]]:
    """
    This function computes the unit vector in the direction of the cross product of ``a`` and ``b``.

    This is simply ``unit(cross(a, b))``, therefore if ``a`` and ``b`` are parallel, or either is the zero vector, the
    zero vector is returned.  See :func:`cross` and :func:`unit` for details.

    :param a: The left vector(s) of the cross product
    :param b: The right vector(s) of the cross product
    :param return_degenerate: A flag specifying whether to also return whether the cross product had zero length
    :return: The unit vector(s) of the cross product, and optionally the degenerate flag(s)
    :raises DimensionMismatchError: if the first axis of either input is not length 3
    """

    return unit(cross(a, b), return_degenerate=return_degenerate)


def outer_product(a: ARRAY_LIKE, b: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function computes the outer product of two vectors.

    The result is a matrix with as many rows as ``a`` has elements and as many columns as ``b`` has elements where

    .. math::
        \left(\mathbf{a}\mathbf{b}^T\right)_{ij}=a_ib_j

    There is no constraint between the lengths of ``a`` and ``b``.

    :param a: The first vector
    :param b: The second vector
    :return: The outer product matrix
    :raises DimensionMismatchError: if either input is not 1D
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    if a.ndim != 1 or b.ndim != 1:
        raise DimensionMismatchError('The outer product is only defined for 1D vectors (got shapes {} and {})'.format(
            a.shape, b.shape))

    return np.outer(a, b)


def box_product(a: ARRAY_LIKE, b: ARRAY_LIKE, c: ARRAY_LIKE) -> float:
    r"""
    This function computes the box product (scalar triple product) of three 3 element vectors.

    .. math::
        [\mathbf{a}\,\mathbf{b}\,\mathbf{c}]=\mathbf{a}\cdot(\mathbf{b}\times\mathbf{c})

    The box product is the signed volume of the parallelepiped spanned by the three vectors, so swapping any two of
    the vectors negates it.

    :param a: The first vector
    :param b: The second vector
    :param c: The third vector
    :return: The scalar triple product
    :raises DimensionMismatchError: if any of the inputs is not a 3 element vector
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    c = np.asarray(c, dtype=np.float64)

    _check_vector(a, 'a')
    _check_vector(b, 'b')
    _check_vector(c, 'c')

    return float(a @ cross(b, c))


def vector_projection(a: ARRAY_LIKE, b: ARRAY_LIKE,
                      return_degenerate: bool = False) -> Union[DOUBLE_ARRAY, Tuple[DOUBLE_ARRAY, bool]]:
    r"""
    This function computes the orthogonal projection of ``b`` onto ``a``.

    The projection is computed as

    .. math::
        \text{proj}_{\mathbf{a}}\mathbf{b}=\mathbf{a}\frac{\mathbf{a}\cdot\mathbf{b}}{\mathbf{a}\cdot\mathbf{a}}

    If ``a`` is the zero vector then there is nothing to project onto and the zero vector is returned.

    The vectors can be of any length, so long as they have the same length.

    :param a: The vector to project onto
    :param b: The vector to be projected
    :param return_degenerate: A flag specifying whether to also return whether a had zero length
    :return: The projection of b onto a, and optionally the degenerate flag
    :raises DimensionMismatchError: if the inputs are not 1D vectors of the same length
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    if a.ndim != 1 or a.shape != b.shape:
        raise DimensionMismatchError('a and b must be 1D vectors of the same length (got shapes {} and {})'.format(
            a.shape, b.shape))

    ahat, degenerate = unit(a, return_degenerate=True)

    # a (a.b)/(a.a) evaluated with the unit vector to avoid squaring the magnitude
    result = ahat * (ahat @ b)

    if return_degenerate:
        return result, degenerate

    return result
