# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This package defines the routines for rotating vectors and building rotation matrices in astrokit.

There are three ways to describe a rotation used in this package:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
axis-angle         A 3 element axis :math:`\mathbf{k}` (of any nonzero length) and an angle :math:`\theta` in radians to
                   rotate about the axis following the right hand rule.  Used directly by
                   :func:`.axis_angle_rotation` (Rodrigues' formula) and converted to a matrix by
                   :func:`.axis_angle_rotation_to_rotation_matrix`.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` with a determinant of 1 such that
                   :math:`\mathbf{T}\mathbf{v}` is the rotated vector.
principal axis     One of the :class:`.Axis` members and an angle.  :func:`.rotation_matrix` returns the matrix that
                   rotates the coordinate frame about the axis by the angle.
=================  =====================================================================================================

In addition, :func:`.cross_matrix` provides the skew symmetric matrix form of the cross product which is the building
block of the axis-angle rotation matrix.
"""

import astrokit.rotations.axes
import astrokit.rotations.core

from astrokit.rotations.axes import Axis, interp_axis
from astrokit.rotations.core import *

__all__ = ['axis_angle_rotation', 'cross_matrix', 'axis_angle_rotation_to_rotation_matrix', 'rotation_matrix',
           'is_rotation_matrix', 'Axis', 'interp_axis']
