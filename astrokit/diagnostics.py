# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides a self consistency check of the rotation routines in :mod:`.rotations`.

The check rotates a vector about an axis two independent ways, once with Rodrigues' formula
(:func:`.axis_angle_rotation`) and once by applying the matrix from :func:`.axis_angle_rotation_to_rotation_matrix`,
and reports the residuals between them, both for a single configured angle and for a sweep of angles from 0 to 360
degrees.  It also checks the principal axis rotation :func:`.rotation_matrix` against a known answer.

The check is configured using :class:`ConsistencyCheckOptions`::

    >>> from astrokit.diagnostics import RotationConsistencyCheck, ConsistencyCheckOptions
    >>> check = RotationConsistencyCheck(options=ConsistencyCheckOptions(angle=2.5, sweep_step_degrees=45))
    >>> report = check.run()
    >>> report.passed
    True

Any residual larger than the configured tolerance results in a :class:`UserWarning` being issued, and
:attr:`.ConsistencyReport.passed` being ``False``.

This is also available from the command line as ``astrokit-vector-test`` (see :mod:`.scripts.vector_test`).
"""

import warnings

from dataclasses import dataclass

from typing import Tuple

import numpy as np

from astrokit._typing import DOUBLE_ARRAY
from astrokit.rotations import axis_angle_rotation, axis_angle_rotation_to_rotation_matrix, rotation_matrix, Axis
from astrokit.utilities.options import UserOptions
from astrokit.utilities.mixin_classes import UserOptionConfigured


PRINCIPAL_AXIS_ANGLE: float = np.pi / 4
"""
The angle used for the principal axis rotation check in radians
"""

PRINCIPAL_AXIS_EXPECTED: DOUBLE_ARRAY = np.array([1., -1., 0.])
"""
The expected result of rotating ``[1/cos(pi/4), 0, 0]`` by ``pi/4`` about the z axis
"""


@dataclass
class ConsistencyCheckOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.RotationConsistencyCheck` class.

    You can set any of the options on an instance of this dataclass and pass it to the
    :class:`.RotationConsistencyCheck` class at initialization (or through the method
    :meth:`.UserOptions.apply_options`) to set the settings on the class.
    """

    vector: Tuple[float, float, float] = (1.2, 3.0, -5.0)
    """
    The vector that is rotated
    """

    axis: Tuple[float, float, float] = (-0.1, 16.2, 2.1)
    """
    The axis the vector is rotated about.  This does not need to be unit length.
    """

    angle: float = 0.123
    """
    The angle to rotate by for the single case in radians
    """

    sweep_step_degrees: float = 10
    """
    The step size between angles for the 0-360 degree sweep in degrees.
    """

    tolerance: float = 1e-9
    """
    The largest residual that is considered consistent
    """


@dataclass
class ConsistencyReport:
    """
    The results of a :meth:`.RotationConsistencyCheck.run` call.
    """

    vector: DOUBLE_ARRAY
    """
    The vector that was rotated
    """

    rodrigues_result: DOUBLE_ARRAY
    """
    The rotated vector for the single case using :func:`.axis_angle_rotation`
    """

    matrix_result: DOUBLE_ARRAY
    """
    The rotated vector for the single case using :func:`.axis_angle_rotation_to_rotation_matrix`
    """

    sweep_angles: DOUBLE_ARRAY
    """
    The angles used for the sweep in radians
    """

    sweep_residuals: DOUBLE_ARRAY
    """
    The norm of the difference between the two rotation methods for each sweep angle
    """

    principal_axis_result: DOUBLE_ARRAY
    """
    The result of the principal axis check.  This should be approximately ``[1, -1, 0]``.
    """

    passed: bool
    """
    Whether every residual was within the tolerance
    """

    @property
    def single_residual(self) -> DOUBLE_ARRAY:
        """
        The difference between the matrix result and the Rodrigues result for the single case
        """

        return self.matrix_result - self.rodrigues_result

    def __str__(self) -> str:

        lines = ['Single test:',
                 '',
                 '  v1   : {}'.format(self.vector),
                 '  v2   : {}'.format(self.rodrigues_result),
                 '  v3   : {}'.format(self.matrix_result),
                 '  Error: {}'.format(self.single_residual),
                 '',
                 '0-360 test:',
                 '']

        for angle, residual in zip(self.sweep_angles, self.sweep_residuals):
            lines.append('  {:6.1f} deg  Error: {:.3e}'.format(np.rad2deg(angle), residual))

        lines.extend(['',
                      'z-axis rotation test:',
                      '',
                      '  {}  (should be [1, -1, 0])'.format(self.principal_axis_result),
                      '',
                      'PASSED' if self.passed else 'FAILED'])

        return '\n'.join(lines)


class RotationConsistencyCheck(UserOptionConfigured[ConsistencyCheckOptions], ConsistencyCheckOptions):
    """
    This class checks that the axis-angle rotation routines agree with one another.

    The settings are controlled by :class:`.ConsistencyCheckOptions`, which are applied as attributes of this class.
    Use :meth:`reset_settings` to return to the settings the instance was created with.
    """

    def __init__(self, options: ConsistencyCheckOptions | None = None):
        """
        :param options: The options to configure the check with.  If ``None`` the defaults are used.
        """

        super().__init__(ConsistencyCheckOptions, options=options)

    def _rotate_both_ways(self, theta: float) -> Tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
        """
        Rotate the configured vector about the configured axis by theta using both methods.

        :param theta: The angle to rotate by in radians
        :return: The Rodrigues result and the matrix result
        """

        vector = np.asarray(self.vector, dtype=np.float64)

        rodrigues = axis_angle_rotation(vector, self.axis, theta)
        matrix = axis_angle_rotation_to_rotation_matrix(self.axis, theta) @ vector

        return rodrigues, matrix

    def sweep_angles(self) -> DOUBLE_ARRAY:
        """
        The angles from 0 to 360 degrees (inclusive when the step divides 360) in radians.

        :return: The sweep angles in radians
        :raises ValueError: if :attr:`sweep_step_degrees` is not positive
        """

        if self.sweep_step_degrees <= 0:
            raise ValueError('sweep_step_degrees must be positive (got {})'.format(self.sweep_step_degrees))

        return np.deg2rad(np.arange(0, 360 + self.sweep_step_degrees / 2, self.sweep_step_degrees))

    def sweep(self) -> Tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
        """
        Compute the residual norm between the two rotation methods for each sweep angle.

        :return: The sweep angles in radians and the corresponding residual norms
        """

        angles = self.sweep_angles()

        residuals = []
        for theta in angles:
            rodrigues, matrix = self._rotate_both_ways(theta)
            residuals.append(np.linalg.norm(matrix - rodrigues))

        return angles, np.array(residuals)

    @staticmethod
    def principal_axis_case() -> DOUBLE_ARRAY:
        """
        Rotate ``[1/cos(pi/4), 0, 0]`` by ``pi/4`` about the z axis using :func:`.rotation_matrix`.

        :return: The rotated vector, which should be approximately ``[1, -1, 0]``
        """

        vector = np.array([1 / np.cos(PRINCIPAL_AXIS_ANGLE), 0., 0.])

        return rotation_matrix(Axis.Z, PRINCIPAL_AXIS_ANGLE) @ vector

    def run(self) -> ConsistencyReport:
        """
        Perform all of the checks and collect the results.

        A :class:`UserWarning` is issued for each check whose residual exceeds :attr:`tolerance`.

        :return: The report of the check results
        """

        rodrigues, matrix = self._rotate_both_ways(self.angle)

        angles, residuals = self.sweep()

        principal = self.principal_axis_case()

        passed = True

        single_error = np.linalg.norm(matrix - rodrigues)
        if single_error > self.tolerance:
            warnings.warn('The rotation methods disagree by {:.3e} for angle {}'.format(single_error, self.angle))
            passed = False

        for theta in angles[residuals > self.tolerance]:
            warnings.warn('The rotation methods disagree for sweep angle {:.1f} deg'.format(np.rad2deg(theta)))
            passed = False

        principal_error = np.linalg.norm(principal - PRINCIPAL_AXIS_EXPECTED)
        if principal_error > self.tolerance:
            warnings.warn('The z axis rotation is off from [1, -1, 0] by {:.3e}'.format(principal_error))
            passed = False

        return ConsistencyReport(vector=np.asarray(self.vector, dtype=np.float64),
                                 rodrigues_result=rodrigues,
                                 matrix_result=matrix,
                                 sweep_angles=angles,
                                 sweep_residuals=residuals,
                                 principal_axis_result=principal,
                                 passed=passed)
