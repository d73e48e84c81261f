import glmath.common
import glmath.core

from glmath import common
from glmath.core import vec3, mat3, mat4, quat
from glmath.common import configure, MathOptions, SETTINGS, set_matrix_array_type, to_radian, to_degree, equals

__all__ = ['common', 'vec3', 'mat3', 'mat4', 'quat', 'configure', 'MathOptions', 'SETTINGS', 'set_matrix_array_type',
           'to_radian', 'to_degree', 'equals']


r"""
This package provides 3 element vectors, 3x3 and 4x4 matrices, and quaternions along with the operations used in 3D
graphics and simulation to build, combine, decompose, and interpolate transformations.

The values are stored as flat numpy arrays in the following formats:

.. _value-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
vec3               A 3 element vector :math:`[x, y, z]`.
quat               A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is the unit axis of rotation and :math:`\theta` is the angle to
                   rotate about it.  Note that :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent the same rotation.
mat3               A :math:`3\times 3` matrix stored column-major in 9 elements, so element (row r, column c) is at
                   index ``3*c + r``.
mat4               A :math:`4\times 4` matrix stored column-major in 16 elements, so element (row r, column c) is at
                   index ``4*c + r``.  For affine transformations the translation is stored in elements 12, 13, and 14.
=================  =====================================================================================================

Every routine which produces one of these values takes the destination array ``out`` as its first argument, writes the
result into it, and returns it.  The destination may be one of the inputs.  Passing ``None`` allocates a new array of
the type configured in :data:`.SETTINGS` (``numpy.float32`` unless changed with :func:`.configure`).  For instance::

    >>> from glmath import mat4, quat
    >>> q = quat.set_axis_angle(None, [0, 0, 1], 0.5)
    >>> m = mat4.from_rotation_translation(None, q, [1, 2, 3])
    >>> mat4.get_translation(None, m)
    array([1., 2., 3.], dtype=float32)

The tolerance used by approximate comparisons and degenerate-input checks, the array type, and the random seed are
all controlled through :func:`.configure`.
"""
