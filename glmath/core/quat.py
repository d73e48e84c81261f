# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
Quaternion algebra for representing and interpolating rotations.

Quaternions are stored as flat arrays of 4 elements ``(x, y, z, w)`` with the vector part first and the scalar part
last.  A unit quaternion :math:`\mathbf{q}=[\sin(\theta/2)\hat{\mathbf{a}}, \cos(\theta/2)]` represents a right
handed rotation of :math:`\theta` about the unit axis :math:`\hat{\mathbf{a}}`, and rotates a vector as
:math:`\mathbf{v}'=\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}`.  Multiplication is the Hamilton product, so
``multiply(out, a, b)`` is the rotation which applies ``b`` first and then ``a``.

Each routine that produces a quaternion takes the destination ``out`` as the first argument, writes the result into
it, and returns it.  ``out`` may be the same array as any of the inputs.  If ``out`` is ``None`` a new array of the
configured type is allocated.

Most routines assume their inputs are unit quaternions and do not normalize them; call :func:`normalize` first if
there is any doubt.
"""

import logging

import numpy as np

from glmath._typing import ARRAY_LIKE, FLOAT_ARRAY, OUT, DatetimeLike, EULER_ORDERS
from glmath.common import SETTINGS, array_equals, to_degree, to_radian
from glmath.core import mat3
from glmath.core._helpers import _check_mat3_array_and_shape, _check_quaternion_array_and_shape, _store, _values


__all__ = ['create', 'identity', 'from_values', 'copy', 'set', 'set_axis_angle', 'get_axis_angle', 'get_angle',
           'multiply', 'mul', 'rotate_x', 'rotate_y', 'rotate_z', 'calculate_w', 'exp', 'ln', 'pow', 'slerp', 'nlerp',
           'sqlerp', 'random', 'invert', 'conjugate', 'from_mat3', 'to_mat3', 'from_euler', 'to_euler', 'rotation_to',
           'set_axes', 'add', 'scale', 'dot', 'lerp', 'length', 'squared_length', 'normalize', 'equals',
           'exact_equals']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


_IDENTITY = (0.0, 0.0, 0.0, 1.0)


def create() -> FLOAT_ARRAY:
    """
    Create a new identity quaternion.
    """
    return _store(None, _IDENTITY, 4)


def identity(out: OUT) -> FLOAT_ARRAY:
    return _store(out, _IDENTITY, 4)


def from_values(x: float, y: float, z: float, w: float) -> FLOAT_ARRAY:
    return _store(None, (x, y, z, w), 4)


def copy(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_quaternion_array_and_shape(a), 4)


def set(out: OUT, x: float, y: float, z: float, w: float) -> FLOAT_ARRAY:
    return _store(out, (x, y, z, w), 4)


def set_axis_angle(out: OUT, axis: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    """
    Set a quaternion to the rotation of ``rad`` radians about ``axis``.

    :param out: the destination
    :param axis: the unit axis to rotate about
    :param rad: the angle in radians
    :return: out
    """

    half = rad * 0.5
    s = np.sin(half)

    x, y, z = _values(axis, 3)

    return _store(out, (s * x, s * y, s * z, np.cos(half)), 4)


def get_axis_angle(out_axis: OUT, q: ARRAY_LIKE) -> float:
    r"""
    Get the rotation axis and angle of a unit quaternion.

    The angle is :math:`\theta=2\cos^{-1}(q_s)`, which lies in the closed interval :math:`[0, 2\pi]` (exactly
    :math:`2\pi` when :math:`q_s=-1`), and the axis is the vector part divided by :math:`\sin(\theta/2)`.  When
    :math:`\sin(\theta/2)` is not larger than epsilon the rotation is (nearly) the identity and the axis is undefined.
    In this case the x axis ``(1, 0, 0)`` is written to ``out_axis``.

    The axis/angle pair returned is not unique: ``(-axis, 2*pi - angle)`` describes the same rotation.

    :param out_axis: the 3 element destination for the axis
    :param q: the quaternion to decompose
    :return: the rotation angle in radians
    """

    x, y, z, w = _values(q, 4)

    rad = float(np.arccos(np.clip(w, -1, 1)) * 2)

    s = np.sin(rad / 2)

    if s > SETTINGS.epsilon:
        _store(out_axis, (x / s, y / s, z / s), 3)

    else:
        _store(out_axis, (1.0, 0.0, 0.0), 3)

    return rad


def get_angle(a: ARRAY_LIKE, b: ARRAY_LIKE) -> float:
    """
    Get the angle in radians of the rotation which takes unit quaternion ``a`` to unit quaternion ``b``.

    This is the axis-angle magnitude of ``conjugate(a) * b``, so it is never negative.

    :param a: the first unit quaternion
    :param b: the second unit quaternion
    :return: the angle between the rotations in radians
    """

    difference = np.zeros(4)

    return get_axis_angle(np.zeros(3), multiply(difference, conjugate(difference, a), b))


def _hamilton(a: list[float], b: list[float]) -> tuple[float, float, float, float]:
    ax, ay, az, aw = a
    bx, by, bz, bw = b

    return (ax * bw + aw * bx + ay * bz - az * by,
            ay * bw + aw * by + az * bx - ax * bz,
            az * bw + aw * bz + ax * by - ay * bx,
            aw * bw - ax * bx - ay * by - az * bz)


def multiply(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Multiply two quaternions using the Hamilton product.

    .. math::
        \mathbf{a}\otimes\mathbf{b}=\left[\begin{array}{c}a_s\mathbf{b}_v + b_s\mathbf{a}_v +
        \mathbf{a}_v\times\mathbf{b}_v\\
        a_sb_s-\mathbf{a}_v^T\mathbf{b}_v\end{array}\right]

    The result is the rotation which applies ``b`` first and then ``a``.

    :param out: the destination
    :param a: the left quaternion
    :param b: the right quaternion
    :return: out
    """

    return _store(out, _hamilton(_values(a, 4), _values(b, 4)), 4)


mul = multiply


def _elemental(rad: float, axis: int) -> list[float]:
    elemental = [0.0, 0.0, 0.0, np.cos(rad * 0.5)]
    elemental[axis] = np.sin(rad * 0.5)

    return elemental


def rotate_x(out: OUT, a: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    """
    Post-multiply a quaternion by a rotation of ``rad`` radians about the x axis.
    """
    return _store(out, _hamilton(_values(a, 4), _elemental(rad, 0)), 4)


def rotate_y(out: OUT, a: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    """
    Post-multiply a quaternion by a rotation of ``rad`` radians about the y axis.
    """
    return _store(out, _hamilton(_values(a, 4), _elemental(rad, 1)), 4)


def rotate_z(out: OUT, a: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    """
    Post-multiply a quaternion by a rotation of ``rad`` radians about the z axis.
    """
    return _store(out, _hamilton(_values(a, 4), _elemental(rad, 2)), 4)


def calculate_w(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the scalar part of a unit quaternion from its vector part, ignoring the input ``w``.

    The result always has a non-negative scalar part.
    """

    x, y, z, _ = _values(a, 4)

    return _store(out, (x, y, z, np.sqrt(abs(1.0 - x * x - y * y - z * z))), 4)


def exp(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Compute the exponential of a quaternion.

    .. math::
        e^{\mathbf{q}} = e^{q_s}\left[\begin{array}{c}\frac{\mathbf{q}_v}{\|\mathbf{q}_v\|}\sin\|\mathbf{q}_v\| \\
        \cos\|\mathbf{q}_v\|\end{array}\right]

    :param out: the destination
    :param a: the quaternion
    :return: out
    """

    x, y, z, w = _values(a, 4)

    r = np.sqrt(x * x + y * y + z * z)
    et = np.exp(w)
    s = et * np.sin(r) / r if r > 0 else 0.0

    return _store(out, (x * s, y * s, z * s, et * np.cos(r)), 4)


def ln(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Compute the natural logarithm of a quaternion.

    .. math::
        \ln\mathbf{q} = \left[\begin{array}{c}\frac{\mathbf{q}_v}{\|\mathbf{q}_v\|}
        \text{atan2}(\|\mathbf{q}_v\|, q_s) \\ \ln\|\mathbf{q}\|\end{array}\right]

    :param out: the destination
    :param a: the quaternion
    :return: out
    """

    x, y, z, w = _values(a, 4)

    vector_length = np.sqrt(x * x + y * y + z * z)
    t = np.arctan2(vector_length, w) / vector_length if vector_length > 0 else 0.0

    return _store(out, (x * t, y * t, z * t, 0.5 * np.log(x * x + y * y + z * z + w * w)), 4)


def pow(out: OUT, a: ARRAY_LIKE, b: float) -> FLOAT_ARRAY:
    """
    Raise a unit quaternion to a scalar power, ``exp(b * ln(a))``.

    For a unit quaternion this scales the rotation angle by ``b`` while keeping the axis, so ``pow(out, q, 2)`` is
    ``q * q`` and ``pow(out, q, -1)`` is the conjugate.  The identity is returned unchanged for any power.

    :param out: the destination
    :param a: the unit quaternion
    :param b: the exponent
    :return: out
    """

    logarithm = ln(np.zeros(4), a)

    return exp(out, logarithm * b)


def _fraction(time: float | DatetimeLike, time0: float | DatetimeLike, time1: float | DatetimeLike) -> float:
    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true division.'
                        'Typically this means they should all be floats or all be DatetimeLike objects')


def slerp(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE, time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> FLOAT_ARRAY:
    r"""
    Perform spherical linear interpolation between two quaternions.

    SLERP moves along the great circle arc connecting the two quaternions at a constant angular rate:

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{a}^T\mathbf{b})\\
        \mathbf{q}=\frac{\sin((1-p)\omega)}{\sin\omega}\mathbf{a}+\frac{\sin(p\omega)}{\sin\omega}\mathbf{b}

    where :math:`p` is the fraction of the way from ``a`` to ``b``.  If the dot product is negative ``b`` is negated
    first so that the shorter of the two arcs is followed.  If the quaternions are within epsilon of parallel
    (:math:`1-\mathbf{a}^T\mathbf{b}\leq\epsilon`) the sine ratios are ill conditioned and the plain linear weights
    :math:`1-p` and :math:`p` are used instead.  The linear fallback is not renormalized.

    You can either specify ``time`` as the fraction to interpolate at, or specify ``time0`` and ``time1`` as the
    times corresponding to ``a`` and ``b`` and ``time`` as the actual time to interpolate at, in which case the
    fraction is computed for you.  All three times can also be given as python datetime or pandas Timestamp objects.

    :param out: the destination
    :param a: the starting quaternion
    :param b: the ending quaternion
    :param time: the time to interpolate at, either as a fraction or as the actual time between ``time0`` and
                 ``time1``
    :param time0: the time corresponding to ``a``.  Leave at 0 if ``time`` is a fraction
    :param time1: the time corresponding to ``b``.  Leave at 1 if ``time`` is a fraction
    :return: out
    :raises TypeError: if the times cannot be subtracted and divided
    """

    t = _fraction(time, time0, time1)

    start = _check_quaternion_array_and_shape(a)
    end = _check_quaternion_array_and_shape(b)

    cosom = np.inner(start, end)

    if cosom < 0:
        cosom = -cosom
        end = -end

    if 1.0 - cosom > SETTINGS.epsilon:
        omega = np.arccos(min(cosom, 1.0))
        sinom = np.sin(omega)
        scale0 = np.sin((1.0 - t) * omega) / sinom
        scale1 = np.sin(t * omega) / sinom

    else:
        scale0 = 1.0 - t
        scale1 = t

    return _store(out, scale0 * start + scale1 * end, 4)


def nlerp(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE, time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> FLOAT_ARRAY:
    r"""
    Perform normalized linear interpolation between two quaternions.

    .. math::
        \mathbf{q}=\frac{(1-p)\mathbf{a}+p\mathbf{b}}{\|(1-p)\mathbf{a}+p\mathbf{b}\|}

    As with :func:`slerp`, ``b`` is negated when the dot product is negative so that the shorter path is followed.
    This is cheaper than :func:`slerp` but does not move at a constant angular rate, so it is best suited to
    quaternions that are close together.  The time arguments are interpreted exactly as in :func:`slerp`.

    :param out: the destination
    :param a: the starting quaternion
    :param b: the ending quaternion
    :param time: the time to interpolate at
    :param time0: the time corresponding to ``a``
    :param time1: the time corresponding to ``b``
    :return: out
    :raises TypeError: if the times cannot be subtracted and divided
    """

    t = _fraction(time, time0, time1)

    start = _check_quaternion_array_and_shape(a)
    end = _check_quaternion_array_and_shape(b)

    if np.inner(start, end) < 0:
        end = -end

    interpolated = start * (1 - t) + end * t

    norm = np.linalg.norm(interpolated)

    if norm > 0:
        interpolated /= norm

    return _store(out, interpolated, 4)


def sqlerp(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE, c: ARRAY_LIKE, d: ARRAY_LIKE, t: float) -> FLOAT_ARRAY:
    """
    Perform spherical quadrangle interpolation with control points.

    This is ``slerp(slerp(a, d, t), slerp(b, c, t), 2t(1-t))``, which gives a smooth curve from ``a`` to ``d`` shaped
    by the inner control points ``b`` and ``c``.

    :param out: the destination
    :param a: the first quaternion
    :param b: the first control point
    :param c: the second control point
    :param d: the last quaternion
    :param t: the fraction to interpolate at
    :return: out
    """

    outer = slerp(np.zeros(4), a, d, t)
    inner = slerp(np.zeros(4), b, c, t)

    return slerp(out, outer, inner, 2 * t * (1 - t))


def random(out: OUT) -> FLOAT_ARRAY:
    """
    Generate a uniformly distributed random unit quaternion.

    This uses Shoemake's subgroup algorithm with the random generator from :data:`glmath.common.SETTINGS`, so the
    sequence is repeatable when a seed is configured.

    :param out: the destination
    :return: out
    """

    u1, u2, u3 = SETTINGS.rng.random(3)

    sqrt1_minus_u1 = np.sqrt(1 - u1)
    sqrt_u1 = np.sqrt(u1)

    return _store(out, (sqrt1_minus_u1 * np.sin(2 * np.pi * u2),
                        sqrt1_minus_u1 * np.cos(2 * np.pi * u2),
                        sqrt_u1 * np.sin(2 * np.pi * u3),
                        sqrt_u1 * np.cos(2 * np.pi * u3)), 4)


def invert(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the inverse of a quaternion (the conjugate divided by the squared length).

    The zero quaternion has no inverse and is written out as zeros.
    """

    x, y, z, w = _values(a, 4)

    squared = x * x + y * y + z * z + w * w
    inverse_squared = 1.0 / squared if squared else 0.0

    return _store(out, (-x * inverse_squared, -y * inverse_squared, -z * inverse_squared, w * inverse_squared), 4)


def conjugate(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the conjugate of a quaternion.  For unit quaternions this is the inverse rotation.
    """

    x, y, z, w = _values(a, 4)

    return _store(out, (-x, -y, -z, w), 4)


def from_mat3(out: OUT, m: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Create a quaternion from a column-major 3x3 rotation matrix.

    When the trace is positive the scalar part is the pivot:

    .. math::
        q_s = \frac{1}{2}\sqrt{\text{Tr}(\mathbf{M})+1} \\
        \mathbf{q}_v = \frac{1}{4q_s}\left[\begin{array}{c}m_{21}-m_{12}\\m_{02}-m_{20}\\m_{10}-m_{01}
        \end{array}\right]

    otherwise the component corresponding to the largest diagonal element is solved for first and the others are
    computed from it so that the division is never by a small number.

    The result is not normalized, so the matrix should be a proper rotation for the result to be a unit quaternion.

    :param out: the destination
    :param m: the column-major rotation matrix
    :return: out
    """

    matrix = _check_mat3_array_and_shape(m)

    result = np.zeros(4)

    with np.errstate(divide='ignore', invalid='ignore'):

        trace = matrix[0] + matrix[4] + matrix[8]

        if trace > 0:
            root = np.sqrt(trace + 1.0)
            result[3] = 0.5 * root
            root = 0.5 / root
            result[0] = (matrix[5] - matrix[7]) * root
            result[1] = (matrix[6] - matrix[2]) * root
            result[2] = (matrix[1] - matrix[3]) * root

        else:
            i = 0
            if matrix[4] > matrix[0]:
                i = 1
            if matrix[8] > matrix[i * 3 + i]:
                i = 2

            j = (i + 1) % 3
            k = (i + 2) % 3

            root = np.sqrt(matrix[i * 3 + i] - matrix[j * 3 + j] - matrix[k * 3 + k] + 1.0)
            result[i] = 0.5 * root
            root = 0.5 / root
            result[3] = (matrix[j * 3 + k] - matrix[k * 3 + j]) * root
            result[j] = (matrix[j * 3 + i] + matrix[i * 3 + j]) * root
            result[k] = (matrix[k * 3 + i] + matrix[i * 3 + k]) * root

    return _store(out, result, 4)


def to_mat3(out: OUT, q: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Form the column-major 3x3 rotation matrix of a unit quaternion (see :func:`.mat3.from_quat`).
    """
    return mat3.from_quat(out, q)


def from_euler(out: OUT, x: float, y: float, z: float, order: EULER_ORDERS = 'xyz') -> FLOAT_ARRAY:
    """
    Create a quaternion from euler angles given in degrees.

    The angles are always given as the rotation about x, about y, and about z.  ``order`` specifies the order the
    rotations are applied in, left to right.  For the default ``'xyz'`` the rotation about x is applied first, then the
    rotation about y, then the rotation about z, so the result is ``qz * qy * qx``.  Each rotation is right handed
    about the fixed world axes.

    :param out: the destination
    :param x: the rotation about the x axis in degrees
    :param y: the rotation about the y axis in degrees
    :param z: the rotation about the z axis in degrees
    :param order: the order to apply the rotations in
    :return: out
    :raises ValueError: if ``order`` is not one of the 6 Tait-Bryan orders
    """

    fixed_order = str(order).lower()

    if sorted(fixed_order) != ['x', 'y', 'z']:
        raise ValueError(f'order must be a permutation of xyz.  You entered {order}')

    angles = {'x': to_radian(x), 'y': to_radian(y), 'z': to_radian(z)}

    rotation = list(_IDENTITY)

    for axis in fixed_order:
        rotation = list(_hamilton(_elemental(angles[axis], 'xyz'.index(axis)), rotation))

    return _store(out, rotation, 4)


def to_euler(q: ARRAY_LIKE, order: EULER_ORDERS = 'xyz') -> tuple[float, float, float]:
    """
    Convert a unit quaternion into euler angles in degrees.

    This is the inverse of :func:`from_euler`: the angles are returned as the rotation about x, about y, and about z
    regardless of ``order``, and ``from_euler(out, *to_euler(q, order), order)`` reproduces ``q`` up to sign.  The
    middle rotation of the sequence is returned in [-90, 90] degrees.  Near gimbal lock (a middle rotation of +/-90
    degrees) the split between the first and last rotation is arbitrary.

    :param q: the unit quaternion
    :param order: the order the rotations are applied in
    :return: the rotations about x, y, and z in degrees
    :raises ValueError: if ``order`` is not one of the 6 Tait-Bryan orders
    """

    fixed_order = str(order).lower()

    # row-major rotation matrix
    matrix = np.reshape(mat3.from_quat(np.zeros(9), q), (3, 3)).T

    if fixed_order == 'xyz':

        f1 = -matrix[1, 0]
        f2 = matrix[0, 0]
        s1 = -matrix[2, 0]
        t1 = -matrix[2, 1]
        t2 = matrix[2, 2]

    elif fixed_order == 'zyx':

        f1 = matrix[1, 2]
        f2 = matrix[2, 2]
        s1 = matrix[0, 2]
        t1 = matrix[0, 1]
        t2 = matrix[0, 0]

    elif fixed_order == 'yzx':

        f1 = -matrix[2, 1]
        f2 = matrix[1, 1]
        s1 = -matrix[0, 1]
        t1 = -matrix[0, 2]
        t2 = matrix[0, 0]

    elif fixed_order == 'zxy':

        f1 = -matrix[0, 2]
        f2 = matrix[2, 2]
        s1 = -matrix[1, 2]
        t1 = -matrix[1, 0]
        t2 = matrix[1, 1]

    elif fixed_order == 'xzy':

        f1 = matrix[2, 0]
        f2 = matrix[0, 0]
        s1 = matrix[1, 0]
        t1 = matrix[1, 2]
        t2 = matrix[1, 1]

    elif fixed_order == 'yxz':

        f1 = matrix[0, 1]
        f2 = matrix[1, 1]
        s1 = matrix[2, 1]
        t1 = matrix[2, 0]
        t2 = matrix[2, 2]

    else:
        raise ValueError(f'order must be a permutation of xyz.  You entered {order}')

    # first, middle, and last rotation of the sequence
    angles = dict(zip(fixed_order, (-np.arctan2(t1, t2), np.arcsin(np.clip(s1, -1, 1)), -np.arctan2(f1, f2))))

    return to_degree(float(angles['x'])), to_degree(float(angles['y'])), to_degree(float(angles['z']))


def rotation_to(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the shortest rotation which takes unit vector ``a`` to unit vector ``b``.

    If the vectors are parallel the identity is returned.  If they point in opposite directions any axis
    perpendicular to ``a`` gives a valid rotation of 180 degrees.  The axis used is ``cross(x, a)``, or ``cross(y, a)``
    when ``a`` is (nearly) parallel to the x axis.

    :param out: the destination
    :param a: the initial unit vector
    :param b: the destination unit vector
    :return: out
    """

    start = np.array(_values(a, 3))
    end = np.array(_values(b, 3))

    cosine = np.inner(start, end)

    if cosine < -0.999999:
        _LOGGER.debug('The vectors are antiparallel, rotating by pi about an arbitrary perpendicular axis')

        axis = np.cross([1.0, 0.0, 0.0], start)

        if np.linalg.norm(axis) < 0.000001:
            axis = np.cross([0.0, 1.0, 0.0], start)

        return set_axis_angle(out, axis / np.linalg.norm(axis), np.pi)

    elif cosine > 0.999999:
        return identity(out)

    rotation = np.append(np.cross(start, end), 1 + cosine)

    return _store(out, rotation / np.linalg.norm(rotation), 4)


def set_axes(out: OUT, view: ARRAY_LIKE, right: ARRAY_LIKE, up: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Create the quaternion which rotates the local frame into the world frame given the world directions of the local
    view (-z), right (+x), and up (+y) axes.

    The three vectors should be orthonormal.  The result is normalized.

    :param out: the destination
    :param view: the world direction the local frame looks along
    :param right: the world direction of the local right axis
    :param up: the world direction of the local up axis
    :return: out
    """

    right_x, right_y, right_z = _values(right, 3)
    up_x, up_y, up_z = _values(up, 3)
    view_x, view_y, view_z = _values(view, 3)

    matrix = (right_x, up_x, -view_x,
              right_y, up_y, -view_y,
              right_z, up_z, -view_z)

    rotation = from_mat3(np.zeros(4), matrix)

    return normalize(out, rotation)


def add(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_quaternion_array_and_shape(a) + _check_quaternion_array_and_shape(b), 4)


def scale(out: OUT, a: ARRAY_LIKE, b: float) -> FLOAT_ARRAY:
    return _store(out, _check_quaternion_array_and_shape(a) * b, 4)


def dot(a: ARRAY_LIKE, b: ARRAY_LIKE) -> float:
    return float(np.inner(_check_quaternion_array_and_shape(a), _check_quaternion_array_and_shape(b)))


def lerp(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE, t: float) -> FLOAT_ARRAY:
    """
    Linearly interpolate between two quaternions without any normalization.
    """

    start = _check_quaternion_array_and_shape(a)
    end = _check_quaternion_array_and_shape(b)

    return _store(out, start + t * (end - start), 4)


def length(a: ARRAY_LIKE) -> float:
    return float(np.linalg.norm(_check_quaternion_array_and_shape(a)))


def squared_length(a: ARRAY_LIKE) -> float:
    quaternion = _check_quaternion_array_and_shape(a)
    return float(np.inner(quaternion, quaternion))


def normalize(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Scale a quaternion to unit length.  The zero quaternion is written out as zeros.
    """

    quaternion = _check_quaternion_array_and_shape(a)

    norm = np.linalg.norm(quaternion)

    if norm > 0:
        quaternion /= norm

    return _store(out, quaternion, 4)


def equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    """
    Test whether two quaternions are approximately equal component by component (see :func:`glmath.common.equals`).

    Note that ``q`` and ``-q`` represent the same rotation but are not considered equal here.
    """
    return array_equals(_check_quaternion_array_and_shape(a), _check_quaternion_array_and_shape(b))


def exact_equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    return bool((_check_quaternion_array_and_shape(a) == _check_quaternion_array_and_shape(b)).all())
