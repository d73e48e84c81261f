# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
4x4 matrix routines for building, decomposing, and combining homogeneous transformations.

Matrices are stored as flat column-major arrays of 16 elements, so element (row r, column c) is at index ``4*c + r``
and the translation of an affine transformation lives in elements 12, 13, and 14.  Points are transformed as column
vectors, :math:`\mathbf{y}=\mathbf{M}\mathbf{x}`, therefore ``multiply(out, a, b)`` produces a transformation which
applies ``b`` first and then ``a``.

Each routine that produces a matrix takes the destination ``out`` as the first argument, writes the result into it,
and returns it.  ``out`` may be the same array as any of the inputs since all operands are read before anything is
written.  If ``out`` is ``None`` a new array of the configured type is allocated.

The routines fall into 3 groups:

* the transform builders, which compose translation, rotation, and scale into a single matrix
  (:func:`from_rotation_translation_scale` and friends) and the decomposers which recover them
  (:func:`get_translation`, :func:`get_scaling`, :func:`get_rotation`, :func:`decompose`),
* the view and projection builders (:func:`look_at`, :func:`target_to`, :func:`perspective`, :func:`frustum`,
  :func:`ortho`), which all use a right handed eye space and a clip space depth range of [-1, 1],
* the algebraic core (:func:`multiply`, :func:`invert`, :func:`adjoint`, :func:`determinant`).

Degenerate inputs are handled as follows.  :func:`invert` returns ``None`` when the determinant is exactly 0,
:func:`look_at` writes the identity when the eye and center coincide, and :func:`rotate`/:func:`from_rotation` return
``None`` for a zero length axis.  The decomposers do not check their input; a matrix with a zero scale produces
``inf``/``nan`` values.
"""

import logging

import numpy as np

from glmath._typing import ARRAY_LIKE, FLOAT_ARRAY, OUT
from glmath.common import SETTINGS, array_equals
from glmath.core._helpers import _check_mat4_array_and_shape, _prepare_out, _store, _values


__all__ = ['create', 'identity', 'from_values', 'copy', 'set', 'transpose', 'invert', 'adjoint', 'determinant',
           'multiply', 'mul', 'translate', 'scale', 'rotate', 'rotate_x', 'rotate_y', 'rotate_z',
           'from_translation', 'from_scaling', 'from_rotation', 'from_x_rotation', 'from_y_rotation',
           'from_z_rotation', 'from_quat', 'from_rotation_translation', 'from_rotation_translation_scale',
           'from_rotation_translation_scale_origin', 'get_translation', 'get_scaling', 'get_rotation', 'decompose',
           'frustum', 'perspective', 'ortho', 'look_at', 'target_to', 'frob', 'add', 'subtract', 'multiply_scalar',
           'multiply_scalar_and_add', 'sub', 'equals', 'exact_equals']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


_IDENTITY = (1.0, 0.0, 0.0, 0.0,
             0.0, 1.0, 0.0, 0.0,
             0.0, 0.0, 1.0, 0.0,
             0.0, 0.0, 0.0, 1.0)


def _columns(a: ARRAY_LIKE) -> np.ndarray:
    # the rows of the returned array are the columns of the matrix
    return np.reshape(_values(a, 16), (4, 4))


def _multiply_columns(a_columns: np.ndarray, b_columns: np.ndarray) -> np.ndarray:
    # (a b)^T = b^T a^T and the column arrays are the transposes
    return b_columns @ a_columns


def create() -> FLOAT_ARRAY:
    """
    Create a new identity matrix.
    """
    return _store(None, _IDENTITY, 16)


def identity(out: OUT) -> FLOAT_ARRAY:
    """
    Set a matrix to the identity.
    """
    return _store(out, _IDENTITY, 16)


def from_values(*values: float) -> FLOAT_ARRAY:
    """
    Create a new matrix from 16 values given in column-major order.
    """
    return _store(None, _check_mat4_array_and_shape(values), 16)


def copy(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_mat4_array_and_shape(a), 16)


def set(out: OUT, *values: float) -> FLOAT_ARRAY:
    """
    Set the 16 elements of a matrix, given in column-major order.
    """
    return _store(out, _check_mat4_array_and_shape(values), 16)


def transpose(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _columns(a).T.ravel(), 16)


def _minors(a: list[float]) -> tuple[float, ...]:
    a00, a01, a02, a03, a10, a11, a12, a13, a20, a21, a22, a23, a30, a31, a32, a33 = a

    # the 2x2 minors of the first two and the last two columns
    return (a00 * a11 - a01 * a10,
            a00 * a12 - a02 * a10,
            a00 * a13 - a03 * a10,
            a01 * a12 - a02 * a11,
            a01 * a13 - a03 * a11,
            a02 * a13 - a03 * a12,
            a20 * a31 - a21 * a30,
            a20 * a32 - a22 * a30,
            a20 * a33 - a23 * a30,
            a21 * a32 - a22 * a31,
            a21 * a33 - a23 * a31,
            a22 * a33 - a23 * a32)


def _adjugate(a: list[float], minors: tuple[float, ...]) -> tuple[float, ...]:
    a00, a01, a02, a03, a10, a11, a12, a13, a20, a21, a22, a23, a30, a31, a32, a33 = a
    b00, b01, b02, b03, b04, b05, b06, b07, b08, b09, b10, b11 = minors

    return (a11 * b11 - a12 * b10 + a13 * b09,
            a02 * b10 - a01 * b11 - a03 * b09,
            a31 * b05 - a32 * b04 + a33 * b03,
            a22 * b04 - a21 * b05 - a23 * b03,
            a12 * b08 - a10 * b11 - a13 * b07,
            a00 * b11 - a02 * b08 + a03 * b07,
            a32 * b02 - a30 * b05 - a33 * b01,
            a20 * b05 - a22 * b02 + a23 * b01,
            a10 * b10 - a11 * b08 + a13 * b06,
            a01 * b08 - a00 * b10 - a03 * b06,
            a30 * b04 - a31 * b02 + a33 * b00,
            a21 * b02 - a20 * b04 - a23 * b00,
            a11 * b07 - a10 * b09 - a12 * b06,
            a00 * b09 - a01 * b07 + a02 * b06,
            a31 * b01 - a30 * b03 - a32 * b00,
            a20 * b03 - a21 * b01 + a22 * b00)


def _determinant_from_minors(minors: tuple[float, ...]) -> float:
    b00, b01, b02, b03, b04, b05, b06, b07, b08, b09, b10, b11 = minors

    return b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06


def determinant(a: ARRAY_LIKE) -> float:
    r"""
    Compute the determinant of a matrix.

    The determinant is formed by the Laplace expansion of the first two columns against the last two columns using
    their 2x2 minors:

    .. math::
        \text{det}(\mathbf{A}) = b_{00}b_{11}-b_{01}b_{10}+b_{02}b_{09}+b_{03}b_{08}-b_{04}b_{07}+b_{05}b_{06}

    where :math:`b_{00}\ldots b_{05}` are the minors of the first two columns and :math:`b_{06}\ldots b_{11}` are the
    complementary minors of the last two columns.  The same minors are used by :func:`invert` and :func:`adjoint`.

    :param a: the matrix
    :return: the determinant
    """

    return _determinant_from_minors(_minors(_values(a, 16)))


def invert(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY | None:
    """
    Invert a matrix.

    The inverse is the adjugate divided by the determinant.  If the determinant is exactly 0 the matrix is singular,
    ``None`` is returned, and ``out`` is left unchanged.  Matrices that are nearly singular still return a result, so
    the caller is responsible for checking the conditioning of their matrices when it matters.

    :param out: the destination
    :param a: the matrix to invert
    :return: out, or ``None`` if the matrix is singular
    """

    out = _prepare_out(out, 16)

    values = _values(a, 16)
    minors = _minors(values)

    det = _determinant_from_minors(minors)

    if det == 0:
        _LOGGER.debug('Cannot invert a 4x4 matrix with a zero determinant')
        return None

    det = 1.0 / det

    return _store(out, [element * det for element in _adjugate(values, minors)], 16)


def adjoint(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the adjugate of a matrix (the transpose of its cofactor matrix).

    This is the inverse multiplied by the determinant, which is useful when the overall scale of the result does not
    matter (for instance when transforming normals) and is defined even for singular matrices.

    :param out: the destination
    :param a: the matrix
    :return: out
    """

    values = _values(a, 16)

    return _store(out, _adjugate(values, _minors(values)), 16)


def multiply(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Multiply two matrices, ``a * b``.

    The result applies ``b`` first and then ``a`` when used to transform points.  ``out`` may be ``a``, ``b``, or
    both.

    :param out: the destination
    :param a: the left matrix
    :param b: the right matrix
    :return: out
    """

    return _store(out, _multiply_columns(_columns(a), _columns(b)).ravel(), 16)


mul = multiply


def translate(out: OUT, a: ARRAY_LIKE, v: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Post-multiply a matrix by a translation, ``a * T(v)``.
    """

    x, y, z = _values(v, 3)
    columns = _columns(a)

    columns[3] = columns[0] * x + columns[1] * y + columns[2] * z + columns[3]

    return _store(out, columns.ravel(), 16)


def scale(out: OUT, a: ARRAY_LIKE, v: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Post-multiply a matrix by a scaling, ``a * S(v)``.
    """

    columns = _columns(a)

    columns[:3] *= np.reshape(_values(v, 3), (3, 1))

    return _store(out, columns.ravel(), 16)


def _axis_angle_block(rad: float, axis: ARRAY_LIKE) -> np.ndarray | None:
    x, y, z = _values(axis, 3)

    norm = np.hypot(np.hypot(x, y), z)

    if norm < SETTINGS.epsilon:
        _LOGGER.debug('Cannot form a rotation about a zero length axis')
        return None

    x /= norm
    y /= norm
    z /= norm

    s = np.sin(rad)
    c = np.cos(rad)
    t = 1 - c

    return np.array([[x * x * t + c, y * x * t + z * s, z * x * t - y * s, 0],
                     [x * y * t - z * s, y * y * t + c, z * y * t + x * s, 0],
                     [x * z * t + y * s, y * z * t - x * s, z * z * t + c, 0],
                     [0, 0, 0, 1]])


def _elemental_block(rad: float, axis: int) -> np.ndarray:
    s = np.sin(rad)
    c = np.cos(rad)

    j, k = (axis + 1) % 3, (axis + 2) % 3

    block = np.eye(4)
    block[j, j] = c
    block[j, k] = s
    block[k, j] = -s
    block[k, k] = c

    return block


def rotate(out: OUT, a: ARRAY_LIKE, rad: float, axis: ARRAY_LIKE) -> FLOAT_ARRAY | None:
    """
    Post-multiply a matrix by a right handed rotation of ``rad`` radians about ``axis``.

    :param out: the destination
    :param a: the matrix to rotate
    :param rad: the angle in radians
    :param axis: the axis to rotate about (does not need to be unit length)
    :return: out, or ``None`` if the axis has (nearly) zero length
    """

    out = _prepare_out(out, 16)

    block = _axis_angle_block(rad, axis)

    if block is None:
        return None

    return _store(out, _multiply_columns(_columns(a), block).ravel(), 16)


def rotate_x(out: OUT, a: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    return _store(out, _multiply_columns(_columns(a), _elemental_block(rad, 0)).ravel(), 16)


def rotate_y(out: OUT, a: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    return _store(out, _multiply_columns(_columns(a), _elemental_block(rad, 1)).ravel(), 16)


def rotate_z(out: OUT, a: ARRAY_LIKE, rad: float) -> FLOAT_ARRAY:
    return _store(out, _multiply_columns(_columns(a), _elemental_block(rad, 2)).ravel(), 16)


def from_translation(out: OUT, v: ARRAY_LIKE) -> FLOAT_ARRAY:
    x, y, z = _values(v, 3)

    return _store(out, (1, 0, 0, 0,
                        0, 1, 0, 0,
                        0, 0, 1, 0,
                        x, y, z, 1), 16)


def from_scaling(out: OUT, v: ARRAY_LIKE) -> FLOAT_ARRAY:
    x, y, z = _values(v, 3)

    return _store(out, (x, 0, 0, 0,
                        0, y, 0, 0,
                        0, 0, z, 0,
                        0, 0, 0, 1), 16)


def from_rotation(out: OUT, rad: float, axis: ARRAY_LIKE) -> FLOAT_ARRAY | None:
    """
    Create a right handed rotation of ``rad`` radians about ``axis``.

    :return: out, or ``None`` if the axis has (nearly) zero length
    """

    out = _prepare_out(out, 16)

    block = _axis_angle_block(rad, axis)

    if block is None:
        return None

    return _store(out, block.ravel(), 16)


def from_x_rotation(out: OUT, rad: float) -> FLOAT_ARRAY:
    return _store(out, _elemental_block(rad, 0).ravel(), 16)


def from_y_rotation(out: OUT, rad: float) -> FLOAT_ARRAY:
    return _store(out, _elemental_block(rad, 1).ravel(), 16)


def from_z_rotation(out: OUT, rad: float) -> FLOAT_ARRAY:
    return _store(out, _elemental_block(rad, 2).ravel(), 16)


def _rotation_scale_columns(q: ARRAY_LIKE, s: ARRAY_LIKE) -> list[float]:
    x, y, z, w = _values(q, 4)
    sx, sy, sz = _values(s, 3)

    x2 = x + x
    y2 = y + y
    z2 = z + z

    xx = x * x2
    xy = x * y2
    xz = x * z2
    yy = y * y2
    yz = y * z2
    zz = z * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    return [(1 - (yy + zz)) * sx, (xy + wz) * sx, (xz - wy) * sx, 0,
            (xy - wz) * sy, (1 - (xx + zz)) * sy, (yz + wx) * sy, 0,
            (xz + wy) * sz, (yz - wx) * sz, (1 - (xx + yy)) * sz, 0]


def from_rotation_translation_scale(out: OUT, q: ARRAY_LIKE, v: ARRAY_LIKE, s: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Compose a translation, a rotation, and a scaling into a single matrix, ``T(v) * R(q) * S(s)``.

    The matrix is written directly from the expansion of the quaternion into a rotation matrix with each column
    multiplied by the corresponding scale factor, so no intermediate matrix products are formed:

    .. math::
        \mathbf{M} = \left[\begin{array}{cccc}
        (1-2(y^2+z^2))s_x & 2(xy-wz)s_y & 2(xz+wy)s_z & v_x \\
        2(xy+wz)s_x & (1-2(x^2+z^2))s_y & 2(yz-wx)s_z & v_y \\
        2(xz-wy)s_x & 2(yz+wx)s_y & (1-2(x^2+y^2))s_z & v_z \\
        0 & 0 & 0 & 1\end{array}\right]

    The quaternion should be unit length; it is not normalized.

    :param out: the destination
    :param q: the rotation quaternion (x, y, z, w)
    :param v: the translation
    :param s: the scale factors along x, y, and z
    :return: out
    """

    translation = _values(v, 3)

    return _store(out, _rotation_scale_columns(q, s) + translation + [1], 16)


def from_rotation_translation_scale_origin(out: OUT, q: ARRAY_LIKE, v: ARRAY_LIKE, s: ARRAY_LIKE,
                                           o: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compose a translation, rotation, and scaling where the rotation and scaling are performed about the point ``o``,
    ``T(v) * T(o) * R(q) * S(s) * T(-o)``.

    :param out: the destination
    :param q: the rotation quaternion (x, y, z, w)
    :param v: the translation
    :param s: the scale factors along x, y, and z
    :param o: the origin of the rotation and scaling
    :return: out
    """

    block = np.reshape(_rotation_scale_columns(q, s), (3, 4))[:, :3]
    origin = np.array(_values(o, 3))

    translation = np.array(_values(v, 3)) + origin - origin @ block

    return _store(out, np.concatenate([np.hstack([block, np.zeros((3, 1))]).ravel(), translation, [1]]), 16)


def from_rotation_translation(out: OUT, q: ARRAY_LIKE, v: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compose a rotation followed by a translation, ``T(v) * R(q)``.
    """
    return from_rotation_translation_scale(out, q, v, (1, 1, 1))


def from_quat(out: OUT, q: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Create the rotation matrix corresponding to a quaternion.
    """
    return from_rotation_translation_scale(out, q, (0, 0, 0), (1, 1, 1))


def get_translation(out: OUT, mat: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Extract the translation (elements 12, 13, and 14) of a transformation matrix.

    :param out: the 3 element destination
    :param mat: the matrix
    :return: out
    """

    return _store(out, _values(mat, 16)[12:15], 3)


def _scaling(columns: np.ndarray) -> np.ndarray:
    return np.linalg.norm(columns[:3, :3], axis=-1)


def get_scaling(out: OUT, mat: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Extract the scale factors of a transformation matrix.

    Each scale factor is the length of the corresponding basis column.  This is only the true scaling if the matrix
    was composed from a translation, rotation, and scaling (that is, it contains no shear).

    :param out: the 3 element destination
    :param mat: the matrix
    :return: out
    """

    return _store(out, _scaling(_columns(mat)), 3)


def _rotation_from_columns(columns: np.ndarray, scaling: np.ndarray) -> np.ndarray:

    with np.errstate(divide='ignore', invalid='ignore'):
        # sm[c, r] is the element in row r and column c with the scale of column c removed
        sm = columns[:3, :3] / scaling.reshape(3, 1)

        trace = sm[0, 0] + sm[1, 1] + sm[2, 2]

        if trace > 0:
            s = np.sqrt(trace + 1.0) * 2
            return np.array([(sm[1, 2] - sm[2, 1]) / s,
                             (sm[2, 0] - sm[0, 2]) / s,
                             (sm[0, 1] - sm[1, 0]) / s,
                             0.25 * s])

        elif sm[0, 0] > sm[1, 1] and sm[0, 0] > sm[2, 2]:
            s = np.sqrt(1.0 + sm[0, 0] - sm[1, 1] - sm[2, 2]) * 2
            return np.array([0.25 * s,
                             (sm[0, 1] + sm[1, 0]) / s,
                             (sm[2, 0] + sm[0, 2]) / s,
                             (sm[1, 2] - sm[2, 1]) / s])

        elif sm[1, 1] > sm[2, 2]:
            s = np.sqrt(1.0 + sm[1, 1] - sm[0, 0] - sm[2, 2]) * 2
            return np.array([(sm[0, 1] + sm[1, 0]) / s,
                             0.25 * s,
                             (sm[1, 2] + sm[2, 1]) / s,
                             (sm[2, 0] - sm[0, 2]) / s])

        else:
            s = np.sqrt(1.0 + sm[2, 2] - sm[0, 0] - sm[1, 1]) * 2
            return np.array([(sm[2, 0] + sm[0, 2]) / s,
                             (sm[1, 2] + sm[2, 1]) / s,
                             0.25 * s,
                             (sm[0, 1] - sm[1, 0]) / s])


def get_rotation(out: OUT, mat: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Extract the rotation of a transformation matrix as a quaternion.

    The scale factors from :func:`get_scaling` are first divided out of each basis column to leave a pure rotation
    matrix :math:`\mathbf{R}`.  The quaternion is then extracted using the largest of :math:`\text{Tr}(\mathbf{R})`,
    :math:`r_{00}`, :math:`r_{11}`, and :math:`r_{22}` as the pivot so that the division is never by a small number.
    For instance, when the trace is positive

    .. math::
        S = 2\sqrt{\text{Tr}(\mathbf{R})+1}\\
        \mathbf{q} = \left[\begin{array}{c}(r_{21}-r_{12})/S\\(r_{02}-r_{20})/S\\(r_{10}-r_{01})/S\\S/4
        \end{array}\right]

    Matrices containing a reflection (negative determinant) or shear do not have a meaningful rotation and produce
    an arbitrary quaternion.

    :param out: the 4 element destination
    :param mat: the matrix
    :return: out
    """

    columns = _columns(mat)

    return _store(out, _rotation_from_columns(columns, _scaling(columns)), 4)


def decompose(out_r: OUT, out_t: OUT, out_s: OUT, mat: ARRAY_LIKE) -> tuple[FLOAT_ARRAY, FLOAT_ARRAY, FLOAT_ARRAY]:
    """
    Decompose a transformation matrix into its rotation, translation, and scaling.

    This is equivalent to calling :func:`get_rotation`, :func:`get_translation`, and :func:`get_scaling`, and has the
    same restrictions.

    :param out_r: the 4 element destination for the rotation quaternion
    :param out_t: the 3 element destination for the translation
    :param out_s: the 3 element destination for the scale factors
    :param mat: the matrix to decompose
    :return: the rotation, translation, and scaling destinations
    """

    columns = _columns(mat)
    scaling = _scaling(columns)

    return (_store(out_r, _rotation_from_columns(columns, scaling), 4),
            _store(out_t, columns[3, :3], 3),
            _store(out_s, scaling, 3))


def frustum(out: OUT, left: float, right: float, bottom: float, top: float, near: float,
            far: float) -> FLOAT_ARRAY:
    """
    Create a perspective projection for a general (possibly off axis) viewing frustum.

    The frustum is described by the extent of the near plane (``left``, ``right``, ``bottom``, ``top``) and the
    distances to the near and far planes.  The result maps the frustum into the clip space cube with depth in [-1, 1]
    and puts -1 in the w row of the z column so that the perspective divide uses the eye space depth.

    A pair of equal bounds does not raise, the affected entries are written as ``inf`` or ``nan``.

    :param out: the destination
    :param left: the left bound of the near plane
    :param right: the right bound of the near plane
    :param bottom: the bottom bound of the near plane
    :param top: the top bound of the near plane
    :param near: the distance to the near plane
    :param far: the distance to the far plane
    :return: out
    """

    left, right, bottom, top, near, far = np.float64([left, right, bottom, top, near, far])

    # equal bounds give inf/nan entries
    with np.errstate(divide='ignore', invalid='ignore'):
        rl = 1 / (right - left)
        tb = 1 / (top - bottom)
        nf = 1 / (near - far)

        values = (near * 2 * rl, 0, 0, 0,
                  0, near * 2 * tb, 0, 0,
                  (right + left) * rl, (top + bottom) * tb, (far + near) * nf, -1,
                  0, 0, far * near * 2 * nf, 0)

    return _store(out, values, 16)


def perspective(out: OUT, fovy: float, aspect: float, near: float, far: float | None = None) -> FLOAT_ARRAY:
    r"""
    Create a symmetric perspective projection.

    This is the special case of :func:`frustum` where ``top = near*tan(fovy/2)``, ``bottom = -top``,
    ``right = top*aspect``, and ``left = -right``, written out directly.

    When ``far`` is ``None`` or infinite the projection has no far plane.  The depth terms are then the limits of the
    finite terms as the far distance goes to infinity:

    .. math::
        \lim_{f\rightarrow\infty}\frac{f+n}{n-f} = \lim_{f\rightarrow\infty}\frac{1+n/f}{n/f-1} = -1 \\
        \lim_{f\rightarrow\infty}\frac{2fn}{n-f} = \lim_{f\rightarrow\infty}\frac{2n}{n/f-1} = -2n

    :param out: the destination
    :param fovy: the vertical field of view in radians
    :param aspect: the aspect ratio (width/height) of the viewport
    :param near: the distance to the near plane
    :param far: the distance to the far plane, or ``None``/``inf`` for no far plane
    :return: out
    """

    f = 1.0 / np.tan(fovy / 2)

    if far is not None and far != np.inf:
        nf = 1 / (near - far)
        depth_scale = (far + near) * nf
        depth_offset = 2 * far * near * nf

    else:
        depth_scale = -1.0
        depth_offset = -2 * near

    return _store(out, (f / aspect, 0, 0, 0,
                        0, f, 0, 0,
                        0, 0, depth_scale, -1,
                        0, 0, depth_offset, 0), 16)


def ortho(out: OUT, left: float, right: float, bottom: float, top: float, near: float, far: float) -> FLOAT_ARRAY:
    """
    Create an orthographic projection which maps the given box into the clip space cube [-1, 1]^3.

    A pair of equal bounds does not raise, the affected entries are written as ``inf`` or ``nan``.

    :param out: the destination
    :param left: the left bound of the box
    :param right: the right bound of the box
    :param bottom: the bottom bound of the box
    :param top: the top bound of the box
    :param near: the distance to the near plane
    :param far: the distance to the far plane
    :return: out
    """

    left, right, bottom, top, near, far = np.float64([left, right, bottom, top, near, far])

    with np.errstate(divide='ignore', invalid='ignore'):
        lr = 1 / (left - right)
        bt = 1 / (bottom - top)
        nf = 1 / (near - far)

        values = (-2 * lr, 0, 0, 0,
                  0, -2 * bt, 0, 0,
                  0, 0, 2 * nf, 0,
                  (left + right) * lr, (top + bottom) * bt, (far + near) * nf, 1)

    return _store(out, values, 16)


def _unit_or_zero(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)

    if norm == 0:
        return np.zeros(3)

    return vector / norm


def look_at(out: OUT, eye: ARRAY_LIKE, center: ARRAY_LIKE, up: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Create a right handed view matrix for a camera at ``eye`` looking towards ``center``.

    The camera looks down its local -z axis with ``up`` (projected into the image plane) as its local +y axis.  The
    axes are

    * forward (local +z) = normalize(eye - center),
    * right (local +x) = normalize(cross(up, forward)),
    * up (local +y) = normalize(cross(forward, right)),

    and the translation column holds the negated dot product of each axis with ``eye`` so that the translation is
    folded in without a separate multiplication.

    If ``eye`` and ``center`` are the same point (to within epsilon in every component) there is no view direction and
    the identity matrix is written.  If ``up`` is parallel to the view direction the right and up axes are written as
    zeros.

    :param out: the destination
    :param eye: the position of the camera
    :param center: the point the camera is looking at
    :param up: the up direction
    :return: out
    """

    eye_vector = np.array(_values(eye, 3))
    center_vector = np.array(_values(center, 3))
    up_vector = np.array(_values(up, 3))

    if (np.abs(eye_vector - center_vector) < SETTINGS.epsilon).all():
        _LOGGER.debug('The eye and center are the same point, using the identity view')
        return identity(out)

    z_axis = _unit_or_zero(eye_vector - center_vector)
    x_axis = _unit_or_zero(np.cross(up_vector, z_axis))
    y_axis = _unit_or_zero(np.cross(z_axis, x_axis))

    rotation = np.vstack([x_axis, y_axis, z_axis])

    return _store(out, np.concatenate([np.hstack([rotation.T, np.zeros((3, 1))]).ravel(),
                                       -(rotation @ eye_vector), [1]]), 16)


def target_to(out: OUT, eye: ARRAY_LIKE, target: ARRAY_LIKE, up: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Create a matrix which places an object at ``eye`` and orients it towards ``target``.

    This is the world-from-object counterpart of :func:`look_at`: the columns of the result are the object's axes and
    the translation column is ``eye``.  The local +z axis points from ``target`` towards ``eye`` and the local +x axis
    is normalize(cross(up, z)).  The local +y axis is ``up`` exactly as given; it is not re-orthogonalized, so the
    result is only a rigid transformation when ``up`` is unit length and perpendicular to the viewing direction.

    :param out: the destination
    :param eye: the position of the object
    :param target: the point to orient towards
    :param up: the up direction of the object
    :return: out
    """

    eye_vector = np.array(_values(eye, 3))
    target_vector = np.array(_values(target, 3))
    up_vector = np.array(_values(up, 3))

    z_axis = _unit_or_zero(eye_vector - target_vector)
    x_axis = _unit_or_zero(np.cross(up_vector, z_axis))

    return _store(out, np.concatenate([x_axis, [0], up_vector, [0], z_axis, [0], eye_vector, [1]]), 16)


def frob(a: ARRAY_LIKE) -> float:
    """
    Compute the Frobenius norm of a matrix.
    """
    return float(np.linalg.norm(_check_mat4_array_and_shape(a)))


def add(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_mat4_array_and_shape(a) + _check_mat4_array_and_shape(b), 16)


def subtract(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_mat4_array_and_shape(a) - _check_mat4_array_and_shape(b), 16)


sub = subtract


def multiply_scalar(out: OUT, a: ARRAY_LIKE, b: float) -> FLOAT_ARRAY:
    return _store(out, _check_mat4_array_and_shape(a) * b, 16)


def multiply_scalar_and_add(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE, s: float) -> FLOAT_ARRAY:
    """
    Add ``b`` scaled by ``s`` to ``a``, ``a + s*b``.
    """
    return _store(out, _check_mat4_array_and_shape(a) + _check_mat4_array_and_shape(b) * s, 16)


def equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    """
    Test whether two matrices are approximately equal element by element (see :func:`glmath.common.equals`).
    """
    return array_equals(_check_mat4_array_and_shape(a), _check_mat4_array_and_shape(b))


def exact_equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    return bool((_check_mat4_array_and_shape(a) == _check_mat4_array_and_shape(b)).all())
