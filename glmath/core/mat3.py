# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
3x3 matrix helpers.

Matrices are stored as flat column-major arrays of 9 elements, so element (row r, column c) is at index ``3*c + r``.
These routines are mostly used to work on the rotation block of 4x4 matrices.
"""

import logging

import numpy as np

from glmath._typing import ARRAY_LIKE, FLOAT_ARRAY, OUT
from glmath.common import array_equals
from glmath.core._helpers import _check_mat3_array_and_shape, _prepare_out, _store, _values


__all__ = ['create', 'identity', 'from_values', 'copy', 'from_mat4', 'from_quat', 'transpose', 'determinant',
           'invert', 'adjoint', 'multiply', 'normal_from_mat4', 'equals']


_LOGGER: logging.Logger = logging.getLogger(__name__)


_IDENTITY = (1.0, 0.0, 0.0,
             0.0, 1.0, 0.0,
             0.0, 0.0, 1.0)


def create() -> FLOAT_ARRAY:
    """
    Create a new identity matrix.
    """
    return _store(None, _IDENTITY, 9)


def identity(out: OUT) -> FLOAT_ARRAY:
    return _store(out, _IDENTITY, 9)


def from_values(*values: float) -> FLOAT_ARRAY:
    """
    Create a new matrix from 9 values given in column-major order.
    """
    return _store(None, _check_mat3_array_and_shape(values), 9)


def copy(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_mat3_array_and_shape(a), 9)


def from_mat4(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Copy the upper left 3x3 block of a column-major 4x4 matrix.
    """

    columns = np.reshape(_values(a, 16), (4, 4))

    return _store(out, columns[:3, :3].ravel(), 9)


def from_quat(out: OUT, q: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Form the rotation matrix corresponding to a unit quaternion.

    The matrix is

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        1-2(y^2+z^2) & 2(xy-wz) & 2(xz+wy) \\
        2(xy+wz) & 1-2(x^2+z^2) & 2(yz-wx) \\
        2(xz-wy) & 2(yz+wx) & 1-2(x^2+y^2)\end{array}\right]

    stored column-major.  The quaternion is not normalized first.

    :param out: the destination
    :param q: the quaternion (x, y, z, w)
    :return: out
    """

    x, y, z, w = _values(q, 4)

    x2 = x + x
    y2 = y + y
    z2 = z + z

    xx = x * x2
    yx = y * x2
    yy = y * y2
    zx = z * x2
    zy = z * y2
    zz = z * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    return _store(out, (1 - yy - zz, yx + wz, zx - wy,
                        yx - wz, 1 - xx - zz, zy + wx,
                        zx + wy, zy - wx, 1 - xx - yy), 9)


def transpose(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, np.reshape(_values(a, 9), (3, 3)).T.ravel(), 9)


def determinant(a: ARRAY_LIKE) -> float:
    """
    Compute the determinant by cofactor expansion along the first column.
    """

    a00, a01, a02, a10, a11, a12, a20, a21, a22 = _values(a, 9)

    return (a00 * (a22 * a11 - a12 * a21) +
            a01 * (-a22 * a10 + a12 * a20) +
            a02 * (a21 * a10 - a11 * a20))


def invert(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY | None:
    """
    Invert a 3x3 matrix.

    If the determinant is exactly 0 the matrix has no inverse, ``None`` is returned and ``out`` is left unchanged.

    :param out: the destination
    :param a: the matrix to invert
    :return: out, or ``None`` if the matrix is singular
    """

    out = _prepare_out(out, 9)

    inverse = _invert_values(_values(a, 9))

    if inverse is None:
        return None

    return _store(out, inverse, 9)


def _invert_values(values: list[float]) -> tuple[float, ...] | None:

    a00, a01, a02, a10, a11, a12, a20, a21, a22 = values

    b01 = a22 * a11 - a12 * a21
    b11 = -a22 * a10 + a12 * a20
    b21 = a21 * a10 - a11 * a20

    det = a00 * b01 + a01 * b11 + a02 * b21

    if det == 0:
        _LOGGER.debug('Cannot invert a 3x3 matrix with a zero determinant')
        return None

    det = 1.0 / det

    return (b01 * det, (-a22 * a01 + a02 * a21) * det, (a12 * a01 - a02 * a11) * det,
            b11 * det, (a22 * a00 - a02 * a20) * det, (-a12 * a00 + a02 * a10) * det,
            b21 * det, (-a21 * a00 + a01 * a20) * det, (a11 * a00 - a01 * a10) * det)


def adjoint(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the adjugate (the transposed cofactor matrix).
    """

    a00, a01, a02, a10, a11, a12, a20, a21, a22 = _values(a, 9)

    return _store(out, (a11 * a22 - a12 * a21, a02 * a21 - a01 * a22, a01 * a12 - a02 * a11,
                        a12 * a20 - a10 * a22, a00 * a22 - a02 * a20, a02 * a10 - a00 * a12,
                        a10 * a21 - a11 * a20, a01 * a20 - a00 * a21, a00 * a11 - a01 * a10), 9)


def multiply(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Multiply two matrices, ``a * b``.
    """

    # reshaping a column-major buffer gives the transpose, and (a b)^T = b^T a^T
    a_t = np.reshape(_values(a, 9), (3, 3))
    b_t = np.reshape(_values(b, 9), (3, 3))

    return _store(out, (b_t @ a_t).ravel(), 9)


def normal_from_mat4(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY | None:
    """
    Compute the normal matrix (inverse transpose of the upper left 3x3 block) of a 4x4 matrix.

    The matrix is assumed to be affine.  Only the upper left block is inverted, so the bottom row of a projective
    matrix has no effect on the result.

    :param out: the destination
    :param a: the 4x4 matrix
    :return: out, or ``None`` if the 3x3 block is singular
    """

    out = _prepare_out(out, 9)

    block = np.reshape(_values(a, 16), (4, 4))[:3, :3]

    inverse = _invert_values(block.ravel().tolist())

    if inverse is None:
        return None

    return _store(out, np.reshape(inverse, (3, 3)).T.ravel(), 9)


def equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    return array_equals(_check_mat3_array_and_shape(a), _check_mat3_array_and_shape(b))
