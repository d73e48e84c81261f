# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
3 element vector primitives.

These are the building blocks used by the matrix and quaternion routines.  Each routine that produces a vector takes
the destination ``out`` as the first argument, writes the result into it, and returns it.  ``out`` may be the same
array as one of the inputs.  If ``out`` is ``None`` a new array is allocated.
"""

import numpy as np

from glmath._typing import ARRAY_LIKE, FLOAT_ARRAY, OUT
from glmath.common import array_equals
from glmath.core._helpers import _allocate, _check_vector_array_and_shape, _store, _values


__all__ = ['create', 'from_values', 'copy', 'set', 'add', 'subtract', 'scale', 'negate', 'dot', 'cross', 'length',
           'squared_length', 'normalize', 'lerp', 'angle', 'transform_mat3', 'transform_mat4', 'transform_quat',
           'equals', 'exact_equals']


def create() -> FLOAT_ARRAY:
    """
    Create a new zero vector.
    """
    return _allocate(3)


def from_values(x: float, y: float, z: float) -> FLOAT_ARRAY:
    """
    Create a new vector initialized with the given values.
    """
    return _store(None, (x, y, z), 3)


def copy(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_vector_array_and_shape(a), 3)


def set(out: OUT, x: float, y: float, z: float) -> FLOAT_ARRAY:
    return _store(out, (x, y, z), 3)


def add(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_vector_array_and_shape(a) + _check_vector_array_and_shape(b), 3)


def subtract(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, _check_vector_array_and_shape(a) - _check_vector_array_and_shape(b), 3)


def scale(out: OUT, a: ARRAY_LIKE, b: float) -> FLOAT_ARRAY:
    return _store(out, _check_vector_array_and_shape(a) * b, 3)


def negate(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _store(out, -_check_vector_array_and_shape(a), 3)


def dot(a: ARRAY_LIKE, b: ARRAY_LIKE) -> float:
    """
    Compute the dot product of two vectors.
    """
    return float(np.inner(_check_vector_array_and_shape(a), _check_vector_array_and_shape(b)))


def cross(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the cross product ``a x b``.
    """
    return _store(out, np.cross(_check_vector_array_and_shape(a), _check_vector_array_and_shape(b)), 3)


def length(a: ARRAY_LIKE) -> float:
    return float(np.linalg.norm(_check_vector_array_and_shape(a)))


def squared_length(a: ARRAY_LIKE) -> float:
    vector = _check_vector_array_and_shape(a)
    return float(np.inner(vector, vector))


def normalize(out: OUT, a: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Scale a vector to unit length.

    A zero length vector is written out unchanged (as zeros).

    :param out: the destination
    :param a: the vector to normalize
    :return: out
    """

    vector = _check_vector_array_and_shape(a)

    norm = np.linalg.norm(vector)

    if norm > 0:
        vector /= norm

    return _store(out, vector, 3)


def lerp(out: OUT, a: ARRAY_LIKE, b: ARRAY_LIKE, t: float) -> FLOAT_ARRAY:
    """
    Linearly interpolate between two vectors, ``a + t*(b - a)``.
    """

    start = _check_vector_array_and_shape(a)
    end = _check_vector_array_and_shape(b)

    return _store(out, start + t * (end - start), 3)


def angle(a: ARRAY_LIKE, b: ARRAY_LIKE) -> float:
    """
    Compute the angle between two vectors in radians.

    If either vector has zero length the angle is reported as pi/2.
    """

    first = _check_vector_array_and_shape(a)
    second = _check_vector_array_and_shape(b)

    magnitude = np.linalg.norm(first) * np.linalg.norm(second)

    cosine = np.inner(first, second) / magnitude if magnitude else 0.0

    return float(np.arccos(np.clip(cosine, -1, 1)))


def transform_mat3(out: OUT, a: ARRAY_LIKE, m: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Transform a vector by a column-major 3x3 matrix, ``m * a``.
    """

    vector = _check_vector_array_and_shape(a)

    # rows of the reshaped flat matrix are the columns of m
    columns = np.reshape(_values(m, 9), (3, 3))

    return _store(out, vector @ columns, 3)


def transform_mat4(out: OUT, a: ARRAY_LIKE, m: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Transform a point by a column-major 4x4 matrix including the perspective divide.

    The point is extended with ``w = 1``.  If the transformed ``w`` is exactly 0 no division is performed.

    :param out: the destination
    :param a: the point to transform
    :param m: the matrix to transform by
    :return: out
    """

    x, y, z = _values(a, 3)
    columns = np.reshape(_values(m, 16), (4, 4))

    transformed = columns[0] * x + columns[1] * y + columns[2] * z + columns[3]

    w = transformed[3] or 1.0

    return _store(out, transformed[:3] / w, 3)


def transform_quat(out: OUT, a: ARRAY_LIKE, q: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Rotate a vector by a unit quaternion.

    This uses the expansion

    .. math::
        \mathbf{v}' = \mathbf{v} + 2q_s(\mathbf{q}_v\times\mathbf{v}) +
        2\mathbf{q}_v\times(\mathbf{q}_v\times\mathbf{v})

    :param out: the destination
    :param a: the vector to rotate
    :param q: the rotation quaternion (x, y, z, w)
    :return: out
    """

    vector = _check_vector_array_and_shape(a)
    quaternion = _values(q, 4)

    qv = np.array(quaternion[:3])
    qs = quaternion[3]

    uv = np.cross(qv, vector)
    uuv = np.cross(qv, uv)

    return _store(out, vector + 2 * qs * uv + 2 * uuv, 3)


def equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    """
    Test whether two vectors are approximately equal (see :func:`glmath.common.equals`).
    """
    return array_equals(_check_vector_array_and_shape(a), _check_vector_array_and_shape(b))


def exact_equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    return bool((_check_vector_array_and_shape(a) == _check_vector_array_and_shape(b)).all())
