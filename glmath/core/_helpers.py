# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Sequence

import numpy as np

from glmath._typing import ARRAY_LIKE, FLOAT_ARRAY, OUT
from glmath.common import SETTINGS


def _check_array_and_shape(input: ARRAY_LIKE, length: int) -> np.ndarray:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    # always copy so that the caller's storage can be reused as the output
    array = np.array(input, dtype=np.float64).ravel()

    if array.size != length:
        raise ValueError(f'The input must contain {length} elements, not {array.size}')

    return array


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> np.ndarray:
    return _check_array_and_shape(vector, 3)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> np.ndarray:
    return _check_array_and_shape(quaternion, 4)


def _check_mat3_array_and_shape(matrix: ARRAY_LIKE) -> np.ndarray:
    return _check_array_and_shape(matrix, 9)


def _check_mat4_array_and_shape(matrix: ARRAY_LIKE) -> np.ndarray:
    return _check_array_and_shape(matrix, 16)


def _values(input: ARRAY_LIKE, length: int) -> list[float]:
    return _check_array_and_shape(input, length).tolist()


def _allocate(length: int) -> FLOAT_ARRAY:
    return np.zeros(length, dtype=SETTINGS.array_type)


def _prepare_out(out: OUT, length: int) -> FLOAT_ARRAY:
    if out is None:
        return _allocate(length)

    if np.shape(out) != (length,):
        raise ValueError(f'The output must be a flat array of {length} elements, not shape {np.shape(out)}')

    return out


def _store(out: OUT, values: Sequence[float] | np.ndarray, length: int) -> FLOAT_ARRAY:
    # every operand has already been read by the caller at this point, so out may alias an input
    out = _prepare_out(out, length)

    out[:] = values

    return out
