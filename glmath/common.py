# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module holds the settings shared by every routine in :mod:`glmath` along with a few scalar helpers.

The settings are stored on the :data:`SETTINGS` object and are read by the routines each time they are called, so
changing them with :func:`configure` takes effect immediately.  The available settings are described by the
:class:`MathOptions` dataclass:

==============  =======================================================================================================
Option          Description
==============  =======================================================================================================
epsilon         The tolerance used by every approximate comparison in the package as well as the thresholds that select
                the degenerate branches of the algorithms (coincident eye/center in ``look_at``, near parallel
                quaternions in ``slerp``, ...).  Approximate equality is tested using
                :math:`|a-b|\\leq\\epsilon\\max(1, |a|, |b|)`.
array_type      The numpy floating point type used when a new array is allocated.  Defaults to ``numpy.float32`` so
                that results match single precision graphics buffers.
seed            The seed for the random generator used by :func:`glmath.quat.random`.
==============  =======================================================================================================

For example::

    >>> from glmath import common
    >>> common.configure(epsilon=1e-9)
    MathOptions(epsilon=1e-09, array_type=<class 'numpy.float32'>, seed=None)
"""

import logging

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from glmath.utilities.options import UserOptions
from glmath._typing import ARRAY_LIKE


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


@dataclass
class MathOptions(UserOptions):
    """
    The options which control the behaviour of the :mod:`glmath` routines.

    See the module documentation for a description of each option.
    """

    epsilon: float = 1e-6
    """
    The tolerance used for approximate comparisons and to detect degenerate inputs.
    """

    array_type: npt.DTypeLike = np.float32
    """
    The floating point type of newly allocated arrays.
    """

    seed: int | None = None
    """
    The seed used to initialize the random generator.
    """

    def override_options(self):

        self.epsilon = float(self.epsilon)

        if self.epsilon < 0:
            raise ValueError('epsilon must be non-negative')

        dtype = np.dtype(self.array_type)

        if not np.issubdtype(dtype, np.floating):
            raise ValueError(f'array_type must be a floating point type, not {dtype}')

        self.array_type = dtype.type


class Settings:
    """
    The live settings read by the routines of the package.

    There should only ever be a need for the single instance :data:`SETTINGS`.
    """

    epsilon: float
    array_type: type
    seed: int | None
    rng: np.random.Generator

    def __init__(self, options: MathOptions | None = None):

        self.apply(options if options is not None else MathOptions())

    def apply(self, options: MathOptions) -> None:
        """
        Apply the options to this object and reseed the random generator.

        :param options: the options to apply
        """

        options.apply_options(self)

        self.rng = np.random.default_rng(self.seed)

    def as_options(self) -> MathOptions:
        """
        Return the current settings as a new :class:`MathOptions` instance.
        """

        return MathOptions(epsilon=self.epsilon, array_type=self.array_type, seed=self.seed)


SETTINGS: Settings = Settings()
"""
The settings currently in effect.
"""


def configure(options: MathOptions | None = None, **overrides) -> MathOptions:
    """
    Update the settings used by the package.

    Either provide a complete :class:`MathOptions` instance, or specify individual options as keyword arguments, or
    both (in which case the keyword arguments replace the matching fields of ``options``).

    :param options: The options to apply.  If ``None`` the current settings are used as the starting point
    :param overrides: individual option values to change
    :return: The options that are now in effect
    :raises ValueError: if an override does not name an option or an option value is invalid
    """

    if options is None:
        options = SETTINGS.as_options()

    if overrides:
        options = options.updated(**overrides)

    SETTINGS.apply(options)

    _LOGGER.info(f'Applied options: epsilon={SETTINGS.epsilon}, array_type={SETTINGS.array_type.__name__}, '
                 f'seed={SETTINGS.seed}')

    return SETTINGS.as_options()


def set_matrix_array_type(array_type: npt.DTypeLike) -> None:
    """
    Set the floating point type used for newly allocated vectors, matrices and quaternions.

    :param array_type: The numpy floating point type to use
    """

    configure(array_type=array_type)


def to_radian(angle: float) -> float:
    """
    Convert an angle from degrees to radians.
    """
    return angle * np.pi / 180


def to_degree(angle: float) -> float:
    """
    Convert an angle from radians to degrees.
    """
    return angle * 180 / np.pi


def equals(a: float, b: float) -> bool:
    """
    Test whether two scalars are approximately equal.

    The comparison is relative for values larger than 1 in magnitude and absolute otherwise:
    ``|a-b| <= epsilon * max(1, |a|, |b|)``.

    :param a: the first value
    :param b: the second value
    :return: ``True`` if the values are approximately equal
    """

    return abs(a - b) <= SETTINGS.epsilon * max(1.0, abs(a), abs(b))


def array_equals(a: ARRAY_LIKE, b: ARRAY_LIKE) -> bool:
    """
    Test whether two arrays of the same shape are approximately equal element by element.

    Each pair of elements is compared using the same rule as :func:`equals`.

    :param a: the first array
    :param b: the second array
    :return: ``True`` if every pair of elements is approximately equal
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    if a.shape != b.shape:
        return False

    scale = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))

    return bool((np.abs(a - b) <= SETTINGS.epsilon * scale).all())
