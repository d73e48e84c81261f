"""
This module contains the vector, matrix, and quaternion routines.  Each kind of value has its own module of plain
functions operating on flat numpy arrays.  The only dependency between them is :mod:`.quat` using
:func:`.mat3.from_quat` for its euler angle conversion.
"""

import glmath.core.vec3
import glmath.core.mat3
import glmath.core.mat4
import glmath.core.quat

from glmath.core import vec3, mat3, mat4, quat

__all__ = ['vec3', 'mat3', 'mat4', 'quat']
