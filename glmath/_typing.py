# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Union, Literal
from datetime import datetime
from pandas import Timestamp

import numpy as np
import numpy.typing as npt

FLOAT_ARRAY = npt.NDArray[np.floating]
ARRAY_LIKE = npt.ArrayLike

OUT = Union[FLOAT_ARRAY, None]

DatetimeLike = Union[datetime, Timestamp]

EULER_ORDERS = Literal['xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx']
