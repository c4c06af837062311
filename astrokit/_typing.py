from typing import Union, Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
ARRAY_LIKE_2D = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]


AXIS_LIKE = Union['Axis', Literal['x', 'y', 'z', 'X', 'Y', 'Z', 1, 2, 3]]
