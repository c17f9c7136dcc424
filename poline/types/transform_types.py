from typing import Callable, Tuple, Union
from numpy.typing import NDArray
import numpy as np

Progress = Union[float, NDArray[np.floating]]
# (progress, inverted) -> eased progress; custom callables only ever get floats
Transformer = Callable[[Progress, bool], Progress]
AxisTransformers = Tuple[Transformer, Transformer, Transformer]
