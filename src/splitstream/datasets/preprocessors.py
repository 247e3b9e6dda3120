from typing import Callable

import numpy as np

from ..interfaces.iterators import MultiDataSetPreProcessor
from .multidataset import MultiDataSet


class FeatureScaler(MultiDataSetPreProcessor):
    """
    Multiplies every feature array by the same constant. Labels are left alone.
    """

    def __init__(self, factor: float):
        self.factor = factor

    def __repr__(self):
        return f"{self.__class__.__name__}({self.factor})"

    def preProcess(self, mds: MultiDataSet):
        mds.features = [np.multiply(f, self.factor) for f in mds.features]


class CallablePreProcessor(MultiDataSetPreProcessor):
    """
    Turns any function that mutates a MultiDataSet into a preprocessor.
    """

    def __init__(self, function: Callable[[MultiDataSet], None]):
        self.function = function

    def preProcess(self, mds: MultiDataSet):
        self.function(mds)
