from splitstream import *

import numpy as np


def makeExamples(n: int, n_features: int=2, width: int=3):
    """
    n MultiDataSets with n_features feature arrays of shape (1, width) and one label array of shape (1, 1).
    Example i has every feature value equal to i, so you can tell from any array which example it came from.
    """
    return [MultiDataSet([np.full((1, width), float(i)) for _ in range(n_features)],
                         [np.array([[i % 2]], dtype=np.int64)])
            for i in range(1, n+1)]


def exampleIndex(mds: MultiDataSet) -> int:
    return int(mds.getFeatures()[0].flat[0])


def makeIterator(n: int, **kwargs) -> ListMultiDataSetIterator:
    return ListMultiDataSetIterator(makeExamples(n), **kwargs)


def drain(iterator: MultiDataSetIterator):
    result = []
    while iterator.hasNext():
        result.append(exampleIndex(iterator.next()))
    return result


class RotatingIterator(ListMultiDataSetIterator):
    """
    Rotates its examples by one position on every reset. Like shuffling, but predictably so.
    """

    def reset(self):
        super().reset()
        self.items = self.items[1:] + self.items[:1]
