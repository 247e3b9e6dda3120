"""
Two ready-made underlying iterators:
    - ListMultiDataSetIterator: holds all of its examples in memory and can be reset as often as you want.
                                Optionally reshuffles on every reset, which is exactly what you should NOT do when
                                you split it with a MultiDataSetIteratorSplitter.
    - IterableMultiDataSetIterator: wraps a Python iterable (e.g. a generator) and can only be consumed once.
"""
from typing import Iterable, List, Optional, Sequence

import numpy as np
import numpy.random as npr

from ..interfaces.iterators import MultiDataSetIterator, MultiDataSetPreProcessor
from ..splitting.errors import UnsupportedByUnderlying
from .multidataset import MultiDataSet


class ListMultiDataSetIterator(MultiDataSetIterator):

    def __init__(self, items: Sequence[MultiDataSet], shuffle: bool=False, seed: int=0):
        """
        :param shuffle: Whether to reorder the examples on every reset(). The first epoch is always in the given order.
        :param seed: Seed for the reordering, so that the sequence of epochs is reproducible across objects.
        """
        self.items: List[MultiDataSet] = list(items)
        self.order = np.arange(len(self.items))
        self.shuffle = shuffle
        self.rng = npr.default_rng(seed=seed)
        self.cursor = 0
        self.preprocessor: Optional[MultiDataSetPreProcessor] = None

    @staticmethod
    def fromArrays(features: Sequence[np.ndarray], labels: Sequence[np.ndarray]=(), batch_size: int=1,
                   shuffle: bool=False, seed: int=0) -> "ListMultiDataSetIterator":
        """
        Cut arrays that all have the same amount of examples along their first axis into MultiDataSets of
        batch_size examples. The MultiDataSets hold views into the given arrays, not copies.
        """
        if batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {batch_size}.")
        features = [np.asarray(f) for f in features]
        labels   = [np.asarray(l) for l in labels]
        if not features:
            return ListMultiDataSetIterator([], shuffle=shuffle, seed=seed)

        n = features[0].shape[0]
        for a in features + labels:
            if a.shape[0] != n:
                raise ValueError(f"All arrays must have the same amount of examples ({n}), but found one with shape {a.shape}.")

        items = [MultiDataSet([f[start:start+batch_size] for f in features],
                              [l[start:start+batch_size] for l in labels])
                 for start in range(0, n, batch_size)]
        return ListMultiDataSetIterator(items, shuffle=shuffle, seed=seed)

    def __len__(self):
        return len(self.items)

    def hasNext(self) -> bool:
        return self.cursor < len(self.items)

    def next(self, num: Optional[int]=None) -> MultiDataSet:
        if num is not None:
            raise NotImplementedError("Examples are already batched; fetching a custom amount is not supported.")
        if not self.hasNext():
            raise StopIteration

        mds = self.items[self.order[self.cursor]]
        self.cursor += 1
        if self.preprocessor is not None:  # Never mutate the stored examples, or the next epoch gets preprocessed twice.
            mds = mds.copy()
            self.preprocessor.preProcess(mds)
        return mds

    def reset(self):
        self.cursor = 0
        if self.shuffle:
            self.order = self.rng.permutation(len(self.items))

    def resetSupported(self) -> bool:
        return True

    def asyncSupported(self) -> bool:
        return True

    def setPreProcessor(self, preprocessor: Optional[MultiDataSetPreProcessor]):
        self.preprocessor = preprocessor

    def getPreProcessor(self) -> Optional[MultiDataSetPreProcessor]:
        return self.preprocessor


class IterableMultiDataSetIterator(MultiDataSetIterator):
    """
    Note that a generator is an iteraTOR, not an iteraBLE: once you've gone through it, it's empty. Hence, even if
    you give this class something that can be iterated over multiple times, it doesn't pretend it can be reset.
    """

    _EXHAUSTED = object()

    def __init__(self, iterable: Iterable[MultiDataSet]):
        self.it = iter(iterable)
        self.lookahead = None
        self.has_lookahead = False
        self.preprocessor: Optional[MultiDataSetPreProcessor] = None

    def _peek(self):
        if not self.has_lookahead:
            self.lookahead = next(self.it, IterableMultiDataSetIterator._EXHAUSTED)
            self.has_lookahead = True
        return self.lookahead

    def hasNext(self) -> bool:
        return self._peek() is not IterableMultiDataSetIterator._EXHAUSTED

    def next(self, num: Optional[int]=None) -> MultiDataSet:
        if num is not None:
            raise NotImplementedError("Fetching a custom amount of examples is not supported.")
        mds = self._peek()
        if mds is IterableMultiDataSetIterator._EXHAUSTED:
            raise StopIteration

        self.lookahead = None
        self.has_lookahead = False
        if self.preprocessor is not None:
            self.preprocessor.preProcess(mds)
        return mds

    def reset(self):
        raise UnsupportedByUnderlying("An iterator over a Python iterable can only be consumed once.")

    def resetSupported(self) -> bool:
        return False

    def asyncSupported(self) -> bool:
        return False

    def setPreProcessor(self, preprocessor: Optional[MultiDataSetPreProcessor]):
        self.preprocessor = preprocessor

    def getPreProcessor(self) -> Optional[MultiDataSetPreProcessor]:
        return self.preprocessor
