"""
The unit of data that flows through an iterator: a number of input arrays (features) and a number of output arrays
(labels), plus optional masks for both. Every array is a numpy array; the first axis is the example axis.
"""
from typing import List, Optional, Sequence

import numpy as np


def _copyArrays(arrays: Optional[Sequence[np.ndarray]]) -> Optional[List[np.ndarray]]:
    if arrays is None:
        return None
    return [None if a is None else np.array(a, copy=True) for a in arrays]


def arraysEqualWithEps(a: np.ndarray, b: np.ndarray, eps: float) -> bool:
    """
    Elementwise |a - b| <= eps. Arrays of different shapes are never equal, and NaNs are equal to each other
    (a NaN in the same place on every epoch is still deterministic).
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        return False
    if a.size == 0:
        return True
    if np.issubdtype(a.dtype, np.number) and np.issubdtype(b.dtype, np.number):
        return bool(np.all(np.isclose(a, b, rtol=0.0, atol=eps, equal_nan=True)))
    return bool(np.array_equal(a, b))


class MultiDataSet:

    def __init__(self, features: Sequence[np.ndarray], labels: Sequence[np.ndarray]=(),
                 features_masks: Optional[Sequence[np.ndarray]]=None, labels_masks: Optional[Sequence[np.ndarray]]=None):
        self.features: List[np.ndarray] = [np.asarray(f) for f in features]
        self.labels:   List[np.ndarray] = [np.asarray(l) for l in labels]
        self.features_masks = None if features_masks is None else [None if m is None else np.asarray(m) for m in features_masks]
        self.labels_masks   = None if labels_masks   is None else [None if m is None else np.asarray(m) for m in labels_masks]

    def __repr__(self):
        shapes = lambda arrays: "[" + ", ".join(str(tuple(a.shape)) for a in arrays) + "]"
        return f"{self.__class__.__name__}(features={shapes(self.features)}, labels={shapes(self.labels)})"

    def getFeatures(self) -> List[np.ndarray]:
        return self.features

    def getLabels(self) -> List[np.ndarray]:
        return self.labels

    def getFeaturesMaskArrays(self) -> Optional[List[np.ndarray]]:
        return self.features_masks

    def getLabelsMaskArrays(self) -> Optional[List[np.ndarray]]:
        return self.labels_masks

    def numFeatureArrays(self) -> int:
        return len(self.features)

    def numLabelsArrays(self) -> int:
        return len(self.labels)

    def numExamples(self) -> int:
        if not self.features:
            return 0
        f = self.features[0]
        return 1 if f.ndim == 0 else f.shape[0]

    def copy(self) -> "MultiDataSet":
        """
        Deep copy. None of the arrays of the result share memory with the arrays of this object.
        """
        return MultiDataSet(_copyArrays(self.features), _copyArrays(self.labels),
                            _copyArrays(self.features_masks), _copyArrays(self.labels_masks))

    def detach(self):
        """
        Make sure this object owns all of its memory. Arrays that are views into somebody else's buffer
        (e.g. the big array an in-memory iterator slices its examples out of) are replaced by compact copies.
        """
        own = lambda a: a if a is None or (a.base is None and a.flags.c_contiguous) else np.ascontiguousarray(a).copy()
        self.features = [own(a) for a in self.features]
        self.labels   = [own(a) for a in self.labels]
        if self.features_masks is not None:
            self.features_masks = [own(a) for a in self.features_masks]
        if self.labels_masks is not None:
            self.labels_masks = [own(a) for a in self.labels_masks]

    def featuresEqualWithEps(self, other: "MultiDataSet", eps: float) -> bool:
        if self.numFeatureArrays() != other.numFeatureArrays():
            return False
        return all(arraysEqualWithEps(a, b, eps) for a, b in zip(self.features, other.features))

    def equalsWithEps(self, other: "MultiDataSet", eps: float) -> bool:
        if not self.featuresEqualWithEps(other, eps):
            return False
        if self.numLabelsArrays() != other.numLabelsArrays():
            return False
        return all(arraysEqualWithEps(a, b, eps) for a, b in zip(self.labels, other.labels))
