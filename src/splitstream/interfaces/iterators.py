"""
Interface of anything that produces MultiDataSets one at a time: the underlying iterators that hold the data, and the
views that the splitter puts on top of them.

The interface is pull-based (hasNext() then next()), but every implementation is also a Python iterator, so you can
just write `for mds in iterator:`. A for loop never resets; call reset() between epochs yourself.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..datasets.multidataset import MultiDataSet
from ..splitting.errors import UnsupportedOperation


class MultiDataSetPreProcessor(ABC):
    """
    Transformation applied to every MultiDataSet an iterator produces. Works in-place.
    """

    @abstractmethod
    def preProcess(self, mds: MultiDataSet):
        pass


class MultiDataSetIterator(ABC):

    @abstractmethod
    def hasNext(self) -> bool:
        pass

    @abstractmethod
    def next(self, num: Optional[int]=None) -> MultiDataSet:
        """
        :param num: If given, the amount of examples to fetch at once. Not every iterator supports this.
        """
        pass

    @abstractmethod
    def reset(self):
        pass

    @abstractmethod
    def resetSupported(self) -> bool:
        pass

    @abstractmethod
    def asyncSupported(self) -> bool:
        pass

    @abstractmethod
    def setPreProcessor(self, preprocessor: Optional[MultiDataSetPreProcessor]):
        pass

    @abstractmethod
    def getPreProcessor(self) -> Optional[MultiDataSetPreProcessor]:
        pass

    def remove(self):
        raise UnsupportedOperation(f"{self.__class__.__name__} does not support removing examples.")

    def __iter__(self):
        return self

    def __next__(self) -> MultiDataSet:
        if not self.hasNext():
            raise StopIteration
        return self.next()
