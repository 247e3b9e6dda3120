"""
Virtually splits a MultiDataSetIterator into a train part and a test part, without copying any data.

The first floor(total_examples * ratio) examples of every epoch are training examples, the remaining ones are test
examples. The train and test view both pull from the same underlying iterator and move the same cursor forward, so
the intended usage per epoch is: drain the train view, then drain the test view, then reset.

Two things you can't do:
    - Use the test view twice in a row. Only the train view actually resets the underlying iterator.
    - Split an iterator that shuffles between epochs. The train view checks this on the first example of every epoch
      after the first, and raises a NonDeterministicSource when it notices.
"""
import math
from abc import abstractmethod
from typing import Optional, Tuple

from ..auxiliary.printing import warn, doPrint
from ..datasets.multidataset import MultiDataSet
from ..interfaces.iterators import MultiDataSetIterator, MultiDataSetPreProcessor
from .config import SplitConfig, CursorState, DEFAULT_EPSILON
from .cursor import SplitCursor
from .errors import InvalidConfiguration, UnsupportedByUnderlying, NonDeterministicSource


class _SplitView(MultiDataSetIterator):
    """
    Everything the train and test view have in common: the preprocessor and capabilities belong to the underlying
    iterator, and resetting just arms the shared flag.
    """

    def __init__(self, splitter: "MultiDataSetIteratorSplitter"):
        self.splitter = splitter
        self.backed_iterator = splitter.backed_iterator
        self.cursor = splitter.cursor

    def __repr__(self):
        return f"{self.__class__.__name__}({self.cursor})"

    def next(self, num: Optional[int]=None) -> MultiDataSet:
        if num is not None:
            raise NotImplementedError("To be implemented yet")
        return self._next()

    @abstractmethod
    def _next(self) -> MultiDataSet:
        pass

    def reset(self):
        self.cursor.requestReset()

    def resetSupported(self) -> bool:
        return self.backed_iterator.resetSupported()

    def asyncSupported(self) -> bool:
        return self.backed_iterator.asyncSupported()

    def setPreProcessor(self, preprocessor: Optional[MultiDataSetPreProcessor]):
        self.backed_iterator.setPreProcessor(preprocessor)

    def getPreProcessor(self) -> Optional[MultiDataSetPreProcessor]:
        return self.backed_iterator.getPreProcessor()


class TrainIterator(_SplitView):

    def hasNext(self) -> bool:
        if self.cursor.isResetPending():
            if not self.resetSupported():
                raise UnsupportedByUnderlying("Reset isn't supported by underlying iterator")
            self.backed_iterator.reset()
            self.cursor.completeReset()
            self.splitter.printer("Underlying iterator was reset.")

        return self.backed_iterator.hasNext() and self.cursor.position < self.splitter.num_train

    def _next(self) -> MultiDataSet:
        position = self.cursor.advance()
        mds = self.backed_iterator.next()

        if position == 1 and not self.cursor.hasReferenceSample():
            # First epoch ever: remember the first example, so later epochs can be checked against it.
            self.cursor.storeReferenceSample(mds)
        elif position == 1:
            reference = self.cursor.reference_sample
            if not mds.featuresEqualWithEps(reference, self.splitter.epsilon):
                raise NonDeterministicSource("First examples do not match. Randomization was used?")

        return mds


class TestIterator(_SplitView):

    __test__ = False  # Not a pytest class, despite the name.

    def hasNext(self) -> bool:
        return self.backed_iterator.hasNext() and self.cursor.position < self.splitter.num_train + self.splitter.num_test

    def _next(self) -> MultiDataSet:
        mds = self.backed_iterator.next()
        self.cursor.advance()
        return mds


class MultiDataSetIteratorSplitter:

    def __init__(self, base_iterator: MultiDataSetIterator, total_examples: int, ratio: float,
                 epsilon: float=DEFAULT_EPSILON, warn_on_construction: bool=True, verbose: bool=False):
        """
        :param total_examples: Amount of examples the base iterator produces per epoch. Used to find the boundary
                               between train and test examples.
        :param ratio: Fraction of the examples used for training, strictly between 0.0 and 1.0. A ratio of 0.7 means
                      70% of the examples go to the train view and 30% to the test view.
        :param epsilon: Tolerance used to compare the first training example of every epoch with the first one ever.
        """
        if base_iterator is None:
            raise InvalidConfiguration("No base iterator given.")
        if not (0.0 < ratio < 1.0):  # Also catches NaN.
            raise InvalidConfiguration(f"Ratio value should be in range of 0.0 > X < 1.0, but got {ratio}.")
        if total_examples < 0:
            raise InvalidConfiguration(f"totalExamples number should be positive value, but got {total_examples}.")
        if not base_iterator.resetSupported():
            raise UnsupportedByUnderlying("Underlying iterator doesn't support reset, so it can't be used for runtime-split")

        self.backed_iterator = base_iterator
        self.total_examples = int(total_examples)
        self.ratio = float(ratio)
        self.num_train = math.floor(self.total_examples * self.ratio)
        self.num_test  = self.total_examples - self.num_train
        self.epsilon = epsilon
        self.printer = doPrint(verbose)

        self.cursor = SplitCursor()

        if warn_on_construction:
            warn("IteratorSplitter is used: please ensure you don't use randomization/shuffle in underlying iterator!")

    @staticmethod
    def fromConfig(base_iterator: MultiDataSetIterator, config: SplitConfig, verbose: bool=False) -> "MultiDataSetIteratorSplitter":
        return MultiDataSetIteratorSplitter(base_iterator, config.total_examples, config.ratio,
                                            epsilon=config.epsilon, warn_on_construction=config.warn_on_construction,
                                            verbose=verbose)

    def __repr__(self):
        return f"{self.__class__.__name__}(train={self.num_train}, test={self.num_test}, {self.cursor})"

    def getTrainIterator(self) -> TrainIterator:
        return TrainIterator(self)

    def getTestIterator(self) -> TestIterator:
        return TestIterator(self)

    def getIterators(self) -> Tuple[TrainIterator, TestIterator]:
        return self.getTrainIterator(), self.getTestIterator()

    def getTotalExamples(self) -> int:
        return self.total_examples

    def getRatio(self) -> float:
        return self.ratio

    def getNumTrain(self) -> int:
        return self.num_train

    def getNumTest(self) -> int:
        return self.num_test

    def getCursor(self) -> SplitCursor:
        return self.cursor

    def getState(self) -> CursorState:
        return self.cursor.state(self.num_train, self.num_train + self.num_test)
