"""
The one piece of state shared by the train and test view of a split iterator. Both views hold a reference to the same
SplitCursor, so there is only ever one position no matter how many views you ask the splitter for.
"""
from typing import Optional

from ..datasets.multidataset import MultiDataSet
from .config import CursorState


class SplitCursor:

    def __init__(self):
        self.position = 0
        self.reset_pending = False
        self.reference_sample: Optional[MultiDataSet] = None  # Never cleared, not even by a reset.

    def __repr__(self):
        return f"{self.__class__.__name__}(position={self.position}, reset_pending={self.reset_pending})"

    def advance(self) -> int:
        self.position += 1
        return self.position

    def requestReset(self):
        self.reset_pending = True

    def isResetPending(self) -> bool:
        return self.reset_pending

    def completeReset(self):
        self.position = 0
        self.reset_pending = False

    def hasReferenceSample(self) -> bool:
        return self.reference_sample is not None

    def storeReferenceSample(self, mds: MultiDataSet):
        sample = mds.copy()
        sample.detach()
        self.reference_sample = sample

    def state(self, num_train: int, num_total: int) -> CursorState:
        """
        Where the cursor sits relative to the train range [0, num_train) and the test range [num_train, num_total).
        A pending reset is not reflected here; see isResetPending().
        """
        if self.position == 0 and num_train > 0:
            return CursorState.AT_START
        elif self.position < num_train:
            return CursorState.IN_TRAIN_RANGE
        elif self.position < num_total:
            return CursorState.IN_TEST_RANGE
        else:
            return CursorState.EXHAUSTED
