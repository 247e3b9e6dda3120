import dataclasses
from enum import Enum


DEFAULT_EPSILON = 1e-5


class CursorState(str, Enum):
    AT_START       = 1
    IN_TRAIN_RANGE = 2
    IN_TEST_RANGE  = 3
    EXHAUSTED      = 4

    def isTrain(self) -> bool:
        return self in {CursorState.AT_START, CursorState.IN_TRAIN_RANGE}


@dataclasses.dataclass
class SplitConfig:
    total_examples: int               # Amount of examples (i.e. next() calls) the underlying iterator produces per epoch.
    ratio: float                      # Fraction of those used for training. Must lie strictly between 0 and 1.
    epsilon: float = DEFAULT_EPSILON  # Tolerance when comparing the first training example across epochs.
    warn_on_construction: bool = True
