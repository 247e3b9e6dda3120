__version__ = "2026.10.18"

from .datasets.multidataset import MultiDataSet
from .datasets.streams import ListMultiDataSetIterator, IterableMultiDataSetIterator
from .datasets.preprocessors import FeatureScaler, CallablePreProcessor
from .interfaces.iterators import MultiDataSetIterator, MultiDataSetPreProcessor
from .splitting.config import SplitConfig, CursorState
from .splitting.cursor import SplitCursor
from .splitting.core import MultiDataSetIteratorSplitter, TrainIterator, TestIterator
from .splitting.errors import SplitterError, InvalidConfiguration, UnsupportedByUnderlying, NonDeterministicSource, UnsupportedOperation
