"""
Everything that can go wrong when splitting a stream. None of these are recoverable: the shared cursor is left as
it was when the error was raised.
"""


class SplitterError(Exception):
    pass


class InvalidConfiguration(SplitterError, ValueError):
    """Ratio outside of (0,1) or a negative amount of examples."""
    pass


class UnsupportedByUnderlying(SplitterError, RuntimeError):
    """The underlying iterator can't do what the splitter needs, which in practice means it can't be reset."""
    pass


class NonDeterministicSource(SplitterError, RuntimeError):
    """
    The first training example of a later pass differs from the first training example of the first pass.
    Almost always means the underlying iterator shuffles between epochs.
    """
    pass


class UnsupportedOperation(SplitterError, RuntimeError):
    pass
