"""
Small end-to-end runs of a split iterator over several epochs, with progress bars.
"""
from tst.preamble import *

from tqdm.auto import tqdm
from splitstream.auxiliary.printing import logger, intsep


def main_trainTestEpochs(n_examples: int=10_000, ratio: float=0.8, epochs: int=3):
    features = np.random.default_rng(seed=0).normal(size=(n_examples, 16))
    labels   = (features.sum(axis=1, keepdims=True) > 0).astype(np.int64)
    base = ListMultiDataSetIterator.fromArrays([features], [labels], batch_size=32)

    splitter = MultiDataSetIteratorSplitter(base, total_examples=len(base), ratio=ratio)
    train, test = splitter.getIterators()
    logger(f"Split {intsep(len(base))} batches into {intsep(splitter.getNumTrain())} train and {intsep(splitter.getNumTest())} test batches.")

    for epoch in range(epochs):
        train.reset()
        seen = 0
        for mds in tqdm(train, total=splitter.getNumTrain(), desc=f"Epoch {epoch+1} (train)"):
            seen += mds.numExamples()

        positives = 0
        total = 0
        for mds in tqdm(test, total=splitter.getNumTest(), desc=f"Epoch {epoch+1} (test)"):
            positives += int(mds.getLabels()[0].sum())
            total     += mds.numExamples()
        logger(f"Epoch {epoch+1}: trained on {intsep(seen)} examples, tested on {intsep(total)} ({positives/max(total,1):.2%} positive).")


def main_detectShuffling(n_examples: int=1_000, ratio: float=0.8):
    base = makeIterator(n_examples, shuffle=True, seed=1)
    splitter = MultiDataSetIteratorSplitter(base, total_examples=n_examples, ratio=ratio)
    train = splitter.getTrainIterator()

    for epoch in range(5):
        train.reset()
        try:
            for _ in tqdm(train, total=splitter.getNumTrain(), desc=f"Epoch {epoch+1}"):
                pass
        except NonDeterministicSource as e:
            logger(f"Shuffling detected at the start of epoch {epoch+1}: {e}")
            return
    logger("The iterator never changed its first example.")


if __name__ == "__main__":
    main_trainTestEpochs()
    main_detectShuffling()
