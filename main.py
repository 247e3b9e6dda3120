"""
Runs the end-to-end demonstrations of a split iterator.
This file sits at the top of the import hierarchy: nothing can be imported from it.
"""
if __name__ == "__main__":
    from tst.experiments.epochs import *
    main_trainTestEpochs()  # A few seconds.
    main_detectShuffling()
