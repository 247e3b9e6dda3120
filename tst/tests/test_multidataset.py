from tst.preamble import *

import pytest

from splitstream.datasets.multidataset import arraysEqualWithEps


def test_copy_is_deep():
    mds = MultiDataSet([np.zeros((2, 3)), np.ones((2, 1))], [np.array([[1], [0]])],
                       features_masks=[np.ones((2, 3)), None])
    c = mds.copy()
    for a, b in zip(mds.getFeatures() + mds.getLabels(), c.getFeatures() + c.getLabels()):
        assert np.array_equal(a, b)
        assert not np.shares_memory(a, b)

    assert c.getFeaturesMaskArrays()[1] is None
    assert c.getLabelsMaskArrays() is None

    c.getFeatures()[0][0, 0] = 5
    assert mds.getFeatures()[0][0, 0] == 0


def test_detach():
    big = np.arange(12, dtype=np.float32).reshape(6, 2)
    mds = MultiDataSet([big[2:4]], [big[::2]])
    assert mds.getFeatures()[0].base is not None

    mds.detach()
    for a in mds.getFeatures() + mds.getLabels():
        assert a.base is None
        assert a.flags.c_contiguous
        assert not np.shares_memory(a, big)
    assert np.array_equal(mds.getFeatures()[0], big[2:4])


def test_detach_keeps_owned_arrays():
    owned = np.zeros((2, 2))
    mds = MultiDataSet([owned])
    mds.detach()
    assert mds.getFeatures()[0] is owned


def test_equals_with_eps():
    a = MultiDataSet([np.array([[1.0, 2.0]]), np.array([[3.0]])], [np.array([[1]])])
    b = MultiDataSet([np.array([[1.0 + 1e-6, 2.0]]), np.array([[3.0 - 1e-6]])], [np.array([[1]])])
    assert a.featuresEqualWithEps(b, 1e-5)
    assert a.equalsWithEps(b, 1e-5)
    assert not a.featuresEqualWithEps(b, 1e-7)


def test_equals_with_eps_structure():
    a = MultiDataSet([np.zeros((1, 2))], [np.zeros((1, 1))])
    assert not a.featuresEqualWithEps(MultiDataSet([np.zeros((1, 3))]), 1e-5)                    # Shape
    assert not a.featuresEqualWithEps(MultiDataSet([np.zeros((1, 2)), np.zeros((1, 2))]), 1e-5)  # Amount of arrays
    assert a.featuresEqualWithEps(MultiDataSet([np.zeros((1, 2))], [np.ones((1, 1))]), 1e-5)     # Labels are ignored...
    assert not a.equalsWithEps(MultiDataSet([np.zeros((1, 2))], [np.ones((1, 1))]), 1e-5)        # ...unless asked.


def test_nan():
    assert arraysEqualWithEps(np.array([np.nan, 1.0]), np.array([np.nan, 1.0]), 1e-5)
    assert not arraysEqualWithEps(np.array([np.nan, 1.0]), np.array([0.0, 1.0]), 1e-5)


def test_non_numeric():
    assert arraysEqualWithEps(np.array(["a", "b"]), np.array(["a", "b"]), 1e-5)
    assert not arraysEqualWithEps(np.array(["a", "b"]), np.array(["a", "c"]), 1e-5)


@pytest.mark.parametrize("features, expected", [
    ([], 0),
    ([np.zeros((4, 2))], 4),
    ([np.array(3.0)], 1)
])
def test_num_examples(features, expected):
    assert MultiDataSet(features).numExamples() == expected
