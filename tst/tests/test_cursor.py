from tst.preamble import *


def test_reset_protocol():
    cursor = SplitCursor()
    cursor.advance()
    cursor.advance()
    cursor.requestReset()
    assert cursor.isResetPending()
    assert cursor.position == 2

    cursor.completeReset()
    assert not cursor.isResetPending()
    assert cursor.position == 0


def test_reference_sample_survives_reset():
    cursor = SplitCursor()
    assert not cursor.hasReferenceSample()

    mds = makeExamples(1)[0]
    cursor.storeReferenceSample(mds)
    assert cursor.hasReferenceSample()
    assert cursor.reference_sample is not mds
    assert cursor.reference_sample.equalsWithEps(mds, 0.0)

    cursor.requestReset()
    cursor.completeReset()
    assert cursor.hasReferenceSample()


def test_states():
    cursor = SplitCursor()
    assert cursor.state(3, 5) == CursorState.AT_START
    assert cursor.state(0, 5) == CursorState.IN_TEST_RANGE
    assert cursor.state(0, 0) == CursorState.EXHAUSTED

    expected = [CursorState.IN_TRAIN_RANGE, CursorState.IN_TRAIN_RANGE,
                CursorState.IN_TEST_RANGE,  CursorState.IN_TEST_RANGE,
                CursorState.EXHAUSTED]
    for state in expected:
        cursor.advance()
        assert cursor.state(3, 5) == state
        assert state.isTrain() == (state == CursorState.IN_TRAIN_RANGE)

    cursor.advance()
    assert cursor.state(3, 5) == CursorState.EXHAUSTED
