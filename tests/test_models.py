import pytest

from ball_clock.models import (
    BallClockError,
    BallQueue,
    EmptyTrayError,
    Tray,
)


@pytest.fixture
def tray():
    return Tray(name="One Minute Tray", capacity=4)


def test_push_until_full(tray):
    """Push accepts balls up to capacity, then reports overflow without mutating."""
    for ball in (7, 3, 9, 1):
        assert tray.push(ball)
    assert tray.is_full()
    assert not tray.push(5)
    assert tray.balls() == [7, 3, 9, 1]
    assert len(tray) == 4


def test_pop_front_and_back(tray):
    for ball in (1, 2, 3):
        tray.push(ball)
    assert tray.pop_front() == 1
    assert tray.pop_back() == 3
    assert tray.balls() == [2]


def test_pop_empty_raises(tray):
    assert tray.is_empty()
    with pytest.raises(EmptyTrayError):
        tray.pop_front()
    with pytest.raises(EmptyTrayError):
        tray.pop_back()


def test_empty_pop_is_not_recoverable_error():
    """EmptyTrayError signals a broken invariant, so batch handling must not catch it."""
    assert not issubclass(EmptyTrayError, BallClockError)


def test_describe(tray):
    tray.push(4)
    tray.push(2)
    assert tray.describe() == "One Minute Tray:4,2"


def test_ball_queue_starts_canonical():
    q = BallQueue(30)
    assert q.balls() == list(range(1, 31))
    assert q.is_canonical_order()
    assert q.tray.is_full()


def test_ball_queue_rotation_is_not_canonical():
    q = BallQueue(30)
    q.push(q.pop_front())
    assert q.balls()[0] == 2
    assert q.balls()[-1] == 1
    assert not q.is_canonical_order()


def test_ball_queue_short_is_not_canonical():
    q = BallQueue(28)
    q.pop_front()
    assert not q.is_canonical_order()


def test_ball_queue_initialize_resets():
    q = BallQueue(28)
    q.pop_front()
    q.pop_front()
    q.initialize(28)
    assert q.is_canonical_order()
    assert len(q) == 28
