import pytest

from ball_clock.config import ClockConfig
from ball_clock.models import (
    BallClockError,
    InvalidSizeError,
    NoCycleFoundError,
    SimulationResult,
)
from ball_clock.simulator import (
    format_entry,
    format_result,
    read_sizes,
    run,
    run_many,
)


def test_thirty_balls():
    result = run(30)
    assert result == SimulationResult(size=30, minutes=21600, days=15)


def test_forty_five_balls():
    result = run(45)
    assert result.minutes == 544320
    assert result.days == 378


def test_deterministic():
    assert run(30) == run(30)


def test_lower_boundary_is_handled():
    try:
        result = run(27)
    except BallClockError:
        return
    assert result.size == 27
    assert result.minutes > 0


def test_upper_boundary_hits_step_bound():
    with pytest.raises(NoCycleFoundError) as exc_info:
        run(127, config=ClockConfig(max_steps=1000))
    assert exc_info.value.size == 127
    assert exc_info.value.max_steps == 1000


def test_out_of_range():
    with pytest.raises(InvalidSizeError):
        run(128)
    with pytest.raises(InvalidSizeError):
        run(26)


def test_run_many_keeps_going_after_failure():
    entries = run_many([30, 5, 31], config=ClockConfig(max_steps=30000))
    assert [e.size for e in entries] == [30, 5, 31]
    assert entries[0].ok and entries[0].result.days == 15
    assert not entries[1].ok
    assert isinstance(entries[1].error, InvalidSizeError)
    assert entries[2].ok or isinstance(entries[2].error, NoCycleFoundError)


def test_sink_sees_start_and_final_queue():
    messages = []
    run(30, sink=messages.append)
    assert messages[0] == "Running clock of size 30"
    assert "Bottom Tray:" + ",".join(str(i) for i in range(1, 31)) in messages[-1]


def test_read_sizes_stops_at_zero():
    assert read_sizes(["30\n", "\n", " 45 \n", "0\n", "99\n"]) == [30, 45]


def test_read_sizes_without_sentinel():
    assert read_sizes(["27", "127"]) == [27, 127]


def test_read_sizes_rejects_garbage():
    with pytest.raises(ValueError):
        read_sizes(["30", "thirty"])


def test_format_result():
    assert format_result(SimulationResult(size=45, minutes=544320, days=378)) == "45 balls cycle after 378 days."


def test_format_failed_entry():
    entry = run_many([200])[0]
    assert format_entry(entry) == "200 balls: Clock size 200 out of range [27, 127]."
