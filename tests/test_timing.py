import pytest

from astrelis.timing import Milliseconds, Seconds, Time, TimePoint, TimeSpan


@pytest.fixture(autouse=True)
def reset_time():
    point = TimePoint(0)
    Time.record_frame(point, point, point)
    yield
    Time.record_frame(point, point, point)


def test_default_span_is_zero():
    assert Seconds().count == 0.0
    assert float(Milliseconds()) == 0.0


def test_conversion_round_trip():
    span = Milliseconds(1500)
    assert span.to(Seconds).to(Milliseconds) == span
    assert span.to(Seconds) == Seconds(1.5)


def test_equality_across_units():
    assert Seconds(2) == Milliseconds(2000)
    assert Milliseconds(2000) == Seconds(2)
    assert Seconds(2) != Milliseconds(2001)


def test_addition_keeps_left_unit():
    total = Seconds(1) + Milliseconds(500)
    assert isinstance(total, Seconds)
    assert total == Milliseconds(1500)


def test_subtraction():
    diff = Milliseconds(1500) - Seconds(1)
    assert isinstance(diff, Milliseconds)
    assert diff == Milliseconds(500)


def test_scalar_mul_div():
    span = Seconds(3)
    assert span * 2 == Seconds(6)
    assert 2 * span == Seconds(6)
    assert (span * 4) / 4 == span


def test_base_span_is_seconds():
    assert TimeSpan(4) == Seconds(4)


def test_construct_from_other_span():
    assert Milliseconds(Seconds(3)) == Seconds(3)


def test_bad_count_rejected():
    with pytest.raises(TypeError):
        Seconds("1")


def test_time_point_now_is_monotonic():
    first = TimePoint.now()
    second = Time.now()
    assert second.nanoseconds >= first.nanoseconds


def test_elapsed_time_units_agree():
    start = TimePoint(1_000)
    end = TimePoint(3_000_001_000)
    seconds = Time.elapsed_time(start, end, Seconds)
    millis = Time.elapsed_time(start, end, Milliseconds)
    assert isinstance(seconds, Seconds)
    assert isinstance(millis, Milliseconds)
    assert seconds == millis
    assert seconds == Seconds(3)


def test_elapsed_time_rejects_other_kinds():
    with pytest.raises(TypeError):
        Time.elapsed_time(TimePoint(0), TimePoint(1), TimeSpan)


def test_record_frame_updates_state():
    start = TimePoint(0)
    last = TimePoint(2_000_000_000)
    now = TimePoint(2_016_000_000)
    delta = Time.record_frame(start, last, now)
    assert delta == Time.delta_time_millis()
    assert Time.delta_time() == Time.elapsed_time(last, now, Seconds)
    assert Time.time_since_app_start() == Time.elapsed_time(start, now, Seconds)
    assert isinstance(Time.time_since_app_start(), Seconds)


def test_reset_state_is_zero():
    assert Time.delta_time_millis() == Milliseconds(0)
    assert Time.time_since_app_start() == Seconds(0)