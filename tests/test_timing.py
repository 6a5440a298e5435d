import pytest

from hookjump.timing import Timer


def test_inactive_timer_never_fires():
    calls = []
    timer = Timer(lambda: calls.append(1))
    assert timer.advance(1000) == 0
    assert calls == []
    assert timer.remaining_ms is None


def test_repeating_timer_fires_for_each_interval():
    calls = []
    timer = Timer(lambda: calls.append(1))
    timer.start(100)
    assert timer.advance(250) == 2
    assert len(calls) == 2
    assert timer.remaining_ms == pytest.approx(50)


def test_partial_advances_accumulate():
    timer = Timer()
    timer.start(16)
    assert timer.advance(10) == 0
    assert timer.advance(6) == 1
    assert timer.remaining_ms == pytest.approx(16)


def test_stop_prevents_firing():
    timer = Timer()
    timer.start(50)
    timer.advance(30)
    timer.stop()
    assert timer.advance(100) == 0
    assert timer.active is False


def test_callback_that_stops_fires_once():
    timer = Timer()
    timer.callback = timer.stop
    timer.start(50)
    assert timer.advance(500) == 1
    assert timer.active is False


def test_restart_resets_phase():
    timer = Timer()
    timer.start(100)
    timer.advance(90)
    timer.start(100)
    assert timer.advance(90) == 0
    assert timer.advance(10) == 1


def test_zero_interval_fires_once_per_advance():
    timer = Timer()
    timer.start(0)
    assert timer.advance(0) == 1
    assert timer.advance(40) == 1


def test_negative_values_are_rejected():
    timer = Timer()
    with pytest.raises(ValueError):
        timer.start(-1)
    timer.start(10)
    with pytest.raises(ValueError):
        timer.advance(-5)