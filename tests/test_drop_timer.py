import pytest

from rockdrop.components.drop_timer import DropTimer


def test_stopped_timer_never_fires():
    timer = DropTimer(interval_ms=100)
    assert not timer.advance(1000)


def test_timer_fires_once_per_interval():
    timer = DropTimer(interval_ms=100)
    timer.start()
    assert not timer.advance(60)
    assert timer.advance(60)
    assert timer.elapsed_ms == pytest.approx(20)
    assert not timer.advance(50)
    assert timer.advance(30)


def test_long_frame_does_not_catch_up():
    timer = DropTimer(interval_ms=100)
    timer.start()
    assert timer.advance(450)
    assert timer.elapsed_ms == 0.0
    assert not timer.advance(10)


def test_stop_discards_progress():
    timer = DropTimer(interval_ms=100)
    timer.start()
    timer.advance(90)
    timer.stop()
    timer.start()
    assert not timer.advance(20)


def test_configure_changes_interval():
    timer = DropTimer(interval_ms=800)
    timer.start()
    timer.configure(100)
    assert timer.advance(100)
    with pytest.raises(ValueError):
        timer.configure(0)
