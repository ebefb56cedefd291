import pytest

from maneuver_lab.core.timekeeping import SimulationClock


def test_advance_adds_one_sixtieth_per_tick():
    clock = SimulationClock()
    for _ in range(60):
        clock.advance()
    assert clock.elapsed == pytest.approx(1.0)


def test_advance_returns_new_elapsed():
    clock = SimulationClock(tick_seconds=0.5)
    assert clock.advance() == 0.5
    assert clock.advance() == 1.0


def test_reset_returns_zero():
    clock = SimulationClock()
    clock.advance()
    assert clock.reset() == 0.0
    assert clock.elapsed == 0.0


def test_pause_freezes_without_resetting():
    clock = SimulationClock(tick_seconds=1.0)
    clock.advance()
    clock.pause()
    assert clock.advance() == 1.0
    clock.resume()
    assert clock.advance() == 2.0


def test_toggle_flips_paused_flag():
    clock = SimulationClock()
    assert clock.toggle() is True
    assert clock.paused
    assert clock.toggle() is False
    assert not clock.paused


def test_reset_keeps_pause_state():
    clock = SimulationClock(tick_seconds=1.0)
    clock.advance()
    clock.pause()
    clock.reset()
    assert clock.paused
    assert clock.advance() == 0.0
