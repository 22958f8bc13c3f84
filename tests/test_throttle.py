import pytest

from campsite_explorer.infrastructure.throttle import Throttle


def _contador():
    chamadas = []
    return chamadas, lambda *args: chamadas.append(args)


class TestThrottle:
    def test_first_call_runs_immediately(self, clock):
        chamadas, func = _contador()
        gate = Throttle(func, 100, clock)
        assert gate("a") is True
        assert chamadas == [("a",)]

    def test_calls_inside_window_are_dropped(self, clock):
        chamadas, func = _contador()
        gate = Throttle(func, 100, clock)
        gate(1)
        clock.advance(30)
        assert gate(2) is False
        clock.advance(60)
        assert gate(3) is False
        assert chamadas == [(1,)]

    def test_no_trailing_call_after_window(self, clock):
        chamadas, func = _contador()
        gate = Throttle(func, 100, clock)
        gate(1)
        clock.advance(50)
        gate(2)
        clock.advance(500)
        assert chamadas == [(1,)]
        assert not gate.in_window()

    def test_new_window_after_interval(self, clock):
        chamadas, func = _contador()
        gate = Throttle(func, 100, clock)
        gate(1)
        clock.advance(100)
        assert gate(2) is True
        clock.advance(10)
        assert gate(3) is False
        assert chamadas == [(1,), (2,)]

    def test_reset_reopens_window(self, clock):
        chamadas, func = _contador()
        gate = Throttle(func, 100, clock)
        gate(1)
        gate.reset()
        assert gate(2) is True
        assert chamadas == [(1,), (2,)]

    def test_zero_interval_never_drops(self, clock):
        chamadas, func = _contador()
        gate = Throttle(func, 0, clock)
        for i in range(3):
            gate(i)
        assert len(chamadas) == 3

    def test_negative_interval_rejected(self, clock):
        with pytest.raises(ValueError):
            Throttle(lambda: None, -1, clock)
