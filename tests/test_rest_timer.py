"""Tests for the rest timer."""

import pytest

from liftlog.services.rest_timer import RestTimer


@pytest.fixture
def completions():
    return []


@pytest.fixture
def timer(fake_clock, fake_scheduler, completions):
    return RestTimer(
        default_seconds=90,
        clock=fake_clock,
        on_complete=lambda: completions.append(True),
        scheduler=fake_scheduler,
    )


class TestStart:
    def test_start_sets_deadline(self, timer, fake_clock, fake_scheduler):
        state = timer.start()

        assert state.is_running
        assert state.seconds_remaining == 90
        assert state.total_seconds == 90
        assert state.end_time == fake_clock.now + 90
        assert len(fake_scheduler.pending) == 1

    def test_start_with_duration(self, timer):
        state = timer.start(120)
        assert state.seconds_remaining == 120
        assert state.total_seconds == 120

    def test_restart_replaces_pending_tick(self, timer, fake_scheduler):
        timer.start()
        first = fake_scheduler.pending[0]

        timer.start(30)

        assert first.cancelled
        assert len(fake_scheduler.pending) == 1
        assert timer.state.seconds_remaining == 30


class TestTicking:
    """Tests for the one-second countdown."""

    def test_tick_counts_down(self, timer, fake_scheduler):
        timer.start()
        fake_scheduler.run_pending()
        fake_scheduler.run_pending()

        assert timer.state.seconds_remaining == 88
        assert timer.is_running
        assert len(fake_scheduler.pending) == 1

    def test_reaching_zero_completes_once(self, timer, fake_scheduler, completions):
        timer.start(2)
        while fake_scheduler.run_pending():
            pass

        assert not timer.is_running
        assert timer.state.seconds_remaining == 0
        assert timer.state.end_time is None
        assert completions == [True]

    def test_tick_when_stopped(self, timer, completions):
        state = timer.tick()
        assert not state.is_running
        assert completions == []


class TestSyncWithClock:
    """Tests for recovering the countdown from the deadline."""

    def test_deadline_passed_while_suspended(self, timer, fake_clock, fake_scheduler, completions):
        timer.start()
        fake_clock.advance(95)

        state = timer.sync_with_clock()

        assert not state.is_running
        assert state.seconds_remaining == 0
        assert completions == [True]
        assert fake_scheduler.pending == []

    def test_partial_second_rounds_up(self, timer, fake_clock, fake_scheduler):
        timer.start()
        fake_clock.advance(10.4)

        state = timer.sync_with_clock()

        assert state.is_running
        assert state.seconds_remaining == 80
        delay, task = fake_scheduler.tasks[-1]
        assert task.pending
        assert delay == pytest.approx(0.6, abs=1e-3)

    def test_sync_cancels_stale_tick(self, timer, fake_clock, fake_scheduler):
        timer.start()
        stale = fake_scheduler.pending[0]
        fake_clock.advance(30)

        timer.sync_with_clock()
        stale.run()

        assert stale.cancelled
        assert timer.state.seconds_remaining == 60

    def test_sync_when_stopped(self, timer, fake_clock, completions):
        fake_clock.advance(500)
        state = timer.sync_with_clock()
        assert not state.is_running
        assert completions == []


class TestStopAndReset:
    def test_stop_keeps_remaining(self, timer, fake_scheduler):
        timer.start()
        fake_scheduler.run_pending()

        state = timer.stop()

        assert not state.is_running
        assert state.seconds_remaining == 89
        assert state.end_time is None
        assert fake_scheduler.pending == []

    def test_reset_restores_duration(self, timer, fake_scheduler, completions):
        timer.start(60)
        fake_scheduler.run_pending()

        state = timer.reset()

        assert not state.is_running
        assert state.seconds_remaining == 60
        assert completions == []

    def test_no_completion_after_stop(self, timer, fake_clock, completions):
        timer.start()
        timer.stop()
        fake_clock.advance(200)
        timer.sync_with_clock()
        assert completions == []


class TestOnComplete:
    def test_callback_error_does_not_break_timer(self, fake_clock, fake_scheduler):
        def explode():
            raise RuntimeError("boom")

        timer = RestTimer(1, clock=fake_clock, on_complete=explode, scheduler=fake_scheduler)
        timer.start()
        fake_scheduler.run_pending()

        assert not timer.is_running
        assert timer.state.seconds_remaining == 0
